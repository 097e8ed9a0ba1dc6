from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

_CENT = Decimal("0.01")


@dataclass(frozen=True)
class Totals:
    subtotal: Decimal
    tax: Decimal
    total: Decimal


@dataclass(frozen=True)
class BookingSummary:
    subtotal: Decimal
    tax: Decimal
    total: Decimal
    reservation_fee: Decimal
    remaining: Decimal


def to_decimal(value: object) -> Decimal:
    if isinstance(value, Decimal):
        return value if value.is_finite() else Decimal(0)
    if isinstance(value, bool) or value is None:
        return Decimal(0)
    try:
        result = Decimal(str(value))
    except (InvalidOperation, ValueError):
        return Decimal(0)
    return result if result.is_finite() else Decimal(0)


def round_money(value: object) -> Decimal:
    return to_decimal(value).quantize(_CENT, rounding=ROUND_HALF_UP)


def compute_totals(price: object, tax_rate: object) -> Totals:
    # Each stage is rounded so subtotal + tax always equals total to the cent.
    subtotal = round_money(price)
    tax = round_money(subtotal * to_decimal(tax_rate))
    total = round_money(subtotal + tax)
    return Totals(subtotal=subtotal, tax=tax, total=total)


def compute_remaining(total: object, fixed_fee: object) -> Decimal:
    remaining = round_money(to_decimal(total) - to_decimal(fixed_fee))
    return max(remaining, Decimal("0.00"))


def build_summary(price: object, tax_rate: object, reservation_fee: object) -> BookingSummary:
    totals = compute_totals(price, tax_rate)
    return BookingSummary(
        subtotal=totals.subtotal,
        tax=totals.tax,
        total=totals.total,
        reservation_fee=round_money(reservation_fee),
        remaining=compute_remaining(totals.total, reservation_fee),
    )
