"""
Tests for booking totals and the remaining balance after the reservation fee.
"""

from __future__ import annotations

from decimal import Decimal

from salon_booking.application.utils.totals import build_summary, compute_remaining, compute_totals


def test_reference_scenario():
    """Price 1200 at 15% tax with a 300 fee."""
    totals = compute_totals(1200, 0.15)
    assert totals.subtotal == Decimal("1200.00")
    assert totals.tax == Decimal("180.00")
    assert totals.total == Decimal("1380.00")
    assert compute_remaining(totals.total, 300) == Decimal("1080.00")


def test_subtotal_plus_tax_equals_total():
    prices = [0, 0.01, 1, 9.99, 19.995, 33.33, 450, 849.5, 1200, 12345.678]
    rates = [0, 0.07, 0.15, 0.175, 0.333, 1]
    for price in prices:
        for rate in rates:
            totals = compute_totals(price, rate)
            assert totals.subtotal + totals.tax == totals.total
            assert totals.total.as_tuple().exponent == -2


def test_staged_rounding_is_half_up():
    totals = compute_totals(10.005, 0.15)
    assert totals.subtotal == Decimal("10.01")
    assert totals.tax == Decimal("1.50")
    assert totals.total == Decimal("11.51")


def test_non_numeric_price_counts_as_zero():
    totals = compute_totals("abc", 0.15)
    assert totals.total == Decimal("0.00")
    assert compute_totals(None, 0.15).subtotal == Decimal("0.00")


def test_remaining_never_negative():
    assert compute_remaining(Decimal("100.00"), 300) == Decimal("0.00")
    assert compute_remaining(0, 0) == Decimal("0.00")
    for fee in (0, 1, 299.99, 300, 5000):
        assert compute_remaining(Decimal("300.00"), fee) >= 0


def test_build_summary():
    summary = build_summary(Decimal("850"), 0.15, 300)
    assert summary.subtotal == Decimal("850.00")
    assert summary.tax == Decimal("127.50")
    assert summary.total == Decimal("977.50")
    assert summary.reservation_fee == Decimal("300.00")
    assert summary.remaining == Decimal("677.50")
