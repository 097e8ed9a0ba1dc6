from __future__ import annotations

import logging
from typing import Any

from salon_booking.application.dto.booking import BookingCreationRequest, BookingItemPayload, BookingRecord
from salon_booking.application.exceptions import BookingApiError
from salon_booking.application.ports.booking_api import BookingApiPort
from salon_booking.application.utils.codec import decode_status, parse_clock_label, to_display_clock
from salon_booking.application.utils.totals import compute_totals
from salon_booking.domain.entities.appointment import AppointmentItem, AppointmentView
from salon_booking.domain.entities.booking_selection import BookingSelection
from salon_booking.domain.entities.booking_status import STATUS_PENDING_CODE
from salon_booking.domain.entities.catalog import ServiceOffering


def build_creation_request(
    selection: BookingSelection,
    service: ServiceOffering,
    tax_rate: float,
    user_id: str | int,
    include_items: bool = True,
) -> BookingCreationRequest:
    """Map the in-progress selection to the backend creation contract."""
    totals = compute_totals(service.price, tax_rate)

    items = None
    if include_items:
        items = [
            BookingItemPayload(
                service_id=service.id,
                quantity=1,
                unit_price=float(service.price),
            )
        ]

    return BookingCreationRequest(
        user_id=user_id,
        stylist_id=selection.stylist_id or None,
        service_date=selection.date,
        service_time=parse_clock_label(selection.time),
        notes=selection.notes or None,
        subtotal=float(totals.subtotal),
        tax=float(totals.tax),
        total_price=float(totals.total),
        status=STATUS_PENDING_CODE,
        items=items,
    )


class BookingGateway:
    """Creation, listing and cancellation of bookings against the backend. Never retries."""

    def __init__(self, api: BookingApiPort, tax_rate: float, include_items: bool = True) -> None:
        self._api = api
        self._tax_rate = tax_rate
        self._include_items = include_items
        self._logger = logging.getLogger(__name__)

    @property
    def tax_rate(self) -> float:
        return self._tax_rate

    def build_creation_request(
        self,
        selection: BookingSelection,
        service: ServiceOffering,
        user_id: str | int,
    ) -> BookingCreationRequest:
        return build_creation_request(
            selection,
            service,
            self._tax_rate,
            user_id,
            include_items=self._include_items,
        )

    def submit(self, request: BookingCreationRequest) -> BookingRecord:
        """Issue the create call once. Raises BookingApiError with a readable message on failure."""
        data = self._api.create_booking(request.to_payload())
        try:
            return BookingRecord.model_validate(data)
        except ValueError as e:
            self._logger.error("Malformed booking response", extra={"error": str(e)})
            raise BookingApiError("Unexpected booking response from server") from e

    def list_appointments(self) -> list[AppointmentView]:
        rows = self._api.list_my_bookings()
        return [to_appointment_view(row) for row in rows if isinstance(row, dict)]

    def cancel(self, booking_id: str) -> None:
        self._api.cancel_booking(str(booking_id))

    def add_item(self, booking_id: str, service_id: str | int, quantity: int, unit_price: float) -> dict[str, Any]:
        return self._api.add_booking_item(
            str(booking_id),
            BookingItemPayload(service_id=service_id, quantity=quantity, unit_price=unit_price).model_dump(mode="json"),
        )


def _pick(row: dict[str, Any], *keys: str, default: Any = None) -> Any:
    """First non-null value among camelCase/snake_case spellings."""
    for key in keys:
        value = row.get(key)
        if value is not None:
            return value
    return default


def _to_float(value: Any) -> float:
    if isinstance(value, bool):
        return 0.0
    try:
        return float(value)
    except (TypeError, ValueError):
        return 0.0


def _optional_str(value: Any) -> str | None:
    return str(value) if value is not None else None


def _to_item(row: dict[str, Any]) -> AppointmentItem:
    quantity = int(_to_float(_pick(row, "quantity", default=0)))
    unit_price = _to_float(_pick(row, "unitPrice", "unit_price", default=0))
    line_total = _pick(row, "lineTotal", "line_total")
    duration = _pick(row, "duration", "duration_minutes")
    list_price = _pick(row, "listPrice", "list_price")
    return AppointmentItem(
        id=str(_pick(row, "id", default="")),
        service_id=_optional_str(_pick(row, "serviceId", "service_id")),
        name=_pick(row, "name"),
        quantity=quantity,
        unit_price=unit_price,
        line_total=_to_float(line_total) if line_total is not None else unit_price * quantity,
        duration=int(_to_float(duration)) if duration is not None else None,
        list_price=_to_float(list_price) if list_price is not None else None,
    )


def _service_label(row: dict[str, Any], items: list[AppointmentItem]) -> str | None:
    explicit = _pick(row, "serviceName", "service_name")
    if explicit:
        return str(explicit)
    if len(items) == 1:
        return items[0].name
    if len(items) > 1:
        return f"{len(items)} services"
    return None


def to_appointment_view(row: dict[str, Any]) -> AppointmentView:
    """Normalize a listing row (camelCase or snake_case) into the read model."""
    raw_items = row.get("items")
    items = [_to_item(it) for it in raw_items if isinstance(it, dict)] if isinstance(raw_items, list) else []

    return AppointmentView(
        id=str(_pick(row, "id", default="")),
        user_id=str(_pick(row, "userId", "user_id", default="")),
        stylist_id=_optional_str(_pick(row, "stylistId", "stylist_id")),
        stylist_name=_pick(row, "stylistName", "stylist_name"),
        date=_pick(row, "date", "service_date"),
        time=to_display_clock(_pick(row, "time", "service_time")),
        status=decode_status(row.get("status"), _pick(row, "statusInt", "status_int")),
        notes=_pick(row, "notes"),
        price=_to_float(_pick(row, "price", "total_price", default=0)),
        service_name=_service_label(row, items),
        items=items,
    )
