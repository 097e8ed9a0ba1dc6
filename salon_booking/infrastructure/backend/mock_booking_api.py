from __future__ import annotations

import logging
from datetime import datetime
from typing import Any

from salon_booking.application.exceptions import BookingApiError
from salon_booking.application.ports.booking_api import BookingApiPort


class MockBookingApi(BookingApiPort):
    """In-memory backend that echoes bookings the way the REST API does."""

    def __init__(self) -> None:
        self._bookings: dict[str, dict[str, Any]] = {}
        self._logger = logging.getLogger(__name__)

    def create_booking(self, payload: dict[str, Any]) -> dict[str, Any]:
        booking_id = str(len(self._bookings) + 1)
        record = {
            **payload,
            "id": booking_id,
            "subtotal": f"{payload.get('subtotal', 0):.2f}",
            "tax": f"{payload.get('tax', 0):.2f}",
            "total_price": f"{payload.get('total_price', 0):.2f}",
            "created_at": datetime.now().isoformat(timespec="seconds"),
        }
        self._bookings[booking_id] = record
        self._logger.info("Mock booking created", extra={"booking_id": booking_id})
        return dict(record)

    def list_my_bookings(self) -> list[dict[str, Any]]:
        return [dict(record) for record in self._bookings.values()]

    def cancel_booking(self, booking_id: str) -> None:
        record = self._bookings.get(str(booking_id))
        if record is None:
            raise BookingApiError("Booking not found", status_code=404)
        record["status"] = 3
        self._logger.info("Mock booking cancelled", extra={"booking_id": booking_id})

    def add_booking_item(self, booking_id: str, item: dict[str, Any]) -> dict[str, Any]:
        record = self._bookings.get(str(booking_id))
        if record is None:
            raise BookingApiError("Booking not found", status_code=404)
        items = record.setdefault("items", [])
        stored = {"id": str(len(items) + 1), **item}
        items.append(stored)
        return dict(stored)
