from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class BookingApiPort(ABC):
    @abstractmethod
    def create_booking(self, payload: dict[str, Any]) -> dict[str, Any]:
        """Create a booking. Returns the created record. Raises BookingApiError."""
        raise NotImplementedError

    @abstractmethod
    def list_my_bookings(self) -> list[dict[str, Any]]:
        """Raw booking rows of the authenticated user."""
        raise NotImplementedError

    @abstractmethod
    def cancel_booking(self, booking_id: str) -> None:
        raise NotImplementedError

    @abstractmethod
    def add_booking_item(self, booking_id: str, item: dict[str, Any]) -> dict[str, Any]:
        raise NotImplementedError
