from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict


class BookingItemPayload(BaseModel):
    model_config = ConfigDict(frozen=True)

    service_id: str | int
    quantity: int = 1
    unit_price: float


class BookingCreationRequest(BaseModel):
    """Wire payload for POST /bookings."""

    model_config = ConfigDict(frozen=True)

    user_id: str | int
    stylist_id: str | int | None = None
    service_date: str  # YYYY-MM-DD
    service_time: str  # HH:MM:SS
    notes: str | None = None
    subtotal: float
    tax: float
    total_price: float
    status: int = 0
    items: list[BookingItemPayload] | None = None

    def to_payload(self) -> dict[str, Any]:
        payload = self.model_dump(mode="json")
        if self.items is None:
            payload.pop("items", None)
        return payload


class BookingRecord(BaseModel):
    """Server-confirmed booking. Decimal fields are kept as received, for display only."""

    model_config = ConfigDict(extra="allow")

    id: str | int | None = None
    user_id: str | int | None = None
    stylist_id: str | int | None = None
    service_date: str | None = None
    service_time: str | None = None
    notes: str | None = None
    subtotal: str | float | None = None
    tax: str | float | None = None
    total_price: str | float | None = None
    status: int | str | None = None
    created_at: str | None = None
    items: list[dict[str, Any]] | None = None
