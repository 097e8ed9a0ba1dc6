from __future__ import annotations

from dataclasses import dataclass, field

from salon_booking.domain.entities.booking_status import AppointmentStatus


@dataclass(frozen=True)
class AppointmentItem:
    id: str
    service_id: str | None
    name: str | None
    quantity: int
    unit_price: float
    line_total: float
    duration: int | None = None
    list_price: float | None = None


@dataclass(frozen=True)
class AppointmentView:
    id: str
    user_id: str
    stylist_id: str | None
    stylist_name: str | None
    date: str | None
    time: str | None  # display form, e.g. "2:30 PM"
    status: AppointmentStatus
    notes: str | None
    price: float
    service_name: str | None
    items: list[AppointmentItem] = field(default_factory=list)

    @property
    def is_upcoming(self) -> bool:
        return self.status in (AppointmentStatus.pending, AppointmentStatus.confirmed)
