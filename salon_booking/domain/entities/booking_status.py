from __future__ import annotations

from enum import Enum


class AppointmentStatus(str, Enum):
    pending = "pending"
    confirmed = "confirmed"
    completed = "completed"
    cancelled = "cancelled"


# Legacy integer codes used on the wire
STATUS_CODES: dict[int, AppointmentStatus] = {
    0: AppointmentStatus.pending,
    1: AppointmentStatus.confirmed,
    2: AppointmentStatus.completed,
    3: AppointmentStatus.cancelled,
}

STATUS_PENDING_CODE = 0
