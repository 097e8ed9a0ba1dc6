from __future__ import annotations

import re

from salon_booking.domain.entities.booking_status import STATUS_CODES, AppointmentStatus

DEFAULT_CANONICAL_TIME = "09:00:00"

_CLOCK_LABEL = re.compile(r"^(\d{1,2}):(\d{2})(?:\s*(AM|PM))?$")
_CANONICAL_CLOCK = re.compile(r"^(\d{1,2}):(\d{2})(?::\d{2})?$")
_MERIDIEM = re.compile(r"am|pm", re.IGNORECASE)


def parse_clock_label(label: str | None) -> str:
    """
    Convert a free-form clock label ("9:30", "09:30", "9:30 pm") to HH:MM:00.
    Anything unparseable falls back to 09:00:00.
    """
    normalized = str(label if label is not None else "").strip().upper()
    match = _CLOCK_LABEL.match(normalized)
    if not match:
        return DEFAULT_CANONICAL_TIME

    hour = int(match.group(1))
    minute = match.group(2)
    am_pm = match.group(3)

    if am_pm == "AM" and hour == 12:
        hour = 0
    elif am_pm == "PM" and hour != 12:
        hour += 12

    return f"{hour:02d}:{minute}:00"


def to_display_clock(canonical: str | None) -> str | None:
    """Convert HH:MM[:SS] to "h:MM AM/PM". Values already carrying AM/PM are returned as-is."""
    if not canonical:
        return None

    text = str(canonical).strip()
    if _MERIDIEM.search(text):
        return text

    match = _CANONICAL_CLOCK.match(text)
    if not match:
        return text

    hour = int(match.group(1))
    minute = match.group(2)
    if hour > 23:
        return text

    am_pm = "PM" if hour >= 12 else "AM"
    display_hour = hour % 12 or 12
    return f"{display_hour}:{minute} {am_pm}"


def decode_status(value: object, fallback_code: object = None) -> AppointmentStatus:
    """
    Decode a booking status from either vocabulary.

    Canonical names pass through, integer codes 0-3 are looked up (first in
    `value`, then in `fallback_code`), everything else is pending.
    """
    if isinstance(value, str):
        try:
            return AppointmentStatus(value)
        except ValueError:
            pass

    for candidate in (value, fallback_code):
        if isinstance(candidate, int) and not isinstance(candidate, bool) and candidate in STATUS_CODES:
            return STATUS_CODES[candidate]

    return AppointmentStatus.pending


def encode_status(status: AppointmentStatus | str) -> int:
    for code, known in STATUS_CODES.items():
        if known == status:
            return code
    return 0


def generate_time_slots(start_hour: int = 6, end_hour: int = 17, step_hours: int = 2) -> list[str]:
    """Display labels offered in the date/time step."""
    slots: list[str] = []
    for hour in range(start_hour, end_hour + 1, step_hours):
        label = to_display_clock(f"{hour:02d}:00")
        if label:
            slots.append(label)
    return slots
