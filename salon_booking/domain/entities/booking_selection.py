from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class BookingSelection:
    service_id: str = ""
    stylist_id: str = ""  # "" means no preference
    date: str = ""  # YYYY-MM-DD
    time: str = ""  # free-form label, normalized on submit
    notes: str = ""
