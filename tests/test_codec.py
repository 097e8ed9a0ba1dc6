"""
Tests for clock label / status conversion at the backend boundary.
"""

from __future__ import annotations

from salon_booking.application.utils.codec import (
    decode_status,
    encode_status,
    generate_time_slots,
    parse_clock_label,
    to_display_clock,
)
from salon_booking.domain.entities.booking_status import AppointmentStatus


def test_parse_clock_label_accepts_free_form_labels():
    """12-hour and 24-hour labels normalize to HH:MM:00."""
    assert parse_clock_label("9:30") == "09:30:00"
    assert parse_clock_label("09:30") == "09:30:00"
    assert parse_clock_label("9:30 pm") == "21:30:00"
    assert parse_clock_label("09:30 AM") == "09:30:00"
    assert parse_clock_label("9:30 PM") == "21:30:00"
    assert parse_clock_label("  2:00pm ") == "14:00:00"


def test_parse_clock_label_noon_and_midnight():
    assert parse_clock_label("12:00 AM") == "00:00:00"
    assert parse_clock_label("12:15 PM") == "12:15:00"
    assert parse_clock_label("18:45") == "18:45:00"


def test_parse_clock_label_falls_back_to_nine():
    """Unparseable labels never raise."""
    assert parse_clock_label("garbage") == "09:00:00"
    assert parse_clock_label("") == "09:00:00"
    assert parse_clock_label(None) == "09:00:00"
    assert parse_clock_label("9.30") == "09:00:00"


def test_to_display_clock():
    assert to_display_clock("13:05") == "1:05 PM"
    assert to_display_clock("00:15") == "12:15 AM"
    assert to_display_clock("12:00:00") == "12:00 PM"
    assert to_display_clock("09:30:00") == "9:30 AM"
    assert to_display_clock("23:59") == "11:59 PM"


def test_to_display_clock_is_idempotent_on_display_values():
    assert to_display_clock("3:00 PM") == "3:00 PM"
    assert to_display_clock(to_display_clock("15:00")) == "3:00 PM"


def test_to_display_clock_lenient_inputs():
    assert to_display_clock(None) is None
    assert to_display_clock("") is None
    assert to_display_clock("soon") == "soon"


def test_display_round_trip_is_stable():
    """Display -> canonical -> display reproduces the display value for every minute of the day."""
    for hour in range(24):
        for minute in (0, 1, 15, 30, 59):
            canonical = f"{hour:02d}:{minute:02d}"
            display = to_display_clock(canonical)
            assert to_display_clock(parse_clock_label(display)) == display


def test_decode_status():
    assert decode_status(2) == "completed"
    assert decode_status(99) == "pending"
    assert decode_status("cancelled") == "cancelled"
    assert decode_status("confirmed") is AppointmentStatus.confirmed
    assert decode_status("no-show") == "pending"
    assert decode_status(None) == "pending"
    assert decode_status(True) == "pending"


def test_decode_status_uses_integer_fallback_field():
    assert decode_status("weird", 3) == "cancelled"
    assert decode_status(None, 1) == "confirmed"
    assert decode_status("completed", 0) == "completed"


def test_encode_status():
    assert encode_status(AppointmentStatus.pending) == 0
    assert encode_status("cancelled") == 3
    assert encode_status("unknown") == 0


def test_generate_time_slots():
    assert generate_time_slots() == ["6:00 AM", "8:00 AM", "10:00 AM", "12:00 PM", "2:00 PM", "4:00 PM"]
