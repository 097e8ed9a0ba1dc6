"""
Tests for narrowing the stylist roster by service category.
"""

from __future__ import annotations

from decimal import Decimal

from salon_booking.application.utils.stylist_filter import filter_by_service
from salon_booking.domain.entities.catalog import ServiceOffering, StylistProfile

ROSTER = [
    StylistProfile(id="1", name="Angie", specialty="Lashista | Makeup Artist"),
    StylistProfile(id="2", name="Katy", specialty="Manicurista"),
    StylistProfile(id="3", name="Naty", specialty="  Nail Technician & Hair "),
]


def _service(category: str) -> ServiceOffering:
    return ServiceOffering(id="s", name="Service", price=Decimal("100"), category=category)


def test_no_service_returns_full_roster():
    assert filter_by_service(ROSTER, None) == ROSTER


def test_category_substring_match_is_case_insensitive():
    result = filter_by_service(ROSTER, _service(" MAKEUP "))
    assert [s.id for s in result] == ["1"]

    result = filter_by_service(ROSTER, _service("nail"))
    assert [s.id for s in result] == ["3"]


def test_zero_matches_falls_back_to_full_roster():
    """An overly strict category never blocks the booking flow."""
    result = filter_by_service(ROSTER, _service("massage"))
    assert result == ROSTER


def test_empty_category_keeps_everyone():
    assert filter_by_service(ROSTER, _service("")) == ROSTER


def test_result_is_a_copy():
    result = filter_by_service(ROSTER, None)
    result.pop()
    assert len(ROSTER) == 3
