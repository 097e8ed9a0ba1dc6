from __future__ import annotations

from salon_booking.domain.entities.catalog import ServiceOffering, StylistProfile


def filter_by_service(
    stylists: list[StylistProfile],
    service: ServiceOffering | None,
) -> list[StylistProfile]:
    """
    Keep stylists whose specialty mentions the service category.
    An empty result means the filter does not apply, so the full roster is returned.
    """
    if service is None:
        return list(stylists)

    category = (service.category or "").strip().lower()
    if not category:
        return list(stylists)

    matches = [s for s in stylists if category in (s.specialty or "").strip().lower()]
    return matches or list(stylists)
