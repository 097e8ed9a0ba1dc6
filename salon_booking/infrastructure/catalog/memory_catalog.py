from __future__ import annotations

from salon_booking.application.ports.catalog import CatalogPort
from salon_booking.domain.entities.catalog import ServiceOffering, StylistProfile
from salon_booking.infrastructure.catalog.catalog_data import SERVICES, STYLISTS


class MemoryCatalog(CatalogPort):
    def __init__(
        self,
        services: list[ServiceOffering] | None = None,
        stylists: list[StylistProfile] | None = None,
    ) -> None:
        self._services = list(services if services is not None else SERVICES)
        self._stylists = list(stylists if stylists is not None else STYLISTS)

    def list_services(self) -> list[ServiceOffering]:
        return list(self._services)

    def list_stylists(self) -> list[StylistProfile]:
        return list(self._stylists)
