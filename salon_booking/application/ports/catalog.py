from __future__ import annotations

from abc import ABC, abstractmethod

from salon_booking.domain.entities.catalog import ServiceOffering, StylistProfile


class CatalogPort(ABC):
    @abstractmethod
    def list_services(self) -> list[ServiceOffering]:
        """All services, including inactive ones."""
        raise NotImplementedError

    @abstractmethod
    def list_stylists(self) -> list[StylistProfile]:
        """Public stylist roster."""
        raise NotImplementedError
