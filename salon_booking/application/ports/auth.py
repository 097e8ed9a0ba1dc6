from __future__ import annotations

from abc import ABC, abstractmethod

from salon_booking.domain.entities.customer import CustomerIdentity


class AuthPort(ABC):
    @abstractmethod
    def get_user(self) -> CustomerIdentity | None:
        """Signed-in customer, or None when logged out or expired."""
        raise NotImplementedError

    @abstractmethod
    def get_token(self) -> str | None:
        raise NotImplementedError
