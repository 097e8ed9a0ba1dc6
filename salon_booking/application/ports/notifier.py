from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class ConfirmationNotice:
    customer_name: str
    service_name: str
    appointment_date: str
    appointment_time: str
    to_email: str | None = None


class NotifierPort(ABC):
    @abstractmethod
    def send_confirmation(self, notice: ConfirmationNotice) -> bool:
        """Send a booking confirmation. Returns False when sending was skipped."""
        raise NotImplementedError
