from __future__ import annotations

import logging

from salon_booking.application.ports.notifier import ConfirmationNotice, NotifierPort


class MockNotifier(NotifierPort):
    def __init__(self) -> None:
        self.sent: list[ConfirmationNotice] = []
        self._logger = logging.getLogger(__name__)

    def send_confirmation(self, notice: ConfirmationNotice) -> bool:
        self.sent.append(notice)
        self._logger.info(
            "Mock confirmation sent",
            extra={"service": notice.service_name, "date": notice.appointment_date, "time": notice.appointment_time},
        )
        return True
