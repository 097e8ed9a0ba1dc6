from __future__ import annotations

import logging

import httpx

from salon_booking.application.exceptions import NotificationError
from salon_booking.application.ports.notifier import ConfirmationNotice, NotifierPort


class EmailEndpointNotifier(NotifierPort):
    def __init__(
        self,
        endpoint: str | None,
        timeout: float = 10.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._endpoint = endpoint
        self._client = httpx.Client(timeout=timeout, transport=transport)
        self._logger = logging.getLogger(__name__)

    def send_confirmation(self, notice: ConfirmationNotice) -> bool:
        if not self._endpoint:
            self._logger.warning("EMAIL_ENDPOINT not configured; skipping confirmation email")
            return False

        payload = {
            "customerName": notice.customer_name,
            "serviceName": notice.service_name,
            "appointmentDate": notice.appointment_date,
            "appointmentTime": notice.appointment_time,
        }
        if notice.to_email:
            payload["toEmail"] = notice.to_email

        try:
            resp = self._client.post(self._endpoint, json=payload)
        except httpx.HTTPError as e:
            raise NotificationError(str(e) or "Network error") from e

        if resp.status_code >= 400:
            detail = resp.text or f"{resp.status_code} {resp.reason_phrase}"
            self._logger.error(
                "Confirmation email failed",
                extra={"status": resp.status_code, "error": detail},
            )
            raise NotificationError(detail)
        return True
