from __future__ import annotations

import logging
from typing import Any

import httpx

from salon_booking.application.exceptions import BookingApiError
from salon_booking.application.ports.booking_api import BookingApiPort
from salon_booking.infrastructure.http.api_client import ApiClient, error_message


class HttpBookingApi(BookingApiPort):
    def __init__(self, client: ApiClient) -> None:
        self._client = client
        self._logger = logging.getLogger(__name__)

    def create_booking(self, payload: dict[str, Any]) -> dict[str, Any]:
        data = self._call("POST", "/bookings", json=payload)
        if isinstance(data, dict) and isinstance(data.get("data"), dict):
            data = data["data"]
        if not isinstance(data, dict):
            raise BookingApiError("Unexpected booking response from server")
        self._logger.info("Booking created", extra={"booking_id": data.get("id")})
        return data

    def list_my_bookings(self) -> list[dict[str, Any]]:
        data = self._call("GET", "/bookings/me")
        if isinstance(data, dict) and isinstance(data.get("data"), list):
            return data["data"]
        if isinstance(data, list):
            return data
        return []

    def cancel_booking(self, booking_id: str) -> None:
        self._call("POST", f"/bookings/{booking_id}/cancel")
        self._logger.info("Booking cancelled", extra={"booking_id": booking_id})

    def add_booking_item(self, booking_id: str, item: dict[str, Any]) -> dict[str, Any]:
        data = self._call("POST", f"/bookings/{booking_id}/items", json=item)
        return data if isinstance(data, dict) else {}

    def _call(self, method: str, path: str, json: Any | None = None) -> Any:
        try:
            resp = self._client.request(method, path, json=json)
        except httpx.HTTPError as e:
            self._logger.error("Booking backend unreachable", extra={"path": path, "error": str(e)})
            raise BookingApiError(str(e) or "Network error") from e

        if not resp.is_success:
            message = error_message(resp)
            self._logger.error(
                "Booking backend call failed",
                extra={"path": path, "status": resp.status_code, "error": message},
            )
            raise BookingApiError(message, status_code=resp.status_code)

        if resp.status_code == 204 or not resp.content:
            return None
        try:
            return resp.json()
        except ValueError as e:
            raise BookingApiError(f"HTTP {resp.status_code}", status_code=resp.status_code) from e
