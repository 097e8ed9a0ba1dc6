from __future__ import annotations

import logging
from typing import Any

import httpx

from salon_booking.core.config import settings
from salon_booking.infrastructure.auth.auth_store import AuthStore


class ApiClient:
    """Authenticated request function for the salon backend."""

    def __init__(
        self,
        auth_store: AuthStore,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._auth_store = auth_store
        self._base_url = (base_url or settings.API_BASE_URL).rstrip("/")
        self._client = httpx.Client(
            timeout=timeout if timeout is not None else settings.API_TIMEOUT_SECONDS,
            transport=transport,
        )
        self._logger = logging.getLogger(__name__)

        if not self._base_url:
            raise ValueError("API_BASE_URL is required for the booking backend")

    def request(
        self,
        method: str,
        path: str,
        json: Any | None = None,
        params: dict[str, Any] | None = None,
    ) -> httpx.Response:
        headers = {"Accept": "application/json"}
        if json is not None:
            headers["Content-Type"] = "application/json"
        token = self._auth_store.get_token()
        if token:
            headers["Authorization"] = f"Bearer {token}"

        url = f"{self._base_url}{path}"
        self._logger.debug("API request", extra={"method": method, "path": path})
        return self._client.request(method, url, json=json, params=params, headers=headers)

    def close(self) -> None:
        self._client.close()


def error_message(response: httpx.Response) -> str:
    """Human-readable failure text: the body's `message`, else "HTTP <status>"."""
    fallback = f"HTTP {response.status_code}"
    try:
        body = response.json()
    except Exception:
        return fallback
    if isinstance(body, dict):
        message = body.get("message")
        if message:
            return str(message)
    return fallback
