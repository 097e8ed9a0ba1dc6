from __future__ import annotations

import logging
from typing import Any

import httpx

from salon_booking.application.exceptions import CatalogUnavailableError
from salon_booking.application.ports.catalog import CatalogPort
from salon_booking.application.utils.totals import to_decimal
from salon_booking.domain.entities.catalog import ServiceOffering, StylistProfile
from salon_booking.infrastructure.http.api_client import ApiClient, error_message


class HttpCatalog(CatalogPort):
    def __init__(self, client: ApiClient) -> None:
        self._client = client
        self._logger = logging.getLogger(__name__)

    def list_services(self) -> list[ServiceOffering]:
        rows = self._fetch_rows("/services", {"include_inactive": 1, "all": 1})
        return [_to_service(row) for row in rows if isinstance(row, dict)]

    def list_stylists(self) -> list[StylistProfile]:
        rows = self._fetch_rows("/catalog/stylists", {"all": 1})
        return [_to_stylist(row) for row in rows if isinstance(row, dict)]

    def _fetch_rows(self, path: str, params: dict[str, Any]) -> list[Any]:
        try:
            resp = self._client.request("GET", path, params=params)
        except httpx.HTTPError as e:
            self._logger.error("Catalog unreachable", extra={"path": path, "error": str(e)})
            raise CatalogUnavailableError(str(e) or "Network error") from e

        if not resp.is_success:
            raise CatalogUnavailableError(error_message(resp))

        try:
            data = resp.json()
        except ValueError as e:
            raise CatalogUnavailableError(f"HTTP {resp.status_code}") from e

        if isinstance(data, dict) and isinstance(data.get("data"), list):
            return data["data"]
        if isinstance(data, list):
            return data
        return []


def _to_service(row: dict[str, Any]) -> ServiceOffering:
    category = row.get("category")
    if category is None and row.get("category_id") is not None:
        category = str(row["category_id"])
    duration = row.get("duration_minutes")
    return ServiceOffering(
        id=str(row.get("id", "")),
        name=str(row.get("name") or ""),
        price=to_decimal(row.get("price")),
        category=str(category or ""),
        active=_flag(row.get("active"), default=False),
        description=row.get("description") or None,
        duration_minutes=int(duration) if isinstance(duration, (int, float)) else None,
    )


def _to_stylist(row: dict[str, Any]) -> StylistProfile:
    return StylistProfile(
        id=str(row.get("id", "")),
        name=str(row.get("name") or ""),
        specialty=str(row.get("specialty") or ""),
        active=_flag(row.get("active"), default=True),
        bio=row.get("bio") or None,
    )


def _flag(value: Any, default: bool) -> bool:
    """Backend flags arrive as booleans or 0/1; anything else is inactive."""
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    return str(value).strip() == "1"
