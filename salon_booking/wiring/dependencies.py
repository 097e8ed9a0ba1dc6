import logging

from salon_booking.application.ports.booking_api import BookingApiPort
from salon_booking.application.ports.catalog import CatalogPort
from salon_booking.application.ports.notifier import NotifierPort
from salon_booking.application.use_cases.booking_gateway import BookingGateway
from salon_booking.application.use_cases.booking_workflow import BookingWorkflow
from salon_booking.core.config import settings
from salon_booking.infrastructure.auth.auth_store import AuthStore
from salon_booking.infrastructure.backend.http_booking_api import HttpBookingApi
from salon_booking.infrastructure.backend.mock_booking_api import MockBookingApi
from salon_booking.infrastructure.catalog.http_catalog import HttpCatalog
from salon_booking.infrastructure.catalog.memory_catalog import MemoryCatalog
from salon_booking.infrastructure.http.api_client import ApiClient
from salon_booking.infrastructure.notifications.email_notifier import EmailEndpointNotifier
from salon_booking.infrastructure.notifications.mock_notifier import MockNotifier


_auth_store: AuthStore | None = None
_booking_api: BookingApiPort | None = None


def _use_mocks() -> bool:
    return not settings.API_TOKEN and settings.ENV.lower() in {"dev", "local"}


def get_auth_store() -> AuthStore:
    global _auth_store
    if _auth_store is None:
        _auth_store = AuthStore(ttl_seconds=settings.AUTH_TTL_SECONDS)
    return _auth_store


def get_api_client() -> ApiClient:
    return ApiClient(auth_store=get_auth_store())


def get_booking_api() -> BookingApiPort:
    global _booking_api
    if _booking_api is None:
        if _use_mocks():
            logging.getLogger(__name__).info("Using MockBookingApi (no API_TOKEN, ENV=dev/local)")
            _booking_api = MockBookingApi()
        else:
            _booking_api = HttpBookingApi(client=get_api_client())
    return _booking_api


def get_catalog() -> CatalogPort:
    if _use_mocks():
        return MemoryCatalog()
    return HttpCatalog(client=get_api_client())


def get_notifier() -> NotifierPort:
    if not settings.EMAIL_ENDPOINT and settings.ENV.lower() in {"dev", "local"}:
        return MockNotifier()
    return EmailEndpointNotifier(endpoint=settings.EMAIL_ENDPOINT, timeout=settings.API_TIMEOUT_SECONDS)


def get_booking_gateway() -> BookingGateway:
    return BookingGateway(
        api=get_booking_api(),
        tax_rate=settings.TAX_RATE,
        include_items=settings.INCLUDE_BOOKING_ITEMS,
    )


def get_booking_workflow() -> BookingWorkflow:
    return BookingWorkflow(
        gateway=get_booking_gateway(),
        catalog=get_catalog(),
        notifier=get_notifier(),
        auth_store=get_auth_store(),
        reservation_fee=settings.RESERVATION_FEE,
    )
