"""
Tests for adapter selection and the log formatter.
"""

from __future__ import annotations

import logging

from salon_booking.core.config import settings
from salon_booking.infrastructure.backend.http_booking_api import HttpBookingApi
from salon_booking.infrastructure.backend.mock_booking_api import MockBookingApi
from salon_booking.infrastructure.catalog.http_catalog import HttpCatalog
from salon_booking.infrastructure.catalog.memory_catalog import MemoryCatalog
from salon_booking.infrastructure.notifications.email_notifier import EmailEndpointNotifier
from salon_booking.infrastructure.notifications.mock_notifier import MockNotifier
from salon_booking.main import ContextFormatter
from salon_booking.wiring import dependencies


def test_dev_without_token_uses_in_memory_adapters(monkeypatch):
    monkeypatch.setattr(settings, "ENV", "dev")
    monkeypatch.setattr(settings, "API_TOKEN", None)
    monkeypatch.setattr(settings, "EMAIL_ENDPOINT", None)
    monkeypatch.setattr(dependencies, "_booking_api", None)

    assert isinstance(dependencies.get_booking_api(), MockBookingApi)
    assert isinstance(dependencies.get_catalog(), MemoryCatalog)
    assert isinstance(dependencies.get_notifier(), MockNotifier)

    workflow = dependencies.get_booking_workflow()
    assert workflow.start().action == "ready"
    assert workflow.services


def test_production_uses_http_adapters(monkeypatch):
    monkeypatch.setattr(settings, "ENV", "prod")
    monkeypatch.setattr(settings, "EMAIL_ENDPOINT", "https://mail.test/send")
    monkeypatch.setattr(dependencies, "_booking_api", None)

    assert isinstance(dependencies.get_booking_api(), HttpBookingApi)
    assert isinstance(dependencies.get_catalog(), HttpCatalog)
    assert isinstance(dependencies.get_notifier(), EmailEndpointNotifier)
    assert dependencies.get_auth_store() is dependencies.get_auth_store()


def test_context_formatter_appends_extras():
    formatter = ContextFormatter("%(levelname)s:%(name)s:%(message)s")
    record = logging.LogRecord("salon", logging.INFO, __file__, 1, "Booking submitted", None, None)
    record.booking_id = "12"
    record.service = "1"
    record.error = ""

    assert formatter.format(record) == "INFO:salon:Booking submitted | booking_id=12 service=1"


def test_context_formatter_includes_request_method():
    formatter = ContextFormatter("%(levelname)s:%(name)s:%(message)s")
    record = logging.LogRecord("salon", logging.DEBUG, __file__, 1, "API request", None, None)
    record.method = "POST"
    record.path = "/bookings"

    assert formatter.format(record) == "DEBUG:salon:API request | method=POST path=/bookings"
