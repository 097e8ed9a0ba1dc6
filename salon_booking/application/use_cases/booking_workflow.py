from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from datetime import date
from typing import Callable

from salon_booking.application.exceptions import BookingApiError, CatalogUnavailableError
from salon_booking.application.ports.auth import AuthPort
from salon_booking.application.ports.catalog import CatalogPort
from salon_booking.application.ports.notifier import ConfirmationNotice, NotifierPort
from salon_booking.application.use_cases.booking_gateway import BookingGateway
from salon_booking.application.utils.codec import generate_time_slots
from salon_booking.application.utils.stylist_filter import filter_by_service
from salon_booking.application.utils.totals import BookingSummary, build_summary
from salon_booking.domain.entities.booking_selection import BookingSelection
from salon_booking.domain.entities.catalog import ServiceOffering, StylistProfile
from salon_booking.domain.entities.workflow_step import WorkflowStep, next_step, previous_step


@dataclass(frozen=True)
class WorkflowResult:
    action: str  # "ready", "advanced", "updated", "back", "invalid", "ignored", "login_required", "booked", "failed", "abandoned"
    step: WorkflowStep
    message: str | None = None
    booking_id: str | None = None


class BookingWorkflow:
    """
    Four-step reservation flow: service -> stylist -> date/time -> confirm.

    Owns the in-progress BookingSelection and the in-flight flag that keeps a
    second confirm from creating a second booking while the first create call
    is outstanding.
    """

    def __init__(
        self,
        gateway: BookingGateway,
        catalog: CatalogPort,
        notifier: NotifierPort,
        auth_store: AuthPort,
        reservation_fee: float = 0.0,
        today: Callable[[], date] = date.today,
    ) -> None:
        self._gateway = gateway
        self._catalog = catalog
        self._notifier = notifier
        self._auth_store = auth_store
        self._reservation_fee = reservation_fee
        self._today = today
        self._logger = logging.getLogger(__name__)

        self._services: list[ServiceOffering] = []
        self._stylists: list[StylistProfile] = []
        self._step = WorkflowStep.selecting_service
        self._selection = self._new_selection()
        self._submitting = False
        self._abandoned = False
        self._created_booking_id: str | None = None

    @property
    def step(self) -> WorkflowStep:
        return self._step

    @property
    def selection(self) -> BookingSelection:
        return self._selection

    @property
    def submitting(self) -> bool:
        return self._submitting

    @property
    def created_booking_id(self) -> str | None:
        return self._created_booking_id

    @property
    def services(self) -> list[ServiceOffering]:
        return list(self._services)

    @property
    def selected_service(self) -> ServiceOffering | None:
        return self._find_service(self._selection.service_id)

    @property
    def eligible_stylists(self) -> list[StylistProfile]:
        return filter_by_service(self._stylists, self.selected_service)

    @property
    def selected_stylist(self) -> StylistProfile | None:
        if not self._selection.stylist_id:
            return None
        for stylist in self.eligible_stylists:
            if stylist.id == self._selection.stylist_id:
                return stylist
        return None

    @property
    def time_slots(self) -> list[str]:
        return generate_time_slots()

    def summary(self) -> BookingSummary:
        service = self.selected_service
        price = service.price if service else 0
        return build_summary(price, self._gateway.tax_rate, self._reservation_fee)

    def start(self, preselected_service_id: str | None = None) -> WorkflowResult:
        """Load the catalog and optionally open with a service already chosen."""
        try:
            self._services = [s for s in self._catalog.list_services() if s.active]
        except CatalogUnavailableError as e:
            self._logger.error("Could not load services", extra={"error": str(e)})
            return self._result("failed", message=str(e) or "Could not load services.")

        message = None
        try:
            self._stylists = [s for s in self._catalog.list_stylists() if s.active]
        except CatalogUnavailableError as e:
            self._logger.warning("Could not load stylists", extra={"error": str(e)})
            self._stylists = []
            message = str(e) or "Could not load stylists."

        if preselected_service_id and self._find_service(str(preselected_service_id)):
            self._selection = replace(self._selection, service_id=str(preselected_service_id))
            self._step = WorkflowStep.selecting_stylist

        return self._result("ready", message=message)

    def select_service(self, service_id: str) -> WorkflowResult:
        if self._locked():
            return self._result("ignored")
        service = self._find_service(str(service_id))
        if not service:
            return self._result("invalid", message="Select a service first")

        self._selection = replace(self._selection, service_id=service.id)
        self._step = WorkflowStep.selecting_stylist
        return self._result("advanced")

    def select_stylist(self, stylist_id: str) -> WorkflowResult:
        if self._locked():
            return self._result("ignored")
        if self._step != WorkflowStep.selecting_stylist or self.selected_service is None:
            return self._result("invalid", message="Select a service first")
        if not any(s.id == str(stylist_id) for s in self.eligible_stylists):
            return self._result("invalid", message="Select a stylist from the list")

        self._selection = replace(self._selection, stylist_id=str(stylist_id))
        self._step = WorkflowStep.selecting_date_time
        return self._result("advanced")

    def skip_stylist(self) -> WorkflowResult:
        """No preference: clear the stylist and go straight to date/time."""
        if self._locked():
            return self._result("ignored")
        if self._step != WorkflowStep.selecting_stylist or self.selected_service is None:
            return self._result("invalid", message="Select a service first")
        self._selection = replace(self._selection, stylist_id="")
        self._step = WorkflowStep.selecting_date_time
        return self._result("advanced")

    def set_date(self, value: str) -> WorkflowResult:
        return self._update(date=(value or "").strip())

    def set_time(self, label: str) -> WorkflowResult:
        return self._update(time=(label or "").strip())

    def set_notes(self, notes: str) -> WorkflowResult:
        return self._update(notes=notes or "")

    def advance(self) -> WorkflowResult:
        if self._locked():
            return self._result("ignored")

        if self._step == WorkflowStep.selecting_service:
            if not self._selection.service_id or not self.selected_service:
                return self._result("invalid", message="Select a service first")
        elif self._step == WorkflowStep.selecting_date_time:
            if not self._selection.date or not self._selection.time:
                return self._result("invalid", message="Select date & time")
        elif self._step == WorkflowStep.confirming:
            return self._result("invalid", message="Confirm the booking or go back")

        self._step = next_step(self._step)
        return self._result("advanced")

    def back(self) -> WorkflowResult:
        if self._locked():
            return self._result("ignored")
        self._step = previous_step(self._step)
        return self._result("back")

    def confirm(self) -> WorkflowResult:
        if self._submitting:
            return self._result("ignored")
        if self._abandoned:
            return self._result("abandoned")
        if self._step != WorkflowStep.confirming:
            return self._result("invalid", message="Complete the previous steps first")

        user = self._auth_store.get_user()
        if user is None:
            return self._result("login_required", message="Please log in to complete your booking")

        service = self.selected_service
        if service is None:
            self._step = WorkflowStep.selecting_service
            return self._result("invalid", message="Select a service first")
        if not self._selection.date or not self._selection.time:
            self._step = WorkflowStep.selecting_date_time
            return self._result("invalid", message="Select date & time")

        selection = self._selection
        request = self._gateway.build_creation_request(selection, service, user.id)

        error: BookingApiError | None = None
        record = None
        self._submitting = True
        try:
            record = self._gateway.submit(request)
        except BookingApiError as e:
            error = e
        finally:
            self._submitting = False

        if self._abandoned:
            self._logger.info("Booking result ignored after workflow was abandoned")
            return self._result("abandoned")

        if error is not None:
            self._logger.error("Failed to create booking", extra={"error": error.message, "service": service.id})
            return self._result("failed", message=error.message or "Failed to create booking")

        booking_id = str(record.id) if record is not None and record.id is not None else None
        self._notify(
            ConfirmationNotice(
                customer_name=user.name,
                service_name=service.name,
                appointment_date=selection.date,
                appointment_time=selection.time,
                to_email=user.email,
            )
        )

        self._step = WorkflowStep.submitted
        self._created_booking_id = booking_id
        self._selection = self._new_selection()
        self._logger.info("Booking submitted", extra={"booking_id": booking_id, "service": service.id})
        return self._result("booked", message="Your appointment has been booked", booking_id=booking_id)

    def abandon(self) -> WorkflowResult:
        """Navigation away: drop the selection; a pending create result will be ignored."""
        self._abandoned = True
        self._selection = self._new_selection()
        return self._result("abandoned")

    def _notify(self, notice: ConfirmationNotice) -> None:
        try:
            self._notifier.send_confirmation(notice)
        except Exception as e:
            self._logger.warning("Failed to send confirmation email", extra={"error": str(e)})

    def _update(self, **changes: str) -> WorkflowResult:
        if self._locked():
            return self._result("ignored")
        self._selection = replace(self._selection, **changes)
        return self._result("updated")

    def _locked(self) -> bool:
        return self._submitting or self._abandoned or self._step == WorkflowStep.submitted

    def _find_service(self, service_id: str) -> ServiceOffering | None:
        if not service_id:
            return None
        for service in self._services:
            if service.id == service_id:
                return service
        return None

    def _new_selection(self) -> BookingSelection:
        return BookingSelection(date=self._today().isoformat())

    def _result(self, action: str, message: str | None = None, booking_id: str | None = None) -> WorkflowResult:
        return WorkflowResult(
            action=action,
            step=self._step,
            message=message,
            booking_id=booking_id or self._created_booking_id,
        )
