#!/usr/bin/env python3
"""
Interactive local booking harness.

Usage:
  python3 scripts/book_local.py [--service ID]

Drives the same BookingWorkflow the application uses, step by step, and
prints the current step, eligible stylists and the confirmation summary.
With ENV=dev and no API_TOKEN the in-memory backend and catalog are used.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from salon_booking.application.exceptions import BookingApiError
from salon_booking.application.use_cases.booking_workflow import BookingWorkflow, WorkflowResult
from salon_booking.domain.entities.customer import CustomerIdentity
from salon_booking.domain.entities.workflow_step import WorkflowStep
from salon_booking.main import configure_logging
from salon_booking.wiring.dependencies import get_auth_store, get_booking_gateway, get_booking_workflow

HELP = """Commands:
  /login ID NAME [EMAIL]  sign in
  /logout                 sign out
  /service ID             choose a service
  /stylist ID             choose a stylist
  /skip                   no stylist preference
  /date YYYY-MM-DD        set the date
  /time LABEL             set the time (e.g. 2:00 PM)
  /notes TEXT             set notes
  /next, /back            move between steps
  /confirm                submit the booking
  /appointments           list my appointments
  /cancel ID              cancel an appointment
  /new                    start a new booking
  /quit"""


def _print_step(workflow: BookingWorkflow) -> None:
    step = workflow.step
    print(f"\n[{step.value}]")
    if step == WorkflowStep.selecting_service:
        for service in workflow.services:
            print(f"  {service.id}: {service.name} ({service.price})")
    elif step == WorkflowStep.selecting_stylist:
        for stylist in workflow.eligible_stylists:
            print(f"  {stylist.id}: {stylist.name} - {stylist.specialty}")
        print("  (or /skip for no preference)")
    elif step == WorkflowStep.selecting_date_time:
        selection = workflow.selection
        print(f"  date: {selection.date or '-'}  time: {selection.time or '-'}")
        print(f"  slots: {', '.join(workflow.time_slots)}")
    elif step == WorkflowStep.confirming:
        service = workflow.selected_service
        stylist = workflow.selected_stylist
        summary = workflow.summary()
        selection = workflow.selection
        print(f"  service: {service.name if service else '-'}")
        print(f"  stylist: {stylist.name if stylist else 'No preference'}")
        print(f"  when: {selection.date} {selection.time}")
        if selection.notes:
            print(f"  notes: {selection.notes}")
        print(f"  subtotal {summary.subtotal}  tax {summary.tax}  total {summary.total}")
        print(f"  reservation fee {summary.reservation_fee}, remaining {summary.remaining}")


def _print_result(result: WorkflowResult) -> None:
    if result.message:
        print(f"({result.action}) {result.message}")
    if result.action == "booked" and result.booking_id:
        print(f"Booking id: {result.booking_id}")


def _list_appointments() -> None:
    try:
        appointments = get_booking_gateway().list_appointments()
    except BookingApiError as e:
        print(f"Error: {e.message}")
        return
    if not appointments:
        print("No appointments.")
        return
    for appt in appointments:
        label = appt.service_name or "-"
        print(f"  {appt.id}: {label} on {appt.date} at {appt.time} [{appt.status.value}] {appt.price:.2f}")


def _cancel(booking_id: str) -> None:
    try:
        get_booking_gateway().cancel(booking_id)
    except BookingApiError as e:
        print(f"Error: {e.message}")
        return
    print("Appointment cancelled.")


def main() -> None:
    parser = argparse.ArgumentParser(description="Local booking harness")
    parser.add_argument("--service", default=None, help="preselect a service id")
    parser.add_argument("--log-level", default=None)
    args = parser.parse_args()

    configure_logging(args.log_level)
    auth_store = get_auth_store()

    workflow = get_booking_workflow()
    _print_result(workflow.start(args.service))
    print(HELP)
    _print_step(workflow)

    while True:
        try:
            text = input("\n> ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\nBye!")
            return
        if not text:
            continue

        command, _, arg = text.partition(" ")
        command = command.lower()
        arg = arg.strip()
        result: WorkflowResult | None = None

        if command in ("/quit", "/exit"):
            workflow.abandon()
            print("Bye!")
            return
        if command == "/help":
            print(HELP)
            continue
        if command == "/login":
            parts = arg.split()
            if len(parts) < 2:
                print("Usage: /login ID NAME [EMAIL]")
                continue
            email = parts[2] if len(parts) > 2 else None
            auth_store.set_auth(CustomerIdentity(id=parts[0], name=parts[1], email=email), token="local")
            print(f"Signed in as {parts[1]}")
            continue
        if command == "/logout":
            auth_store.clear_auth()
            print("Signed out")
            continue
        if command == "/appointments":
            _list_appointments()
            continue
        if command == "/cancel":
            _cancel(arg)
            continue
        if command == "/new":
            workflow.abandon()
            workflow = get_booking_workflow()
            result = workflow.start()
        elif command == "/service":
            result = workflow.select_service(arg)
        elif command == "/stylist":
            result = workflow.select_stylist(arg)
        elif command == "/skip":
            result = workflow.skip_stylist()
        elif command == "/date":
            result = workflow.set_date(arg)
        elif command == "/time":
            result = workflow.set_time(arg)
        elif command == "/notes":
            result = workflow.set_notes(arg)
        elif command == "/next":
            result = workflow.advance()
        elif command == "/back":
            result = workflow.back()
        elif command == "/confirm":
            result = workflow.confirm()
        else:
            print("Unknown command. Type /help.")
            continue

        _print_result(result)
        _print_step(workflow)


if __name__ == "__main__":
    main()
