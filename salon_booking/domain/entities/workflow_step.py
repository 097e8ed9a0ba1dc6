from __future__ import annotations

from enum import Enum


class WorkflowStep(str, Enum):
    selecting_service = "selecting_service"
    selecting_stylist = "selecting_stylist"
    selecting_date_time = "selecting_date_time"
    confirming = "confirming"
    submitted = "submitted"


STEP_ORDER: tuple[WorkflowStep, ...] = (
    WorkflowStep.selecting_service,
    WorkflowStep.selecting_stylist,
    WorkflowStep.selecting_date_time,
    WorkflowStep.confirming,
    WorkflowStep.submitted,
)


def previous_step(step: WorkflowStep) -> WorkflowStep:
    index = STEP_ORDER.index(step)
    return STEP_ORDER[max(index - 1, 0)]


def next_step(step: WorkflowStep) -> WorkflowStep:
    index = STEP_ORDER.index(step)
    return STEP_ORDER[min(index + 1, len(STEP_ORDER) - 1)]
