"""Application DTOs (no persistence or HTTP dependency)."""

from app.application.dtos.completion import (
    CompletionCheck,
    CompletionRequirements,
    DocumentRequirement,
    FieldRequirement,
)
from app.application.dtos.process import ResponsibleUser, TaskNeighbours
from app.application.dtos.schedule import ScheduleWindow
from app.application.dtos.task_event import (
    ActivationResult,
    CompleteTaskResult,
    StartTaskResult,
    TaskEvent,
)
from app.application.dtos.timeline import (
    Deviation,
    EdgePath,
    Point,
    TimelineRow,
    TimelineView,
)

__all__ = [
    "ActivationResult",
    "CompleteTaskResult",
    "CompletionCheck",
    "CompletionRequirements",
    "Deviation",
    "DocumentRequirement",
    "EdgePath",
    "FieldRequirement",
    "Point",
    "ResponsibleUser",
    "ScheduleWindow",
    "StartTaskResult",
    "TaskEvent",
    "TaskNeighbours",
    "TimelineRow",
    "TimelineView",
]
