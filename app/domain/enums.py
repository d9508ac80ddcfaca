"""Domain enumerations for the store-opening process engine.

Enums represent closed sets of domain values (task status, task kind,
timeline zoom). Display strings used by the portal live only at the API
boundary (app.schemas), never here.
"""

from enum import Enum

from app.shared.enums import _ValuesMixin


class TaskStatus(_ValuesMixin, str, Enum):
    """Task instance status.

    OVERDUE is normally derived (deadline passed, not completed) but callers
    may persist it explicitly. PLANNED is display-only: it labels projected
    timeline rows for definitions that have no instance yet.
    """

    ASSIGNED = "assigned"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    OVERDUE = "overdue"
    PLANNED = "planned"

    @property
    def is_open(self) -> bool:
        """Return whether a task in this status still awaits work."""
        return self in (TaskStatus.ASSIGNED, TaskStatus.IN_PROGRESS)


class TaskKind(_ValuesMixin, str, Enum):
    """BPMN task kind of a process definition."""

    USER_TASK = "UserTask"
    SERVICE_TASK = "ServiceTask"
    MANUAL_TASK = "ManualTask"
    SEND_TASK = "SendTask"


class ZoomLevel(_ValuesMixin, str, Enum):
    """Timeline discretization level (bucket width)."""

    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    QUARTER = "quarter"


class DeviationType(_ValuesMixin, str, Enum):
    """Direction of an actual-vs-deadline deviation."""

    EARLY = "early"
    LATE = "late"


class DeadlineState(_ValuesMixin, str, Enum):
    """Deadline classification of an open task relative to today."""

    OVERDUE = "overdue"
    DUE_SOON = "due_soon"
    ON_TRACK = "on_track"
    NONE = "none"


class FieldKind(_ValuesMixin, str, Enum):
    """How a required task field is checked for presence."""

    TEXT = "text"
    DATE = "date"
    AMOUNT = "amount"  # must be a positive number
    CHOICE = "choice"  # any explicit answer, including "no"
