"""Task instance domain entity.

A task instance belongs to one project. When ``code`` is set it was created
from a process definition ("graph-backed"); when it is None it is an ad-hoc
task created by a user and is invisible to the dependency resolver.

Instances are immutable values: lifecycle methods return a new instance and
leave the original untouched, so callers decide what to persist.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field, replace
from datetime import date, datetime, timedelta
from typing import Any

from app.domain.enums import DeadlineState, TaskKind, TaskStatus
from app.domain.exceptions import InvalidTransitionException, ValidationException


@dataclass(frozen=True)
class TaskInstanceEntity:
    """Domain entity for a project task."""

    project_id: str
    name: str
    status: TaskStatus
    created_at: datetime
    id: str | None = None
    code: str | None = None
    kind: TaskKind = TaskKind.USER_TASK
    responsible: str = ""
    responsible_user_id: str | None = None
    stage: str | None = None
    normative_deadline: datetime | None = None
    started_at: datetime | None = None
    actual_date: datetime | None = None
    completed_at: datetime | None = None
    attributes: dict[str, Any] = field(default_factory=dict)

    @property
    def is_graph_backed(self) -> bool:
        """Return whether this instance was created from a process definition."""
        return self.code is not None

    @property
    def is_completed(self) -> bool:
        return self.status is TaskStatus.COMPLETED

    @property
    def ref(self) -> str:
        """Identifier for messages: id when persisted, else code, else name."""
        return self.id or self.code or self.name

    def is_overdue(self, today: date) -> bool:
        """Return whether the deadline day has passed and the task is not completed."""
        if self.is_completed:
            return False
        if self.status is TaskStatus.OVERDUE:
            return True
        if self.normative_deadline is None:
            return False
        return self.normative_deadline.date() < today

    def display_status(self, today: date) -> TaskStatus:
        """Return the status shown to users, deriving OVERDUE from the deadline."""
        if self.is_overdue(today):
            return TaskStatus.OVERDUE
        return self.status

    def deadline_state(self, today: date, due_soon_days: int) -> DeadlineState:
        """Classify the deadline of an open task relative to today.

        Args:
            today: Reference day.
            due_soon_days: Window (in days, inclusive) considered "due soon".

        Returns:
            NONE for completed tasks or tasks without a deadline.
        """
        if self.is_completed or self.normative_deadline is None:
            return DeadlineState.NONE
        if self.is_overdue(today):
            return DeadlineState.OVERDUE
        if self.normative_deadline.date() <= today + timedelta(days=due_soon_days):
            return DeadlineState.DUE_SOON
        return DeadlineState.ON_TRACK

    def start(self, now: datetime) -> "TaskInstanceEntity":
        """Return a copy moved to IN_PROGRESS with started_at stamped.

        Raises:
            InvalidTransitionException: If the task is already in progress or completed.
        """
        if self.status not in (TaskStatus.ASSIGNED, TaskStatus.OVERDUE):
            raise InvalidTransitionException(
                self.ref, self.status.value, TaskStatus.IN_PROGRESS.value
            )
        return replace(
            self,
            status=TaskStatus.IN_PROGRESS,
            started_at=self.started_at or now,
            attributes=dict(self.attributes),
        )

    def complete(self, now: datetime) -> "TaskInstanceEntity":
        """Return a copy moved to COMPLETED with actual_date set to now.

        Callers must have passed the completion gate first; this method only
        enforces that COMPLETED is terminal.

        Raises:
            InvalidTransitionException: If the task is already completed.
        """
        if self.is_completed or self.status is TaskStatus.PLANNED:
            raise InvalidTransitionException(
                self.ref, self.status.value, TaskStatus.COMPLETED.value
            )
        return replace(
            self,
            status=TaskStatus.COMPLETED,
            completed_at=self.completed_at or now,
            actual_date=now,
            attributes=dict(self.attributes),
        )


def ensure_same_project(project_id: str, tasks: Iterable[TaskInstanceEntity]) -> None:
    """Reject a task snapshot that mixes in tasks of other projects.

    Raises:
        ValidationException: If any task belongs to a project other than project_id.
    """
    foreign = sorted({t.project_id for t in tasks} - {project_id})
    if foreign:
        raise ValidationException(
            f"Tasks belong to other projects: {', '.join(foreign)}", field="tasks"
        )
