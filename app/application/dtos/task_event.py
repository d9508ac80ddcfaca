"""DTOs for task lifecycle events and use case results."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from app.application.dtos.completion import CompletionCheck
from app.domain.entities.task_instance import TaskInstanceEntity
from app.shared.enums import ActorType, TaskEventKind


@dataclass(frozen=True)
class TaskEvent:
    """Caller-visible event (created, started, completed); delivery is external."""

    kind: TaskEventKind
    project_id: str
    task_name: str
    occurred_at: datetime
    actor_type: ActorType = ActorType.SYSTEM
    task_id: str | None = None
    task_code: str | None = None
    responsible: str | None = None
    responsible_user_id: str | None = None
    details: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class ActivationResult:
    """New task proposals plus the events they produced."""

    created: list[TaskInstanceEntity]
    events: list[TaskEvent]


@dataclass(frozen=True)
class StartTaskResult:
    task: TaskInstanceEntity
    event: TaskEvent


@dataclass(frozen=True)
class CompleteTaskResult:
    """Result of a completion attempt.

    When ``check.ok`` is False the task is returned unchanged and nothing
    was created.
    """

    task: TaskInstanceEntity
    check: CompletionCheck
    created: list[TaskInstanceEntity] = field(default_factory=list)
    events: list[TaskEvent] = field(default_factory=list)

    @property
    def completed(self) -> bool:
        return self.check.ok
