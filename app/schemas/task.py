"""Task and document API schemas.

Statuses travel as enum values ("assigned", "in_progress", ...). The portal's
legacy Russian labels are accepted on input and echoed as ``*_label`` on
output; they never reach the engine.
"""

from datetime import date, datetime, timezone
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from app.domain.entities.document import DocumentRef
from app.domain.entities.task_instance import TaskInstanceEntity
from app.domain.enums import DeadlineState, TaskKind, TaskStatus
from app.shared.enums import ActorType, TaskEventKind

STATUS_LABELS: dict[TaskStatus, str] = {
    TaskStatus.ASSIGNED: "Назначена",
    TaskStatus.IN_PROGRESS: "В работе",
    TaskStatus.COMPLETED: "Завершена",
    TaskStatus.OVERDUE: "Срыв сроков",
    TaskStatus.PLANNED: "Запланирована",
}
_STATUS_BY_LABEL = {label.casefold(): status for status, label in STATUS_LABELS.items()}


def parse_task_status(value: Any) -> TaskStatus:
    """Accept a TaskStatus, its value, or a legacy portal label."""
    if isinstance(value, TaskStatus):
        return value
    if not isinstance(value, str):
        raise ValueError("status must be a string")
    text = value.strip()
    if text in TaskStatus.values():
        return TaskStatus(text)
    status = _STATUS_BY_LABEL.get(text.casefold())
    if status is None:
        raise ValueError(
            f"Unknown task status {value!r}; expected one of {', '.join(TaskStatus.values())}"
        )
    return status


def ensure_aware_datetime(v: Any) -> Any:
    """Accept datetime or ISO string; treat naive datetimes as UTC (common from frontends)."""
    if v is None or v == "":
        return None
    if isinstance(v, str):
        v = datetime.fromisoformat(v.replace("Z", "+00:00"))
    if isinstance(v, datetime) and v.tzinfo is None:
        v = v.replace(tzinfo=timezone.utc)
    return v


class DocumentRefSchema(BaseModel):
    """Document attached to a task (as listed by the document store)."""

    id: str
    task_id: str | None = None
    document_type: str = Field(
        ..., min_length=1, validation_alias=AliasChoices("document_type", "type")
    )
    uploaded_at: datetime = Field(validation_alias=AliasChoices("uploaded_at", "upload_date"))
    file_name: str | None = None

    @field_validator("uploaded_at", mode="before")
    @classmethod
    def uploaded_at_aware(cls, v: Any) -> Any:
        return ensure_aware_datetime(v)

    def to_entity(self) -> DocumentRef:
        return DocumentRef(
            id=self.id,
            task_id=self.task_id,
            document_type=self.document_type,
            uploaded_at=self.uploaded_at,
            file_name=self.file_name,
        )


class TaskInstanceSchema(BaseModel):
    """Task snapshot as persisted by the caller."""

    id: str | None = None
    project_id: str = Field(..., min_length=1)
    code: str | None = None
    name: str = Field(..., min_length=1, max_length=500)
    kind: TaskKind = TaskKind.USER_TASK
    responsible: str = ""
    responsible_user_id: str | None = None
    status: TaskStatus = TaskStatus.ASSIGNED
    stage: str | None = None
    created_at: datetime
    started_at: datetime | None = None
    normative_deadline: datetime | None = None
    actual_date: datetime | None = None
    completed_at: datetime | None = None
    attributes: dict[str, Any] = Field(default_factory=dict)

    @field_validator("status", mode="before")
    @classmethod
    def status_from_label(cls, v: Any) -> TaskStatus:
        return parse_task_status(v)

    @field_validator(
        "created_at",
        "started_at",
        "normative_deadline",
        "actual_date",
        "completed_at",
        mode="before",
    )
    @classmethod
    def datetimes_aware(cls, v: Any) -> Any:
        return ensure_aware_datetime(v)

    def to_entity(self) -> TaskInstanceEntity:
        return TaskInstanceEntity(
            id=self.id,
            project_id=self.project_id,
            code=self.code,
            name=self.name,
            kind=self.kind,
            responsible=self.responsible,
            responsible_user_id=self.responsible_user_id,
            status=self.status,
            stage=self.stage,
            created_at=self.created_at,
            started_at=self.started_at,
            normative_deadline=self.normative_deadline,
            actual_date=self.actual_date,
            completed_at=self.completed_at,
            attributes=dict(self.attributes),
        )


class TaskInstanceResponse(TaskInstanceSchema):
    """Task with derived, read-only classifications."""

    status_label: str
    display_status: TaskStatus
    display_status_label: str
    deadline_state: DeadlineState

    @classmethod
    def from_entity(
        cls, task: TaskInstanceEntity, *, today: date, due_soon_days: int
    ) -> "TaskInstanceResponse":
        display = task.display_status(today)
        return cls(
            id=task.id,
            project_id=task.project_id,
            code=task.code,
            name=task.name,
            kind=task.kind,
            responsible=task.responsible,
            responsible_user_id=task.responsible_user_id,
            status=task.status,
            stage=task.stage,
            created_at=task.created_at,
            started_at=task.started_at,
            normative_deadline=task.normative_deadline,
            actual_date=task.actual_date,
            completed_at=task.completed_at,
            attributes=task.attributes,
            status_label=STATUS_LABELS[task.status],
            display_status=display,
            display_status_label=STATUS_LABELS[display],
            deadline_state=task.deadline_state(today, due_soon_days),
        )


class TaskEventResponse(BaseModel):
    """Task lifecycle event for the caller to deliver or log."""

    model_config = ConfigDict(from_attributes=True)

    kind: TaskEventKind
    project_id: str
    task_name: str
    occurred_at: datetime
    actor_type: ActorType
    task_id: str | None = None
    task_code: str | None = None
    responsible: str | None = None
    responsible_user_id: str | None = None
    details: dict[str, Any] = Field(default_factory=dict)


class TaskProposalsResponse(BaseModel):
    """Newly proposed tasks plus their creation events."""

    tasks: list[TaskInstanceResponse]
    events: list[TaskEventResponse]


class StartTaskRequest(BaseModel):
    """Request body for starting a task."""

    task: TaskInstanceSchema
    now: datetime | None = None

    @field_validator("now", mode="before")
    @classmethod
    def now_aware(cls, v: Any) -> Any:
        return ensure_aware_datetime(v)


class StartTaskResponse(BaseModel):
    task: TaskInstanceResponse
    event: TaskEventResponse


class AdHocTaskRequest(BaseModel):
    """Request body for creating a task outside the process graph."""

    project_id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1, max_length=500)
    normative_deadline: datetime | None = None
    responsible: str = ""
    responsible_user_id: str | None = None
    stage: str | None = None
    attributes: dict[str, Any] = Field(default_factory=dict)
    project_name: str | None = None

    @field_validator("normative_deadline", mode="before")
    @classmethod
    def deadline_aware(cls, v: Any) -> Any:
        return ensure_aware_datetime(v)
