"""Completion gate API schemas."""

from datetime import datetime
from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator

from app.application.dtos.completion import CompletionCheck
from app.schemas.task import (
    DocumentRefSchema,
    TaskEventResponse,
    TaskInstanceResponse,
    TaskInstanceSchema,
    ensure_aware_datetime,
)


class CompletionCheckRequest(BaseModel):
    """Request body for a dry-run completion check."""

    task: TaskInstanceSchema
    documents: list[DocumentRefSchema] = Field(default_factory=list)


class CompletionCheckResponse(BaseModel):
    """Gate outcome; a blocked outcome names the first failing requirement."""

    ok: bool
    outcome: Literal["ok", "blocked"]
    reason: str | None = None
    requirement: str | None = None
    label: str | None = None
    message: str | None = None
    present_document_types: list[str] = Field(default_factory=list)

    @classmethod
    def from_check(cls, check: CompletionCheck) -> "CompletionCheckResponse":
        return cls(
            ok=check.ok,
            outcome="ok" if check.ok else "blocked",
            reason=check.reason,
            requirement=check.requirement,
            label=check.label,
            message=check.message,
            present_document_types=list(check.present_document_types),
        )


class CompleteTaskRequest(BaseModel):
    """Request body for completing a task.

    ``tasks`` is the full task snapshot of the project, used to activate
    dependents once the task completes.
    """

    task: TaskInstanceSchema
    tasks: list[TaskInstanceSchema] = Field(default_factory=list)
    documents: list[DocumentRefSchema] = Field(default_factory=list)
    project_name: str | None = None
    now: datetime | None = None

    @field_validator("now", mode="before")
    @classmethod
    def now_aware(cls, v: Any) -> Any:
        return ensure_aware_datetime(v)


class CompleteTaskResponse(BaseModel):
    """Completion result (HTTP 200 for both outcomes)."""

    outcome: Literal["completed", "blocked"]
    task: TaskInstanceResponse
    check: CompletionCheckResponse
    created: list[TaskInstanceResponse] = Field(default_factory=list)
    events: list[TaskEventResponse] = Field(default_factory=list)


class AttachmentFormatRequest(BaseModel):
    """Request body for validating an upload's file format."""

    document_type: str = Field(..., min_length=1)
    file_name: str = Field(..., min_length=1)


class AttachmentFormatResponse(BaseModel):
    document_type: str
    file_name: str
    allowed: bool = True
