"""Workflow (dependency resolver) API schemas."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field, field_validator

from app.schemas.task import TaskInstanceSchema, ensure_aware_datetime


class InitialTasksRequest(BaseModel):
    """Request body for activating a new project."""

    project_id: str = Field(..., min_length=1)
    project_name: str | None = None
    now: datetime | None = None

    @field_validator("now", mode="before")
    @classmethod
    def now_aware(cls, v: Any) -> Any:
        return ensure_aware_datetime(v)


class NextTasksRequest(BaseModel):
    """Request body for resolving newly unlocked tasks.

    One activation step by default; dependents of the returned tasks are
    evaluated by a later call. With ``cascade`` the resolver repeats until
    nothing else unlocks, so chains of automatic (ServiceTask) steps settle
    in one call.
    """

    project_id: str = Field(..., min_length=1)
    tasks: list[TaskInstanceSchema] = Field(default_factory=list)
    cascade: bool = False
    now: datetime | None = None

    @field_validator("now", mode="before")
    @classmethod
    def now_aware(cls, v: Any) -> Any:
        return ensure_aware_datetime(v)


class CurrentStageRequest(BaseModel):
    tasks: list[TaskInstanceSchema] = Field(default_factory=list)


class CurrentStageResponse(BaseModel):
    stage: str
