"""Pydantic request/response schemas for the API."""

from app.schemas.completion import (
    AttachmentFormatRequest,
    CompleteTaskRequest,
    CompleteTaskResponse,
    CompletionCheckRequest,
    CompletionCheckResponse,
)
from app.schemas.health import HealthResponse, ReadinessResponse
from app.schemas.process import ProcessGraphResponse, TaskDefinitionResponse
from app.schemas.task import (
    AdHocTaskRequest,
    DocumentRefSchema,
    StartTaskRequest,
    StartTaskResponse,
    TaskInstanceResponse,
    TaskInstanceSchema,
    TaskProposalsResponse,
)
from app.schemas.timeline import TimelineRequest, TimelineResponse
from app.schemas.workflow import (
    CurrentStageRequest,
    CurrentStageResponse,
    InitialTasksRequest,
    NextTasksRequest,
)

__all__ = [
    "AdHocTaskRequest",
    "AttachmentFormatRequest",
    "CompleteTaskRequest",
    "CompleteTaskResponse",
    "CompletionCheckRequest",
    "CompletionCheckResponse",
    "CurrentStageRequest",
    "CurrentStageResponse",
    "DocumentRefSchema",
    "HealthResponse",
    "InitialTasksRequest",
    "NextTasksRequest",
    "ProcessGraphResponse",
    "ReadinessResponse",
    "StartTaskRequest",
    "StartTaskResponse",
    "TaskDefinitionResponse",
    "TaskInstanceResponse",
    "TaskInstanceSchema",
    "TaskProposalsResponse",
    "TimelineRequest",
    "TimelineResponse",
]
