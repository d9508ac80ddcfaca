"""Entity -> response helpers shared by the engine endpoints."""

from collections.abc import Iterable

from app.application.dtos.task_event import ActivationResult, TaskEvent
from app.core.config import Settings
from app.domain.entities.task_instance import TaskInstanceEntity
from app.schemas.task import TaskEventResponse, TaskInstanceResponse, TaskProposalsResponse
from app.shared.utils.datetime import utc_now


def task_response(task: TaskInstanceEntity, settings: Settings) -> TaskInstanceResponse:
    return TaskInstanceResponse.from_entity(
        task,
        today=utc_now().date(),
        due_soon_days=settings.deadline_due_soon_days,
    )


def event_responses(events: Iterable[TaskEvent]) -> list[TaskEventResponse]:
    return [TaskEventResponse.model_validate(event) for event in events]


def proposals_response(
    tasks: Iterable[TaskInstanceEntity],
    events: Iterable[TaskEvent],
    settings: Settings,
) -> TaskProposalsResponse:
    return TaskProposalsResponse(
        tasks=[task_response(task, settings) for task in tasks],
        events=event_responses(events),
    )


def activation_response(result: ActivationResult, settings: Settings) -> TaskProposalsResponse:
    return proposals_response(result.created, result.events, settings)
