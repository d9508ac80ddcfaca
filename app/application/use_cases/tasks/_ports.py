"""Helpers shared by task use cases: responsible assignment and event delivery.

Notification and activity collaborators are informed, not consulted: a
runtime failure in one of them is logged and never fails the transition.
Programming errors are re-raised.
"""

from __future__ import annotations

from dataclasses import replace
from datetime import datetime

from app.application.dtos.task_event import TaskEvent
from app.application.interfaces.services import (
    IActivityLog,
    INotificationService,
    IResponsibleDirectory,
)
from app.domain.entities.task_instance import TaskInstanceEntity
from app.shared.enums import ActorType, TaskEventKind
from app.shared.telemetry.logging import get_logger

logger = get_logger(__name__)

_PROGRAMMING_ERRORS = (AssertionError, AttributeError, IndexError, KeyError, NameError, TypeError)


async def assign_responsible(
    tasks: list[TaskInstanceEntity],
    directory: IResponsibleDirectory | None,
) -> list[TaskInstanceEntity]:
    """Replace the role placeholder with a user from the directory, when found."""
    if directory is None:
        return tasks
    assigned: list[TaskInstanceEntity] = []
    for task in tasks:
        user = await directory.find_by_role(task.responsible)
        if user is None:
            logger.info("No user found for role %s (task %s)", task.responsible, task.ref)
            assigned.append(task)
            continue
        assigned.append(replace(task, responsible=user.name, responsible_user_id=user.user_id))
    return assigned


def created_event(
    task: TaskInstanceEntity, now: datetime, project_name: str | None = None
) -> TaskEvent:
    """Event for a newly proposed task (notification to the responsible user)."""
    project_label = project_name or f"#{task.project_id}"
    return TaskEvent(
        kind=TaskEventKind.CREATED,
        project_id=task.project_id,
        task_name=task.name,
        occurred_at=now,
        actor_type=ActorType.SYSTEM,
        task_id=task.id,
        task_code=task.code,
        responsible=task.responsible,
        responsible_user_id=task.responsible_user_id,
        details={
            "message": f'Вам назначена новая задача "{task.name}" в проекте "{project_label}"',
            "status": task.status.value,
            "stage": task.stage,
        },
    )


async def notify_created(
    events: list[TaskEvent], notification_service: INotificationService | None
) -> None:
    """Notify responsible users about created tasks that have a user assigned."""
    if notification_service is None:
        return
    for event in events:
        if not event.responsible_user_id:
            continue
        try:
            await notification_service.notify(event)
        except _PROGRAMMING_ERRORS:
            raise
        except Exception:
            logger.exception(
                "Notification failed for task %s (project %s)",
                event.task_code or event.task_name,
                event.project_id,
            )


async def record_activity(event: TaskEvent, activity_log: IActivityLog | None) -> None:
    """Append a started/completed event to the project activity log."""
    if activity_log is None:
        return
    try:
        await activity_log.append(event)
    except _PROGRAMMING_ERRORS:
        raise
    except Exception:
        logger.exception(
            "Activity log append failed for task %s (%s)",
            event.task_id or event.task_name,
            event.kind.value,
        )
