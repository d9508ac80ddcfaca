"""Create ad-hoc task use case: a user task outside the process graph."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from app.application.dtos.task_event import ActivationResult
from app.application.interfaces.services import INotificationService
from app.application.use_cases.tasks._ports import created_event, notify_created
from app.domain.entities.task_instance import TaskInstanceEntity
from app.domain.enums import TaskKind, TaskStatus
from app.domain.exceptions import ValidationException
from app.shared.telemetry.tracing import traced
from app.shared.utils.datetime import ensure_utc, utc_now


class CreateAdHocTaskUseCase:
    """Creates an Assigned task with no definition code.

    Ad-hoc tasks are invisible to the dependency resolver and to the
    timeline; they only participate in the start/complete lifecycle.
    """

    def __init__(self, notification_service: INotificationService | None = None) -> None:
        self._notification_service = notification_service

    @traced("store_opening.create_ad_hoc_task")
    async def execute(
        self,
        project_id: str,
        name: str,
        *,
        normative_deadline: datetime | None = None,
        responsible: str = "",
        responsible_user_id: str | None = None,
        stage: str | None = None,
        attributes: dict[str, Any] | None = None,
        project_name: str | None = None,
        now: datetime | None = None,
    ) -> ActivationResult:
        """Propose an ad-hoc task for the caller to persist.

        Raises:
            ValidationException: If the name is blank or the deadline precedes creation.
        """
        if not name or not name.strip():
            raise ValidationException("Task name is required", field="name")
        now = now or utc_now()
        deadline = ensure_utc(normative_deadline)
        if deadline is not None and deadline.date() < now.date():
            raise ValidationException(
                "Deadline cannot be before the creation date", field="normative_deadline"
            )
        task = TaskInstanceEntity(
            project_id=project_id,
            name=name.strip(),
            kind=TaskKind.USER_TASK,
            status=TaskStatus.ASSIGNED,
            created_at=now,
            responsible=responsible,
            responsible_user_id=responsible_user_id,
            stage=stage,
            normative_deadline=deadline,
            attributes=dict(attributes or {}),
        )
        event = created_event(task, now, project_name)
        await notify_created([event], self._notification_service)
        return ActivationResult(created=[task], events=[event])
