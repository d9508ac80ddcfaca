"""Start task use case: Assigned -> InProgress."""

from __future__ import annotations

from datetime import datetime

from app.application.dtos.task_event import StartTaskResult, TaskEvent
from app.application.interfaces.services import IActivityLog
from app.application.use_cases.tasks._ports import record_activity
from app.domain.entities.task_instance import TaskInstanceEntity
from app.shared.enums import ActorType, TaskEventKind
from app.shared.telemetry.tracing import traced
from app.shared.utils.datetime import utc_now

ACTION_STARTED = "взял в работу"


class StartTaskUseCase:
    """Moves a task to InProgress and records the activity."""

    def __init__(self, activity_log: IActivityLog | None = None) -> None:
        self._activity_log = activity_log

    @traced("store_opening.start_task")
    async def execute(
        self,
        task: TaskInstanceEntity,
        *,
        now: datetime | None = None,
    ) -> StartTaskResult:
        """Start work on a task.

        Raises:
            InvalidTransitionException: If the task is already in progress or completed.
        """
        now = now or utc_now()
        started = task.start(now)
        event = TaskEvent(
            kind=TaskEventKind.STARTED,
            project_id=task.project_id,
            task_name=task.name,
            occurred_at=now,
            actor_type=ActorType.USER,
            task_id=task.id,
            task_code=task.code,
            responsible=task.responsible,
            responsible_user_id=task.responsible_user_id,
            details={
                "action": ACTION_STARTED,
                "from_status": task.status.value,
                "to_status": started.status.value,
            },
        )
        await record_activity(event, self._activity_log)
        return StartTaskResult(task=started, event=event)
