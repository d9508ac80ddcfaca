"""Complete task use case: gate, transition, then activate unlocked tasks."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime

from app.application.dtos.task_event import CompleteTaskResult, TaskEvent
from app.application.interfaces.services import (
    IActivityLog,
    IDocumentLookup,
    INotificationService,
    IResponsibleDirectory,
)
from app.application.services.completion_gate import CompletionGate
from app.application.services.dependency_resolver import DependencyResolver
from app.application.use_cases.tasks._ports import (
    assign_responsible,
    created_event,
    notify_created,
    record_activity,
)
from app.domain.entities.document import DocumentRef
from app.domain.entities.task_instance import TaskInstanceEntity, ensure_same_project
from app.domain.enums import TaskStatus
from app.domain.exceptions import InvalidTransitionException
from app.shared.enums import ActorType, TaskEventKind
from app.shared.telemetry.logging import get_logger
from app.shared.telemetry.tracing import add_span_attributes, traced
from app.shared.utils.datetime import utc_now

logger = get_logger(__name__)

ACTION_COMPLETED = "завершил задачу"


def _same_task(a: TaskInstanceEntity, b: TaskInstanceEntity) -> bool:
    if a.id is not None and b.id is not None:
        return a.id == b.id
    return a.code is not None and a.code == b.code


class CompleteTaskUseCase:
    """Runs the completion gate and, on success, re-runs the dependency resolver."""

    def __init__(
        self,
        resolver: DependencyResolver,
        gate: CompletionGate,
        document_lookup: IDocumentLookup | None = None,
        activity_log: IActivityLog | None = None,
        notification_service: INotificationService | None = None,
        responsible_directory: IResponsibleDirectory | None = None,
    ) -> None:
        self._resolver = resolver
        self._gate = gate
        self._document_lookup = document_lookup
        self._activity_log = activity_log
        self._notification_service = notification_service
        self._responsible_directory = responsible_directory

    async def _documents(
        self, task: TaskInstanceEntity, documents: Sequence[DocumentRef] | None
    ) -> list[DocumentRef]:
        if documents is not None:
            return list(documents)
        if self._document_lookup is not None and task.id is not None:
            return await self._document_lookup.list_documents(task.id)
        return []

    @traced("store_opening.complete_task")
    async def execute(
        self,
        task: TaskInstanceEntity,
        existing: Sequence[TaskInstanceEntity],
        *,
        documents: Sequence[DocumentRef] | None = None,
        project_name: str | None = None,
        now: datetime | None = None,
    ) -> CompleteTaskResult:
        """Try to complete a task.

        Args:
            task: Task to complete (current persisted state).
            existing: Full task snapshot of the project (may include task).
            documents: Attached documents; when None they are fetched through
                the document lookup port (if configured).
            project_name: Optional name used in notification text.
            now: Completion time (defaults to current UTC time).

        Returns:
            CompleteTaskResult. When blocked, the task is returned unchanged
            with the failing requirement and no tasks are created.

        Raises:
            InvalidTransitionException: If the task is already completed.
            ValidationException: If existing holds tasks of another project.
        """
        ensure_same_project(task.project_id, existing)
        if task.status in (TaskStatus.COMPLETED, TaskStatus.PLANNED):
            raise InvalidTransitionException(
                task.ref, task.status.value, TaskStatus.COMPLETED.value
            )
        now = now or utc_now()

        check = self._gate.can_complete(task, await self._documents(task, documents))
        if not check.ok:
            logger.warning(
                "Completion blocked for task %s: %s (%s)",
                task.ref,
                check.reason,
                check.requirement,
            )
            add_span_attributes(blocked_reason=check.reason or "")
            return CompleteTaskResult(task=task, check=check)

        completed = task.complete(now)
        event = TaskEvent(
            kind=TaskEventKind.COMPLETED,
            project_id=task.project_id,
            task_name=task.name,
            occurred_at=now,
            actor_type=ActorType.USER,
            task_id=task.id,
            task_code=task.code,
            responsible=task.responsible,
            responsible_user_id=task.responsible_user_id,
            details={
                "action": ACTION_COMPLETED,
                "from_status": task.status.value,
                "to_status": completed.status.value,
            },
        )
        await record_activity(event, self._activity_log)

        created: list[TaskInstanceEntity] = []
        if completed.is_graph_backed:
            snapshot = [completed if _same_task(t, task) else t for t in existing]
            if not any(_same_task(t, task) for t in existing):
                snapshot.append(completed)
            created = self._resolver.cascade(task.project_id, snapshot, now)
            created = await assign_responsible(created, self._responsible_directory)

        created_events = [created_event(t, now, project_name) for t in created]
        await notify_created(created_events, self._notification_service)
        logger.info(
            "Task %s completed; %d task(s) unlocked", task.ref, len(created)
        )
        return CompleteTaskResult(
            task=completed,
            check=check,
            created=created,
            events=[event, *created_events],
        )
