"""Activate project use case: initial tasks for a newly created project."""

from __future__ import annotations

from datetime import datetime

from app.application.dtos.task_event import ActivationResult
from app.application.interfaces.services import INotificationService, IResponsibleDirectory
from app.application.services.dependency_resolver import DependencyResolver
from app.application.use_cases.tasks._ports import (
    assign_responsible,
    created_event,
    notify_created,
)
from app.shared.telemetry.logging import get_logger
from app.shared.telemetry.tracing import traced
from app.shared.utils.datetime import utc_now

logger = get_logger(__name__)


class ActivateProjectUseCase:
    """Creates the root tasks of the process (plus any ServiceTask cascade)."""

    def __init__(
        self,
        resolver: DependencyResolver,
        responsible_directory: IResponsibleDirectory | None = None,
        notification_service: INotificationService | None = None,
    ) -> None:
        self._resolver = resolver
        self._responsible_directory = responsible_directory
        self._notification_service = notification_service

    @traced("store_opening.activate_project")
    async def execute(
        self,
        project_id: str,
        *,
        project_name: str | None = None,
        now: datetime | None = None,
    ) -> ActivationResult:
        """Propose the initial task set of a project.

        Must be called once per project; the caller persists the proposals.

        Args:
            project_id: New project id.
            project_name: Optional name used in notification text.
            now: Creation time (defaults to current UTC time).

        Returns:
            ActivationResult with the proposals and one created event each.
        """
        now = now or utc_now()
        initial = self._resolver.initial_tasks(project_id, now)
        tasks = initial + self._resolver.cascade(project_id, initial, now)
        tasks = await assign_responsible(tasks, self._responsible_directory)
        events = [created_event(task, now, project_name) for task in tasks]
        await notify_created(events, self._notification_service)
        logger.info("Project %s activated with %d task(s)", project_id, len(tasks))
        return ActivationResult(created=tasks, events=events)
