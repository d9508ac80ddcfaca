"""Build project timeline use case: projector + timeline builder."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import date, datetime

from app.application.dtos.timeline import TimelineView
from app.application.services.schedule_projector import ScheduleProjector
from app.application.services.timeline_builder import TimelineBuilder
from app.domain.entities.task_instance import TaskInstanceEntity, ensure_same_project
from app.domain.enums import TaskStatus, ZoomLevel
from app.shared.telemetry.tracing import add_span_attributes, traced
from app.shared.utils.datetime import utc_now


class BuildProjectTimelineUseCase:
    """Combines real and projected windows and discretizes them for rendering."""

    def __init__(self, projector: ScheduleProjector, builder: TimelineBuilder) -> None:
        self._projector = projector
        self._builder = builder

    @traced("store_opening.build_timeline")
    async def execute(
        self,
        instances: Sequence[TaskInstanceEntity],
        *,
        project_start: datetime | None = None,
        zoom: ZoomLevel = ZoomLevel.DAY,
        status_filter: TaskStatus | None = None,
        today: date | None = None,
    ) -> TimelineView:
        """Return the timeline view model of one project.

        Args:
            instances: Task snapshot of the project (ad-hoc tasks are skipped).
            project_start: Start of projected root tasks; defaults to the
                earliest task creation time, else now.
            zoom: Bucket width.
            status_filter: Optional display-status filter (axis unaffected).
            today: Reference day (defaults to the current UTC date).

        Raises:
            ValidationException: If the instances span more than one project.
        """
        if instances:
            ensure_same_project(instances[0].project_id, instances)
        now = utc_now()
        if project_start is None:
            created = [t.created_at for t in instances if t.is_graph_backed]
            project_start = min(created) if created else now
        windows = self._projector.project(instances, project_start)
        view = self._builder.build(
            windows, zoom, today or now.date(), status_filter=status_filter
        )
        add_span_attributes(rows=len(view.rows), buckets=view.bucket_count)
        return view
