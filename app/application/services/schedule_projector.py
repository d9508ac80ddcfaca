"""Schedule projector: display windows for every process definition."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime, timedelta

from app.application.dtos.schedule import ScheduleWindow
from app.application.services.process_graph import ProcessGraph
from app.domain.entities.task_instance import TaskInstanceEntity


class ScheduleProjector:
    """Combines real task dates with projected placeholders.

    Real instances keep their own dates (created_at to normative deadline).
    Definitions without an instance start one day after the latest
    predecessor window ends (the project start for roots) and last their
    nominal duration, so projected children never overlap their parents.
    """

    def __init__(self, graph: ProcessGraph) -> None:
        self.graph = graph

    def project(
        self,
        instances: Iterable[TaskInstanceEntity],
        project_start: datetime,
    ) -> list[ScheduleWindow]:
        """Return one window per definition, in declared order.

        Args:
            instances: Task snapshot of the project; ad-hoc tasks are ignored.
                When several instances share a code the first one wins.
            project_start: Reference start for projected root definitions.
        """
        by_code: dict[str, TaskInstanceEntity] = {}
        for task in instances:
            if task.is_graph_backed and task.code not in by_code:
                by_code[task.code] = task

        windows: dict[str, ScheduleWindow] = {}
        for definition in self.graph.topological_order():
            duration = timedelta(days=definition.duration_days)
            task = by_code.get(definition.code)
            if task is not None:
                start = task.created_at
                end = task.normative_deadline or start + duration
                responsible = task.responsible or definition.role
            else:
                start = project_start
                if definition.depends_on:
                    start = max(windows[dep].end for dep in definition.depends_on) + timedelta(
                        days=1
                    )
                end = start + duration
                responsible = definition.role
            windows[definition.code] = ScheduleWindow(
                code=definition.code,
                name=task.name if task is not None else definition.name,
                stage=definition.stage,
                responsible=responsible,
                depends_on=definition.depends_on,
                start=start,
                end=end,
                instance=task,
            )
        return [windows[d.code] for d in self.graph]
