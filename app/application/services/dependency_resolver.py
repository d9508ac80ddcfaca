"""Dependency resolver: which task instances unlock for a project.

Pure computation over a ProcessGraph and a snapshot of existing instances.
Proposals are returned for the caller to persist; at-most-once creation per
(project, code) is the persistence layer's job (unique constraint).
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from datetime import datetime, timedelta

from app.application.services.process_graph import ProcessGraph
from app.application.services.store_opening_process import INITIAL_STAGE
from app.domain.entities.task_definition import TaskDefinitionEntity
from app.domain.entities.task_instance import TaskInstanceEntity, ensure_same_project
from app.domain.enums import TaskStatus


class DependencyResolver:
    """Derives newly unlocked task instances from completed predecessors."""

    def __init__(self, graph: ProcessGraph, initial_stage: str = INITIAL_STAGE) -> None:
        self.graph = graph
        self.initial_stage = initial_stage

    def _instantiate(
        self, definition: TaskDefinitionEntity, project_id: str, now: datetime
    ) -> TaskInstanceEntity:
        task = TaskInstanceEntity(
            project_id=project_id,
            code=definition.code,
            name=definition.name,
            kind=definition.kind,
            responsible=definition.role,
            status=TaskStatus.ASSIGNED,
            stage=definition.stage,
            created_at=now,
            normative_deadline=now + timedelta(days=definition.duration_days),
        )
        if definition.auto_completes:
            return task.complete(now)
        return task

    def initial_tasks(self, project_id: str, now: datetime) -> list[TaskInstanceEntity]:
        """One Assigned instance per root definition (call once per project)."""
        return [self._instantiate(d, project_id, now) for d in self.graph.roots()]

    def next_tasks(
        self,
        project_id: str,
        existing: Iterable[TaskInstanceEntity],
        now: datetime,
    ) -> list[TaskInstanceEntity]:
        """Instances for definitions whose predecessors are all Completed.

        Ad-hoc instances (no code) are ignored. Definitions already
        represented in ``existing`` are never returned again, so repeated
        calls over the same snapshot return the same list.

        Args:
            project_id: Owning project.
            existing: Current task snapshot of the project.
            now: Creation timestamp for the proposals.

        Returns:
            New instances in topological order; ServiceTask proposals are
            already Completed.

        Raises:
            ValidationException: If the snapshot holds tasks of another project.
        """
        existing = tuple(existing)
        ensure_same_project(project_id, existing)
        present: set[str] = set()
        completed: set[str] = set()
        for task in existing:
            if not task.is_graph_backed:
                continue
            present.add(task.code)
            if task.is_completed:
                completed.add(task.code)

        unlocked: list[TaskInstanceEntity] = []
        for definition in self.graph.topological_order():
            if definition.code in present:
                continue
            if all(dep in completed for dep in definition.depends_on):
                unlocked.append(self._instantiate(definition, project_id, now))
        return unlocked

    def cascade(
        self,
        project_id: str,
        existing: Iterable[TaskInstanceEntity],
        now: datetime,
    ) -> list[TaskInstanceEntity]:
        """Repeat next_tasks until nothing unlocks (settles ServiceTask chains)."""
        snapshot = list(existing)
        created: list[TaskInstanceEntity] = []
        # each round adds at least one code, so the graph size bounds the loop
        for _ in range(len(self.graph) + 1):
            batch = self.next_tasks(project_id, snapshot, now)
            if not batch:
                break
            created.extend(batch)
            snapshot.extend(batch)
        return created

    def current_stage(self, instances: Sequence[TaskInstanceEntity]) -> str:
        """Stage label of the project.

        Prefers an Assigned/InProgress instance, then the most recently
        created instance, then the initial stage label.
        """
        staged = [t for t in instances if t.stage]
        for task in staged:
            if task.status.is_open:
                return task.stage
        if staged:
            return max(staged, key=lambda t: t.created_at).stage
        return self.initial_stage
