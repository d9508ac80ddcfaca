"""DependencyResolver unit tests (initial tasks, unlocking, cascade, stage)."""

from datetime import timedelta

import pytest

from app.application.services.dependency_resolver import DependencyResolver
from app.application.services.process_graph import ProcessGraph
from app.application.services.store_opening_process import INITIAL_STAGE
from app.domain.entities.task_definition import TaskDefinitionEntity
from app.domain.enums import TaskKind, TaskStatus
from app.domain.exceptions import ValidationException
from tests.conftest import PROJECT_ID, T0, make_task

_COMPLETED = TaskStatus.COMPLETED


def _done(*codes: str) -> list:
    return [make_task(code, status=_COMPLETED) for code in codes]


def test_initial_tasks_are_assigned_roots(resolver: DependencyResolver) -> None:
    tasks = resolver.initial_tasks(PROJECT_ID, T0)

    assert len(tasks) == 1
    task = tasks[0]
    assert task.code == "TASK-PREP-AUDIT"
    assert task.project_id == PROJECT_ID
    assert task.status is TaskStatus.ASSIGNED
    assert task.responsible == "МП"
    assert task.stage == INITIAL_STAGE
    assert task.created_at == T0
    assert task.normative_deadline == T0 + timedelta(days=2)


def test_next_tasks_unlocks_after_completion(resolver: DependencyResolver) -> None:
    created = resolver.next_tasks(PROJECT_ID, _done("TASK-PREP-AUDIT"), T0)
    assert [t.code for t in created] == ["TASK-AUDIT"]


def test_next_tasks_is_idempotent_over_snapshot(resolver: DependencyResolver) -> None:
    snapshot = _done("TASK-PREP-AUDIT")
    first = resolver.next_tasks(PROJECT_ID, snapshot, T0)
    again = resolver.next_tasks(PROJECT_ID, snapshot, T0)
    assert [t.code for t in first] == [t.code for t in again]

    assert resolver.next_tasks(PROJECT_ID, snapshot + first, T0) == []


def test_fan_in_waits_for_every_predecessor(resolver: DependencyResolver) -> None:
    snapshot = _done("TASK-PREP-AUDIT", "TASK-AUDIT", "TASK-CONTOUR", "TASK-VISUALIZATION")
    snapshot += [
        make_task("TASK-ALCO-LIC"),
        make_task("TASK-WASTE"),
        make_task("TASK-LOGISTICS"),
        make_task("TASK-LAYOUT", status=TaskStatus.IN_PROGRESS),
    ]
    assert resolver.next_tasks(PROJECT_ID, snapshot, T0) == []

    snapshot[-1] = make_task("TASK-LAYOUT", status=_COMPLETED)
    created = resolver.next_tasks(PROJECT_ID, snapshot, T0)
    assert [t.code for t in created] == ["TASK-BUDGET-EQUIP", "TASK-BUDGET-SECURITY"]


def test_fan_in_unlocks_once_when_both_complete(resolver: DependencyResolver) -> None:
    snapshot = _done(
        "TASK-PREP-AUDIT",
        "TASK-AUDIT",
        "TASK-CONTOUR",
        "TASK-VISUALIZATION",
        "TASK-LAYOUT",
        "TASK-BUDGET-SECURITY",
        "TASK-BUDGET-RSR",
    )
    snapshot.append(make_task("TASK-BUDGET-EQUIP"))
    created = resolver.next_tasks(PROJECT_ID, snapshot, T0)
    codes = [t.code for t in created]
    assert "TASK-BUDGET-EQUIP" not in codes
    assert "TASK-BUDGET-PIS" not in codes


def test_ad_hoc_tasks_are_ignored(resolver: DependencyResolver) -> None:
    snapshot = _done("TASK-PREP-AUDIT") + [
        make_task(None, name="Согласовать с арендодателем", status=_COMPLETED)
    ]
    created = resolver.next_tasks(PROJECT_ID, snapshot, T0)
    assert [t.code for t in created] == ["TASK-AUDIT"]


def test_next_tasks_on_empty_snapshot_returns_roots(resolver: DependencyResolver) -> None:
    created = resolver.next_tasks(PROJECT_ID, [], T0)
    assert [t.code for t in created] == ["TASK-PREP-AUDIT"]


def test_cascade_settles_service_task_chain() -> None:
    def _d(code: str, deps: tuple[str, ...], kind: TaskKind) -> TaskDefinitionEntity:
        return TaskDefinitionEntity(code, f"Task {code}", "МП", deps, kind, "Stage", 1)

    graph = ProcessGraph.from_definitions(
        [
            _d("A", (), TaskKind.USER_TASK),
            _d("B", ("A",), TaskKind.SERVICE_TASK),
            _d("C", ("B",), TaskKind.USER_TASK),
        ]
    )
    resolver = DependencyResolver(graph)
    snapshot = _done("A")

    single = resolver.next_tasks(PROJECT_ID, snapshot, T0)
    assert [(t.code, t.status) for t in single] == [("B", _COMPLETED)]
    assert single[0].completed_at == T0

    cascaded = resolver.cascade(PROJECT_ID, snapshot, T0)
    assert [(t.code, t.status) for t in cascaded] == [
        ("B", _COMPLETED),
        ("C", TaskStatus.ASSIGNED),
    ]


def test_current_stage_without_tasks(resolver: DependencyResolver) -> None:
    assert resolver.current_stage([]) == INITIAL_STAGE


def test_current_stage_prefers_open_task(resolver: DependencyResolver) -> None:
    tasks = [
        make_task("TASK-PREP-AUDIT", status=_COMPLETED, stage=INITIAL_STAGE),
        make_task("TASK-AUDIT", status=TaskStatus.IN_PROGRESS, stage="Аудит"),
    ]
    assert resolver.current_stage(tasks) == "Аудит"


def test_current_stage_falls_back_to_latest_created(resolver: DependencyResolver) -> None:
    tasks = [
        make_task("TASK-AUDIT", status=_COMPLETED, stage="Аудит", created_at=T0 + timedelta(days=3)),
        make_task("TASK-PREP-AUDIT", status=_COMPLETED, stage=INITIAL_STAGE),
    ]
    assert resolver.current_stage(tasks) == "Аудит"


def test_foreign_completed_tasks_do_not_unlock(resolver: DependencyResolver) -> None:
    snapshot = [
        make_task("TASK-CONTOUR"),
        make_task("TASK-LAYOUT", status=_COMPLETED, project_id="p2"),
        make_task("TASK-VISUALIZATION", status=_COMPLETED, project_id="p2"),
    ]
    with pytest.raises(ValidationException) as exc_info:
        resolver.next_tasks(PROJECT_ID, snapshot, T0)
    assert exc_info.value.details == {"field": "tasks"}

    with pytest.raises(ValidationException):
        resolver.cascade(PROJECT_ID, snapshot, T0)
