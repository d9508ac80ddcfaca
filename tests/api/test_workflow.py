"""Tests for workflow endpoints (initial tasks, next tasks, current stage)."""

from httpx import AsyncClient

from app.schemas.workflow import NextTasksRequest

NOW = "2024-01-10T09:00:00Z"


def _task(code: str, name: str, status: str = "completed", **extra) -> dict:
    return {
        "project_id": "p1",
        "code": code,
        "name": name,
        "status": status,
        "created_at": NOW,
        **extra,
    }


async def test_initial_tasks(client: AsyncClient) -> None:
    response = await client.post(
        "/api/v1/workflow/initial-tasks",
        json={"project_id": "p1", "project_name": "Магазин №7", "now": NOW},
    )
    assert response.status_code == 200
    data = response.json()
    assert [t["code"] for t in data["tasks"]] == ["TASK-PREP-AUDIT"]
    task = data["tasks"][0]
    assert task["status"] == "assigned"
    assert task["status_label"] == "Назначена"
    assert task["normative_deadline"].startswith("2024-01-12")
    assert data["events"][0]["kind"] == "created"


async def test_next_tasks_accepts_legacy_status_labels(client: AsyncClient) -> None:
    response = await client.post(
        "/api/v1/workflow/next-tasks",
        json={
            "project_id": "p1",
            "now": NOW,
            "tasks": [_task("TASK-PREP-AUDIT", "Подготовка к аудиту", status="Завершена")],
        },
    )
    assert response.status_code == 200
    assert [t["code"] for t in response.json()["tasks"]] == ["TASK-AUDIT"]


async def test_next_tasks_rejects_foreign_project(client: AsyncClient) -> None:
    foreign = _task("TASK-PREP-AUDIT", "Подготовка к аудиту", project_id="p2")
    response = await client.post(
        "/api/v1/workflow/next-tasks",
        json={"project_id": "p1", "tasks": [foreign]},
    )
    assert response.status_code == 400
    assert response.json()["details"] == {"field": "tasks"}


async def test_next_tasks_unknown_status_returns_422(client: AsyncClient) -> None:
    response = await client.post(
        "/api/v1/workflow/next-tasks",
        json={"project_id": "p1", "tasks": [_task("TASK-PREP-AUDIT", "x", status="done?")]},
    )
    assert response.status_code == 422


async def test_current_stage(client: AsyncClient) -> None:
    response = await client.post(
        "/api/v1/workflow/current-stage",
        json={
            "tasks": [
                _task("TASK-PREP-AUDIT", "Подготовка к аудиту", stage="Инициализация"),
                _task("TASK-AUDIT", "Аудит объекта", status="in_progress", stage="Аудит"),
            ]
        },
    )
    assert response.status_code == 200
    assert response.json() == {"stage": "Аудит"}


def test_next_tasks_is_single_step_by_default() -> None:
    assert NextTasksRequest(project_id="p1").cascade is False
