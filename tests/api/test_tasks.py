"""Tests for task lifecycle endpoints."""

from httpx import AsyncClient

NOW = "2024-01-11T09:00:00Z"

PREP_TASK = {
    "id": "t1",
    "project_id": "p1",
    "code": "TASK-PREP-AUDIT",
    "name": "Подготовка к аудиту",
    "status": "in_progress",
    "created_at": "2024-01-10T09:00:00Z",
    "normative_deadline": "2024-01-12T09:00:00Z",
    "attributes": {"planned_audit_date": "2024-01-15", "project_folder_link": "https://disk/p1"},
}

TECH_PLAN = {
    "id": "d1",
    "task_id": "t1",
    "type": "Технический план",
    "upload_date": "2024-01-11T08:00:00",
    "file_name": "plan.pdf",
}


async def test_start_task(client: AsyncClient) -> None:
    response = await client.post(
        "/api/v1/tasks/start",
        json={"task": {**PREP_TASK, "status": "Назначена"}, "now": NOW},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["task"]["status"] == "in_progress"
    assert data["task"]["started_at"].startswith("2024-01-11")
    assert data["event"]["kind"] == "started"


async def test_start_task_in_progress_returns_409(client: AsyncClient) -> None:
    response = await client.post("/api/v1/tasks/start", json={"task": PREP_TASK})
    assert response.status_code == 409
    assert response.json()["error"] == "INVALID_TRANSITION"


async def test_completion_check_blocked(client: AsyncClient) -> None:
    response = await client.post(
        "/api/v1/tasks/completion-check", json={"task": PREP_TASK, "documents": []}
    )
    assert response.status_code == 200
    data = response.json()
    assert data["ok"] is False
    assert data["outcome"] == "blocked"
    assert data["reason"] == "missing_document"


async def test_complete_task_blocked_returns_200(client: AsyncClient) -> None:
    response = await client.post(
        "/api/v1/tasks/complete",
        json={"task": PREP_TASK, "tasks": [PREP_TASK], "documents": [], "now": NOW},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["outcome"] == "blocked"
    assert data["task"]["status"] == "in_progress"
    assert data["created"] == []


async def test_complete_task_unlocks_audit(client: AsyncClient) -> None:
    response = await client.post(
        "/api/v1/tasks/complete",
        json={
            "task": PREP_TASK,
            "tasks": [PREP_TASK],
            "documents": [TECH_PLAN],
            "project_name": "Магазин №7",
            "now": NOW,
        },
    )
    assert response.status_code == 200
    data = response.json()
    assert data["outcome"] == "completed"
    assert data["task"]["status"] == "completed"
    assert [t["code"] for t in data["created"]] == ["TASK-AUDIT"]
    assert [e["kind"] for e in data["events"]] == ["completed", "created"]


async def test_create_ad_hoc_task(client: AsyncClient) -> None:
    response = await client.post(
        "/api/v1/tasks/ad-hoc",
        json={"project_id": "p1", "name": "Согласовать вывеску", "responsible": "Петров П."},
    )
    assert response.status_code == 201
    task = response.json()["tasks"][0]
    assert task["code"] is None
    assert task["status"] == "assigned"


async def test_attachment_format(client: AsyncClient) -> None:
    ok = await client.post(
        "/api/v1/tasks/attachment-format",
        json={"document_type": "Расчет бюджета РСР", "file_name": "rsr.xlsx"},
    )
    assert ok.status_code == 200
    assert ok.json()["allowed"] is True

    rejected = await client.post(
        "/api/v1/tasks/attachment-format",
        json={"document_type": "Расчет бюджета РСР", "file_name": "rsr.pdf"},
    )
    assert rejected.status_code == 400
    assert rejected.json()["details"] == {"field": "file_name"}


async def test_complete_task_rejects_other_project_tasks(client: AsyncClient) -> None:
    contour = {
        "id": "t3",
        "project_id": "p1",
        "code": "TASK-CONTOUR",
        "name": "Контур",
        "status": "in_progress",
        "created_at": "2024-01-10T09:00:00Z",
    }
    foreign = [
        {**contour, "id": f"x{i}", "project_id": "p2", "code": code, "status": "completed"}
        for i, code in enumerate(["TASK-LAYOUT", "TASK-VISUALIZATION"])
    ]
    response = await client.post(
        "/api/v1/tasks/complete",
        json={"task": contour, "tasks": [contour, *foreign], "documents": [], "now": NOW},
    )
    assert response.status_code == 400
    assert response.json()["details"] == {"field": "tasks"}
