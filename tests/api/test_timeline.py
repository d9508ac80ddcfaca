"""Tests for the timeline endpoint."""

from httpx import AsyncClient


async def test_timeline_for_fresh_project(client: AsyncClient) -> None:
    response = await client.post(
        "/api/v1/timeline",
        json={"tasks": [], "project_start": "2024-03-01T00:00:00Z", "today": "2024-03-01"},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["zoom"] == "day"
    assert len(data["rows"]) == 13
    assert data["bucket_count"] == len(data["buckets"])
    assert data["rows"][0]["status"] == "planned"
    assert data["filter_options"][0] == {"value": None, "label": "Все"}
    assert data["edges"][0]["path"].startswith("M ")


async def test_timeline_status_filter_label(client: AsyncClient) -> None:
    response = await client.post(
        "/api/v1/timeline",
        json={
            "tasks": [
                {
                    "project_id": "p1",
                    "code": "TASK-PREP-AUDIT",
                    "name": "Подготовка к аудиту",
                    "status": "in_progress",
                    "created_at": "2024-01-10T09:00:00Z",
                    "normative_deadline": "2024-01-12T09:00:00Z",
                }
            ],
            "zoom": "week",
            "status_filter": "В работе",
            "today": "2024-01-11",
        },
    )
    assert response.status_code == 200
    data = response.json()
    assert data["status_filter"] == "in_progress"
    assert [row["code"] for row in data["rows"]] == ["TASK-PREP-AUDIT"]


async def test_timeline_invalid_zoom_returns_422(client: AsyncClient) -> None:
    response = await client.post("/api/v1/timeline", json={"tasks": [], "zoom": "year"})
    assert response.status_code == 422


async def test_timeline_rejects_mixed_projects(client: AsyncClient) -> None:
    task = {
        "project_id": "p1",
        "code": "TASK-PREP-AUDIT",
        "name": "Подготовка к аудиту",
        "status": "completed",
        "created_at": "2024-01-10T09:00:00Z",
    }
    response = await client.post(
        "/api/v1/timeline",
        json={"tasks": [task, {**task, "project_id": "p2", "code": "TASK-AUDIT"}]},
    )
    assert response.status_code == 400
    assert response.json()["details"] == {"field": "tasks"}
