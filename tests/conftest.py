"""Pytest configuration and fixtures for the store-opening engine.

Uses app.main:app for HTTP tests. httpx's ASGITransport does not run the
lifespan, so the client fixture enters it explicitly (the process graph is
loaded there). Telemetry is disabled before the app is imported.
"""

import os
from datetime import datetime, timezone

os.environ.setdefault("TELEMETRY_ENABLED", "false")

import pytest
from httpx import ASGITransport, AsyncClient

from app.application.services.dependency_resolver import DependencyResolver
from app.application.services.process_graph import ProcessGraph
from app.core.lifespan import create_lifespan, load_process_graph
from app.domain.entities.task_instance import TaskInstanceEntity
from app.domain.enums import TaskStatus
from app.main import app

PROJECT_ID = "p1"
T0 = datetime(2024, 1, 10, 9, 0, tzinfo=timezone.utc)


@pytest.fixture
async def client() -> AsyncClient:
    """Async HTTP client against the FastAPI app (ASGI) with startup run."""
    async with create_lifespan(app):
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            yield ac


@pytest.fixture
def graph() -> ProcessGraph:
    """The configured store-opening process graph."""
    return load_process_graph()


@pytest.fixture
def resolver(graph: ProcessGraph) -> DependencyResolver:
    return DependencyResolver(graph)


def make_task(
    code: str | None,
    name: str = "Task",
    status: TaskStatus = TaskStatus.ASSIGNED,
    created_at: datetime = T0,
    **kwargs,
) -> TaskInstanceEntity:
    """Task instance builder used across unit tests."""
    return TaskInstanceEntity(
        project_id=kwargs.pop("project_id", PROJECT_ID),
        code=code,
        name=name,
        status=status,
        created_at=created_at,
        **kwargs,
    )
