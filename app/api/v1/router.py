"""API v1 router aggregation.

Includes all endpoint modules with consistent prefix and tags. All routes
use dependencies from app.api.v1.dependencies (no manual service construction).
"""

from fastapi import APIRouter

from app.api.v1.endpoints import health, process, tasks, timeline, workflow

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(process.router, prefix="/process", tags=["process"])
api_router.include_router(workflow.router, prefix="/workflow", tags=["workflow"])
api_router.include_router(tasks.router, prefix="/tasks", tags=["tasks"])
api_router.include_router(timeline.router, prefix="/timeline", tags=["timeline"])
