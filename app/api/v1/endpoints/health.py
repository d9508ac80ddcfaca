"""Health check endpoints: liveness and readiness (process graph loaded)."""

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from app.schemas.health import (
    HealthResponse,
    ReadinessErrorResponse,
    ReadinessResponse,
)

router = APIRouter()


@router.get("", response_model=HealthResponse)
def health_check() -> HealthResponse:
    """Return simple ok status for liveness."""
    return HealthResponse()


@router.get(
    "/ready",
    response_model=ReadinessResponse,
    responses={503: {"description": "Process graph not loaded", "model": ReadinessErrorResponse}},
)
def readiness_check(request: Request) -> ReadinessResponse | JSONResponse:
    """Return 200 once the process graph is loaded; 503 otherwise."""
    graph = getattr(request.app.state, "process_graph", None)
    if graph is None:
        return JSONResponse(
            status_code=503,
            content=ReadinessErrorResponse(message="Process graph not loaded").model_dump(),
        )
    return ReadinessResponse(process_version=graph.version, definitions=len(graph))
