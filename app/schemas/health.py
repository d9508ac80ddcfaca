"""Health check API schemas."""

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Response for GET /health (liveness)."""

    status: str = Field(default="ok", description="Service status")


class ReadinessResponse(BaseModel):
    """Response for GET /health/ready once the process graph is loaded."""

    status: str = Field(default="ok", description="Readiness status")
    process_version: str | None = Field(default=None, description="Loaded process version")
    definitions: int = Field(default=0, description="Number of task definitions")


class ReadinessErrorResponse(BaseModel):
    """Response for GET /health/ready before startup completed (503)."""

    status: str = Field(default="not_ready", description="Readiness status")
    message: str = Field(..., description="Reason (e.g. process graph not loaded)")
