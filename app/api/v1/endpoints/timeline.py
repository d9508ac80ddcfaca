"""Timeline API: Gantt view model of one project."""

from typing import Annotated

from fastapi import APIRouter, Depends

from app.api.v1.dependencies import get_build_timeline_use_case
from app.application.use_cases.timeline import BuildProjectTimelineUseCase
from app.core.config import Settings, get_settings
from app.domain.enums import ZoomLevel
from app.schemas.timeline import TimelineRequest, TimelineResponse

router = APIRouter()


@router.post("", response_model=TimelineResponse)
async def build_timeline(
    body: TimelineRequest,
    timeline_uc: Annotated[BuildProjectTimelineUseCase, Depends(get_build_timeline_use_case)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> TimelineResponse:
    """Combine real and projected task windows into a zoomable timeline."""
    view = await timeline_uc.execute(
        [t.to_entity() for t in body.tasks],
        project_start=body.project_start,
        zoom=body.zoom or ZoomLevel(settings.default_timeline_zoom),
        status_filter=body.status_filter,
        today=body.today,
    )
    return TimelineResponse.from_view(view)
