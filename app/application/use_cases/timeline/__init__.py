"""Timeline use cases."""

from app.application.use_cases.timeline.build_project_timeline import (
    BuildProjectTimelineUseCase,
)

__all__ = ["BuildProjectTimelineUseCase"]
