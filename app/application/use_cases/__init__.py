"""Application use cases: one entry point per workflow."""

from app.application.use_cases.tasks import (
    ActivateProjectUseCase,
    CompleteTaskUseCase,
    CreateAdHocTaskUseCase,
    StartTaskUseCase,
)
from app.application.use_cases.timeline import BuildProjectTimelineUseCase

__all__ = [
    "ActivateProjectUseCase",
    "BuildProjectTimelineUseCase",
    "CompleteTaskUseCase",
    "CreateAdHocTaskUseCase",
    "StartTaskUseCase",
]
