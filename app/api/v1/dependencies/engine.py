"""Engine dependencies (composition root).

The process graph is loaded once by the lifespan and stored on app.state;
everything else is cheap to build per request.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request

from app.application.services.completion_gate import CompletionGate
from app.application.services.dependency_resolver import DependencyResolver
from app.application.services.process_graph import ProcessGraph
from app.application.services.schedule_projector import ScheduleProjector
from app.application.services.timeline_builder import TimelineBuilder
from app.application.use_cases.tasks import (
    ActivateProjectUseCase,
    CompleteTaskUseCase,
    CreateAdHocTaskUseCase,
    StartTaskUseCase,
)
from app.application.use_cases.timeline import BuildProjectTimelineUseCase
from app.core.config import Settings, get_settings
from app.domain.exceptions import StoreOpeningException


def get_process_graph(request: Request) -> ProcessGraph:
    """Process graph loaded at startup."""
    graph = getattr(request.app.state, "process_graph", None)
    if graph is None:
        raise StoreOpeningException(
            "Process graph is not loaded", "PROCESS_GRAPH_INVALID", {"reason": "not_loaded"}
        )
    return graph


def get_resolver(
    graph: Annotated[ProcessGraph, Depends(get_process_graph)],
) -> DependencyResolver:
    return DependencyResolver(graph)


def get_completion_gate() -> CompletionGate:
    return CompletionGate()


def get_timeline_builder(
    settings: Annotated[Settings, Depends(get_settings)],
) -> TimelineBuilder:
    """Timeline builder with configured row height and connector bias."""
    return TimelineBuilder(
        row_height=settings.timeline_row_height,
        edge_bias=settings.timeline_edge_bias,
    )


def get_activate_project_use_case(
    resolver: Annotated[DependencyResolver, Depends(get_resolver)],
) -> ActivateProjectUseCase:
    return ActivateProjectUseCase(resolver)


def get_start_task_use_case() -> StartTaskUseCase:
    return StartTaskUseCase()


def get_complete_task_use_case(
    resolver: Annotated[DependencyResolver, Depends(get_resolver)],
    gate: Annotated[CompletionGate, Depends(get_completion_gate)],
) -> CompleteTaskUseCase:
    """Complete task use case; documents come from the request body."""
    return CompleteTaskUseCase(resolver=resolver, gate=gate)


def get_create_ad_hoc_task_use_case() -> CreateAdHocTaskUseCase:
    return CreateAdHocTaskUseCase()


def get_build_timeline_use_case(
    graph: Annotated[ProcessGraph, Depends(get_process_graph)],
    builder: Annotated[TimelineBuilder, Depends(get_timeline_builder)],
) -> BuildProjectTimelineUseCase:
    return BuildProjectTimelineUseCase(ScheduleProjector(graph), builder)
