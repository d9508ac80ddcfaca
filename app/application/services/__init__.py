"""Application services: process graph, resolver, projector, timeline, gate."""

from app.application.services.completion_gate import CompletionGate
from app.application.services.dependency_resolver import DependencyResolver
from app.application.services.process_graph import ProcessGraph
from app.application.services.schedule_projector import ScheduleProjector
from app.application.services.store_opening_process import (
    INITIAL_STAGE,
    STORE_OPENING_PROCESS_VERSION,
    STORE_OPENING_TASKS,
)
from app.application.services.timeline_builder import TimelineBuilder

__all__ = [
    "INITIAL_STAGE",
    "STORE_OPENING_PROCESS_VERSION",
    "STORE_OPENING_TASKS",
    "CompletionGate",
    "DependencyResolver",
    "ProcessGraph",
    "ScheduleProjector",
    "TimelineBuilder",
]
