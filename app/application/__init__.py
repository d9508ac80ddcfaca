"""Application layer: interfaces, services, use cases.

Depends only on domain and protocol definitions (DIP). Callers implement
the ports (documents, notifications, activity log, user directory).
"""

from app.application.interfaces import (
    IActivityLog,
    IDocumentLookup,
    INotificationService,
    IResponsibleDirectory,
)
from app.application.services import (
    CompletionGate,
    DependencyResolver,
    ProcessGraph,
    ScheduleProjector,
    TimelineBuilder,
)
from app.application.use_cases import (
    ActivateProjectUseCase,
    BuildProjectTimelineUseCase,
    CompleteTaskUseCase,
    CreateAdHocTaskUseCase,
    StartTaskUseCase,
)

__all__ = [
    "ActivateProjectUseCase",
    "BuildProjectTimelineUseCase",
    "CompleteTaskUseCase",
    "CompletionGate",
    "CreateAdHocTaskUseCase",
    "DependencyResolver",
    "IActivityLog",
    "IDocumentLookup",
    "INotificationService",
    "IResponsibleDirectory",
    "ProcessGraph",
    "ScheduleProjector",
    "StartTaskUseCase",
    "TimelineBuilder",
]
