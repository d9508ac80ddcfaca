"""Domain layer: entities, enums, and exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from app.domain.entities import (
    DocumentRef,
    TaskDefinitionEntity,
    TaskInstanceEntity,
)
from app.domain.enums import (
    DeadlineState,
    DeviationType,
    FieldKind,
    TaskKind,
    TaskStatus,
    ZoomLevel,
)
from app.domain.exceptions import (
    InvalidTransitionException,
    ProcessGraphException,
    ResourceNotFoundException,
    StoreOpeningException,
    ValidationException,
)

__all__ = [
    # Entities
    "DocumentRef",
    "TaskDefinitionEntity",
    "TaskInstanceEntity",
    # Enums
    "DeadlineState",
    "DeviationType",
    "FieldKind",
    "TaskKind",
    "TaskStatus",
    "ZoomLevel",
    # Exceptions
    "InvalidTransitionException",
    "ProcessGraphException",
    "ResourceNotFoundException",
    "StoreOpeningException",
    "ValidationException",
]
