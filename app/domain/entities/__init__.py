"""Domain entities.

Pure domain models; no persistence or HTTP concerns.
"""

from app.domain.entities.document import DocumentRef
from app.domain.entities.task_definition import TaskDefinitionEntity
from app.domain.entities.task_instance import TaskInstanceEntity

__all__ = [
    "DocumentRef",
    "TaskDefinitionEntity",
    "TaskInstanceEntity",
]
