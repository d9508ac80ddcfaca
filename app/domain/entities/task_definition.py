"""Task definition domain entity.

A task definition is one node of the fixed store-opening process graph:
identity code, display name, responsible role, predecessors, BPMN kind,
stage label and nominal duration. Definitions are configuration and never
change at runtime.
"""

from dataclasses import dataclass

from app.domain.enums import TaskKind


@dataclass(frozen=True)
class TaskDefinitionEntity:
    """Immutable process graph node."""

    code: str
    name: str
    role: str
    depends_on: tuple[str, ...]
    kind: TaskKind
    stage: str
    duration_days: int

    @property
    def is_root(self) -> bool:
        """Return whether this definition has no predecessors."""
        return not self.depends_on

    @property
    def auto_completes(self) -> bool:
        """Return whether instances complete without human action (ServiceTask)."""
        return self.kind is TaskKind.SERVICE_TASK
