"""DTOs for process graph queries."""

from dataclasses import dataclass


@dataclass(frozen=True)
class TaskNeighbours:
    """Predecessor/successor display names of a task (edit dialog view)."""

    predecessors: tuple[str, ...]
    successors: tuple[str, ...]
    is_ad_hoc: bool


@dataclass(frozen=True)
class ResponsibleUser:
    """User chosen to own tasks of a role."""

    user_id: str
    name: str
