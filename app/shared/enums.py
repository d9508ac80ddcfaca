"""Shared enumerations for the store-opening engine.

Cross-cutting enums used by application and API layers (actor type, task
event kind). Domain-specific enums (e.g. TaskStatus) live in
app.domain.enums.
"""

from enum import Enum


class _ValuesMixin:
    """Mixin that adds a values() classmethod to str Enums."""

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid values as strings."""
        return [member.value for member in cls]


class ActorType(_ValuesMixin, str, Enum):
    """Who caused a task event (a person or the engine itself)."""

    USER = "user"
    SYSTEM = "system"


class TaskEventKind(_ValuesMixin, str, Enum):
    """Caller-visible task events emitted by the engine."""

    CREATED = "created"
    STARTED = "started"
    COMPLETED = "completed"
