"""Service interfaces (ports) for the application layer.

Protocols define contracts for external collaborators (DIP): document
lookup, notification delivery, activity log and the user directory used
to auto-assign responsible users.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from app.application.dtos.process import ResponsibleUser
    from app.application.dtos.task_event import TaskEvent
    from app.domain.entities.document import DocumentRef


# Document collaborator: read-only lookup of task attachments
class IDocumentLookup(Protocol):
    """Protocol for listing documents attached to a task."""

    async def list_documents(self, task_id: str) -> list[DocumentRef]:
        """Return documents attached to the task (empty list when none)."""


# Notification delivery (informed, not consulted)
class INotificationService(Protocol):
    """Protocol for notifying users about task events (e.g. a new assignment)."""

    async def notify(self, event: TaskEvent) -> None:
        """Deliver a notification for the event. No-op or log if not configured."""


# Per-project activity log (append-only)
class IActivityLog(Protocol):
    """Protocol for recording user activity on tasks."""

    async def append(self, event: TaskEvent) -> None:
        """Append one activity entry."""


# Responsible directory: resolve the user owning a role
class IResponsibleDirectory(Protocol):
    """Protocol for resolving the responsible user for a process role."""

    async def find_by_role(self, role: str) -> ResponsibleUser | None:
        """Return a user holding the role, or None when nobody does."""
