"""Application interfaces (ports): external collaborator protocols.

Define contracts for caller-side implementations (DIP).
No runtime imports from app.api.
"""

from app.application.interfaces.services import (
    IActivityLog,
    IDocumentLookup,
    INotificationService,
    IResponsibleDirectory,
)

__all__ = [
    "IActivityLog",
    "IDocumentLookup",
    "INotificationService",
    "IResponsibleDirectory",
]
