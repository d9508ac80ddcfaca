"""Document reference (external collaborator record, consulted not owned)."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class DocumentRef:
    """Minimal shape of an uploaded document attached to a task."""

    id: str
    task_id: str | None
    document_type: str
    uploaded_at: datetime
    file_name: str | None = None
