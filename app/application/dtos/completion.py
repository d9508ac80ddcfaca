"""DTOs for the completion validation gate."""

from __future__ import annotations

from dataclasses import dataclass

from app.domain.enums import FieldKind

REASON_MISSING_FIELD = "missing_field"
REASON_MISSING_DOCUMENT = "missing_document"


@dataclass(frozen=True)
class FieldRequirement:
    """Task attribute that must be filled before completion."""

    field: str
    label: str
    kind: FieldKind = FieldKind.DATE


@dataclass(frozen=True)
class DocumentRequirement:
    """Document type that must be attached before completion."""

    document_type: str
    label: str | None = None

    @property
    def display_label(self) -> str:
        return self.label or self.document_type


@dataclass(frozen=True)
class CompletionRequirements:
    """Ordered checks for one task: fields first, then documents."""

    fields: tuple[FieldRequirement, ...] = ()
    documents: tuple[DocumentRequirement, ...] = ()


@dataclass(frozen=True)
class CompletionCheck:
    """Outcome of a completion attempt.

    ``ok`` is True when every requirement is met. Otherwise ``reason`` and
    ``requirement`` identify the first failing check (declared order) and
    ``message`` is the user-facing text.
    """

    ok: bool
    reason: str | None = None
    requirement: str | None = None
    label: str | None = None
    message: str | None = None
    present_document_types: tuple[str, ...] = ()

    @classmethod
    def passed(cls) -> CompletionCheck:
        return cls(ok=True)
