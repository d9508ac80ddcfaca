"""Completion validation gate.

Decides whether a task may move to Completed. A missing requirement is an
expected outcome returned as a CompletionCheck, never raised.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from decimal import Decimal, InvalidOperation
from typing import Any

from app.application.dtos.completion import (
    REASON_MISSING_DOCUMENT,
    REASON_MISSING_FIELD,
    CompletionCheck,
    CompletionRequirements,
    FieldRequirement,
)
from app.application.services.completion_requirements import (
    ATTACHMENT_FORMATS,
    COMPLETION_REQUIREMENTS,
    DOC_TECHNICAL_PLAN,
)
from app.domain.entities.document import DocumentRef
from app.domain.entities.task_instance import TaskInstanceEntity
from app.domain.enums import FieldKind
from app.domain.exceptions import ValidationException

_NO_REQUIREMENTS = CompletionRequirements()


def _is_blank(requirement: FieldRequirement, value: Any) -> bool:
    if value is None:
        return True
    if requirement.kind is FieldKind.CHOICE:
        # any explicit answer counts, including False
        return False
    if requirement.kind is FieldKind.AMOUNT:
        if isinstance(value, bool):
            return True
        try:
            return Decimal(str(value)) <= 0
        except InvalidOperation:
            return True
    if isinstance(value, str):
        return not value.strip()
    return False


class CompletionGate:
    """Evaluates per-task completion requirements in declared order."""

    def __init__(
        self,
        requirements: Mapping[str, CompletionRequirements] = COMPLETION_REQUIREMENTS,
        attachment_formats: Mapping[str, tuple[str, ...]] = ATTACHMENT_FORMATS,
    ) -> None:
        self.requirements = requirements
        self.attachment_formats = attachment_formats

    def requirements_for(self, task: TaskInstanceEntity) -> CompletionRequirements:
        """Requirements for the task's display name (empty when none declared)."""
        return self.requirements.get(task.name, _NO_REQUIREMENTS)

    def can_complete(
        self,
        task: TaskInstanceEntity,
        documents: Iterable[DocumentRef],
    ) -> CompletionCheck:
        """Check the first failing requirement for task.

        Args:
            task: Task about to be completed; not modified.
            documents: Documents attached to the task. Documents that name a
                different task id are ignored.

        Returns:
            CompletionCheck.passed() or the first failing requirement.
        """
        present = tuple(
            doc.document_type
            for doc in documents
            if task.id is None or doc.task_id is None or doc.task_id == task.id
        )
        requirements = self.requirements_for(task)

        for requirement in requirements.fields:
            if _is_blank(requirement, task.attributes.get(requirement.field)):
                return CompletionCheck(
                    ok=False,
                    reason=REASON_MISSING_FIELD,
                    requirement=requirement.field,
                    label=requirement.label,
                    message=f'Поле "{requirement.label}" обязательно для заполнения!',
                    present_document_types=present,
                )

        for requirement in requirements.documents:
            if requirement.document_type in present:
                continue
            message = f'Необходимо загрузить "{requirement.display_label}"!'
            if requirement.document_type == DOC_TECHNICAL_PLAN:
                attached = ", ".join(present) or "нет"
                message = (
                    f'Необходимо загрузить файл "{requirement.display_label}"! '
                    f"Текущие вложения: {attached}"
                )
            return CompletionCheck(
                ok=False,
                reason=REASON_MISSING_DOCUMENT,
                requirement=requirement.document_type,
                label=requirement.display_label,
                message=message,
                present_document_types=present,
            )

        return CompletionCheck.passed()

    def check_attachment_format(self, document_type: str, file_name: str) -> None:
        """Validate the file extension allowed for a document type.

        Raises:
            ValidationException: If the document type restricts formats and
                file_name does not match any of them.
        """
        allowed = self.attachment_formats.get(document_type)
        if not allowed:
            return
        if not file_name.lower().endswith(allowed):
            formats = " или ".join(allowed)
            raise ValidationException(
                f"Для этого поля разрешен только формат {formats}",
                field="file_name",
            )
