"""CompletionGate unit tests (required fields, documents, attachment formats)."""

from datetime import datetime, timezone

import pytest

from app.application.dtos.completion import REASON_MISSING_DOCUMENT, REASON_MISSING_FIELD
from app.application.services.completion_gate import CompletionGate
from app.application.services.completion_requirements import DOC_TECHNICAL_PLAN
from app.domain.entities.document import DocumentRef
from app.domain.exceptions import ValidationException
from tests.conftest import make_task

UPLOADED = datetime(2024, 1, 11, tzinfo=timezone.utc)


def _doc(document_type: str, task_id: str | None = "t1") -> DocumentRef:
    return DocumentRef(id=f"d-{document_type}", task_id=task_id, document_type=document_type, uploaded_at=UPLOADED)


@pytest.fixture
def gate() -> CompletionGate:
    return CompletionGate()


def test_missing_audit_date_blocks(gate: CompletionGate) -> None:
    task = make_task("TASK-AUDIT", name="Аудит объекта", id="t1")
    check = gate.can_complete(task, [])

    assert check.ok is False
    assert check.reason == REASON_MISSING_FIELD
    assert check.requirement == "actual_audit_date"
    assert check.message == 'Поле "Фактическая дата аудита" обязательно для заполнения!'


def test_filled_audit_date_passes(gate: CompletionGate) -> None:
    task = make_task(
        "TASK-AUDIT",
        name="Аудит объекта",
        id="t1",
        attributes={"actual_audit_date": "2024-01-12"},
    )
    assert gate.can_complete(task, []).ok is True


def test_first_failing_requirement_is_reported(gate: CompletionGate) -> None:
    task = make_task("TASK-PREP-AUDIT", name="Подготовка к аудиту", id="t1")
    check = gate.can_complete(task, [])
    assert check.requirement == "planned_audit_date"


def test_fields_checked_before_documents(gate: CompletionGate) -> None:
    task = make_task(
        "TASK-PREP-AUDIT",
        name="Подготовка к аудиту",
        id="t1",
        attributes={"planned_audit_date": "2024-01-15", "project_folder_link": "   "},
    )
    check = gate.can_complete(task, [])
    assert check.reason == REASON_MISSING_FIELD
    assert check.requirement == "project_folder_link"


def test_technical_plan_message_lists_attachments(gate: CompletionGate) -> None:
    task = make_task(
        "TASK-PREP-AUDIT",
        name="Подготовка к аудиту",
        id="t1",
        attributes={"planned_audit_date": "2024-01-15", "project_folder_link": "https://x"},
    )
    check = gate.can_complete(task, [])
    assert check.reason == REASON_MISSING_DOCUMENT
    assert check.requirement == DOC_TECHNICAL_PLAN
    assert check.message.endswith("Текущие вложения: нет")

    check = gate.can_complete(task, [_doc("Фотографии объекта")])
    assert check.present_document_types == ("Фотографии объекта",)
    assert "Фотографии объекта" in check.message

    assert gate.can_complete(task, [_doc(DOC_TECHNICAL_PLAN)]).ok is True


def test_documents_of_other_tasks_are_ignored(gate: CompletionGate) -> None:
    task = make_task(
        "TASK-PREP-AUDIT",
        name="Подготовка к аудиту",
        id="t1",
        attributes={"planned_audit_date": "2024-01-15", "project_folder_link": "https://x"},
    )
    check = gate.can_complete(task, [_doc(DOC_TECHNICAL_PLAN, task_id="other")])
    assert check.ok is False
    assert check.present_document_types == ()


def test_missing_document_uses_display_label(gate: CompletionGate) -> None:
    task = make_task(
        "TASK-CONTOUR",
        name="Контур планировки",
        id="t1",
        attributes={"planning_contour_agreement_date": "2024-01-15"},
    )
    check = gate.can_complete(task, [_doc("Фотографии объекта"), _doc("Обмерный план")])
    assert check.requirement == "Предварительный контур"
    assert check.message == 'Необходимо загрузить "Предварительный контур планировки"!'


def test_choice_field_accepts_explicit_no(gate: CompletionGate) -> None:
    task = make_task(
        "TASK-LOGISTICS",
        name="Оценка логистики",
        id="t1",
        attributes={"logistics_nbkp_eligibility": False},
    )
    documents = [
        _doc("Схема подъездных путей"),
        _doc("Оценка логистики и подъездных путей"),
        _doc("Оценка возможности НБКП"),
    ]
    assert gate.can_complete(task, documents).ok is True


@pytest.mark.parametrize("amount", [None, 0, "0", -5, "abc", True])
def test_amount_must_be_positive(gate: CompletionGate, amount) -> None:
    task = make_task(
        "TASK-BUDGET-PIS",
        name="Расчет бюджета ПиС",
        id="t1",
        attributes={"pis_budget_no_vat": amount},
    )
    check = gate.can_complete(task, [])
    assert check.ok is False
    assert check.requirement == "pis_budget_no_vat"


@pytest.mark.parametrize("amount", [1, "1500.50", 0.01])
def test_positive_amount_passes(gate: CompletionGate, amount) -> None:
    task = make_task(
        "TASK-BUDGET-PIS",
        name="Расчет бюджета ПиС",
        id="t1",
        attributes={"pis_budget_no_vat": amount},
    )
    assert gate.can_complete(task, []).ok is True


def test_task_without_requirements_passes(gate: CompletionGate) -> None:
    task = make_task("TASK-ALCO-LIC", name="Алкогольная лицензия", id="t1")
    assert gate.can_complete(task, []).ok is True


def test_attachment_format_rejected(gate: CompletionGate) -> None:
    with pytest.raises(ValidationException) as exc_info:
        gate.check_attachment_format("Расчет затрат на оборудование", "budget.pdf")
    assert exc_info.value.message == "Для этого поля разрешен только формат .xls или .xlsx"
    assert exc_info.value.details == {"field": "file_name"}


def test_attachment_format_accepted(gate: CompletionGate) -> None:
    gate.check_attachment_format("Расчет затрат на оборудование", "Budget.XLSX")
    gate.check_attachment_format("Обмерный план", "plan.dwg")
    gate.check_attachment_format("Фотографии объекта", "photo.jpg")
