"""Completion requirements per task and attachment format rules.

Requirements are keyed by the task display name, as the portal stores them;
renaming a task in the process definition must be mirrored here. Checks run
in the declared order: fields first, then documents. No infrastructure deps.
"""

from types import MappingProxyType

from app.application.dtos.completion import (
    CompletionRequirements,
    DocumentRequirement,
    FieldRequirement,
)
from app.domain.enums import FieldKind

DOC_TECHNICAL_PLAN = "Технический план"

_REQUIREMENTS: dict[str, CompletionRequirements] = {
    "Подготовка к аудиту": CompletionRequirements(
        fields=(
            FieldRequirement("planned_audit_date", "Плановая дата аудита"),
            FieldRequirement("project_folder_link", "Ссылка на папку проекта", FieldKind.TEXT),
        ),
        documents=(DocumentRequirement(DOC_TECHNICAL_PLAN),),
    ),
    "Аудит объекта": CompletionRequirements(
        fields=(FieldRequirement("actual_audit_date", "Фактическая дата аудита"),),
    ),
    "Площадка ТБО": CompletionRequirements(
        fields=(
            FieldRequirement(
                "tbo_docs_link", "Ссылка на документы для площадки ТБО", FieldKind.TEXT
            ),
            FieldRequirement("tbo_agreement_date", "Дата согласования"),
            FieldRequirement("tbo_registry_date", "Дата внесения в Реестр ТБО"),
        ),
    ),
    "Контур планировки": CompletionRequirements(
        fields=(
            FieldRequirement(
                "planning_contour_agreement_date", "Дата согласования контура планировки"
            ),
        ),
        documents=(
            DocumentRequirement("Фотографии объекта"),
            DocumentRequirement("Обмерный план"),
            DocumentRequirement("Предварительный контур", "Предварительный контур планировки"),
        ),
    ),
    "Визуализация": CompletionRequirements(
        fields=(
            FieldRequirement("visualization_agreement_date", "Дата согласования визуализации"),
        ),
        documents=(
            DocumentRequirement("Концепт визуализации"),
            DocumentRequirement("Выписка ЕГРН"),
            DocumentRequirement("Визуализация внешнего вида магазина"),
        ),
    ),
    "Оценка логистики": CompletionRequirements(
        fields=(
            FieldRequirement("logistics_nbkp_eligibility", "Возможность НБКП", FieldKind.CHOICE),
        ),
        documents=(
            DocumentRequirement("Схема подъездных путей"),
            DocumentRequirement("Оценка логистики и подъездных путей"),
            DocumentRequirement("Оценка возможности НБКП"),
        ),
    ),
    "Планировка с расстановкой": CompletionRequirements(
        fields=(FieldRequirement("layout_agreement_date", "Дата согласования планировки"),),
        documents=(
            DocumentRequirement("Технологическая планировка (DWG)"),
            DocumentRequirement("Технологическая планировка (PDF)"),
        ),
    ),
    "Расчет бюджета оборудования": CompletionRequirements(
        fields=(
            FieldRequirement(
                "equipment_cost_no_vat", "Сумма затрат на оборудование", FieldKind.AMOUNT
            ),
        ),
        documents=(
            DocumentRequirement(
                "Расчет затрат на оборудование", "Расчет затрат на оборудование (XLS)"
            ),
        ),
    ),
    "Расчет бюджета СБ": CompletionRequirements(
        fields=(FieldRequirement("security_budget_no_vat", "Сумма бюджета СБ", FieldKind.AMOUNT),),
        documents=(
            DocumentRequirement("Анкета СБ"),
            DocumentRequirement(
                "Расчет затрат на оборудование СБ", "Расчет затрат на оборудование СБ (XLS)"
            ),
        ),
    ),
    "ТЗ и расчет бюджета РСР": CompletionRequirements(
        fields=(FieldRequirement("rsr_budget_no_vat", "Сумма бюджета РСР", FieldKind.AMOUNT),),
        documents=(
            DocumentRequirement("Распределительная ведомость"),
            DocumentRequirement("Расчет бюджета РСР", "Расчет бюджета РСР (XLS)"),
        ),
    ),
    "Расчет бюджета ПиС": CompletionRequirements(
        fields=(FieldRequirement("pis_budget_no_vat", "Сумма бюджета ПИС", FieldKind.AMOUNT),),
    ),
    "Общий бюджет проекта": CompletionRequirements(
        fields=(FieldRequirement("total_budget_no_vat", "Сумма общего бюджета", FieldKind.AMOUNT),),
    ),
}

COMPLETION_REQUIREMENTS = MappingProxyType(_REQUIREMENTS)

# document type -> allowed lowercase file extensions
ATTACHMENT_FORMATS = MappingProxyType(
    {
        "Обмерный план": (".dwg",),
        "Предварительный контур": (".dwg",),
        "Технологическая планировка (DWG)": (".dwg",),
        "Оценка логистики и подъездных путей": (".pdf",),
        "Оценка возможности НБКП": (".pdf",),
        "Технологическая планировка (PDF)": (".pdf",),
        "Расчет затрат на оборудование": (".xls", ".xlsx"),
        "Расчет затрат на оборудование СБ": (".xls", ".xlsx"),
        "Расчет бюджета РСР": (".xls", ".xlsx"),
        "Расчет бюджета ПИС": (".xls", ".xlsx"),
    }
)
