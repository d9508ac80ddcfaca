"""Store-opening process definition (task graph constants).

Loaded once at startup into a ProcessGraph. Display names, roles and stage
labels are portal data and stay in Russian. No infrastructure deps.
"""

from app.domain.entities.task_definition import TaskDefinitionEntity
from app.domain.enums import TaskKind

STORE_OPENING_PROCESS_VERSION = "2024.1"
INITIAL_STAGE = "Инициализация"

ROLE_PROJECT_MANAGER = "МП"
ROLE_DEVELOPMENT_MANAGER = "МРиЗ"

# (code, name, role, depends_on, stage, duration_days)
_TASKS: list[tuple[str, str, str, tuple[str, ...], str, int]] = [
    ("TASK-PREP-AUDIT", "Подготовка к аудиту", ROLE_PROJECT_MANAGER, (), INITIAL_STAGE, 2),
    ("TASK-AUDIT", "Аудит объекта", ROLE_PROJECT_MANAGER, ("TASK-PREP-AUDIT",), "Аудит", 1),
    ("TASK-ALCO-LIC", "Алкогольная лицензия", ROLE_PROJECT_MANAGER, ("TASK-AUDIT",), "Лицензирование", 2),
    ("TASK-WASTE", "Площадка ТБО", ROLE_PROJECT_MANAGER, ("TASK-AUDIT",), "ТБО", 2),
    ("TASK-CONTOUR", "Контур планировки", ROLE_DEVELOPMENT_MANAGER, ("TASK-AUDIT",), "Проектирование", 1),
    ("TASK-VISUALIZATION", "Визуализация", ROLE_PROJECT_MANAGER, ("TASK-CONTOUR",), "Проектирование", 1),
    ("TASK-LOGISTICS", "Оценка логистики", ROLE_DEVELOPMENT_MANAGER, ("TASK-CONTOUR",), "Логистика", 2),
    ("TASK-LAYOUT", "Планировка с расстановкой", ROLE_DEVELOPMENT_MANAGER, ("TASK-CONTOUR",), "Проектирование", 2),
    (
        "TASK-BUDGET-EQUIP",
        "Расчет бюджета оборудования",
        ROLE_DEVELOPMENT_MANAGER,
        ("TASK-VISUALIZATION", "TASK-LAYOUT"),
        "Бюджет",
        2,
    ),
    ("TASK-BUDGET-SECURITY", "Расчет бюджета СБ", ROLE_DEVELOPMENT_MANAGER, ("TASK-LAYOUT",), "Бюджет", 2),
    ("TASK-BUDGET-RSR", "ТЗ и расчет бюджета РСР", ROLE_DEVELOPMENT_MANAGER, ("TASK-BUDGET-SECURITY",), "Бюджет", 1),
    (
        "TASK-BUDGET-PIS",
        "Расчет бюджета ПиС",
        ROLE_DEVELOPMENT_MANAGER,
        ("TASK-BUDGET-RSR", "TASK-BUDGET-EQUIP"),
        "Бюджет",
        1,
    ),
    ("TASK-TOTAL-BUDGET", "Общий бюджет проекта", ROLE_PROJECT_MANAGER, ("TASK-BUDGET-PIS",), "Бюджет", 1),
]

STORE_OPENING_TASKS: tuple[TaskDefinitionEntity, ...] = tuple(
    TaskDefinitionEntity(
        code=code,
        name=name,
        role=role,
        depends_on=depends_on,
        kind=TaskKind.USER_TASK,
        stage=stage,
        duration_days=duration_days,
    )
    for code, name, role, depends_on, stage, duration_days in _TASKS
)


def get_store_opening_definitions() -> tuple[TaskDefinitionEntity, ...]:
    """Return the versioned store-opening task definitions."""
    return STORE_OPENING_TASKS
