"""DTOs for projected task schedules (no persistence)."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from app.domain.entities.task_instance import TaskInstanceEntity


@dataclass(frozen=True)
class ScheduleWindow:
    """Display window of one process definition.

    ``instance`` is the real task when the definition has been activated;
    otherwise the window is projected from predecessor windows and exists
    only to position the definition on the timeline.
    """

    code: str
    name: str
    stage: str
    responsible: str
    depends_on: tuple[str, ...]
    start: datetime
    end: datetime
    instance: TaskInstanceEntity | None = None

    @property
    def is_projected(self) -> bool:
        return self.instance is None
