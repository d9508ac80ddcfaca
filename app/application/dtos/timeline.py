"""DTOs for the timeline (Gantt) view model.

Geometry is expressed as fractions of the axis width (0..1) and row-height
units; pixel mapping belongs to the renderer.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime

from app.domain.enums import DeviationType, TaskStatus, ZoomLevel


@dataclass(frozen=True)
class Deviation:
    """Whole-day difference between actual completion and the deadline."""

    days: int
    type: DeviationType


@dataclass(frozen=True)
class Point:
    x: float
    y: float


@dataclass(frozen=True)
class EdgePath:
    """Cubic connector from a predecessor bar end to a dependent bar start.

    x coordinates are axis fractions, y coordinates are in the same unit as
    the row height used to build the timeline.
    """

    from_code: str
    to_code: str
    start: Point
    control_start: Point
    control_end: Point
    end: Point

    def svg_path(self, x_scale: float = 100.0) -> str:
        """Render as an SVG path ``d`` attribute (x scaled, percent by default)."""

        def fmt(point: Point) -> str:
            return f"{round(point.x * x_scale, 6):g} {round(point.y, 6):g}"

        return (
            f"M {fmt(self.start)} "
            f"C {fmt(self.control_start)}, {fmt(self.control_end)}, {fmt(self.end)}"
        )


@dataclass(frozen=True)
class TimelineRow:
    """One rendered task bar."""

    index: int
    code: str
    name: str
    stage: str
    responsible: str
    status: TaskStatus
    projected: bool
    start: datetime
    end: datetime
    left: float
    width: float
    task_id: str | None = None
    deviation: Deviation | None = None
    deviation_label_left: float | None = None


@dataclass(frozen=True)
class TimelineView:
    """Complete timeline for one project at one zoom level."""

    zoom: ZoomLevel
    buckets: list[date]
    rows: list[TimelineRow]
    edges: list[EdgePath]
    row_height: float
    timeline_start: date | None = None
    timeline_end: date | None = None
    today_left: float | None = None
    status_filter: TaskStatus | None = None
    filter_options: list[TaskStatus] = field(default_factory=list)

    @property
    def bucket_count(self) -> int:
        return len(self.buckets)
