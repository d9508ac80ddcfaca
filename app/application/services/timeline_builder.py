"""Timeline (Gantt) builder.

Discretizes a project's schedule windows into a zoomable calendar axis and
computes bar geometry, dependency connectors and deadline deviations. All
geometry is expressed as fractions of the axis; the renderer maps them to
pixels.

The axis is derived from every window, never from the filtered rows, so
switching the status filter does not move or rescale existing bars.
"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import date, datetime, timedelta

from app.application.dtos.schedule import ScheduleWindow
from app.application.dtos.timeline import (
    Deviation,
    EdgePath,
    Point,
    TimelineRow,
    TimelineView,
)
from app.domain.enums import DeviationType, TaskStatus, ZoomLevel
from app.shared.utils.datetime import (
    add_months,
    at_midnight,
    days_in_month,
    ensure_utc,
    first_of_month,
    first_of_quarter,
    monday_of_week,
)

DEFAULT_ROW_HEIGHT = 41.0
DEFAULT_EDGE_BIAS = 0.02

# Status filter choices offered next to "all" (None).
FILTER_OPTIONS: tuple[TaskStatus, ...] = (
    TaskStatus.IN_PROGRESS,
    TaskStatus.COMPLETED,
    TaskStatus.OVERDUE,
)

_SECONDS_PER_DAY = 86400.0


def _month_units(start: datetime, end: datetime) -> float:
    whole = (end.year - start.year) * 12 + (end.month - start.month)
    end_fraction = (end.day - 1) / days_in_month(end.year, end.month)
    start_fraction = (start.day - 1) / days_in_month(start.year, start.month)
    return whole + end_fraction - start_fraction


def units_between(start: datetime, end: datetime, zoom: ZoomLevel) -> float:
    """Elapsed time from start to end in units of the zoom level.

    Day and week are exact elapsed time. Month counts whole calendar months
    plus the day-within-month fraction of each endpoint; quarter is the month
    value divided by three.
    """
    if zoom is ZoomLevel.DAY:
        return (end - start).total_seconds() / _SECONDS_PER_DAY
    if zoom is ZoomLevel.WEEK:
        return (end - start).total_seconds() / (_SECONDS_PER_DAY * 7)
    if zoom is ZoomLevel.MONTH:
        return _month_units(start, end)
    return _month_units(start, end) / 3


def _step(day: date, zoom: ZoomLevel, count: int = 1) -> date:
    if zoom is ZoomLevel.DAY:
        return day + timedelta(days=count)
    if zoom is ZoomLevel.WEEK:
        return day + timedelta(weeks=count)
    if zoom is ZoomLevel.MONTH:
        return add_months(day, count)
    return add_months(day, 3 * count)


def build_buckets(min_day: date, max_day: date, zoom: ZoomLevel) -> list[date]:
    """Padded, aligned bucket boundary dates (inclusive on both ends).

    Args:
        min_day: Earliest date on any window.
        max_day: Latest date on any window.
        zoom: Bucket width.

    Returns:
        Ordered bucket start dates.
    """
    if zoom is ZoomLevel.DAY:
        first, last = min_day - timedelta(days=3), max_day + timedelta(days=5)
    elif zoom is ZoomLevel.WEEK:
        first = monday_of_week(min_day) - timedelta(weeks=1)
        last = monday_of_week(max_day) + timedelta(weeks=2)
    elif zoom is ZoomLevel.MONTH:
        first = add_months(first_of_month(min_day), -1)
        last = add_months(first_of_month(max_day), 2)
    else:
        first = add_months(first_of_quarter(min_day), -3)
        last = add_months(first_of_quarter(max_day), 6)

    buckets: list[date] = []
    index = 0
    current = first
    while current <= last:
        buckets.append(current)
        index += 1
        # step from the anchor so month-end clamping never drifts
        current = _step(first, zoom, index)
    return buckets


def compute_deviation(actual: datetime | None, deadline: datetime | None) -> Deviation | None:
    """Whole-day deviation of the actual completion from the deadline.

    Both dates are truncated to the calendar day. Returns None when either
    date is missing or they fall on the same day.
    """
    if actual is None or deadline is None:
        return None
    diff = (ensure_utc(actual).date() - ensure_utc(deadline).date()).days
    if diff == 0:
        return None
    return Deviation(
        days=abs(diff),
        type=DeviationType.LATE if diff > 0 else DeviationType.EARLY,
    )


def _window_dates(window: ScheduleWindow) -> list[datetime]:
    dates = [window.start, window.end]
    if window.instance is not None:
        for value in (window.instance.actual_date, window.instance.started_at):
            if value is not None:
                dates.append(value)
    return [ensure_utc(d) for d in dates]


class TimelineBuilder:
    """Builds TimelineView values from schedule windows."""

    def __init__(
        self,
        row_height: float = DEFAULT_ROW_HEIGHT,
        edge_bias: float = DEFAULT_EDGE_BIAS,
    ) -> None:
        self.row_height = row_height
        self.edge_bias = edge_bias

    def build(
        self,
        windows: Sequence[ScheduleWindow],
        zoom: ZoomLevel,
        today: date,
        status_filter: TaskStatus | None = None,
    ) -> TimelineView:
        """Build the timeline for one project.

        Args:
            windows: Combined real and projected windows (one per definition).
            zoom: Bucket width.
            today: Reference day for display status and the today marker.
            status_filter: Keep only rows with this display status; None keeps all.

        Returns:
            TimelineView. With no windows the bucket list is empty and every
            row has zero geometry.
        """
        all_dates = [d for window in windows for d in _window_dates(window)]
        buckets: list[date] = []
        if all_dates:
            buckets = build_buckets(
                min(all_dates).date(), max(all_dates).date(), zoom
            )
        count = len(buckets)
        axis_start = at_midnight(buckets[0]) if buckets else None

        rows: list[TimelineRow] = []
        for window in windows:
            status = (
                window.instance.display_status(today)
                if window.instance is not None
                else TaskStatus.PLANNED
            )
            if status_filter is not None and status is not status_filter:
                continue
            rows.append(self._row(len(rows), window, status, zoom, axis_start, count))

        today_left = None
        timeline_end = _step(buckets[-1], zoom) if buckets else None
        if axis_start is not None and buckets[0] <= today < timeline_end:
            today_left = units_between(axis_start, at_midnight(today), zoom) / count

        return TimelineView(
            zoom=zoom,
            buckets=buckets,
            rows=rows,
            edges=self._edges(rows, windows),
            row_height=self.row_height,
            timeline_start=buckets[0] if buckets else None,
            timeline_end=timeline_end,
            today_left=today_left,
            status_filter=status_filter,
            filter_options=list(FILTER_OPTIONS),
        )

    def _row(
        self,
        index: int,
        window: ScheduleWindow,
        status: TaskStatus,
        zoom: ZoomLevel,
        axis_start: datetime | None,
        count: int,
    ) -> TimelineRow:
        start, end = ensure_utc(window.start), ensure_utc(window.end)
        task = window.instance
        deviation = None
        if task is not None:
            deviation = compute_deviation(task.actual_date, task.normative_deadline)

        left = width = 0.0
        label_left = None
        if axis_start is not None:
            if start >= axis_start:
                left = units_between(axis_start, start, zoom) / count
            width = max(units_between(start, end, zoom) / count, 1 / (count * 10))
            if deviation is not None:
                label_at = max(ensure_utc(task.actual_date), ensure_utc(task.normative_deadline))
                label_left = units_between(axis_start, label_at + timedelta(days=1), zoom) / count

        return TimelineRow(
            index=index,
            code=window.code,
            name=window.name,
            stage=window.stage,
            responsible=window.responsible,
            status=status,
            projected=window.is_projected,
            start=start,
            end=end,
            left=left,
            width=width,
            task_id=task.id if task is not None else None,
            deviation=deviation,
            deviation_label_left=label_left,
        )

    def _edges(
        self, rows: list[TimelineRow], windows: Sequence[ScheduleWindow]
    ) -> list[EdgePath]:
        by_code = {row.code: row for row in rows}
        depends_on = {window.code: window.depends_on for window in windows}
        half = self.row_height / 2
        edges: list[EdgePath] = []
        for row in rows:
            for dep_code in depends_on.get(row.code, ()):
                parent = by_code.get(dep_code)
                if parent is None:
                    continue
                start = Point(parent.left + parent.width, parent.index * self.row_height + half)
                end = Point(row.left, row.index * self.row_height + half)
                edges.append(
                    EdgePath(
                        from_code=parent.code,
                        to_code=row.code,
                        start=start,
                        control_start=Point(start.x + self.edge_bias, start.y),
                        control_end=Point(end.x - self.edge_bias, end.y),
                        end=end,
                    )
                )
        return edges
