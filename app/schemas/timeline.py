"""Timeline (Gantt) API schemas."""

from datetime import date, datetime
from typing import Any

from pydantic import BaseModel, Field, field_validator

from app.application.dtos.timeline import EdgePath, TimelineRow, TimelineView
from app.domain.enums import DeviationType, TaskStatus, ZoomLevel
from app.schemas.task import (
    STATUS_LABELS,
    TaskInstanceSchema,
    ensure_aware_datetime,
    parse_task_status,
)

ALL_STATUSES_LABEL = "Все"


class TimelineRequest(BaseModel):
    """Request body for building a project timeline."""

    tasks: list[TaskInstanceSchema] = Field(default_factory=list)
    project_start: datetime | None = None
    zoom: ZoomLevel | None = None
    status_filter: TaskStatus | None = None
    today: date | None = None

    @field_validator("project_start", mode="before")
    @classmethod
    def project_start_aware(cls, v: Any) -> Any:
        return ensure_aware_datetime(v)

    @field_validator("status_filter", mode="before")
    @classmethod
    def status_filter_from_label(cls, v: Any) -> TaskStatus | None:
        if v is None or v == "" or v in ("all", ALL_STATUSES_LABEL):
            return None
        return parse_task_status(v)


class PointSchema(BaseModel):
    x: float
    y: float


class EdgeResponse(BaseModel):
    """Connector between a predecessor bar and a dependent bar."""

    from_code: str
    to_code: str
    start: PointSchema
    control_start: PointSchema
    control_end: PointSchema
    end: PointSchema
    path: str

    @classmethod
    def from_edge(cls, edge: EdgePath) -> "EdgeResponse":
        return cls(
            from_code=edge.from_code,
            to_code=edge.to_code,
            start=PointSchema(x=edge.start.x, y=edge.start.y),
            control_start=PointSchema(x=edge.control_start.x, y=edge.control_start.y),
            control_end=PointSchema(x=edge.control_end.x, y=edge.control_end.y),
            end=PointSchema(x=edge.end.x, y=edge.end.y),
            path=edge.svg_path(),
        )


class DeviationResponse(BaseModel):
    days: int
    type: DeviationType


class TimelineRowResponse(BaseModel):
    """One task bar; left/width are fractions of the axis width."""

    index: int
    code: str
    name: str
    stage: str
    responsible: str
    status: TaskStatus
    status_label: str
    projected: bool
    start: datetime
    end: datetime
    left: float
    width: float
    task_id: str | None = None
    deviation: DeviationResponse | None = None
    deviation_label_left: float | None = None

    @classmethod
    def from_row(cls, row: TimelineRow) -> "TimelineRowResponse":
        deviation = None
        if row.deviation is not None:
            deviation = DeviationResponse(days=row.deviation.days, type=row.deviation.type)
        return cls(
            index=row.index,
            code=row.code,
            name=row.name,
            stage=row.stage,
            responsible=row.responsible,
            status=row.status,
            status_label=STATUS_LABELS[row.status],
            projected=row.projected,
            start=row.start,
            end=row.end,
            left=row.left,
            width=row.width,
            task_id=row.task_id,
            deviation=deviation,
            deviation_label_left=row.deviation_label_left,
        )


class FilterOptionResponse(BaseModel):
    value: TaskStatus | None
    label: str


class TimelineResponse(BaseModel):
    """Timeline view model for the rendering consumer."""

    zoom: ZoomLevel
    buckets: list[date]
    bucket_count: int
    timeline_start: date | None
    timeline_end: date | None
    today_left: float | None
    row_height: float
    status_filter: TaskStatus | None
    filter_options: list[FilterOptionResponse]
    rows: list[TimelineRowResponse]
    edges: list[EdgeResponse]

    @classmethod
    def from_view(cls, view: TimelineView) -> "TimelineResponse":
        options = [FilterOptionResponse(value=None, label=ALL_STATUSES_LABEL)]
        options.extend(
            FilterOptionResponse(value=status, label=STATUS_LABELS[status])
            for status in view.filter_options
        )
        return cls(
            zoom=view.zoom,
            buckets=view.buckets,
            bucket_count=view.bucket_count,
            timeline_start=view.timeline_start,
            timeline_end=view.timeline_end,
            today_left=view.today_left,
            row_height=view.row_height,
            status_filter=view.status_filter,
            filter_options=options,
            rows=[TimelineRowResponse.from_row(row) for row in view.rows],
            edges=[EdgeResponse.from_edge(edge) for edge in view.edges],
        )
