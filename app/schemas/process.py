"""Process graph API schemas."""

from pydantic import BaseModel, ConfigDict

from app.domain.enums import TaskKind


class TaskDefinitionResponse(BaseModel):
    """One process definition with its direct dependents."""

    model_config = ConfigDict(from_attributes=True)

    code: str
    name: str
    role: str
    depends_on: list[str]
    kind: TaskKind
    stage: str
    duration_days: int
    dependents: list[str] = []


class ProcessGraphResponse(BaseModel):
    """The loaded process graph (definitions in declared order)."""

    version: str | None
    initial_stage: str
    roots: list[str]
    topological_order: list[str]
    edges: list[tuple[str, str]]
    definitions: list[TaskDefinitionResponse]


class TaskNeighboursResponse(BaseModel):
    """Predecessor/successor names shown in the task dialog."""

    model_config = ConfigDict(from_attributes=True)

    predecessors: list[str]
    successors: list[str]
    is_ad_hoc: bool
