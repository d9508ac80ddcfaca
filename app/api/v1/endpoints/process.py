"""Process graph API: read-only view of the loaded task definitions."""

from typing import Annotated

from fastapi import APIRouter, Depends

from app.api.v1.dependencies import get_process_graph
from app.application.services.process_graph import ProcessGraph
from app.application.services.store_opening_process import INITIAL_STAGE
from app.domain.entities.task_definition import TaskDefinitionEntity
from app.schemas.process import (
    ProcessGraphResponse,
    TaskDefinitionResponse,
    TaskNeighboursResponse,
)

router = APIRouter()


def _definition_response(
    graph: ProcessGraph, definition: TaskDefinitionEntity
) -> TaskDefinitionResponse:
    return TaskDefinitionResponse(
        code=definition.code,
        name=definition.name,
        role=definition.role,
        depends_on=list(definition.depends_on),
        kind=definition.kind,
        stage=definition.stage,
        duration_days=definition.duration_days,
        dependents=[d.code for d in graph.dependents(definition.code)],
    )


@router.get("", response_model=ProcessGraphResponse)
def get_process(
    graph: Annotated[ProcessGraph, Depends(get_process_graph)],
) -> ProcessGraphResponse:
    """Return every definition, the roots, the topological order and the edges."""
    return ProcessGraphResponse(
        version=graph.version,
        initial_stage=INITIAL_STAGE,
        roots=[d.code for d in graph.roots()],
        topological_order=[d.code for d in graph.topological_order()],
        edges=graph.edges(),
        definitions=[_definition_response(graph, d) for d in graph],
    )


@router.get("/tasks/{code}", response_model=TaskDefinitionResponse)
def get_task_definition(
    code: str,
    graph: Annotated[ProcessGraph, Depends(get_process_graph)],
) -> TaskDefinitionResponse:
    """Return one definition (404 when the code is unknown)."""
    return _definition_response(graph, graph.get(code))


@router.get("/tasks/{code}/neighbours", response_model=TaskNeighboursResponse)
def get_task_neighbours(
    code: str,
    graph: Annotated[ProcessGraph, Depends(get_process_graph)],
) -> TaskNeighboursResponse:
    """Predecessor and successor names (start/final markers for roots and leaves)."""
    graph.get(code)
    return TaskNeighboursResponse.model_validate(graph.neighbour_names(code))
