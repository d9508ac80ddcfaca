"""Workflow API: initial tasks, newly unlocked tasks and the current stage.

Stateless: the caller sends the project's task snapshot and persists the
returned proposals.
"""

from typing import Annotated

from fastapi import APIRouter, Depends

from app.api.v1.dependencies import get_activate_project_use_case, get_resolver
from app.api.v1.endpoints._responses import activation_response, proposals_response
from app.application.services.dependency_resolver import DependencyResolver
from app.application.use_cases.tasks import ActivateProjectUseCase
from app.application.use_cases.tasks._ports import created_event
from app.core.config import Settings, get_settings
from app.schemas.task import TaskProposalsResponse
from app.schemas.workflow import (
    CurrentStageRequest,
    CurrentStageResponse,
    InitialTasksRequest,
    NextTasksRequest,
)
from app.shared.utils.datetime import utc_now

router = APIRouter()


@router.post("/initial-tasks", response_model=TaskProposalsResponse)
async def initial_tasks(
    body: InitialTasksRequest,
    activate_uc: Annotated[ActivateProjectUseCase, Depends(get_activate_project_use_case)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> TaskProposalsResponse:
    """Root tasks for a new project (call once per project)."""
    result = await activate_uc.execute(
        body.project_id, project_name=body.project_name, now=body.now
    )
    return activation_response(result, settings)


@router.post("/next-tasks", response_model=TaskProposalsResponse)
def next_tasks(
    body: NextTasksRequest,
    resolver: Annotated[DependencyResolver, Depends(get_resolver)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> TaskProposalsResponse:
    """Tasks whose predecessors are all completed and that do not exist yet."""
    now = body.now or utc_now()
    existing = [t.to_entity() for t in body.tasks]
    if body.cascade:
        created = resolver.cascade(body.project_id, existing, now)
    else:
        created = resolver.next_tasks(body.project_id, existing, now)
    events = [created_event(task, now) for task in created]
    return proposals_response(created, events, settings)


@router.post("/current-stage", response_model=CurrentStageResponse)
def current_stage(
    body: CurrentStageRequest,
    resolver: Annotated[DependencyResolver, Depends(get_resolver)],
) -> CurrentStageResponse:
    """Stage label of the project derived from its tasks."""
    return CurrentStageResponse(
        stage=resolver.current_stage([t.to_entity() for t in body.tasks])
    )
