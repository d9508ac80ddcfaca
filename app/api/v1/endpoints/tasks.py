"""Task lifecycle API: start, completion check, complete, ad-hoc creation."""

from typing import Annotated

from fastapi import APIRouter, Depends

from app.api.v1.dependencies import (
    get_complete_task_use_case,
    get_completion_gate,
    get_create_ad_hoc_task_use_case,
    get_start_task_use_case,
)
from app.api.v1.endpoints._responses import (
    activation_response,
    event_responses,
    task_response,
)
from app.application.services.completion_gate import CompletionGate
from app.application.use_cases.tasks import (
    CompleteTaskUseCase,
    CreateAdHocTaskUseCase,
    StartTaskUseCase,
)
from app.core.config import Settings, get_settings
from app.schemas.completion import (
    AttachmentFormatRequest,
    AttachmentFormatResponse,
    CompleteTaskRequest,
    CompleteTaskResponse,
    CompletionCheckRequest,
    CompletionCheckResponse,
)
from app.schemas.task import (
    AdHocTaskRequest,
    StartTaskRequest,
    StartTaskResponse,
    TaskProposalsResponse,
)

router = APIRouter()


@router.post("/start", response_model=StartTaskResponse)
async def start_task(
    body: StartTaskRequest,
    start_uc: Annotated[StartTaskUseCase, Depends(get_start_task_use_case)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> StartTaskResponse:
    """Move a task to in_progress (409 when already in progress or completed)."""
    result = await start_uc.execute(body.task.to_entity(), now=body.now)
    return StartTaskResponse(
        task=task_response(result.task, settings),
        event=event_responses([result.event])[0],
    )


@router.post("/completion-check", response_model=CompletionCheckResponse)
def completion_check(
    body: CompletionCheckRequest,
    gate: Annotated[CompletionGate, Depends(get_completion_gate)],
) -> CompletionCheckResponse:
    """Dry-run the completion gate without changing anything."""
    check = gate.can_complete(
        body.task.to_entity(), [doc.to_entity() for doc in body.documents]
    )
    return CompletionCheckResponse.from_check(check)


@router.post("/complete", response_model=CompleteTaskResponse)
async def complete_task(
    body: CompleteTaskRequest,
    complete_uc: Annotated[CompleteTaskUseCase, Depends(get_complete_task_use_case)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> CompleteTaskResponse:
    """Complete a task when the gate passes; a blocked outcome is returned with 200."""
    result = await complete_uc.execute(
        body.task.to_entity(),
        [t.to_entity() for t in body.tasks],
        documents=[doc.to_entity() for doc in body.documents],
        project_name=body.project_name,
        now=body.now,
    )
    return CompleteTaskResponse(
        outcome="completed" if result.completed else "blocked",
        task=task_response(result.task, settings),
        check=CompletionCheckResponse.from_check(result.check),
        created=[task_response(t, settings) for t in result.created],
        events=event_responses(result.events),
    )


@router.post("/ad-hoc", response_model=TaskProposalsResponse, status_code=201)
async def create_ad_hoc_task(
    body: AdHocTaskRequest,
    create_uc: Annotated[CreateAdHocTaskUseCase, Depends(get_create_ad_hoc_task_use_case)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> TaskProposalsResponse:
    """Propose a task outside the process graph."""
    result = await create_uc.execute(
        body.project_id,
        body.name,
        normative_deadline=body.normative_deadline,
        responsible=body.responsible,
        responsible_user_id=body.responsible_user_id,
        stage=body.stage,
        attributes=body.attributes,
        project_name=body.project_name,
    )
    return activation_response(result, settings)


@router.post("/attachment-format", response_model=AttachmentFormatResponse)
def attachment_format(
    body: AttachmentFormatRequest,
    gate: Annotated[CompletionGate, Depends(get_completion_gate)],
) -> AttachmentFormatResponse:
    """Validate an upload's extension for its document type (400 when not allowed)."""
    gate.check_attachment_format(body.document_type, body.file_name)
    return AttachmentFormatResponse(document_type=body.document_type, file_name=body.file_name)
