"""Workflows API Router. Workflows are stored definitions; nothing executes their steps."""

from logging import getLogger
from typing import Optional

from dishka.integrations.fastapi import FromDishka, inject
from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from workhub.application.commands.workflows import (
    CreateWorkflowCommand,
    CreateWorkflowHandler,
    DeleteWorkflowCommand,
    DeleteWorkflowHandler,
    SetWorkflowActiveCommand,
    SetWorkflowActiveHandler,
    UpdateWorkflowCommand,
    UpdateWorkflowHandler,
)
from workhub.application.dto import ApiResponse, PageResponse, WorkflowDTO, WorkflowStepDTO
from workhub.application.queries.workflows import (
    GetWorkflowHandler,
    GetWorkflowQuery,
    ListWorkflowsHandler,
    ListWorkflowsQuery,
)
from workhub.domain.value_objects.page import PageRequest
from workhub.presentation.dependencies import (
    AuthUser,
    get_current_user,
    get_page_request,
    require_manager,
)

logger = getLogger(__name__)


# ==================== REQUEST/RESPONSE MODELS ====================


class CreateWorkflowRequest(BaseModel):
    name: str = Field(min_length=1, max_length=200)
    form_id: str
    steps: list[WorkflowStepDTO] = Field(min_length=1)
    description: Optional[str] = None


class UpdateWorkflowRequest(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=200)
    form_id: Optional[str] = None
    steps: Optional[list[WorkflowStepDTO]] = None
    description: Optional[str] = None


class SetActiveRequest(BaseModel):
    active: bool


# ==================== ROUTER ====================

router = APIRouter(prefix="/api/v1/workflows", tags=["workflows"])


# ==================== ENDPOINTS ====================


@router.post("", response_model=ApiResponse[WorkflowDTO], status_code=status.HTTP_201_CREATED)
@inject
async def create_workflow(
    request: CreateWorkflowRequest,
    handler: FromDishka[CreateWorkflowHandler],
    current_user: AuthUser = Depends(require_manager),
):
    workflow = await handler.execute(
        CreateWorkflowCommand(
            name=request.name,
            form_id=request.form_id,
            steps=tuple(s.to_value() for s in request.steps),
            description=request.description,
            created_by=current_user.user_id,
        )
    )
    return ApiResponse.ok(WorkflowDTO.from_entity(workflow), "Workflow created")


@router.get("", response_model=PageResponse[WorkflowDTO])
@inject
async def list_workflows(
    handler: FromDishka[ListWorkflowsHandler],
    page: PageRequest = Depends(get_page_request),
    current_user: AuthUser = Depends(get_current_user),
):
    result = await handler.execute(ListWorkflowsQuery(page=page))
    return PageResponse.from_page(result, WorkflowDTO.from_entity)


@router.get("/{workflow_id}", response_model=ApiResponse[WorkflowDTO])
@inject
async def get_workflow(
    workflow_id: str,
    handler: FromDishka[GetWorkflowHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    workflow = await handler.execute(GetWorkflowQuery(workflow_id=workflow_id))
    return ApiResponse.ok(WorkflowDTO.from_entity(workflow))


@router.put("/{workflow_id}", response_model=ApiResponse[WorkflowDTO])
@inject
async def update_workflow(
    workflow_id: str,
    request: UpdateWorkflowRequest,
    handler: FromDishka[UpdateWorkflowHandler],
    current_user: AuthUser = Depends(require_manager),
):
    workflow = await handler.execute(
        UpdateWorkflowCommand(
            workflow_id=workflow_id,
            name=request.name,
            description=request.description,
            form_id=request.form_id,
            steps=tuple(s.to_value() for s in request.steps) if request.steps else None,
        )
    )
    return ApiResponse.ok(WorkflowDTO.from_entity(workflow), "Workflow updated")


@router.patch("/{workflow_id}/active", response_model=ApiResponse[WorkflowDTO])
@inject
async def set_workflow_active(
    workflow_id: str,
    request: SetActiveRequest,
    handler: FromDishka[SetWorkflowActiveHandler],
    current_user: AuthUser = Depends(require_manager),
):
    workflow = await handler.execute(
        SetWorkflowActiveCommand(workflow_id=workflow_id, active=request.active)
    )
    return ApiResponse.ok(WorkflowDTO.from_entity(workflow))


@router.delete("/{workflow_id}", response_model=ApiResponse[None])
@inject
async def delete_workflow(
    workflow_id: str,
    handler: FromDishka[DeleteWorkflowHandler],
    current_user: AuthUser = Depends(require_manager),
):
    await handler.execute(DeleteWorkflowCommand(workflow_id=workflow_id))
    return ApiResponse.ok(None, "Workflow deleted")
