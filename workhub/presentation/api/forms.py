"""
Forms API Router - form definitions and their submissions.

Deleting a form removes its submissions and is refused while any workflow
still references it.
"""

from logging import getLogger
from typing import Any, Optional

from dishka.integrations.fastapi import FromDishka, inject
from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from workhub.application.commands.forms import (
    CreateFormCommand,
    CreateFormHandler,
    DeleteFormCommand,
    DeleteFormHandler,
    SetFormActiveCommand,
    SetFormActiveHandler,
    SubmitFormCommand,
    SubmitFormHandler,
    UpdateFormCommand,
    UpdateFormHandler,
    UpdateSubmissionStatusCommand,
    UpdateSubmissionStatusHandler,
)
from workhub.application.dto import (
    ApiResponse,
    FormDTO,
    FormFieldDTO,
    FormSubmissionDTO,
    PageResponse,
    WorkflowDTO,
)
from workhub.application.queries.forms import (
    GetFormHandler,
    GetFormQuery,
    ListFormsHandler,
    ListFormsQuery,
    ListSubmissionsHandler,
    ListSubmissionsQuery,
)
from workhub.application.queries.workflows import (
    ListFormWorkflowsHandler,
    ListFormWorkflowsQuery,
)
from workhub.domain.entities.form import SubmissionStatus
from workhub.domain.value_objects.page import PageRequest
from workhub.presentation.dependencies import (
    AuthUser,
    get_current_user,
    get_page_request,
    require_manager,
)

logger = getLogger(__name__)


# ==================== REQUEST/RESPONSE MODELS ====================


class CreateFormRequest(BaseModel):
    name: str = Field(min_length=1, max_length=200)
    fields: list[FormFieldDTO] = Field(min_length=1)
    description: Optional[str] = None
    layout: Optional[dict[str, Any]] = None


class UpdateFormRequest(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=200)
    fields: Optional[list[FormFieldDTO]] = None
    description: Optional[str] = None
    layout: Optional[dict[str, Any]] = None


class SetActiveRequest(BaseModel):
    active: bool


class SubmitFormRequest(BaseModel):
    data: dict[str, Any] = {}


class UpdateSubmissionStatusRequest(BaseModel):
    status: SubmissionStatus


# ==================== ROUTER ====================

router = APIRouter(prefix="/api/v1/forms", tags=["forms"])


# ==================== ENDPOINTS ====================


@router.post("", response_model=ApiResponse[FormDTO], status_code=status.HTTP_201_CREATED)
@inject
async def create_form(
    request: CreateFormRequest,
    handler: FromDishka[CreateFormHandler],
    current_user: AuthUser = Depends(require_manager),
):
    form = await handler.execute(
        CreateFormCommand(
            name=request.name,
            fields=tuple(f.to_value() for f in request.fields),
            description=request.description,
            layout=request.layout,
            created_by=current_user.user_id,
        )
    )
    return ApiResponse.ok(FormDTO.from_entity(form), "Form created")


@router.get("", response_model=PageResponse[FormDTO])
@inject
async def list_forms(
    handler: FromDishka[ListFormsHandler],
    active_only: bool = False,
    page: PageRequest = Depends(get_page_request),
    current_user: AuthUser = Depends(get_current_user),
):
    result = await handler.execute(ListFormsQuery(page=page, active_only=active_only))
    return PageResponse.from_page(result, FormDTO.from_entity)


@router.get("/submissions/mine", response_model=PageResponse[FormSubmissionDTO])
@inject
async def list_my_submissions(
    handler: FromDishka[ListSubmissionsHandler],
    page: PageRequest = Depends(get_page_request),
    current_user: AuthUser = Depends(get_current_user),
):
    result = await handler.execute(ListSubmissionsQuery(page=page, user_id=current_user.user_id))
    return PageResponse.from_page(result, FormSubmissionDTO.from_entity)


@router.patch(
    "/submissions/{submission_id}/status", response_model=ApiResponse[FormSubmissionDTO]
)
@inject
async def update_submission_status(
    submission_id: str,
    request: UpdateSubmissionStatusRequest,
    handler: FromDishka[UpdateSubmissionStatusHandler],
    current_user: AuthUser = Depends(require_manager),
):
    submission = await handler.execute(
        UpdateSubmissionStatusCommand(submission_id=submission_id, status=request.status)
    )
    return ApiResponse.ok(FormSubmissionDTO.from_entity(submission), "Submission updated")


@router.get("/{form_id}", response_model=ApiResponse[FormDTO])
@inject
async def get_form(
    form_id: str,
    handler: FromDishka[GetFormHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    form = await handler.execute(GetFormQuery(form_id=form_id))
    return ApiResponse.ok(FormDTO.from_entity(form))


@router.put("/{form_id}", response_model=ApiResponse[FormDTO])
@inject
async def update_form(
    form_id: str,
    request: UpdateFormRequest,
    handler: FromDishka[UpdateFormHandler],
    current_user: AuthUser = Depends(require_manager),
):
    form = await handler.execute(
        UpdateFormCommand(
            form_id=form_id,
            name=request.name,
            description=request.description,
            fields=tuple(f.to_value() for f in request.fields) if request.fields else None,
            layout=request.layout,
            modified_by=current_user.user_id,
        )
    )
    return ApiResponse.ok(FormDTO.from_entity(form), "Form updated")


@router.patch("/{form_id}/active", response_model=ApiResponse[FormDTO])
@inject
async def set_form_active(
    form_id: str,
    request: SetActiveRequest,
    handler: FromDishka[SetFormActiveHandler],
    current_user: AuthUser = Depends(require_manager),
):
    form = await handler.execute(SetFormActiveCommand(form_id=form_id, active=request.active))
    return ApiResponse.ok(FormDTO.from_entity(form))


@router.delete("/{form_id}", response_model=ApiResponse[None])
@inject
async def delete_form(
    form_id: str,
    handler: FromDishka[DeleteFormHandler],
    current_user: AuthUser = Depends(require_manager),
):
    await handler.execute(DeleteFormCommand(form_id=form_id))
    return ApiResponse.ok(None, "Form deleted")


@router.post(
    "/{form_id}/submissions",
    response_model=ApiResponse[FormSubmissionDTO],
    status_code=status.HTTP_201_CREATED,
)
@inject
async def submit_form(
    form_id: str,
    request: SubmitFormRequest,
    handler: FromDishka[SubmitFormHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    submission = await handler.execute(
        SubmitFormCommand(form_id=form_id, user_id=current_user.user_id, data=request.data)
    )
    return ApiResponse.ok(FormSubmissionDTO.from_entity(submission), "Form submitted")


@router.get("/{form_id}/submissions", response_model=PageResponse[FormSubmissionDTO])
@inject
async def list_form_submissions(
    form_id: str,
    handler: FromDishka[ListSubmissionsHandler],
    page: PageRequest = Depends(get_page_request),
    current_user: AuthUser = Depends(require_manager),
):
    result = await handler.execute(ListSubmissionsQuery(page=page, form_id=form_id))
    return PageResponse.from_page(result, FormSubmissionDTO.from_entity)


@router.get("/{form_id}/workflows", response_model=ApiResponse[list[WorkflowDTO]])
@inject
async def list_form_workflows(
    form_id: str,
    handler: FromDishka[ListFormWorkflowsHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    workflows = await handler.execute(ListFormWorkflowsQuery(form_id=form_id))
    return ApiResponse.ok([WorkflowDTO.from_entity(w) for w in workflows])
