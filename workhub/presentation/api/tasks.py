"""Tasks API Router."""

from datetime import datetime
from logging import getLogger
from typing import Optional

from dishka.integrations.fastapi import FromDishka, inject
from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel, Field

from workhub.application.commands.tasks import (
    AssignTaskCommand,
    AssignTaskHandler,
    CreateTaskCommand,
    CreateTaskHandler,
    DeleteTaskCommand,
    DeleteTaskHandler,
    UpdateTaskCommand,
    UpdateTaskHandler,
    UpdateTaskStatusCommand,
    UpdateTaskStatusHandler,
)
from workhub.application.dto import ApiResponse, PageResponse, TaskDTO
from workhub.application.queries.tasks import (
    GetTaskHandler,
    GetTaskQuery,
    ListTasksHandler,
    ListTasksQuery,
)
from workhub.domain.entities.task import TaskPriority, TaskStatus
from workhub.domain.value_objects.page import PageRequest
from workhub.presentation.dependencies import AuthUser, get_current_user, get_page_request

logger = getLogger(__name__)


# ==================== REQUEST/RESPONSE MODELS ====================


class CreateTaskRequest(BaseModel):
    project_id: str
    title: str = Field(min_length=1, max_length=200)
    description: Optional[str] = None
    status: TaskStatus = TaskStatus.TODO
    priority: TaskPriority = TaskPriority.MEDIUM
    assignee_id: Optional[str] = None
    due_date: Optional[datetime] = None
    estimated_hours: Optional[float] = Field(default=None, ge=0)
    tags: list[str] = []


class UpdateTaskRequest(BaseModel):
    project_id: Optional[str] = None
    title: Optional[str] = Field(default=None, min_length=1, max_length=200)
    description: Optional[str] = None
    status: Optional[TaskStatus] = None
    priority: Optional[TaskPriority] = None
    assignee_id: Optional[str] = None
    due_date: Optional[datetime] = None
    estimated_hours: Optional[float] = Field(default=None, ge=0)
    actual_hours: Optional[float] = Field(default=None, ge=0)
    tags: Optional[list[str]] = None


class UpdateTaskStatusRequest(BaseModel):
    status: TaskStatus


class AssignTaskRequest(BaseModel):
    assignee_id: str


# ==================== ROUTER ====================

router = APIRouter(prefix="/api/v1/tasks", tags=["tasks"])


# ==================== ENDPOINTS ====================


@router.post("", response_model=ApiResponse[TaskDTO], status_code=status.HTTP_201_CREATED)
@inject
async def create_task(
    request: CreateTaskRequest,
    handler: FromDishka[CreateTaskHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    task = await handler.execute(
        CreateTaskCommand(
            project_id=request.project_id,
            title=request.title,
            description=request.description,
            status=request.status,
            priority=request.priority,
            assignee_id=request.assignee_id,
            due_date=request.due_date,
            estimated_hours=request.estimated_hours,
            tags=tuple(request.tags),
            created_by=current_user.user_id,
        )
    )
    return ApiResponse.ok(TaskDTO.from_entity(task), "Task created")


@router.get("", response_model=PageResponse[TaskDTO])
@inject
async def list_tasks(
    handler: FromDishka[ListTasksHandler],
    overdue: bool = False,
    search: Optional[str] = Query(None, alias="q"),
    project_id: Optional[str] = None,
    assignee_id: Optional[str] = None,
    task_status: Optional[TaskStatus] = Query(None, alias="status"),
    priority: Optional[TaskPriority] = None,
    page: PageRequest = Depends(get_page_request),
    current_user: AuthUser = Depends(get_current_user),
):
    """
    List tasks. One filter applies at a time, in this order:
    overdue, q, project_id, assignee_id, status, priority.
    """
    result = await handler.execute(
        ListTasksQuery(
            page=page,
            overdue=overdue,
            search=search,
            project_id=project_id,
            assignee_id=assignee_id,
            status=task_status,
            priority=priority,
        )
    )
    return PageResponse.from_page(result, TaskDTO.from_entity)


@router.get("/mine", response_model=PageResponse[TaskDTO])
@inject
async def list_my_tasks(
    handler: FromDishka[ListTasksHandler],
    page: PageRequest = Depends(get_page_request),
    current_user: AuthUser = Depends(get_current_user),
):
    result = await handler.execute(ListTasksQuery(page=page, assignee_id=current_user.user_id))
    return PageResponse.from_page(result, TaskDTO.from_entity)


@router.get("/{task_id}", response_model=ApiResponse[TaskDTO])
@inject
async def get_task(
    task_id: str,
    handler: FromDishka[GetTaskHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    task = await handler.execute(GetTaskQuery(task_id=task_id))
    return ApiResponse.ok(TaskDTO.from_entity(task))


@router.put("/{task_id}", response_model=ApiResponse[TaskDTO])
@inject
async def update_task(
    task_id: str,
    request: UpdateTaskRequest,
    handler: FromDishka[UpdateTaskHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    task = await handler.execute(
        UpdateTaskCommand(
            task_id=task_id,
            project_id=request.project_id,
            title=request.title,
            description=request.description,
            status=request.status,
            priority=request.priority,
            assignee_id=request.assignee_id,
            due_date=request.due_date,
            estimated_hours=request.estimated_hours,
            actual_hours=request.actual_hours,
            tags=tuple(request.tags) if request.tags is not None else None,
        )
    )
    return ApiResponse.ok(TaskDTO.from_entity(task), "Task updated")


@router.patch("/{task_id}/status", response_model=ApiResponse[TaskDTO])
@inject
async def update_task_status(
    task_id: str,
    request: UpdateTaskStatusRequest,
    handler: FromDishka[UpdateTaskStatusHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    task = await handler.execute(UpdateTaskStatusCommand(task_id=task_id, status=request.status))
    return ApiResponse.ok(TaskDTO.from_entity(task), "Task status updated")


@router.patch("/{task_id}/assignee", response_model=ApiResponse[TaskDTO])
@inject
async def assign_task(
    task_id: str,
    request: AssignTaskRequest,
    handler: FromDishka[AssignTaskHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    task = await handler.execute(
        AssignTaskCommand(task_id=task_id, assignee_id=request.assignee_id)
    )
    return ApiResponse.ok(TaskDTO.from_entity(task), "Task assigned")


@router.delete("/{task_id}", response_model=ApiResponse[None])
@inject
async def delete_task(
    task_id: str,
    handler: FromDishka[DeleteTaskHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    await handler.execute(DeleteTaskCommand(task_id=task_id))
    return ApiResponse.ok(None, "Task deleted")
