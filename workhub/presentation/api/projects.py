"""
Projects API Router.

Nested resources:
  POST/DELETE /projects/{id}/users/{user_id}   team membership
  GET         /projects/{id}/tasks             tasks of a project
  GET         /projects/{id}/documents         documents of a project
  GET         /projects/{id}/statistics        task counts by status
"""

from datetime import datetime
from decimal import Decimal
from logging import getLogger
from typing import Optional

from dishka.integrations.fastapi import FromDishka, inject
from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel, Field

from workhub.application.commands.projects import (
    AddProjectMemberCommand,
    AddProjectMemberHandler,
    CreateProjectCommand,
    CreateProjectHandler,
    DeleteProjectCommand,
    DeleteProjectHandler,
    RemoveProjectMemberCommand,
    RemoveProjectMemberHandler,
    UpdateProjectCommand,
    UpdateProjectHandler,
    UpdateProjectStatusCommand,
    UpdateProjectStatusHandler,
)
from workhub.application.commands.projects.create_project import DEFAULT_MEMBER_ROLE
from workhub.application.dto import (
    ApiResponse,
    DocumentDTO,
    PageResponse,
    ProjectDTO,
    TaskDTO,
    TaskStatisticsDTO,
)
from workhub.application.queries.documents import ListDocumentsHandler, ListDocumentsQuery
from workhub.application.queries.projects import (
    GetProjectHandler,
    GetProjectQuery,
    ListProjectsHandler,
    ListProjectsQuery,
    ProjectsEndingSoonHandler,
    ProjectsEndingSoonQuery,
)
from workhub.application.queries.tasks import (
    ListTasksHandler,
    ListTasksQuery,
    TaskStatisticsHandler,
    TaskStatisticsQuery,
)
from workhub.config.settings import Config
from workhub.domain.entities.project import ProjectStatus
from workhub.domain.value_objects.page import PageRequest
from workhub.presentation.dependencies import (
    AuthUser,
    get_current_user,
    get_page_request,
    require_manager,
)

logger = getLogger(__name__)


# ==================== REQUEST/RESPONSE MODELS ====================


class TeamMemberRequest(BaseModel):
    user_id: str
    role: str = DEFAULT_MEMBER_ROLE


class CreateProjectRequest(BaseModel):
    name: str = Field(min_length=1, max_length=200)
    organization_id: str
    description: Optional[str] = None
    owner_id: Optional[str] = None
    status: ProjectStatus = ProjectStatus.PLANNING
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    budget: Optional[Decimal] = Field(default=None, ge=0)
    tags: list[str] = []
    team_members: list[TeamMemberRequest] = []


class UpdateProjectRequest(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=200)
    organization_id: Optional[str] = None
    description: Optional[str] = None
    owner_id: Optional[str] = None
    status: Optional[ProjectStatus] = None
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    budget: Optional[Decimal] = Field(default=None, ge=0)
    tags: Optional[list[str]] = None
    team_members: Optional[list[TeamMemberRequest]] = None


class UpdateProjectStatusRequest(BaseModel):
    status: ProjectStatus


def _members(members: list[TeamMemberRequest]) -> tuple[tuple[str, str], ...]:
    return tuple((m.user_id, m.role) for m in members)


# ==================== ROUTER ====================

router = APIRouter(prefix="/api/v1/projects", tags=["projects"])


# ==================== ENDPOINTS ====================


@router.post("", response_model=ApiResponse[ProjectDTO], status_code=status.HTTP_201_CREATED)
@inject
async def create_project(
    request: CreateProjectRequest,
    handler: FromDishka[CreateProjectHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    project = await handler.execute(
        CreateProjectCommand(
            name=request.name,
            organization_id=request.organization_id,
            description=request.description,
            owner_id=request.owner_id or current_user.user_id,
            status=request.status,
            start_date=request.start_date,
            end_date=request.end_date,
            budget=request.budget,
            tags=tuple(request.tags),
            team_members=_members(request.team_members),
        )
    )
    return ApiResponse.ok(ProjectDTO.from_entity(project), "Project created")


@router.get("", response_model=PageResponse[ProjectDTO])
@inject
async def list_projects(
    handler: FromDishka[ListProjectsHandler],
    search: Optional[str] = Query(None, alias="q"),
    organization_id: Optional[str] = None,
    project_status: Optional[ProjectStatus] = Query(None, alias="status"),
    member_id: Optional[str] = None,
    page: PageRequest = Depends(get_page_request),
    current_user: AuthUser = Depends(get_current_user),
):
    """
    List projects. One filter applies at a time, in this order:
    q (name/description contains), organization_id, status, member_id.
    """
    result = await handler.execute(
        ListProjectsQuery(
            page=page,
            search=search,
            organization_id=organization_id,
            status=project_status,
            member_id=member_id,
        )
    )
    return PageResponse.from_page(result, ProjectDTO.from_entity)


@router.get("/ending-soon", response_model=ApiResponse[list[ProjectDTO]])
@inject
async def projects_ending_soon(
    handler: FromDishka[ProjectsEndingSoonHandler],
    days: int = Query(Config.PROJECT_ENDING_SOON_DAYS, ge=0),
    current_user: AuthUser = Depends(get_current_user),
):
    projects = await handler.execute(ProjectsEndingSoonQuery(days=days))
    return ApiResponse.ok([ProjectDTO.from_entity(p) for p in projects])


@router.get("/{project_id}", response_model=ApiResponse[ProjectDTO])
@inject
async def get_project(
    project_id: str,
    handler: FromDishka[GetProjectHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    project = await handler.execute(GetProjectQuery(project_id=project_id))
    return ApiResponse.ok(ProjectDTO.from_entity(project))


@router.put("/{project_id}", response_model=ApiResponse[ProjectDTO])
@inject
async def update_project(
    project_id: str,
    request: UpdateProjectRequest,
    handler: FromDishka[UpdateProjectHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    project = await handler.execute(
        UpdateProjectCommand(
            project_id=project_id,
            name=request.name,
            organization_id=request.organization_id,
            description=request.description,
            owner_id=request.owner_id,
            status=request.status,
            start_date=request.start_date,
            end_date=request.end_date,
            budget=request.budget,
            tags=tuple(request.tags) if request.tags is not None else None,
            team_members=(
                _members(request.team_members) if request.team_members is not None else None
            ),
        )
    )
    return ApiResponse.ok(ProjectDTO.from_entity(project), "Project updated")


@router.patch("/{project_id}/status", response_model=ApiResponse[ProjectDTO])
@inject
async def update_project_status(
    project_id: str,
    request: UpdateProjectStatusRequest,
    handler: FromDishka[UpdateProjectStatusHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    project = await handler.execute(
        UpdateProjectStatusCommand(project_id=project_id, status=request.status)
    )
    return ApiResponse.ok(ProjectDTO.from_entity(project), "Project status updated")


@router.delete("/{project_id}", response_model=ApiResponse[None])
@inject
async def delete_project(
    project_id: str,
    handler: FromDishka[DeleteProjectHandler],
    current_user: AuthUser = Depends(require_manager),
):
    """Delete a project together with its tasks and documents."""
    await handler.execute(DeleteProjectCommand(project_id=project_id))
    return ApiResponse.ok(None, "Project deleted")


@router.post("/{project_id}/users/{user_id}", response_model=ApiResponse[ProjectDTO])
@inject
async def add_project_member(
    project_id: str,
    user_id: str,
    handler: FromDishka[AddProjectMemberHandler],
    role: str = Query(DEFAULT_MEMBER_ROLE),
    current_user: AuthUser = Depends(get_current_user),
):
    project = await handler.execute(
        AddProjectMemberCommand(project_id=project_id, user_id=user_id, role=role)
    )
    return ApiResponse.ok(ProjectDTO.from_entity(project), "Member added")


@router.delete("/{project_id}/users/{user_id}", response_model=ApiResponse[ProjectDTO])
@inject
async def remove_project_member(
    project_id: str,
    user_id: str,
    handler: FromDishka[RemoveProjectMemberHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    project = await handler.execute(
        RemoveProjectMemberCommand(project_id=project_id, user_id=user_id)
    )
    return ApiResponse.ok(ProjectDTO.from_entity(project), "Member removed")


@router.get("/{project_id}/tasks", response_model=PageResponse[TaskDTO])
@inject
async def list_project_tasks(
    project_id: str,
    handler: FromDishka[ListTasksHandler],
    page: PageRequest = Depends(get_page_request),
    current_user: AuthUser = Depends(get_current_user),
):
    result = await handler.execute(ListTasksQuery(page=page, project_id=project_id))
    return PageResponse.from_page(result, TaskDTO.from_entity)


@router.get("/{project_id}/documents", response_model=PageResponse[DocumentDTO])
@inject
async def list_project_documents(
    project_id: str,
    handler: FromDishka[ListDocumentsHandler],
    page: PageRequest = Depends(get_page_request),
    current_user: AuthUser = Depends(get_current_user),
):
    result = await handler.execute(ListDocumentsQuery(page=page, project_id=project_id))
    return PageResponse.from_page(result, DocumentDTO.from_entity)


@router.get("/{project_id}/statistics", response_model=ApiResponse[TaskStatisticsDTO])
@inject
async def project_task_statistics(
    project_id: str,
    handler: FromDishka[TaskStatisticsHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    stats = await handler.execute(TaskStatisticsQuery(project_id=project_id))
    return ApiResponse.ok(TaskStatisticsDTO.from_result(stats))
