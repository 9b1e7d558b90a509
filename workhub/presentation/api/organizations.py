"""Organizations API Router."""

from logging import getLogger
from typing import Optional

from dishka.integrations.fastapi import FromDishka, inject
from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel, Field

from workhub.application.commands.organizations import (
    CreateOrganizationCommand,
    CreateOrganizationHandler,
    DeleteOrganizationCommand,
    DeleteOrganizationHandler,
    UpdateOrganizationCommand,
    UpdateOrganizationHandler,
)
from workhub.application.dto import (
    ApiResponse,
    OrganizationDTO,
    OrganizationSettingsDTO,
    PageResponse,
    ProjectDTO,
)
from workhub.application.queries.organizations import (
    GetOrganizationHandler,
    GetOrganizationQuery,
    ListOrganizationsHandler,
    ListOrganizationsQuery,
)
from workhub.application.queries.projects import ListProjectsHandler, ListProjectsQuery
from workhub.domain.value_objects.page import PageRequest
from workhub.presentation.dependencies import (
    AuthUser,
    get_current_user,
    get_page_request,
    require_admin,
    require_manager,
)

logger = getLogger(__name__)


# ==================== REQUEST/RESPONSE MODELS ====================


class CreateOrganizationRequest(BaseModel):
    name: str = Field(min_length=1, max_length=200)
    description: Optional[str] = None
    website: Optional[str] = None
    logo_url: Optional[str] = None
    owner_id: Optional[str] = None
    settings: Optional[OrganizationSettingsDTO] = None


class UpdateOrganizationRequest(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=200)
    description: Optional[str] = None
    website: Optional[str] = None
    logo_url: Optional[str] = None
    settings: Optional[OrganizationSettingsDTO] = None
    active: Optional[bool] = None


# ==================== ROUTER ====================

router = APIRouter(prefix="/api/v1/organizations", tags=["organizations"])


# ==================== ENDPOINTS ====================


@router.post(
    "", response_model=ApiResponse[OrganizationDTO], status_code=status.HTTP_201_CREATED
)
@inject
async def create_organization(
    request: CreateOrganizationRequest,
    handler: FromDishka[CreateOrganizationHandler],
    current_user: AuthUser = Depends(require_admin),
):
    organization = await handler.execute(
        CreateOrganizationCommand(
            name=request.name,
            description=request.description,
            website=request.website,
            logo_url=request.logo_url,
            owner_id=request.owner_id or current_user.user_id,
            settings=request.settings.to_value() if request.settings else None,
        )
    )
    return ApiResponse.ok(OrganizationDTO.from_entity(organization), "Organization created")


@router.get("", response_model=PageResponse[OrganizationDTO])
@inject
async def list_organizations(
    handler: FromDishka[ListOrganizationsHandler],
    name: Optional[str] = Query(None, description="Case-insensitive name filter"),
    page: PageRequest = Depends(get_page_request),
    current_user: AuthUser = Depends(get_current_user),
):
    result = await handler.execute(ListOrganizationsQuery(page=page, name_contains=name))
    return PageResponse.from_page(result, OrganizationDTO.from_entity)


@router.get("/{organization_id}", response_model=ApiResponse[OrganizationDTO])
@inject
async def get_organization(
    organization_id: str,
    handler: FromDishka[GetOrganizationHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    organization = await handler.execute(GetOrganizationQuery(organization_id=organization_id))
    return ApiResponse.ok(OrganizationDTO.from_entity(organization))


@router.put("/{organization_id}", response_model=ApiResponse[OrganizationDTO])
@inject
async def update_organization(
    organization_id: str,
    request: UpdateOrganizationRequest,
    handler: FromDishka[UpdateOrganizationHandler],
    current_user: AuthUser = Depends(require_manager),
):
    organization = await handler.execute(
        UpdateOrganizationCommand(
            organization_id=organization_id,
            name=request.name,
            description=request.description,
            website=request.website,
            logo_url=request.logo_url,
            settings=request.settings.to_value() if request.settings else None,
            active=request.active,
        )
    )
    return ApiResponse.ok(OrganizationDTO.from_entity(organization), "Organization updated")


@router.delete("/{organization_id}", response_model=ApiResponse[None])
@inject
async def delete_organization(
    organization_id: str,
    handler: FromDishka[DeleteOrganizationHandler],
    current_user: AuthUser = Depends(require_admin),
):
    """Delete an organization with its projects, their tasks and all its documents."""
    await handler.execute(DeleteOrganizationCommand(organization_id=organization_id))
    return ApiResponse.ok(None, "Organization deleted")


@router.get("/{organization_id}/projects", response_model=PageResponse[ProjectDTO])
@inject
async def list_organization_projects(
    organization_id: str,
    handler: FromDishka[ListProjectsHandler],
    page: PageRequest = Depends(get_page_request),
    current_user: AuthUser = Depends(get_current_user),
):
    result = await handler.execute(
        ListProjectsQuery(page=page, organization_id=organization_id)
    )
    return PageResponse.from_page(result, ProjectDTO.from_entity)
