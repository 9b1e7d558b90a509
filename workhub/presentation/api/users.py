"""
Users API Router - user administration, profiles and password changes.

Admin-only: create, delete, activate/deactivate, role changes, listing.
Self or admin: read, update, profile.
"""

from logging import getLogger
from typing import Optional

from dishka.integrations.fastapi import FromDishka, inject
from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel, Field

from workhub.application.commands.users import (
    ChangePasswordCommand,
    ChangePasswordHandler,
    CreateUserCommand,
    CreateUserHandler,
    DeleteUserCommand,
    DeleteUserHandler,
    SetUserActiveCommand,
    SetUserActiveHandler,
    UpdateProfileCommand,
    UpdateProfileHandler,
    UpdateUserCommand,
    UpdateUserHandler,
)
from workhub.application.dto import (
    AddressDTO,
    ApiResponse,
    OrderSummaryDTO,
    PageResponse,
    ProfileDTO,
    UserDTO,
)
from workhub.application.queries.orders import UserOrderSummaryHandler, UserOrderSummaryQuery
from workhub.application.queries.users import (
    GetProfileHandler,
    GetProfileQuery,
    GetUserHandler,
    GetUserQuery,
    ListUsersHandler,
    ListUsersQuery,
)
from workhub.domain.exceptions import AccessDeniedError
from workhub.domain.value_objects.page import PageRequest
from workhub.presentation.dependencies import (
    AuthUser,
    get_current_user,
    get_page_request,
    require_admin,
)

logger = getLogger(__name__)


# ==================== REQUEST/RESPONSE MODELS ====================


class CreateUserRequest(BaseModel):
    username: str = Field(min_length=3, max_length=50)
    email: str
    password: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    roles: list[str] = []
    organization_id: Optional[str] = None


class UpdateUserRequest(BaseModel):
    username: Optional[str] = Field(default=None, min_length=3, max_length=50)
    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    roles: Optional[list[str]] = None
    organization_id: Optional[str] = None


class ChangePasswordRequest(BaseModel):
    current_password: str
    new_password: str


class SetActiveRequest(BaseModel):
    active: bool


class UpdateProfileRequest(BaseModel):
    bio: Optional[str] = None
    avatar_url: Optional[str] = None
    phone_number: Optional[str] = None
    job_title: Optional[str] = None
    department: Optional[str] = None
    preferred_language: Optional[str] = None
    timezone: Optional[str] = None
    address: Optional[AddressDTO] = None
    social_links: Optional[dict[str, str]] = None


# ==================== ROUTER ====================

router = APIRouter(prefix="/api/v1/users", tags=["users"])


# ==================== ENDPOINTS ====================


@router.post("", response_model=ApiResponse[UserDTO], status_code=status.HTTP_201_CREATED)
@inject
async def create_user(
    request: CreateUserRequest,
    handler: FromDishka[CreateUserHandler],
    current_user: AuthUser = Depends(require_admin),
):
    user = await handler.execute(
        CreateUserCommand(
            username=request.username,
            email=request.email,
            password=request.password,
            first_name=request.first_name,
            last_name=request.last_name,
            roles=tuple(request.roles),
            organization_id=request.organization_id,
            actor=current_user.to_actor(),
        )
    )
    return ApiResponse.ok(UserDTO.from_entity(user), "User created")


@router.get("", response_model=PageResponse[UserDTO])
@inject
async def list_users(
    handler: FromDishka[ListUsersHandler],
    role: Optional[str] = None,
    organization_id: Optional[str] = None,
    search: Optional[str] = Query(None, alias="q"),
    page: PageRequest = Depends(get_page_request),
    current_user: AuthUser = Depends(require_admin),
):
    """List users; filters are applied one at a time (role, organization, search)."""
    result = await handler.execute(
        ListUsersQuery(page=page, role=role, organization_id=organization_id, search=search)
    )
    return PageResponse.from_page(result, UserDTO.from_entity)


@router.get("/by-username/{username}", response_model=ApiResponse[UserDTO])
@inject
async def get_user_by_username(
    username: str,
    handler: FromDishka[GetUserHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    user = await handler.execute(GetUserQuery(username=username))
    return ApiResponse.ok(UserDTO.from_entity(user))


@router.get("/by-email/{email}", response_model=ApiResponse[UserDTO])
@inject
async def get_user_by_email(
    email: str,
    handler: FromDishka[GetUserHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    user = await handler.execute(GetUserQuery(email=email))
    return ApiResponse.ok(UserDTO.from_entity(user))


@router.get("/{user_id}", response_model=ApiResponse[UserDTO])
@inject
async def get_user(
    user_id: str,
    handler: FromDishka[GetUserHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    user = await handler.execute(GetUserQuery(user_id=user_id))
    return ApiResponse.ok(UserDTO.from_entity(user))


@router.put("/{user_id}", response_model=ApiResponse[UserDTO])
@inject
async def update_user(
    user_id: str,
    request: UpdateUserRequest,
    handler: FromDishka[UpdateUserHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    current_user.ensure_self_or_admin(user_id)
    if request.roles is not None and not current_user.is_admin:
        raise AccessDeniedError("Only administrators can change roles")

    user = await handler.execute(
        UpdateUserCommand(
            user_id=user_id,
            username=request.username,
            email=request.email,
            first_name=request.first_name,
            last_name=request.last_name,
            roles=tuple(request.roles) if request.roles is not None else None,
            organization_id=request.organization_id,
            actor=current_user.to_actor(),
        )
    )
    return ApiResponse.ok(UserDTO.from_entity(user), "User updated")


@router.delete("/{user_id}", response_model=ApiResponse[None])
@inject
async def delete_user(
    user_id: str,
    handler: FromDishka[DeleteUserHandler],
    current_user: AuthUser = Depends(require_admin),
):
    await handler.execute(DeleteUserCommand(user_id=user_id, actor=current_user.to_actor()))
    return ApiResponse.ok(None, "User deleted")


@router.patch("/{user_id}/active", response_model=ApiResponse[UserDTO])
@inject
async def set_user_active(
    user_id: str,
    request: SetActiveRequest,
    handler: FromDishka[SetUserActiveHandler],
    current_user: AuthUser = Depends(require_admin),
):
    user = await handler.execute(
        SetUserActiveCommand(
            user_id=user_id, active=request.active, actor=current_user.to_actor()
        )
    )
    return ApiResponse.ok(
        UserDTO.from_entity(user), "User activated" if user.active else "User deactivated"
    )


@router.post("/{user_id}/password", response_model=ApiResponse[None])
@inject
async def change_password(
    user_id: str,
    request: ChangePasswordRequest,
    handler: FromDishka[ChangePasswordHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    """Change own password. Every other session of the user is invalidated."""
    if user_id != current_user.user_id:
        raise AccessDeniedError("You can only change your own password")

    await handler.execute(
        ChangePasswordCommand(
            user_id=user_id,
            current_password=request.current_password,
            new_password=request.new_password,
            keep_session_id=current_user.session_id,
            actor=current_user.to_actor(),
        )
    )
    return ApiResponse.ok(None, "Password changed")


@router.get("/{user_id}/profile", response_model=ApiResponse[ProfileDTO])
@inject
async def get_profile(
    user_id: str,
    handler: FromDishka[GetProfileHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    profile = await handler.execute(GetProfileQuery(user_id=user_id))
    return ApiResponse.ok(ProfileDTO.from_entity(profile))


@router.put("/{user_id}/profile", response_model=ApiResponse[ProfileDTO])
@inject
async def update_profile(
    user_id: str,
    request: UpdateProfileRequest,
    handler: FromDishka[UpdateProfileHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    current_user.ensure_self_or_admin(user_id)
    profile = await handler.execute(
        UpdateProfileCommand(
            user_id=user_id,
            bio=request.bio,
            avatar_url=request.avatar_url,
            phone_number=request.phone_number,
            job_title=request.job_title,
            department=request.department,
            preferred_language=request.preferred_language,
            timezone=request.timezone,
            address=request.address.to_value() if request.address else None,
            social_links=request.social_links,
        )
    )
    return ApiResponse.ok(ProfileDTO.from_entity(profile), "Profile updated")


@router.get("/{user_id}/order-summary", response_model=ApiResponse[OrderSummaryDTO])
@inject
async def get_order_summary(
    user_id: str,
    handler: FromDishka[UserOrderSummaryHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    current_user.ensure_self_or_admin(user_id)
    summary = await handler.execute(UserOrderSummaryQuery(user_id=user_id))
    return ApiResponse.ok(OrderSummaryDTO.from_result(summary))
