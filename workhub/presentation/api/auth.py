"""
Auth API Router - registration, login/logout and session management.

Flow:
  POST /auth/login  -> LoginHandler        -> session token (opaque, stored)
  any other request -> get_current_user    -> AuthenticateSessionHandler
"""

from logging import getLogger
from typing import Optional

from dishka.integrations.fastapi import FromDishka, inject
from fastapi import APIRouter, Depends, Request, status
from pydantic import BaseModel, Field
from slowapi import Limiter
from slowapi.util import get_remote_address

from workhub.application.commands.auth import (
    ExtendSessionCommand,
    ExtendSessionHandler,
    LoginCommand,
    LoginHandler,
    LogoutCommand,
    LogoutHandler,
)
from workhub.application.commands.users import CreateUserCommand, CreateUserHandler
from workhub.application.dto import ApiResponse, SessionDTO, UserDTO
from workhub.application.queries.users import GetUserHandler, GetUserQuery
from workhub.config.settings import Config
from workhub.presentation.dependencies.auth import AuthUser, client_ip, get_current_user

logger = getLogger(__name__)

# Rate limiter for this router
limiter = Limiter(key_func=get_remote_address, enabled=Config.RATELIMIT_ENABLED)


# ==================== REQUEST/RESPONSE MODELS ====================


class RegisterRequest(BaseModel):
    username: str = Field(min_length=3, max_length=50)
    email: str
    password: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None


class LoginRequest(BaseModel):
    """``username_or_email`` containing '@' is looked up by email."""

    username_or_email: str = Field(min_length=1)
    password: str = Field(min_length=1)


class ExtendSessionRequest(BaseModel):
    minutes: int = Field(default=Config.SESSION_TTL_MINUTES, gt=0)


# ==================== ROUTER ====================

router = APIRouter(prefix="/api/v1/auth", tags=["auth"])


# ==================== ENDPOINTS ====================


@router.post(
    "/register",
    response_model=ApiResponse[UserDTO],
    status_code=status.HTTP_201_CREATED,
)
@inject
async def register(
    body: RegisterRequest,
    handler: FromDishka[CreateUserHandler],
):
    """Public self-registration. Always creates a plain USER."""
    user = await handler.execute(
        CreateUserCommand(
            username=body.username,
            email=body.email,
            password=body.password,
            first_name=body.first_name,
            last_name=body.last_name,
        )
    )
    return ApiResponse.ok(UserDTO.from_entity(user), "User registered")


@router.post("/login", response_model=ApiResponse[SessionDTO])
@limiter.limit(Config.LOGIN_RATE_LIMIT)
@inject
async def login(
    request: Request,
    body: LoginRequest,
    handler: FromDishka[LoginHandler],
):
    """
    Exchange credentials for a session token.

    Rate limited per client address (LOGIN_RATE_LIMIT).
    """
    result = await handler.execute(
        LoginCommand(
            username_or_email=body.username_or_email,
            password=body.password,
            ip_address=client_ip(request),
            user_agent=request.headers.get("User-Agent"),
        )
    )
    return ApiResponse.ok(SessionDTO.from_entity(result.session, result.user), "Login successful")


@router.post("/logout", response_model=ApiResponse[None])
@inject
async def logout(
    handler: FromDishka[LogoutHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    await handler.execute(LogoutCommand(token=current_user.token))
    return ApiResponse.ok(None, "Logged out")


@router.get("/me", response_model=ApiResponse[UserDTO])
@inject
async def me(
    handler: FromDishka[GetUserHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    user = await handler.execute(GetUserQuery(user_id=current_user.user_id))
    return ApiResponse.ok(UserDTO.from_entity(user))


@router.post("/extend", response_model=ApiResponse[SessionDTO])
@inject
async def extend_session(
    handler: FromDishka[ExtendSessionHandler],
    body: Optional[ExtendSessionRequest] = None,
    current_user: AuthUser = Depends(get_current_user),
):
    session = await handler.execute(
        ExtendSessionCommand(
            token=current_user.token,
            minutes=body.minutes if body else Config.SESSION_TTL_MINUTES,
        )
    )
    return ApiResponse.ok(SessionDTO.from_entity(session), "Session extended")
