"""
Authentication Dependencies for FastAPI.

Guidelines:
- Extracts the opaque session token from the Authorization header (Bearer scheme)
- Resolves it through AuthenticateSessionHandler from the request's DI container
- Raises InvalidCredentialsError (401) / AccessDeniedError (403); the app's
  exception handlers turn them into the response envelope
"""

from dataclasses import dataclass
from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from workhub.application.common.actor import Actor
from workhub.application.queries.auth import (
    AuthenticateSessionHandler,
    AuthenticateSessionQuery,
)
from workhub.domain.entities.user import Role
from workhub.domain.exceptions import AccessDeniedError, InvalidCredentialsError


@dataclass(frozen=True)
class AuthUser:
    user_id: str
    username: str
    roles: tuple[str, ...]
    session_id: str
    token: str
    ip_address: Optional[str] = None
    user_agent: Optional[str] = None

    @property
    def is_admin(self) -> bool:
        return Role.ADMIN.value in self.roles

    def has_any_role(self, *roles: str) -> bool:
        return any(role in self.roles for role in roles)

    def to_actor(self) -> Actor:
        return Actor(
            user_id=self.user_id,
            roles=self.roles,
            ip_address=self.ip_address,
            user_agent=self.user_agent,
        )

    def ensure_self_or_admin(self, user_id: str) -> None:
        if user_id != self.user_id and not self.is_admin:
            raise AccessDeniedError("You can only access your own resources")


# auto_error=False so a missing header becomes InvalidCredentialsError (401)
security = HTTPBearer(auto_error=False)


def client_ip(request: Request) -> Optional[str]:
    forwarded = request.headers.get("X-Forwarded-For")
    if forwarded:
        return forwarded.split(",")[0].strip()
    return request.client.host if request.client else None


async def get_current_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> AuthUser:
    """
    Validate the bearer token against the session store.

    Raises:
        InvalidCredentialsError if the token is missing, unknown, inactive or expired
    """
    if credentials is None or not credentials.credentials:
        raise InvalidCredentialsError("Missing bearer token")

    handler = await request.state.dishka_container.get(AuthenticateSessionHandler)
    result = await handler.execute(AuthenticateSessionQuery(token=credentials.credentials))

    return AuthUser(
        user_id=result.user.id,
        username=result.user.username,
        roles=tuple(result.user.roles),
        session_id=result.session.id,
        token=result.session.token,
        ip_address=client_ip(request),
        user_agent=request.headers.get("User-Agent"),
    )


def require_roles(*roles: Role):
    """Dependency factory: the current user must hold at least one of ``roles``."""
    allowed = tuple(role.value for role in roles)

    async def checker(current_user: AuthUser = Depends(get_current_user)) -> AuthUser:
        if not current_user.has_any_role(*allowed):
            raise AccessDeniedError(
                f"Requires one of roles: {', '.join(allowed)}", required_roles=allowed
            )
        return current_user

    return checker


require_admin = require_roles(Role.ADMIN)
require_manager = require_roles(Role.ADMIN, Role.MANAGER)
