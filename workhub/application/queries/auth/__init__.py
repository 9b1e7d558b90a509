"""Authentication queries."""

from .authenticate_session import (
    AuthenticatedSession,
    AuthenticateSessionHandler,
    AuthenticateSessionQuery,
)

__all__ = [
    "AuthenticatedSession",
    "AuthenticateSessionHandler",
    "AuthenticateSessionQuery",
]
