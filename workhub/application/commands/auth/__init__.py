"""Authentication commands."""

from .login import LoginCommand, LoginHandler, LoginResult
from .logout import LogoutCommand, LogoutHandler
from .extend_session import ExtendSessionCommand, ExtendSessionHandler

__all__ = [
    "LoginCommand",
    "LoginHandler",
    "LoginResult",
    "LogoutCommand",
    "LogoutHandler",
    "ExtendSessionCommand",
    "ExtendSessionHandler",
]
