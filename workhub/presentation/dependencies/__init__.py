from workhub.presentation.dependencies.auth import (
    AuthUser,
    client_ip,
    get_current_user,
    require_admin,
    require_manager,
    require_roles,
)
from workhub.presentation.dependencies.pagination import get_page_request

__all__ = [
    "AuthUser",
    "client_ip",
    "get_current_user",
    "require_admin",
    "require_manager",
    "require_roles",
    "get_page_request",
]
