"""User and profile queries."""

from .get_user import GetUserQuery, GetUserHandler
from .list_users import ListUsersQuery, ListUsersHandler
from .get_profile import GetProfileQuery, GetProfileHandler

__all__ = [
    "GetUserQuery",
    "GetUserHandler",
    "ListUsersQuery",
    "ListUsersHandler",
    "GetProfileQuery",
    "GetProfileHandler",
]
