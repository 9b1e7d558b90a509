"""User and profile commands."""

from .create_user import CreateUserCommand, CreateUserHandler
from .update_user import UpdateUserCommand, UpdateUserHandler
from .delete_user import DeleteUserCommand, DeleteUserHandler
from .change_password import ChangePasswordCommand, ChangePasswordHandler
from .set_user_active import SetUserActiveCommand, SetUserActiveHandler
from .update_profile import UpdateProfileCommand, UpdateProfileHandler

__all__ = [
    "CreateUserCommand",
    "CreateUserHandler",
    "UpdateUserCommand",
    "UpdateUserHandler",
    "DeleteUserCommand",
    "DeleteUserHandler",
    "ChangePasswordCommand",
    "ChangePasswordHandler",
    "SetUserActiveCommand",
    "SetUserActiveHandler",
    "UpdateProfileCommand",
    "UpdateProfileHandler",
]
