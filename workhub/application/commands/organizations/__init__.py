"""Organization commands."""

from .create_organization import CreateOrganizationCommand, CreateOrganizationHandler
from .update_organization import UpdateOrganizationCommand, UpdateOrganizationHandler
from .delete_organization import DeleteOrganizationCommand, DeleteOrganizationHandler

__all__ = [
    "CreateOrganizationCommand",
    "CreateOrganizationHandler",
    "UpdateOrganizationCommand",
    "UpdateOrganizationHandler",
    "DeleteOrganizationCommand",
    "DeleteOrganizationHandler",
]
