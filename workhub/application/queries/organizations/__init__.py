"""Organization queries."""

from .get_organization import GetOrganizationQuery, GetOrganizationHandler
from .list_organizations import ListOrganizationsQuery, ListOrganizationsHandler

__all__ = [
    "GetOrganizationQuery",
    "GetOrganizationHandler",
    "ListOrganizationsQuery",
    "ListOrganizationsHandler",
]
