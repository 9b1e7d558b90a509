"""
List Users Query.

Filters are exclusive, checked in this order: search term, role, organization.
"""

from dataclasses import dataclass
from typing import Optional

from workhub.application.common.interfaces import Query, QueryHandler
from workhub.domain.entities.user import Role, User
from workhub.domain.exceptions import DomainValidationError, EntityNotFoundError
from workhub.domain.ports.repositories import OrganizationRepository, UserRepository
from workhub.domain.value_objects.page import Page, PageRequest


@dataclass(frozen=True)
class ListUsersQuery(Query[Page[User]]):
    page: PageRequest
    role: Optional[str] = None
    organization_id: Optional[str] = None
    search: Optional[str] = None


class ListUsersHandler(QueryHandler[Page[User]]):
    def __init__(
        self,
        user_repository: UserRepository,
        organization_repository: OrganizationRepository,
    ):
        self._user_repository = user_repository
        self._organization_repository = organization_repository

    async def execute(self, query: ListUsersQuery) -> Page[User]:
        if query.search:
            return await self._user_repository.search(query.search, query.page)
        if query.role:
            if query.role not in {role.value for role in Role}:
                raise DomainValidationError(f"Invalid role: {query.role}")
            return await self._user_repository.find_by_role(query.role, query.page)
        if query.organization_id:
            if not await self._organization_repository.exists_by_id(query.organization_id):
                raise EntityNotFoundError.for_id("Organization", query.organization_id)
            return await self._user_repository.find_by_organization(
                query.organization_id, query.page
            )
        return await self._user_repository.find_all(query.page)
