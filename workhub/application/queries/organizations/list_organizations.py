"""List / search Organizations Query."""

from dataclasses import dataclass
from typing import Optional

from workhub.application.common.interfaces import Query, QueryHandler
from workhub.domain.entities.organization import Organization
from workhub.domain.ports.repositories import OrganizationRepository
from workhub.domain.value_objects.page import Page, PageRequest


@dataclass(frozen=True)
class ListOrganizationsQuery(Query[Page[Organization]]):
    page: PageRequest
    name_contains: Optional[str] = None


class ListOrganizationsHandler(QueryHandler[Page[Organization]]):
    def __init__(self, organization_repository: OrganizationRepository):
        self._organization_repository = organization_repository

    async def execute(self, query: ListOrganizationsQuery) -> Page[Organization]:
        if query.name_contains:
            return await self._organization_repository.search_by_name(
                query.name_contains, query.page
            )
        return await self._organization_repository.find_all(query.page)
