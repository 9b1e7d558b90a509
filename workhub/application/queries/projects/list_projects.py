"""
List Projects Query.

Filters are exclusive, checked in this order: search term, organization,
status, member. With none given every project is listed.
"""

from dataclasses import dataclass
from typing import Optional

from workhub.application.common.interfaces import Query, QueryHandler
from workhub.domain.entities.project import Project, ProjectStatus
from workhub.domain.exceptions import EntityNotFoundError
from workhub.domain.ports.repositories import OrganizationRepository, ProjectRepository
from workhub.domain.value_objects.page import Page, PageRequest


@dataclass(frozen=True)
class ListProjectsQuery(Query[Page[Project]]):
    page: PageRequest
    search: Optional[str] = None
    organization_id: Optional[str] = None
    status: Optional[ProjectStatus] = None
    member_id: Optional[str] = None


class ListProjectsHandler(QueryHandler[Page[Project]]):
    def __init__(
        self,
        project_repository: ProjectRepository,
        organization_repository: OrganizationRepository,
    ):
        self._project_repository = project_repository
        self._organization_repository = organization_repository

    async def execute(self, query: ListProjectsQuery) -> Page[Project]:
        if query.search:
            return await self._project_repository.search(query.search, query.page)
        if query.organization_id:
            if not await self._organization_repository.exists_by_id(query.organization_id):
                raise EntityNotFoundError.for_id("Organization", query.organization_id)
            return await self._project_repository.find_by_organization(
                query.organization_id, query.page
            )
        if query.status:
            return await self._project_repository.find_by_status(query.status, query.page)
        if query.member_id:
            return await self._project_repository.find_by_member(query.member_id, query.page)
        return await self._project_repository.find_all(query.page)
