"""
List Documents Query.

Filters are exclusive, checked in this order: search term, project,
organization, type.
"""

from dataclasses import dataclass
from typing import Optional

from workhub.application.common.interfaces import Query, QueryHandler
from workhub.domain.entities.document import Document
from workhub.domain.exceptions import EntityNotFoundError
from workhub.domain.ports.repositories import (
    DocumentRepository,
    OrganizationRepository,
    ProjectRepository,
)
from workhub.domain.value_objects.page import Page, PageRequest


@dataclass(frozen=True)
class ListDocumentsQuery(Query[Page[Document]]):
    page: PageRequest
    search: Optional[str] = None
    project_id: Optional[str] = None
    organization_id: Optional[str] = None
    type: Optional[str] = None


class ListDocumentsHandler(QueryHandler[Page[Document]]):
    def __init__(
        self,
        document_repository: DocumentRepository,
        project_repository: ProjectRepository,
        organization_repository: OrganizationRepository,
    ):
        self._document_repository = document_repository
        self._project_repository = project_repository
        self._organization_repository = organization_repository

    async def execute(self, query: ListDocumentsQuery) -> Page[Document]:
        if query.search:
            return await self._document_repository.search(query.search, query.page)
        if query.project_id:
            if not await self._project_repository.exists_by_id(query.project_id):
                raise EntityNotFoundError.for_id("Project", query.project_id)
            return await self._document_repository.find_by_project(
                query.project_id, query.page
            )
        if query.organization_id:
            if not await self._organization_repository.exists_by_id(query.organization_id):
                raise EntityNotFoundError.for_id("Organization", query.organization_id)
            return await self._document_repository.find_by_organization(
                query.organization_id, query.page
            )
        if query.type:
            return await self._document_repository.find_by_type(query.type, query.page)
        return await self._document_repository.find_all(query.page)
