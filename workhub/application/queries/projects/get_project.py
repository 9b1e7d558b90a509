"""Get Project Query."""

from dataclasses import dataclass

from workhub.application.common.interfaces import Query, QueryHandler
from workhub.domain.entities.project import Project
from workhub.domain.exceptions import EntityNotFoundError
from workhub.domain.ports.repositories import ProjectRepository


@dataclass(frozen=True)
class GetProjectQuery(Query[Project]):
    project_id: str


class GetProjectHandler(QueryHandler[Project]):
    def __init__(self, project_repository: ProjectRepository):
        self._project_repository = project_repository

    async def execute(self, query: GetProjectQuery) -> Project:
        project = await self._project_repository.get_by_id(query.project_id)
        if not project:
            raise EntityNotFoundError.for_id("Project", query.project_id)
        return project
