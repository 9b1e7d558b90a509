"""Projects whose end_date falls within the next N days and are not COMPLETED."""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from workhub.application.common.interfaces import Query, QueryHandler
from workhub.domain.entities.project import Project, ProjectStatus
from workhub.domain.exceptions import DomainValidationError
from workhub.domain.ports.repositories import ProjectRepository


@dataclass(frozen=True)
class ProjectsEndingSoonQuery(Query[list[Project]]):
    days: int = 7


class ProjectsEndingSoonHandler(QueryHandler[list[Project]]):
    def __init__(self, project_repository: ProjectRepository):
        self._project_repository = project_repository

    async def execute(self, query: ProjectsEndingSoonQuery) -> list[Project]:
        if query.days < 0:
            raise DomainValidationError("days must not be negative")
        deadline = datetime.now(timezone.utc) + timedelta(days=query.days)
        return await self._project_repository.find_ending_before(
            deadline, [ProjectStatus.COMPLETED]
        )
