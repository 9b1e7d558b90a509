"""Task counts per status for one project."""

from dataclasses import dataclass

from workhub.application.common.interfaces import Query, QueryHandler
from workhub.domain.entities.task import TaskStatus
from workhub.domain.exceptions import EntityNotFoundError
from workhub.domain.ports.repositories import ProjectRepository, TaskRepository


@dataclass(frozen=True)
class TaskStatistics:
    project_id: str
    total: int
    by_status: dict[str, int]


@dataclass(frozen=True)
class TaskStatisticsQuery(Query[TaskStatistics]):
    project_id: str


class TaskStatisticsHandler(QueryHandler[TaskStatistics]):
    def __init__(
        self, task_repository: TaskRepository, project_repository: ProjectRepository
    ):
        self._task_repository = task_repository
        self._project_repository = project_repository

    async def execute(self, query: TaskStatisticsQuery) -> TaskStatistics:
        if not await self._project_repository.exists_by_id(query.project_id):
            raise EntityNotFoundError.for_id("Project", query.project_id)

        by_status = {}
        for status in TaskStatus:
            by_status[status.value] = await self._task_repository.count_by_project_and_status(
                query.project_id, status
            )
        total = await self._task_repository.count_by_project(query.project_id)
        return TaskStatistics(project_id=query.project_id, total=total, by_status=by_status)
