"""Get Task Query."""

from dataclasses import dataclass

from workhub.application.common.interfaces import Query, QueryHandler
from workhub.domain.entities.task import Task
from workhub.domain.exceptions import EntityNotFoundError
from workhub.domain.ports.repositories import TaskRepository


@dataclass(frozen=True)
class GetTaskQuery(Query[Task]):
    task_id: str


class GetTaskHandler(QueryHandler[Task]):
    def __init__(self, task_repository: TaskRepository):
        self._task_repository = task_repository

    async def execute(self, query: GetTaskQuery) -> Task:
        task = await self._task_repository.get_by_id(query.task_id)
        if not task:
            raise EntityNotFoundError.for_id("Task", query.task_id)
        return task
