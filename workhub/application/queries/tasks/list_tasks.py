"""
List Tasks Query.

Filters are exclusive, checked in this order: overdue flag, search term,
project, assignee, status, priority.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

from workhub.application.common.interfaces import Query, QueryHandler
from workhub.domain.entities.task import Task, TaskPriority, TaskStatus
from workhub.domain.exceptions import EntityNotFoundError
from workhub.domain.ports.repositories import ProjectRepository, TaskRepository
from workhub.domain.value_objects.page import Page, PageRequest


@dataclass(frozen=True)
class ListTasksQuery(Query[Page[Task]]):
    page: PageRequest
    overdue: bool = False
    search: Optional[str] = None
    project_id: Optional[str] = None
    assignee_id: Optional[str] = None
    status: Optional[TaskStatus] = None
    priority: Optional[TaskPriority] = None


class ListTasksHandler(QueryHandler[Page[Task]]):
    def __init__(
        self, task_repository: TaskRepository, project_repository: ProjectRepository
    ):
        self._task_repository = task_repository
        self._project_repository = project_repository

    async def execute(self, query: ListTasksQuery) -> Page[Task]:
        if query.overdue:
            return await self._task_repository.find_overdue(
                datetime.now(timezone.utc), query.page
            )
        if query.search:
            return await self._task_repository.search(query.search, query.page)
        if query.project_id:
            if not await self._project_repository.exists_by_id(query.project_id):
                raise EntityNotFoundError.for_id("Project", query.project_id)
            return await self._task_repository.find_by_project(query.project_id, query.page)
        if query.assignee_id:
            return await self._task_repository.find_by_assignee(query.assignee_id, query.page)
        if query.status:
            return await self._task_repository.find_by_status(query.status, query.page)
        if query.priority:
            return await self._task_repository.find_by_priority(query.priority, query.page)
        return await self._task_repository.find_all(query.page)
