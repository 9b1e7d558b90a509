"""Update Task Command (partial update)."""

from dataclasses import dataclass
from datetime import datetime
from logging import getLogger
from typing import Optional

from workhub.application.commands.tasks.create_task import notify_assignment
from workhub.application.common.interfaces import Command, CommandHandler
from workhub.application.common.notifier import Notifier
from workhub.domain.entities.task import Task, TaskPriority, TaskStatus
from workhub.domain.exceptions import DomainValidationError, EntityNotFoundError
from workhub.domain.ports.repositories import ProjectRepository, TaskRepository, UserRepository

logger = getLogger(__name__)


@dataclass(frozen=True)
class UpdateTaskCommand(Command[Task]):
    task_id: str
    project_id: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None
    status: Optional[TaskStatus] = None
    priority: Optional[TaskPriority] = None
    assignee_id: Optional[str] = None
    due_date: Optional[datetime] = None
    estimated_hours: Optional[float] = None
    actual_hours: Optional[float] = None
    tags: Optional[tuple[str, ...]] = None


class UpdateTaskHandler(CommandHandler[Task]):
    def __init__(
        self,
        task_repository: TaskRepository,
        project_repository: ProjectRepository,
        user_repository: UserRepository,
        notifier: Notifier,
    ):
        self._task_repository = task_repository
        self._project_repository = project_repository
        self._user_repository = user_repository
        self._notifier = notifier

    async def execute(self, command: UpdateTaskCommand) -> Task:
        task = await self._task_repository.get_by_id(command.task_id)
        if not task:
            raise EntityNotFoundError.for_id("Task", command.task_id)

        if command.project_id is not None and command.project_id != task.project_id:
            if not await self._project_repository.exists_by_id(command.project_id):
                raise EntityNotFoundError.for_id("Project", command.project_id)
            task.project_id = command.project_id

        reassigned = False
        if command.assignee_id is not None and command.assignee_id != task.assignee_id:
            if not await self._user_repository.exists_by_id(command.assignee_id):
                raise EntityNotFoundError.for_id("User", command.assignee_id)
            task.assignee_id = command.assignee_id
            reassigned = True

        if command.title is not None:
            if not command.title.strip():
                raise DomainValidationError("Task title must not be blank")
            task.title = command.title.strip()
        if command.description is not None:
            task.description = command.description
        if command.status is not None:
            task.status = command.status
        if command.priority is not None:
            task.priority = command.priority
        if command.due_date is not None:
            task.due_date = command.due_date
        if command.estimated_hours is not None:
            task.estimated_hours = command.estimated_hours
        if command.actual_hours is not None:
            task.actual_hours = command.actual_hours
        if command.tags is not None:
            task.tags = list(command.tags)

        task.touch()
        await self._task_repository.save(task)
        if reassigned:
            await notify_assignment(self._notifier, task)
        logger.info("Updated task %s", task.id)
        return task
