"""Create Task Command. The project and the assignee (if any) must exist."""

from dataclasses import dataclass
from datetime import datetime
from logging import getLogger
from typing import Optional

from workhub.application.common.interfaces import Command, CommandHandler
from workhub.application.common.notifier import Notifier
from workhub.domain.entities.notification import RelatedEntity
from workhub.domain.entities.task import Task, TaskPriority, TaskStatus
from workhub.domain.exceptions import DomainValidationError, EntityNotFoundError
from workhub.domain.ports.repositories import ProjectRepository, TaskRepository, UserRepository

logger = getLogger(__name__)


async def notify_assignment(notifier: Notifier, task: Task) -> None:
    if task.assignee_id:
        await notifier.notify(
            user_id=task.assignee_id,
            type="TASK_ASSIGNED",
            title="Task assigned",
            message=f"You were assigned the task '{task.title}'",
            related_to=RelatedEntity(type="Task", id=task.id),
        )


@dataclass(frozen=True)
class CreateTaskCommand(Command[Task]):
    project_id: str
    title: str
    description: Optional[str] = None
    status: TaskStatus = TaskStatus.TODO
    priority: TaskPriority = TaskPriority.MEDIUM
    assignee_id: Optional[str] = None
    due_date: Optional[datetime] = None
    estimated_hours: Optional[float] = None
    tags: tuple[str, ...] = ()
    created_by: Optional[str] = None


class CreateTaskHandler(CommandHandler[Task]):
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

    async def execute(self, command: CreateTaskCommand) -> Task:
        if not command.title or not command.title.strip():
            raise DomainValidationError("Task title must not be blank")
        if not await self._project_repository.exists_by_id(command.project_id):
            raise EntityNotFoundError.for_id("Project", command.project_id)
        if command.assignee_id and not await self._user_repository.exists_by_id(
            command.assignee_id
        ):
            raise EntityNotFoundError.for_id("User", command.assignee_id)

        task = Task.create(
            project_id=command.project_id,
            title=command.title.strip(),
            description=command.description,
            status=command.status,
            priority=command.priority,
            assignee_id=command.assignee_id,
            due_date=command.due_date,
            estimated_hours=command.estimated_hours,
            tags=list(command.tags),
            created_by=command.created_by,
        )
        await self._task_repository.save(task)
        await notify_assignment(self._notifier, task)
        logger.info("Created task %s in project %s", task.id, task.project_id)
        return task
