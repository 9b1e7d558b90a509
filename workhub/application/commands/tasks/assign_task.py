"""Assign Task Command. The assignee is notified."""

from dataclasses import dataclass
from logging import getLogger

from workhub.application.commands.tasks.create_task import notify_assignment
from workhub.application.common.interfaces import Command, CommandHandler
from workhub.application.common.notifier import Notifier
from workhub.domain.entities.task import Task
from workhub.domain.exceptions import EntityNotFoundError
from workhub.domain.ports.repositories import TaskRepository, UserRepository

logger = getLogger(__name__)


@dataclass(frozen=True)
class AssignTaskCommand(Command[Task]):
    task_id: str
    assignee_id: str


class AssignTaskHandler(CommandHandler[Task]):
    def __init__(
        self,
        task_repository: TaskRepository,
        user_repository: UserRepository,
        notifier: Notifier,
    ):
        self._task_repository = task_repository
        self._user_repository = user_repository
        self._notifier = notifier

    async def execute(self, command: AssignTaskCommand) -> Task:
        task = await self._task_repository.get_by_id(command.task_id)
        if not task:
            raise EntityNotFoundError.for_id("Task", command.task_id)
        if not await self._user_repository.exists_by_id(command.assignee_id):
            raise EntityNotFoundError.for_id("User", command.assignee_id)

        task.assign(command.assignee_id)
        await self._task_repository.save(task)
        await notify_assignment(self._notifier, task)
        logger.info("Task %s assigned to %s", task.id, command.assignee_id)
        return task
