"""Update Task Status Command. No transition guard."""

from dataclasses import dataclass
from logging import getLogger

from workhub.application.common.interfaces import Command, CommandHandler
from workhub.domain.entities.task import Task, TaskStatus
from workhub.domain.exceptions import EntityNotFoundError
from workhub.domain.ports.repositories import TaskRepository

logger = getLogger(__name__)


@dataclass(frozen=True)
class UpdateTaskStatusCommand(Command[Task]):
    task_id: str
    status: TaskStatus


class UpdateTaskStatusHandler(CommandHandler[Task]):
    def __init__(self, task_repository: TaskRepository):
        self._task_repository = task_repository

    async def execute(self, command: UpdateTaskStatusCommand) -> Task:
        task = await self._task_repository.get_by_id(command.task_id)
        if not task:
            raise EntityNotFoundError.for_id("Task", command.task_id)
        task.change_status(command.status)
        await self._task_repository.save(task)
        logger.info("Task %s status -> %s", task.id, command.status.value)
        return task
