"""Delete Task Command."""

from dataclasses import dataclass
from logging import getLogger

from workhub.application.common.interfaces import Command, CommandHandler
from workhub.domain.exceptions import EntityNotFoundError
from workhub.domain.ports.repositories import TaskRepository

logger = getLogger(__name__)


@dataclass(frozen=True)
class DeleteTaskCommand(Command[bool]):
    task_id: str


class DeleteTaskHandler(CommandHandler[bool]):
    def __init__(self, task_repository: TaskRepository):
        self._task_repository = task_repository

    async def execute(self, command: DeleteTaskCommand) -> bool:
        if not await self._task_repository.get_by_id(command.task_id):
            raise EntityNotFoundError.for_id("Task", command.task_id)
        deleted = await self._task_repository.delete(command.task_id)
        logger.info("Deleted task %s", command.task_id)
        return deleted
