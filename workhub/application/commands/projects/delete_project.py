"""
Delete Project Command.

Cascade: the project's tasks, then its documents (and their comments),
then the project itself. Sequential writes with no rollback.
"""

from dataclasses import dataclass
from logging import getLogger

from workhub.application.common.interfaces import Command, CommandHandler
from workhub.domain.exceptions import EntityNotFoundError
from workhub.domain.ports.repositories import (
    CommentRepository,
    DocumentRepository,
    ProjectRepository,
    TaskRepository,
)

logger = getLogger(__name__)


@dataclass(frozen=True)
class DeleteProjectCommand(Command[bool]):
    project_id: str


class DeleteProjectHandler(CommandHandler[bool]):
    def __init__(
        self,
        project_repository: ProjectRepository,
        task_repository: TaskRepository,
        document_repository: DocumentRepository,
        comment_repository: CommentRepository,
    ):
        self._project_repository = project_repository
        self._task_repository = task_repository
        self._document_repository = document_repository
        self._comment_repository = comment_repository

    async def execute(self, command: DeleteProjectCommand) -> bool:
        project_id = command.project_id
        if not await self._project_repository.exists_by_id(project_id):
            raise EntityNotFoundError.for_id("Project", project_id)

        tasks_deleted = await self._task_repository.delete_by_project(project_id)
        for document_id in await self._document_repository.find_ids_by_project(project_id):
            await self._comment_repository.delete_by_document(document_id)
        documents_deleted = await self._document_repository.delete_by_project(project_id)
        deleted = await self._project_repository.delete(project_id)

        logger.info(
            "Deleted project %s (%d task(s), %d document(s))",
            project_id,
            tasks_deleted,
            documents_deleted,
        )
        return deleted
