"""
Delete Organization Command.

Cascade order:
1. For every project of the organization: delete its tasks, its documents'
   comments and its documents
2. Delete the organization's projects
3. Delete documents still attached to the organization (and their comments)
4. Delete the organization

Each step is an independent write. A failure part-way leaves the earlier
deletions in place.
"""

from dataclasses import dataclass
from logging import getLogger

from workhub.application.common.interfaces import Command, CommandHandler
from workhub.domain.exceptions import EntityNotFoundError
from workhub.domain.ports.repositories import (
    CommentRepository,
    DocumentRepository,
    OrganizationRepository,
    ProjectRepository,
    TaskRepository,
)

logger = getLogger(__name__)


@dataclass(frozen=True)
class DeleteOrganizationCommand(Command[bool]):
    organization_id: str


class DeleteOrganizationHandler(CommandHandler[bool]):
    def __init__(
        self,
        organization_repository: OrganizationRepository,
        project_repository: ProjectRepository,
        task_repository: TaskRepository,
        document_repository: DocumentRepository,
        comment_repository: CommentRepository,
    ):
        self._organization_repository = organization_repository
        self._project_repository = project_repository
        self._task_repository = task_repository
        self._document_repository = document_repository
        self._comment_repository = comment_repository

    async def execute(self, command: DeleteOrganizationCommand) -> bool:
        organization_id = command.organization_id
        if not await self._organization_repository.exists_by_id(organization_id):
            raise EntityNotFoundError.for_id("Organization", organization_id)

        project_ids = await self._project_repository.find_ids_by_organization(
            organization_id
        )
        for project_id in project_ids:
            await self._task_repository.delete_by_project(project_id)
            for document_id in await self._document_repository.find_ids_by_project(
                project_id
            ):
                await self._comment_repository.delete_by_document(document_id)
            await self._document_repository.delete_by_project(project_id)
        await self._project_repository.delete_by_organization(organization_id)

        for document_id in await self._document_repository.find_ids_by_organization(
            organization_id
        ):
            await self._comment_repository.delete_by_document(document_id)
        await self._document_repository.delete_by_organization(organization_id)

        deleted = await self._organization_repository.delete(organization_id)
        logger.info(
            "Deleted organization %s with %d project(s)", organization_id, len(project_ids)
        )
        return deleted
