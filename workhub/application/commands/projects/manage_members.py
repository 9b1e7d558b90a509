"""
Project membership commands.

Adding an existing member and removing an absent one are both no-ops.
A newly added member gets a PROJECT_MEMBER_ADDED notification.
"""

from dataclasses import dataclass
from logging import getLogger

from workhub.application.commands.projects.create_project import DEFAULT_MEMBER_ROLE
from workhub.application.common.interfaces import Command, CommandHandler
from workhub.application.common.notifier import Notifier
from workhub.domain.entities.notification import RelatedEntity
from workhub.domain.entities.project import Project
from workhub.domain.exceptions import EntityNotFoundError
from workhub.domain.ports.repositories import ProjectRepository, UserRepository

logger = getLogger(__name__)


@dataclass(frozen=True)
class AddProjectMemberCommand(Command[Project]):
    project_id: str
    user_id: str
    role: str = DEFAULT_MEMBER_ROLE


@dataclass(frozen=True)
class RemoveProjectMemberCommand(Command[Project]):
    project_id: str
    user_id: str


class AddProjectMemberHandler(CommandHandler[Project]):
    def __init__(
        self,
        project_repository: ProjectRepository,
        user_repository: UserRepository,
        notifier: Notifier,
    ):
        self._project_repository = project_repository
        self._user_repository = user_repository
        self._notifier = notifier

    async def execute(self, command: AddProjectMemberCommand) -> Project:
        project = await self._project_repository.get_by_id(command.project_id)
        if not project:
            raise EntityNotFoundError.for_id("Project", command.project_id)
        if not await self._user_repository.exists_by_id(command.user_id):
            raise EntityNotFoundError.for_id("User", command.user_id)

        if project.add_member(command.user_id, command.role):
            await self._project_repository.save(project)
            await self._notifier.notify(
                user_id=command.user_id,
                type="PROJECT_MEMBER_ADDED",
                title="Added to project",
                message=f"You were added to project '{project.name}' as {command.role}",
                related_to=RelatedEntity(type="Project", id=project.id),
            )
            logger.info("Added user %s to project %s", command.user_id, project.id)
        return project


class RemoveProjectMemberHandler(CommandHandler[Project]):
    def __init__(
        self, project_repository: ProjectRepository, user_repository: UserRepository
    ):
        self._project_repository = project_repository
        self._user_repository = user_repository

    async def execute(self, command: RemoveProjectMemberCommand) -> Project:
        project = await self._project_repository.get_by_id(command.project_id)
        if not project:
            raise EntityNotFoundError.for_id("Project", command.project_id)
        if not await self._user_repository.exists_by_id(command.user_id):
            raise EntityNotFoundError.for_id("User", command.user_id)

        if project.remove_member(command.user_id):
            await self._project_repository.save(project)
            logger.info("Removed user %s from project %s", command.user_id, project.id)
        return project
