"""Update Project Command (partial update)."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from logging import getLogger
from typing import Optional

from workhub.application.commands.projects.create_project import (
    DEFAULT_MEMBER_ROLE,
    check_date_range,
)
from workhub.application.common.interfaces import Command, CommandHandler
from workhub.domain.entities.project import Project, ProjectStatus
from workhub.domain.exceptions import DomainValidationError, EntityNotFoundError
from workhub.domain.ports.repositories import (
    OrganizationRepository,
    ProjectRepository,
    UserRepository,
)

logger = getLogger(__name__)


@dataclass(frozen=True)
class UpdateProjectCommand(Command[Project]):
    project_id: str
    name: Optional[str] = None
    description: Optional[str] = None
    organization_id: Optional[str] = None
    owner_id: Optional[str] = None
    status: Optional[ProjectStatus] = None
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    budget: Optional[Decimal] = None
    tags: Optional[tuple[str, ...]] = None
    team_members: Optional[tuple[tuple[str, str], ...]] = None


class UpdateProjectHandler(CommandHandler[Project]):
    def __init__(
        self,
        project_repository: ProjectRepository,
        organization_repository: OrganizationRepository,
        user_repository: UserRepository,
    ):
        self._project_repository = project_repository
        self._organization_repository = organization_repository
        self._user_repository = user_repository

    async def execute(self, command: UpdateProjectCommand) -> Project:
        project = await self._project_repository.get_by_id(command.project_id)
        if not project:
            raise EntityNotFoundError.for_id("Project", command.project_id)

        if (
            command.organization_id is not None
            and command.organization_id != project.organization_id
        ):
            if not await self._organization_repository.exists_by_id(
                command.organization_id
            ):
                raise EntityNotFoundError.for_id("Organization", command.organization_id)
            project.organization_id = command.organization_id

        if command.owner_id is not None and command.owner_id != project.owner_id:
            if not await self._user_repository.exists_by_id(command.owner_id):
                raise EntityNotFoundError.for_id("User", command.owner_id)
            project.owner_id = command.owner_id

        if command.team_members is not None:
            for user_id, _ in command.team_members:
                if not await self._user_repository.exists_by_id(user_id):
                    raise EntityNotFoundError.for_id("User", user_id)
            project.replace_team(
                [(user_id, role or DEFAULT_MEMBER_ROLE) for user_id, role in command.team_members]
            )

        if command.name is not None:
            if not command.name.strip():
                raise DomainValidationError("Project name must not be blank")
            project.name = command.name.strip()
        if command.description is not None:
            project.description = command.description
        if command.status is not None:
            project.status = command.status
        if command.start_date is not None:
            project.start_date = command.start_date
        if command.end_date is not None:
            project.end_date = command.end_date
        if command.budget is not None:
            project.budget = command.budget
        if command.tags is not None:
            project.tags = list(command.tags)
        check_date_range(project.start_date, project.end_date)

        project.touch()
        await self._project_repository.save(project)
        logger.info("Updated project %s", project.id)
        return project
