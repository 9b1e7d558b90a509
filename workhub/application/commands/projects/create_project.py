"""
Create Project Command.

Every reference is checked before anything is written: the organization,
the owner and each team member must exist, and start_date may not come
after end_date.
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from logging import getLogger
from typing import Optional

from workhub.application.common.interfaces import Command, CommandHandler
from workhub.domain.entities.project import Project, ProjectStatus
from workhub.domain.exceptions import DomainValidationError, EntityNotFoundError
from workhub.domain.ports.repositories import (
    OrganizationRepository,
    ProjectRepository,
    UserRepository,
)

logger = getLogger(__name__)

DEFAULT_MEMBER_ROLE = "MEMBER"


def check_date_range(start: Optional[datetime], end: Optional[datetime]) -> None:
    if start and end and start > end:
        raise DomainValidationError("Project start date must not be after its end date")


@dataclass(frozen=True)
class CreateProjectCommand(Command[Project]):
    name: str
    organization_id: str
    description: Optional[str] = None
    owner_id: Optional[str] = None
    status: ProjectStatus = ProjectStatus.PLANNING
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    budget: Optional[Decimal] = None
    tags: tuple[str, ...] = ()
    # (user_id, role) pairs
    team_members: tuple[tuple[str, str], ...] = ()


class CreateProjectHandler(CommandHandler[Project]):
    def __init__(
        self,
        project_repository: ProjectRepository,
        organization_repository: OrganizationRepository,
        user_repository: UserRepository,
    ):
        self._project_repository = project_repository
        self._organization_repository = organization_repository
        self._user_repository = user_repository

    async def execute(self, command: CreateProjectCommand) -> Project:
        if not command.name or not command.name.strip():
            raise DomainValidationError("Project name must not be blank")
        if not await self._organization_repository.exists_by_id(command.organization_id):
            raise EntityNotFoundError.for_id("Organization", command.organization_id)
        if command.owner_id and not await self._user_repository.exists_by_id(
            command.owner_id
        ):
            raise EntityNotFoundError.for_id("User", command.owner_id)
        for user_id, _ in command.team_members:
            if not await self._user_repository.exists_by_id(user_id):
                raise EntityNotFoundError.for_id("User", user_id)
        check_date_range(command.start_date, command.end_date)

        project = Project.create(
            name=command.name.strip(),
            organization_id=command.organization_id,
            description=command.description,
            owner_id=command.owner_id,
            status=command.status,
            start_date=command.start_date,
            end_date=command.end_date,
            budget=command.budget,
            tags=list(command.tags),
        )
        for user_id, role in command.team_members:
            project.add_member(user_id, role or DEFAULT_MEMBER_ROLE)

        await self._project_repository.save(project)
        logger.info(
            "Created project %s in organization %s", project.id, project.organization_id
        )
        return project
