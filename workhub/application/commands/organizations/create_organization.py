"""
Create Organization Command.

Organization names are unique; the slug is derived from the name.
"""

from dataclasses import dataclass
from logging import getLogger
from typing import Optional

from workhub.application.common.interfaces import Command, CommandHandler
from workhub.domain.entities.organization import Organization, OrganizationSettings
from workhub.domain.exceptions import EntityAlreadyExistsError, EntityNotFoundError
from workhub.domain.ports.repositories import OrganizationRepository, UserRepository

logger = getLogger(__name__)


@dataclass(frozen=True)
class CreateOrganizationCommand(Command[Organization]):
    name: str
    description: Optional[str] = None
    website: Optional[str] = None
    logo_url: Optional[str] = None
    owner_id: Optional[str] = None
    settings: Optional[OrganizationSettings] = None


class CreateOrganizationHandler(CommandHandler[Organization]):
    def __init__(
        self,
        organization_repository: OrganizationRepository,
        user_repository: UserRepository,
    ):
        self._organization_repository = organization_repository
        self._user_repository = user_repository

    async def execute(self, command: CreateOrganizationCommand) -> Organization:
        if await self._organization_repository.exists_by_name(command.name):
            raise EntityAlreadyExistsError(
                f"Organization name already in use: {command.name}"
            )
        if command.owner_id and not await self._user_repository.exists_by_id(
            command.owner_id
        ):
            raise EntityNotFoundError.for_id("User", command.owner_id)

        organization = Organization.create(
            name=command.name,
            description=command.description,
            website=command.website,
            logo_url=command.logo_url,
            owner_id=command.owner_id,
            settings=command.settings,
        )
        await self._organization_repository.save(organization)
        logger.info("Created organization %s (%s)", organization.id, organization.name)
        return organization
