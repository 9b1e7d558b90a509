"""Update Organization Command (partial update)."""

from dataclasses import dataclass
from logging import getLogger
from typing import Optional

from workhub.application.common.interfaces import Command, CommandHandler
from workhub.domain.entities.organization import Organization, OrganizationSettings
from workhub.domain.exceptions import EntityAlreadyExistsError, EntityNotFoundError
from workhub.domain.ports.repositories import OrganizationRepository

logger = getLogger(__name__)


@dataclass(frozen=True)
class UpdateOrganizationCommand(Command[Organization]):
    organization_id: str
    name: Optional[str] = None
    description: Optional[str] = None
    website: Optional[str] = None
    logo_url: Optional[str] = None
    settings: Optional[OrganizationSettings] = None
    active: Optional[bool] = None


class UpdateOrganizationHandler(CommandHandler[Organization]):
    def __init__(self, organization_repository: OrganizationRepository):
        self._organization_repository = organization_repository

    async def execute(self, command: UpdateOrganizationCommand) -> Organization:
        organization = await self._organization_repository.get_by_id(
            command.organization_id
        )
        if not organization:
            raise EntityNotFoundError.for_id("Organization", command.organization_id)

        # Uniqueness is only re-checked when the name actually changes
        if command.name is not None and command.name != organization.name:
            if await self._organization_repository.exists_by_name(command.name):
                raise EntityAlreadyExistsError(
                    f"Organization name already in use: {command.name}"
                )
            organization.rename(command.name)

        if command.description is not None:
            organization.description = command.description
        if command.website is not None:
            organization.website = command.website
        if command.logo_url is not None:
            organization.logo_url = command.logo_url
        if command.settings is not None:
            organization.settings = command.settings
        if command.active is not None:
            organization.active = command.active
        organization.touch()

        await self._organization_repository.save(organization)
        logger.info("Updated organization %s", organization.id)
        return organization
