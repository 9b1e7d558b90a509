"""Get Organization Query."""

from dataclasses import dataclass

from workhub.application.common.interfaces import Query, QueryHandler
from workhub.domain.entities.organization import Organization
from workhub.domain.exceptions import EntityNotFoundError
from workhub.domain.ports.repositories import OrganizationRepository


@dataclass(frozen=True)
class GetOrganizationQuery(Query[Organization]):
    organization_id: str


class GetOrganizationHandler(QueryHandler[Organization]):
    def __init__(self, organization_repository: OrganizationRepository):
        self._organization_repository = organization_repository

    async def execute(self, query: GetOrganizationQuery) -> Organization:
        organization = await self._organization_repository.get_by_id(
            query.organization_id
        )
        if not organization:
            raise EntityNotFoundError.for_id("Organization", query.organization_id)
        return organization
