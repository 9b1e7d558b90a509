"""Get Profile Query."""

from dataclasses import dataclass

from workhub.application.common.interfaces import Query, QueryHandler
from workhub.domain.entities.profile import Profile
from workhub.domain.exceptions import EntityNotFoundError
from workhub.domain.ports.repositories import ProfileRepository


@dataclass(frozen=True)
class GetProfileQuery(Query[Profile]):
    user_id: str


class GetProfileHandler(QueryHandler[Profile]):
    def __init__(self, profile_repository: ProfileRepository):
        self._profile_repository = profile_repository

    async def execute(self, query: GetProfileQuery) -> Profile:
        profile = await self._profile_repository.get_by_user_id(query.user_id)
        if not profile:
            raise EntityNotFoundError(f"Profile not found for user: {query.user_id}")
        return profile
