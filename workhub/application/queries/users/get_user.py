"""Get User Query - by id, email or username (exactly one)."""

from dataclasses import dataclass
from logging import getLogger
from typing import Optional

from workhub.application.commands.users.create_user import parse_email
from workhub.application.common.interfaces import Query, QueryHandler
from workhub.domain.entities.user import User
from workhub.domain.exceptions import DomainValidationError, EntityNotFoundError
from workhub.domain.ports.repositories import UserRepository

logger = getLogger(__name__)


@dataclass(frozen=True)
class GetUserQuery(Query[User]):
    user_id: Optional[str] = None
    email: Optional[str] = None
    username: Optional[str] = None


class GetUserHandler(QueryHandler[User]):
    def __init__(self, user_repository: UserRepository):
        self._user_repository = user_repository

    async def execute(self, query: GetUserQuery) -> User:
        if query.user_id:
            user = await self._user_repository.get_by_id(query.user_id)
            missing = f"User not found with id: {query.user_id}"
        elif query.email:
            email = parse_email(query.email)
            user = await self._user_repository.get_by_email(email)
            missing = f"User not found with email: {email.value}"
        elif query.username:
            user = await self._user_repository.get_by_username(query.username)
            missing = f"User not found with username: {query.username}"
        else:
            raise DomainValidationError("One of user_id, email or username is required")

        if not user:
            raise EntityNotFoundError(missing)
        logger.debug("Loaded user %s", user.id)
        return user
