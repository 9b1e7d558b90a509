"""
Authenticate Session Query.

A token is accepted only when its session exists, is active and has not
reached expires_at, and the owning user exists and is active. Expired
records are rejected even if the TTL monitor has not removed them yet.
"""

from dataclasses import dataclass
from logging import getLogger

from workhub.application.common.interfaces import Query, QueryHandler
from workhub.domain.entities.session import Session
from workhub.domain.entities.user import User
from workhub.domain.exceptions import InvalidCredentialsError
from workhub.domain.ports.repositories import SessionRepository, UserRepository

logger = getLogger(__name__)


@dataclass(frozen=True)
class AuthenticatedSession:
    user: User
    session: Session


@dataclass(frozen=True)
class AuthenticateSessionQuery(Query[AuthenticatedSession]):
    token: str


class AuthenticateSessionHandler(QueryHandler[AuthenticatedSession]):
    def __init__(
        self, session_repository: SessionRepository, user_repository: UserRepository
    ):
        self._session_repository = session_repository
        self._user_repository = user_repository

    async def execute(self, query: AuthenticateSessionQuery) -> AuthenticatedSession:
        session = await self._session_repository.get_by_token(query.token)
        if session is None:
            raise InvalidCredentialsError("Invalid session token")
        if not session.active:
            raise InvalidCredentialsError("Session has been closed")
        if session.is_expired():
            logger.debug("Rejected expired session %s", session.id)
            raise InvalidCredentialsError("Session has expired")

        user = await self._user_repository.get_by_id(session.user_id)
        if user is None or not user.active:
            raise InvalidCredentialsError("User is inactive or no longer exists")

        session.mark_activity()
        await self._session_repository.save(session)
        return AuthenticatedSession(user=user, session=session)
