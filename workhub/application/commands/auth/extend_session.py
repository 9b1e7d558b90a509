"""Extend Session Command - pushes expires_at forward on a valid session."""

from dataclasses import dataclass
from logging import getLogger

from workhub.application.common.interfaces import Command, CommandHandler
from workhub.domain.entities.session import Session
from workhub.domain.exceptions import DomainValidationError, InvalidCredentialsError
from workhub.domain.ports.repositories import SessionRepository

logger = getLogger(__name__)


@dataclass(frozen=True)
class ExtendSessionCommand(Command[Session]):
    token: str
    minutes: int


class ExtendSessionHandler(CommandHandler[Session]):
    def __init__(self, session_repository: SessionRepository):
        self._session_repository = session_repository

    async def execute(self, command: ExtendSessionCommand) -> Session:
        if command.minutes <= 0:
            raise DomainValidationError("Extension must be a positive number of minutes")

        session = await self._session_repository.get_by_token(command.token)
        if session is None or not session.is_valid():
            raise InvalidCredentialsError("Session is invalid or expired")

        session.extend(command.minutes)
        session.mark_activity()
        await self._session_repository.save(session)
        logger.info("Session %s extended to %s", session.id, session.expires_at.isoformat())
        return session
