"""Logout Command - marks the session inactive."""

from dataclasses import dataclass
from logging import getLogger

from workhub.application.common.interfaces import Command, CommandHandler
from workhub.domain.exceptions import InvalidCredentialsError
from workhub.domain.ports.repositories import SessionRepository

logger = getLogger(__name__)


@dataclass(frozen=True)
class LogoutCommand(Command[None]):
    token: str


class LogoutHandler(CommandHandler[None]):
    def __init__(self, session_repository: SessionRepository):
        self._session_repository = session_repository

    async def execute(self, command: LogoutCommand) -> None:
        session = await self._session_repository.get_by_token(command.token)
        if session is None:
            raise InvalidCredentialsError("Session not found")
        session.invalidate()
        await self._session_repository.save(session)
        logger.info("Session %s closed for user %s", session.id, session.user_id)
