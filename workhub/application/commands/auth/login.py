"""
Login Command.

Resolves the user by email (when the identifier contains "@") or by
username, verifies the password and opens a new session. Every failure
raises the same InvalidCredentialsError so callers cannot tell which
part was wrong.
"""

from dataclasses import dataclass
from logging import getLogger
from typing import Optional

from workhub.application.common.interfaces import Command, CommandHandler
from workhub.config.settings import Config
from workhub.domain.entities.session import Session
from workhub.domain.entities.user import User
from workhub.domain.exceptions import InvalidCredentialsError
from workhub.domain.ports.password_hasher import PasswordHasher
from workhub.domain.ports.repositories import SessionRepository, UserRepository
from workhub.domain.value_objects.email_address import EmailAddress

logger = getLogger(__name__)


@dataclass(frozen=True)
class LoginResult:
    user: User
    session: Session


@dataclass(frozen=True)
class LoginCommand(Command[LoginResult]):
    username_or_email: str
    password: str
    ip_address: Optional[str] = None
    user_agent: Optional[str] = None


class LoginHandler(CommandHandler[LoginResult]):
    def __init__(
        self,
        user_repository: UserRepository,
        session_repository: SessionRepository,
        password_hasher: PasswordHasher,
    ):
        self._user_repository = user_repository
        self._session_repository = session_repository
        self._password_hasher = password_hasher

    async def _find_user(self, identifier: str) -> Optional[User]:
        if "@" in identifier:
            try:
                email = EmailAddress(identifier)
            except ValueError:
                return None
            return await self._user_repository.get_by_email(email)
        return await self._user_repository.get_by_username(identifier)

    async def execute(self, command: LoginCommand) -> LoginResult:
        user = await self._find_user(command.username_or_email.strip())
        if (
            user is None
            or not user.active
            or not self._password_hasher.verify(user.password_hash, command.password)
        ):
            logger.warning("Rejected login for %r", command.username_or_email)
            raise InvalidCredentialsError()

        session = Session.start(
            user_id=user.id,
            ttl_minutes=Config.SESSION_TTL_MINUTES,
            token_bytes=Config.SESSION_TOKEN_BYTES,
            ip_address=command.ip_address,
            user_agent=command.user_agent,
        )
        await self._session_repository.save(session)

        user.record_login()
        await self._user_repository.save(user)

        logger.info("User %s logged in, session %s", user.id, session.id)
        return LoginResult(user=user, session=session)
