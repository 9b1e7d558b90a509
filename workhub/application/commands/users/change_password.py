"""
Change Password Command.

The current password must verify. Every other session of the user is
invalidated; the session that issued the change (if given) stays valid.
"""

from dataclasses import dataclass
from logging import getLogger
from typing import Optional

from workhub.application.commands.users.create_user import check_password_strength
from workhub.application.common.actor import Actor, SYSTEM
from workhub.application.common.audit import AuditTrail
from workhub.application.common.interfaces import Command, CommandHandler
from workhub.domain.exceptions import DomainValidationError, EntityNotFoundError
from workhub.domain.ports.password_hasher import PasswordHasher
from workhub.domain.ports.repositories import SessionRepository, UserRepository

logger = getLogger(__name__)


@dataclass(frozen=True)
class ChangePasswordCommand(Command[None]):
    user_id: str
    current_password: str
    new_password: str
    keep_session_id: Optional[str] = None
    actor: Actor = SYSTEM


class ChangePasswordHandler(CommandHandler[None]):
    def __init__(
        self,
        user_repository: UserRepository,
        session_repository: SessionRepository,
        password_hasher: PasswordHasher,
        audit_trail: AuditTrail,
    ):
        self._user_repository = user_repository
        self._session_repository = session_repository
        self._password_hasher = password_hasher
        self._audit_trail = audit_trail

    async def execute(self, command: ChangePasswordCommand) -> None:
        user = await self._user_repository.get_by_id(command.user_id)
        if not user:
            raise EntityNotFoundError.for_id("User", command.user_id)

        if not self._password_hasher.verify(user.password_hash, command.current_password):
            raise DomainValidationError("Current password is incorrect")
        check_password_strength(command.new_password)

        user.change_password_hash(self._password_hasher.hash(command.new_password))
        await self._user_repository.save(user)
        revoked = await self._session_repository.invalidate_by_user(
            user.id, keep_session_id=command.keep_session_id
        )
        await self._audit_trail.record(
            "PASSWORD_CHANGED", "User", user.id, actor=command.actor
        )
        logger.info("Password changed for user %s, %d session(s) revoked", user.id, revoked)
