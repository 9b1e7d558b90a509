"""Activate / deactivate a user. Deactivation revokes all sessions."""

from dataclasses import dataclass
from logging import getLogger

from workhub.application.common.actor import Actor, SYSTEM
from workhub.application.common.audit import AuditTrail
from workhub.application.common.interfaces import Command, CommandHandler
from workhub.domain.entities.user import User
from workhub.domain.exceptions import EntityNotFoundError
from workhub.domain.ports.repositories import SessionRepository, UserRepository

logger = getLogger(__name__)


@dataclass(frozen=True)
class SetUserActiveCommand(Command[User]):
    user_id: str
    active: bool
    actor: Actor = SYSTEM


class SetUserActiveHandler(CommandHandler[User]):
    def __init__(
        self,
        user_repository: UserRepository,
        session_repository: SessionRepository,
        audit_trail: AuditTrail,
    ):
        self._user_repository = user_repository
        self._session_repository = session_repository
        self._audit_trail = audit_trail

    async def execute(self, command: SetUserActiveCommand) -> User:
        user = await self._user_repository.get_by_id(command.user_id)
        if not user:
            raise EntityNotFoundError.for_id("User", command.user_id)

        user.set_active(command.active)
        await self._user_repository.save(user)
        if not command.active:
            await self._session_repository.invalidate_by_user(user.id)

        action = "USER_ACTIVATED" if command.active else "USER_DEACTIVATED"
        await self._audit_trail.record(action, "User", user.id, actor=command.actor)
        logger.info("User %s active=%s", user.id, command.active)
        return user
