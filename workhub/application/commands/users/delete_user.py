"""
Delete User Command.

Removes the user's sessions, notifications and profile, clears task
assignments, then deletes the user. Sequential writes, no rollback.
"""

from dataclasses import dataclass
from logging import getLogger

from workhub.application.common.actor import Actor, SYSTEM
from workhub.application.common.audit import AuditTrail
from workhub.application.common.interfaces import Command, CommandHandler
from workhub.domain.exceptions import EntityNotFoundError
from workhub.domain.ports.repositories import (
    NotificationRepository,
    ProfileRepository,
    SessionRepository,
    TaskRepository,
    UserRepository,
)

logger = getLogger(__name__)


@dataclass(frozen=True)
class DeleteUserCommand(Command[bool]):
    user_id: str
    actor: Actor = SYSTEM


class DeleteUserHandler(CommandHandler[bool]):
    def __init__(
        self,
        user_repository: UserRepository,
        profile_repository: ProfileRepository,
        session_repository: SessionRepository,
        notification_repository: NotificationRepository,
        task_repository: TaskRepository,
        audit_trail: AuditTrail,
    ):
        self._user_repository = user_repository
        self._profile_repository = profile_repository
        self._session_repository = session_repository
        self._notification_repository = notification_repository
        self._task_repository = task_repository
        self._audit_trail = audit_trail

    async def execute(self, command: DeleteUserCommand) -> bool:
        user = await self._user_repository.get_by_id(command.user_id)
        if not user:
            raise EntityNotFoundError.for_id("User", command.user_id)

        await self._session_repository.delete_by_user(user.id)
        await self._notification_repository.delete_by_user(user.id)
        await self._task_repository.unassign_user(user.id)
        await self._profile_repository.delete_by_user_id(user.id)
        deleted = await self._user_repository.delete(user.id)

        await self._audit_trail.record(
            "USER_DELETED",
            "User",
            user.id,
            actor=command.actor,
            changes={"username": user.username},
        )
        logger.info("Deleted user %s (%s)", user.id, user.username)
        return deleted
