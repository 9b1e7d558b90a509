"""
Notification commands.

mark_read and delete are owner-only: a user may only touch their own
notifications.
"""

from dataclasses import dataclass
from logging import getLogger
from typing import Optional

from workhub.application.common.interfaces import Command, CommandHandler
from workhub.application.common.notifier import Notifier
from workhub.domain.entities.notification import Notification, RelatedEntity
from workhub.domain.exceptions import (
    AccessDeniedError,
    DomainValidationError,
    EntityNotFoundError,
)
from workhub.domain.ports.repositories import NotificationRepository, UserRepository

logger = getLogger(__name__)


@dataclass(frozen=True)
class CreateNotificationCommand(Command[Notification]):
    user_id: str
    type: str
    title: str
    message: str
    related_to: Optional[RelatedEntity] = None


@dataclass(frozen=True)
class MarkNotificationReadCommand(Command[Notification]):
    notification_id: str
    user_id: str


@dataclass(frozen=True)
class MarkAllNotificationsReadCommand(Command[int]):
    user_id: str


@dataclass(frozen=True)
class DeleteNotificationCommand(Command[bool]):
    notification_id: str
    user_id: str


class CreateNotificationHandler(CommandHandler[Notification]):
    def __init__(self, user_repository: UserRepository, notifier: Notifier):
        self._user_repository = user_repository
        self._notifier = notifier

    async def execute(self, command: CreateNotificationCommand) -> Notification:
        if not command.title or not command.title.strip():
            raise DomainValidationError("Notification title must not be blank")
        if not await self._user_repository.exists_by_id(command.user_id):
            raise EntityNotFoundError.for_id("User", command.user_id)
        notification = await self._notifier.notify(
            user_id=command.user_id,
            type=command.type,
            title=command.title.strip(),
            message=command.message,
            related_to=command.related_to,
        )
        logger.info("Created notification %s for %s", notification.id, command.user_id)
        return notification


class _OwnedNotificationHandler:
    def __init__(self, notification_repository: NotificationRepository):
        self._notification_repository = notification_repository

    async def _load_owned(self, notification_id: str, user_id: str) -> Notification:
        notification = await self._notification_repository.get_by_id(notification_id)
        if not notification:
            raise EntityNotFoundError.for_id("Notification", notification_id)
        if notification.user_id != user_id:
            raise AccessDeniedError("Notification belongs to another user")
        return notification


class MarkNotificationReadHandler(_OwnedNotificationHandler, CommandHandler[Notification]):
    async def execute(self, command: MarkNotificationReadCommand) -> Notification:
        notification = await self._load_owned(command.notification_id, command.user_id)
        if not notification.read:
            notification.mark_as_read()
            await self._notification_repository.save(notification)
        return notification


class MarkAllNotificationsReadHandler(CommandHandler[int]):
    def __init__(self, notification_repository: NotificationRepository):
        self._notification_repository = notification_repository

    async def execute(self, command: MarkAllNotificationsReadCommand) -> int:
        updated = await self._notification_repository.mark_all_read(command.user_id)
        logger.info("Marked %d notification(s) read for %s", updated, command.user_id)
        return updated


class DeleteNotificationHandler(_OwnedNotificationHandler, CommandHandler[bool]):
    async def execute(self, command: DeleteNotificationCommand) -> bool:
        await self._load_owned(command.notification_id, command.user_id)
        return await self._notification_repository.delete(command.notification_id)
