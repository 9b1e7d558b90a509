"""
Notifier - Creates in-app notifications as a side effect of other commands.
"""

from typing import Optional

from workhub.domain.entities.notification import Notification, RelatedEntity
from workhub.domain.ports.repositories import NotificationRepository


class Notifier:
    def __init__(self, notification_repository: NotificationRepository):
        self._notification_repository = notification_repository

    async def notify(
        self,
        user_id: str,
        type: str,
        title: str,
        message: str,
        related_to: Optional[RelatedEntity] = None,
    ) -> Notification:
        notification = Notification.create(
            user_id=user_id,
            type=type,
            title=title,
            message=message,
            related_to=related_to,
        )
        await self._notification_repository.save(notification)
        return notification
