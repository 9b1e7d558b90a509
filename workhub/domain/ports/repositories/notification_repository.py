"""
Notification Repository Port - Interface for notification persistence.
Implementation: workhub/infrastructure/persistence/mongo_notification_repository.py
"""

from abc import ABC, abstractmethod
from typing import Optional
from workhub.domain.entities.notification import Notification
from workhub.domain.value_objects.page import Page, PageRequest


class NotificationRepository(ABC):
    # Fields a paged listing may be sorted by ("id" maps to _id)
    sortable_fields = frozenset({"id", "type", "read", "created_at"})

    @abstractmethod
    async def get_by_id(self, notification_id: str) -> Optional[Notification]: ...

    @abstractmethod
    async def find_by_user(
        self, user_id: str, unread_only: bool, page: PageRequest
    ) -> Page[Notification]: ...

    @abstractmethod
    async def count_unread(self, user_id: str) -> int: ...

    @abstractmethod
    async def mark_all_read(self, user_id: str) -> int: ...

    @abstractmethod
    async def save(self, notification: Notification) -> None: ...

    @abstractmethod
    async def delete(self, notification_id: str) -> bool: ...

    @abstractmethod
    async def delete_by_user(self, user_id: str) -> int: ...
