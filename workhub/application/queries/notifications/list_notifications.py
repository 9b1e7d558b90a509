"""Notification queries: a user's notifications (paged) and the unread count."""

from dataclasses import dataclass

from workhub.application.common.interfaces import Query, QueryHandler
from workhub.domain.entities.notification import Notification
from workhub.domain.ports.repositories import NotificationRepository
from workhub.domain.value_objects.page import Page, PageRequest


@dataclass(frozen=True)
class ListNotificationsQuery(Query[Page[Notification]]):
    user_id: str
    page: PageRequest
    unread_only: bool = False


@dataclass(frozen=True)
class CountUnreadNotificationsQuery(Query[int]):
    user_id: str


class ListNotificationsHandler(QueryHandler[Page[Notification]]):
    def __init__(self, notification_repository: NotificationRepository):
        self._notification_repository = notification_repository

    async def execute(self, query: ListNotificationsQuery) -> Page[Notification]:
        return await self._notification_repository.find_by_user(
            query.user_id, query.unread_only, query.page
        )


class CountUnreadNotificationsHandler(QueryHandler[int]):
    def __init__(self, notification_repository: NotificationRepository):
        self._notification_repository = notification_repository

    async def execute(self, query: CountUnreadNotificationsQuery) -> int:
        return await self._notification_repository.count_unread(query.user_id)
