"""MongoDB Notification Repository Implementation."""

from typing import Any, Optional

from workhub.domain.entities.notification import Notification, RelatedEntity
from workhub.domain.ports.repositories import NotificationRepository
from workhub.domain.value_objects.page import Page, PageRequest
from workhub.infrastructure.persistence.mongo_base import MongoRepository


class MongoNotificationRepository(MongoRepository[Notification], NotificationRepository):
    collection_name = "notifications"

    def _to_entity(self, document: dict[str, Any]) -> Notification:
        related = document.get("related_to")
        return Notification(
            id=document["_id"],
            user_id=document["user_id"],
            type=document["type"],
            title=document["title"],
            message=document["message"],
            created_at=document["created_at"],
            read=document.get("read", False),
            related_to=RelatedEntity(type=related["type"], id=related["id"]) if related else None,
        )

    def _to_document(self, notification: Notification) -> dict[str, Any]:
        related = notification.related_to
        return {
            "_id": notification.id,
            "user_id": notification.user_id,
            "type": notification.type,
            "title": notification.title,
            "message": notification.message,
            "read": notification.read,
            "related_to": {"type": related.type, "id": related.id} if related else None,
            "created_at": notification.created_at,
        }

    async def get_by_id(self, notification_id: str) -> Optional[Notification]:
        return await self._find_one({"_id": notification_id})

    async def find_by_user(
        self, user_id: str, unread_only: bool, page: PageRequest
    ) -> Page[Notification]:
        filter: dict[str, Any] = {"user_id": user_id}
        if unread_only:
            filter["read"] = False
        return await self._find_page(filter, page)

    async def count_unread(self, user_id: str) -> int:
        return await self._count({"user_id": user_id, "read": False})

    async def mark_all_read(self, user_id: str) -> int:
        return await self._update_many(
            {"user_id": user_id, "read": False}, {"$set": {"read": True}}
        )

    async def save(self, notification: Notification) -> None:
        await self._upsert(notification)

    async def delete(self, notification_id: str) -> bool:
        return await self._delete_by_id(notification_id)

    async def delete_by_user(self, user_id: str) -> int:
        return await self._delete_many({"user_id": user_id})
