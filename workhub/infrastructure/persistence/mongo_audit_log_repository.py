"""MongoDB AuditLog Repository Implementation. Entries are only ever inserted."""

from typing import Any

from pymongo import DESCENDING

from workhub.domain.entities.audit_log import AuditLog
from workhub.domain.ports.repositories import AuditLogRepository
from workhub.domain.value_objects.page import Page, PageRequest
from workhub.infrastructure.persistence.mongo_base import MongoRepository


class MongoAuditLogRepository(MongoRepository[AuditLog], AuditLogRepository):
    collection_name = "audit_logs"
    default_sort = ("timestamp", DESCENDING)

    def _to_entity(self, document: dict[str, Any]) -> AuditLog:
        return AuditLog(
            id=document["_id"],
            action=document["action"],
            entity_type=document["entity_type"],
            entity_id=document["entity_id"],
            timestamp=document["timestamp"],
            user_id=document.get("user_id"),
            changes=dict(document.get("changes") or {}),
            ip_address=document.get("ip_address"),
            user_agent=document.get("user_agent"),
        )

    def _to_document(self, entry: AuditLog) -> dict[str, Any]:
        return {
            "_id": entry.id,
            "action": entry.action,
            "entity_type": entry.entity_type,
            "entity_id": entry.entity_id,
            "user_id": entry.user_id,
            "changes": entry.changes,
            "ip_address": entry.ip_address,
            "user_agent": entry.user_agent,
            "timestamp": entry.timestamp,
        }

    async def append(self, entry: AuditLog) -> None:
        await self._collection.insert_one(self._to_document(entry))

    async def find_by_entity(
        self, entity_type: str, entity_id: str, page: PageRequest
    ) -> Page[AuditLog]:
        return await self._find_page(
            {"entity_type": entity_type, "entity_id": entity_id}, page
        )

    async def find_by_user(self, user_id: str, page: PageRequest) -> Page[AuditLog]:
        return await self._find_page({"user_id": user_id}, page)
