"""
MongoDB Session Repository Implementation.

Expired sessions are removed by the TTL index on ``expires_at``
(expireAfterSeconds=0). The TTL monitor runs about once a minute, so
reads must still check expiry themselves.
"""

from typing import Any, Optional

from workhub.domain.entities.session import Session
from workhub.domain.ports.repositories import SessionRepository
from workhub.infrastructure.persistence.mongo_base import MongoRepository


class MongoSessionRepository(MongoRepository[Session], SessionRepository):
    collection_name = "sessions"

    def _to_entity(self, document: dict[str, Any]) -> Session:
        return Session(
            id=document["_id"],
            user_id=document["user_id"],
            token=document["token"],
            created_at=document["created_at"],
            expires_at=document["expires_at"],
            last_activity=document.get("last_activity", document["created_at"]),
            active=document.get("active", True),
            ip_address=document.get("ip_address"),
            user_agent=document.get("user_agent"),
        )

    def _to_document(self, session: Session) -> dict[str, Any]:
        return {
            "_id": session.id,
            "user_id": session.user_id,
            "token": session.token,
            "created_at": session.created_at,
            "expires_at": session.expires_at,
            "last_activity": session.last_activity,
            "active": session.active,
            "ip_address": session.ip_address,
            "user_agent": session.user_agent,
        }

    async def get_by_token(self, token: str) -> Optional[Session]:
        return await self._find_one({"token": token})

    async def find_active_by_user(self, user_id: str) -> list[Session]:
        return await self._find_many({"user_id": user_id, "active": True})

    async def save(self, session: Session) -> None:
        await self._upsert(session)

    async def invalidate_by_user(
        self, user_id: str, keep_session_id: Optional[str] = None
    ) -> int:
        filter: dict[str, Any] = {"user_id": user_id, "active": True}
        if keep_session_id:
            filter["_id"] = {"$ne": keep_session_id}
        return await self._update_many(filter, {"$set": {"active": False}})

    async def delete_by_user(self, user_id: str) -> int:
        return await self._delete_many({"user_id": user_id})
