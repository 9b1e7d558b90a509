"""MongoDB Profile Repository Implementation (one profile per user)."""

from typing import Any, Optional

from workhub.domain.entities.profile import Profile
from workhub.domain.ports.repositories import ProfileRepository
from workhub.domain.value_objects.address import Address
from workhub.infrastructure.persistence.mongo_base import MongoRepository


class MongoProfileRepository(MongoRepository[Profile], ProfileRepository):
    collection_name = "profiles"

    def _to_entity(self, document: dict[str, Any]) -> Profile:
        return Profile(
            id=document["_id"],
            user_id=document["user_id"],
            created_at=document["created_at"],
            updated_at=document["updated_at"],
            bio=document.get("bio"),
            avatar_url=document.get("avatar_url"),
            phone_number=document.get("phone_number"),
            job_title=document.get("job_title"),
            department=document.get("department"),
            preferred_language=document.get("preferred_language"),
            timezone=document.get("timezone"),
            address=Address.from_dict(document.get("address")),
            social_links=dict(document.get("social_links") or {}),
        )

    def _to_document(self, profile: Profile) -> dict[str, Any]:
        return {
            "_id": profile.id,
            "user_id": profile.user_id,
            "bio": profile.bio,
            "avatar_url": profile.avatar_url,
            "phone_number": profile.phone_number,
            "job_title": profile.job_title,
            "department": profile.department,
            "preferred_language": profile.preferred_language,
            "timezone": profile.timezone,
            "address": profile.address.to_dict() if profile.address else None,
            "social_links": dict(profile.social_links),
            "created_at": profile.created_at,
            "updated_at": profile.updated_at,
        }

    async def get_by_user_id(self, user_id: str) -> Optional[Profile]:
        return await self._find_one({"user_id": user_id})

    async def save(self, profile: Profile) -> None:
        await self._upsert(profile)

    async def delete_by_user_id(self, user_id: str) -> int:
        return await self._delete_many({"user_id": user_id})
