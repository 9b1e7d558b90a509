"""
Profile Repository Port - Interface for profile persistence.
Implementation: workhub/infrastructure/persistence/mongo_profile_repository.py
"""

from abc import ABC, abstractmethod
from typing import Optional
from workhub.domain.entities.profile import Profile


class ProfileRepository(ABC):
    # Fields a paged listing may be sorted by ("id" maps to _id)
    sortable_fields = frozenset({"id", "created_at", "updated_at"})

    @abstractmethod
    async def get_by_user_id(self, user_id: str) -> Optional[Profile]: ...

    @abstractmethod
    async def save(self, profile: Profile) -> None: ...

    @abstractmethod
    async def delete_by_user_id(self, user_id: str) -> int: ...
