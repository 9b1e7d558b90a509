"""
Session Repository Port - Interface for session persistence.
Implementation: workhub/infrastructure/persistence/mongo_session_repository.py
"""

from abc import ABC, abstractmethod
from typing import Optional
from workhub.domain.entities.session import Session


class SessionRepository(ABC):
    # Fields a paged listing may be sorted by ("id" maps to _id)
    sortable_fields = frozenset({"id", "created_at", "expires_at", "last_activity"})

    @abstractmethod
    async def get_by_token(self, token: str) -> Optional[Session]:
        """Exact-match lookup. Expired records may still be returned."""
        ...

    @abstractmethod
    async def find_active_by_user(self, user_id: str) -> list[Session]: ...

    @abstractmethod
    async def save(self, session: Session) -> None: ...

    @abstractmethod
    async def invalidate_by_user(
        self, user_id: str, keep_session_id: Optional[str] = None
    ) -> int: ...

    @abstractmethod
    async def delete_by_user(self, user_id: str) -> int: ...
