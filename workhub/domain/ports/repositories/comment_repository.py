"""
Comment Repository Port - Interface for comment persistence.
Implementation: workhub/infrastructure/persistence/mongo_comment_repository.py
"""

from abc import ABC, abstractmethod
from typing import Optional
from workhub.domain.entities.comment import Comment
from workhub.domain.value_objects.page import Page, PageRequest


class CommentRepository(ABC):
    # Fields a paged listing may be sorted by ("id" maps to _id)
    sortable_fields = frozenset({"id", "created_at", "updated_at", "likes", "status"})

    @abstractmethod
    async def get_by_id(self, comment_id: str) -> Optional[Comment]: ...

    @abstractmethod
    async def find_by_document(
        self, document_id: str, page: PageRequest
    ) -> Page[Comment]: ...

    @abstractmethod
    async def find_replies(self, parent_comment_id: str) -> list[Comment]: ...

    @abstractmethod
    async def save(self, comment: Comment) -> None: ...

    @abstractmethod
    async def delete(self, comment_id: str) -> bool: ...

    @abstractmethod
    async def delete_replies(self, parent_comment_id: str) -> int: ...

    @abstractmethod
    async def delete_by_document(self, document_id: str) -> int: ...
