"""MongoDB Comment Repository Implementation."""

from typing import Any, Optional

from pymongo import ASCENDING

from workhub.domain.entities.comment import Comment, CommentStatus
from workhub.domain.ports.repositories import CommentRepository
from workhub.domain.value_objects.page import Page, PageRequest
from workhub.infrastructure.persistence.mongo_base import MongoRepository


class MongoCommentRepository(MongoRepository[Comment], CommentRepository):
    collection_name = "comments"
    default_sort = ("created_at", ASCENDING)

    def _to_entity(self, document: dict[str, Any]) -> Comment:
        return Comment(
            id=document["_id"],
            document_id=document["document_id"],
            user_id=document["user_id"],
            text=document["text"],
            status=CommentStatus(document["status"]),
            created_at=document["created_at"],
            updated_at=document["updated_at"],
            parent_comment_id=document.get("parent_comment_id"),
            likes=document.get("likes", 0),
            flags=document.get("flags", 0),
            version=document.get("version", 1),
        )

    def _to_document(self, comment: Comment) -> dict[str, Any]:
        return {
            "_id": comment.id,
            "document_id": comment.document_id,
            "user_id": comment.user_id,
            "parent_comment_id": comment.parent_comment_id,
            "text": comment.text,
            "status": comment.status.value,
            "likes": comment.likes,
            "flags": comment.flags,
            "version": comment.version,
            "created_at": comment.created_at,
            "updated_at": comment.updated_at,
        }

    async def get_by_id(self, comment_id: str) -> Optional[Comment]:
        return await self._find_one({"_id": comment_id})

    async def find_by_document(
        self, document_id: str, page: PageRequest
    ) -> Page[Comment]:
        return await self._find_page({"document_id": document_id}, page)

    async def find_replies(self, parent_comment_id: str) -> list[Comment]:
        return await self._find_many({"parent_comment_id": parent_comment_id})

    async def save(self, comment: Comment) -> None:
        await self._upsert(comment)

    async def delete(self, comment_id: str) -> bool:
        return await self._delete_by_id(comment_id)

    async def delete_replies(self, parent_comment_id: str) -> int:
        return await self._delete_many({"parent_comment_id": parent_comment_id})

    async def delete_by_document(self, document_id: str) -> int:
        return await self._delete_many({"document_id": document_id})
