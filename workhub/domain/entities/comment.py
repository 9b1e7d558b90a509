"""
Comment Entity - Threaded, moderated discussion on a document.
"""

from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Optional
from uuid import uuid4


class CommentStatus(str, Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"
    FLAGGED = "flagged"


@dataclass
class Comment:
    id: str
    document_id: str
    user_id: str
    text: str
    status: CommentStatus
    created_at: datetime
    updated_at: datetime
    parent_comment_id: Optional[str] = None
    likes: int = 0
    flags: int = 0
    version: int = 1

    @classmethod
    def create(
        cls,
        document_id: str,
        user_id: str,
        text: str,
        parent_comment_id: Optional[str] = None,
    ) -> Comment:
        now = datetime.now(timezone.utc)
        return cls(
            id=str(uuid4()),
            document_id=document_id,
            user_id=user_id,
            text=text,
            status=CommentStatus.PENDING,
            created_at=now,
            updated_at=now,
            parent_comment_id=parent_comment_id,
        )

    @property
    def is_reply(self) -> bool:
        return bool(self.parent_comment_id)

    def edit(self, text: str) -> None:
        self.text = text
        self.version += 1
        self.touch()

    def moderate(self, status: CommentStatus) -> None:
        self.status = status
        self.touch()

    def like(self) -> None:
        self.likes += 1
        self.touch()

    def unlike(self) -> None:
        if self.likes > 0:
            self.likes -= 1
            self.touch()

    def flag(self, threshold: int = 5) -> None:
        self.flags += 1
        if self.flags >= threshold and self.status != CommentStatus.REJECTED:
            self.status = CommentStatus.FLAGGED
        self.touch()

    def touch(self) -> None:
        self.updated_at = datetime.now(timezone.utc)
