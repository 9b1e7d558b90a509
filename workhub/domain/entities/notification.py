"""
Notification Entity - A message addressed to one user.
"""

from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional
from uuid import uuid4


@dataclass(frozen=True)
class RelatedEntity:
    type: str
    id: str


@dataclass
class Notification:
    id: str
    user_id: str
    type: str
    title: str
    message: str
    created_at: datetime
    read: bool = False
    related_to: Optional[RelatedEntity] = None

    @classmethod
    def create(
        cls,
        user_id: str,
        type: str,
        title: str,
        message: str,
        related_to: Optional[RelatedEntity] = None,
    ) -> Notification:
        return cls(
            id=str(uuid4()),
            user_id=user_id,
            type=type,
            title=title,
            message=message,
            created_at=datetime.now(timezone.utc),
            related_to=related_to,
        )

    def mark_as_read(self) -> None:
        self.read = True
