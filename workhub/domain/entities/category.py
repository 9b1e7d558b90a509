"""
Category Entity - Product catalogue grouping, referenced by name from products.
"""

from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional
from uuid import uuid4


@dataclass
class Category:
    id: str
    name: str
    created_at: datetime
    updated_at: datetime
    description: Optional[str] = None
    parent_id: Optional[str] = None

    @classmethod
    def create(
        cls, name: str, description: Optional[str] = None, parent_id: Optional[str] = None
    ) -> Category:
        now = datetime.now(timezone.utc)
        return cls(
            id=str(uuid4()),
            name=name,
            created_at=now,
            updated_at=now,
            description=description,
            parent_id=parent_id,
        )

    def touch(self) -> None:
        self.updated_at = datetime.now(timezone.utc)
