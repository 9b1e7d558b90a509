"""
Document Entity - File metadata attached to a project (and its organization).
"""

from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional
from uuid import uuid4


@dataclass
class Document:
    id: str
    name: str
    project_id: str
    organization_id: str
    created_at: datetime
    updated_at: datetime
    version: int = 1
    description: Optional[str] = None
    file_url: Optional[str] = None
    mime_type: Optional[str] = None
    size: Optional[int] = None
    type: Optional[str] = None
    tags: list[str] = field(default_factory=list)
    uploaded_by: Optional[str] = None
    public: bool = False
    last_accessed_at: Optional[datetime] = None

    @classmethod
    def create(
        cls,
        name: str,
        project_id: str,
        organization_id: str,
        description: Optional[str] = None,
        file_url: Optional[str] = None,
        mime_type: Optional[str] = None,
        size: Optional[int] = None,
        type: Optional[str] = None,
        tags: Optional[list[str]] = None,
        uploaded_by: Optional[str] = None,
        public: bool = False,
    ) -> Document:
        now = datetime.now(timezone.utc)
        return cls(
            id=str(uuid4()),
            name=name,
            project_id=project_id,
            organization_id=organization_id,
            created_at=now,
            updated_at=now,
            description=description,
            file_url=file_url,
            mime_type=mime_type,
            size=size,
            type=type,
            tags=list(tags or []),
            uploaded_by=uploaded_by,
            public=public,
        )

    def mark_revised(self) -> None:
        """Bump version and updated_at. Last write wins, there is no conflict check."""
        self.version += 1
        self.updated_at = datetime.now(timezone.utc)

    def mark_accessed(self) -> None:
        self.last_accessed_at = datetime.now(timezone.utc)
