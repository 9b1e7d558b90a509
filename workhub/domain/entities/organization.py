"""
Organization Entity - The tenant that owns projects and documents.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional
from uuid import uuid4

from workhub.utils.text import slugify


@dataclass
class OrganizationSettings:
    max_projects: int = 50
    allow_public_projects: bool = False
    default_project_role: str = "MEMBER"


@dataclass
class Organization:
    id: str
    name: str
    slug: str
    created_at: datetime
    updated_at: datetime
    description: Optional[str] = None
    website: Optional[str] = None
    logo_url: Optional[str] = None
    owner_id: Optional[str] = None
    settings: OrganizationSettings = field(default_factory=OrganizationSettings)
    active: bool = True

    @classmethod
    def create(
        cls,
        name: str,
        description: Optional[str] = None,
        website: Optional[str] = None,
        logo_url: Optional[str] = None,
        owner_id: Optional[str] = None,
        settings: Optional[OrganizationSettings] = None,
    ) -> Organization:
        now = datetime.now(timezone.utc)
        return cls(
            id=str(uuid4()),
            name=name,
            slug=slugify(name),
            created_at=now,
            updated_at=now,
            description=description,
            website=website,
            logo_url=logo_url,
            owner_id=owner_id,
            settings=settings or OrganizationSettings(),
        )

    def rename(self, new_name: str) -> None:
        self.name = new_name
        self.slug = slugify(new_name)
        self.touch()

    def touch(self) -> None:
        self.updated_at = datetime.now(timezone.utc)
