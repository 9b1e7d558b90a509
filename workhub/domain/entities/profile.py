"""
Profile Entity - Personal details kept apart from the User credentials.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional
from uuid import uuid4

from workhub.domain.value_objects.address import Address


@dataclass
class Profile:
    id: str
    user_id: str
    created_at: datetime
    updated_at: datetime
    bio: Optional[str] = None
    avatar_url: Optional[str] = None
    phone_number: Optional[str] = None
    job_title: Optional[str] = None
    department: Optional[str] = None
    preferred_language: Optional[str] = None
    timezone: Optional[str] = None
    address: Optional[Address] = None
    social_links: dict[str, str] = field(default_factory=dict)

    @classmethod
    def empty_for(cls, user_id: str) -> Profile:
        now = datetime.now(timezone.utc)
        return cls(id=str(uuid4()), user_id=user_id, created_at=now, updated_at=now)

    def touch(self) -> None:
        self.updated_at = datetime.now(timezone.utc)
