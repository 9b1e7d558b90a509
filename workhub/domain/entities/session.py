"""
Session Entity - An opaque bearer token bound to a user, with an expiry.
"""

from __future__ import annotations
import secrets
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional
from uuid import uuid4


@dataclass
class Session:
    id: str
    user_id: str
    token: str
    created_at: datetime
    expires_at: datetime
    last_activity: datetime
    active: bool = True
    ip_address: Optional[str] = None
    user_agent: Optional[str] = None

    @classmethod
    def start(
        cls,
        user_id: str,
        ttl_minutes: int,
        token_bytes: int = 32,
        ip_address: Optional[str] = None,
        user_agent: Optional[str] = None,
    ) -> Session:
        now = datetime.now(timezone.utc)
        return cls(
            id=str(uuid4()),
            user_id=user_id,
            token=secrets.token_urlsafe(token_bytes),
            created_at=now,
            expires_at=now + timedelta(minutes=ttl_minutes),
            last_activity=now,
            ip_address=ip_address,
            user_agent=user_agent,
        )

    def is_expired(self, now: Optional[datetime] = None) -> bool:
        return (now or datetime.now(timezone.utc)) >= self.expires_at

    def is_valid(self, now: Optional[datetime] = None) -> bool:
        return self.active and not self.is_expired(now)

    def mark_activity(self) -> None:
        self.last_activity = datetime.now(timezone.utc)

    def invalidate(self) -> None:
        self.active = False

    def extend(self, minutes: int) -> None:
        self.expires_at = self.expires_at + timedelta(minutes=minutes)

    def __repr__(self) -> str:
        return (
            f"Session(id={self.id!r}, user_id={self.user_id!r}, token='[PROTECTED]', "
            f"expires_at={self.expires_at!r}, active={self.active!r})"
        )
