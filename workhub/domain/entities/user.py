"""
User Entity - A system user.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Optional
from uuid import uuid4

from workhub.domain.value_objects.email_address import EmailAddress


class Role(str, Enum):
    USER = "USER"
    MANAGER = "MANAGER"
    ADMIN = "ADMIN"


@dataclass
class User:
    # Required fields (no defaults) - must come first
    id: str
    username: str
    email: EmailAddress
    password_hash: str
    created_at: datetime
    updated_at: datetime
    # Optional fields (with defaults) - must come last
    roles: list[str] = field(default_factory=lambda: [Role.USER.value])
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    organization_id: Optional[str] = None
    active: bool = True
    last_login: Optional[datetime] = None

    def __post_init__(self):
        valid_roles = [role.value for role in Role]
        for role in self.roles:
            if role not in valid_roles:
                raise ValueError(f"Invalid role: {role}. Must be one of {valid_roles}.")

    @classmethod
    def create(
        cls,
        username: str,
        email: EmailAddress,
        password_hash: str,
        roles: Optional[list[str]] = None,
        first_name: Optional[str] = None,
        last_name: Optional[str] = None,
        organization_id: Optional[str] = None,
    ) -> User:
        now = datetime.now(timezone.utc)
        return cls(
            id=str(uuid4()),
            username=username,
            email=email,
            password_hash=password_hash,
            created_at=now,
            updated_at=now,
            roles=list(dict.fromkeys(roles)) if roles else [Role.USER.value],
            first_name=first_name,
            last_name=last_name,
            organization_id=organization_id,
        )

    @property
    def full_name(self) -> str:
        return " ".join(part for part in (self.first_name, self.last_name) if part)

    def has_any_role(self, *roles: str) -> bool:
        return any(role in self.roles for role in roles)

    def change_password_hash(self, password_hash: str) -> None:
        self.password_hash = password_hash
        self.touch()

    def set_active(self, active: bool) -> None:
        self.active = active
        self.touch()

    def record_login(self) -> None:
        self.last_login = datetime.now(timezone.utc)
        self.touch()

    def touch(self) -> None:
        self.updated_at = datetime.now(timezone.utc)
