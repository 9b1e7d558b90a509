"""Identity DTOs: users, profiles, sessions."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from workhub.application.dto.common import AddressDTO
from workhub.domain.entities.profile import Profile
from workhub.domain.entities.session import Session
from workhub.domain.entities.user import User


class UserDTO(BaseModel):
    """User as returned by the API. The password hash is never exposed."""

    id: str
    username: str
    email: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    full_name: str = ""
    roles: list[str]
    active: bool
    organization_id: Optional[str] = None
    last_login: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, user: User) -> "UserDTO":
        return cls(
            id=user.id,
            username=user.username,
            email=user.email.value,
            first_name=user.first_name,
            last_name=user.last_name,
            full_name=user.full_name,
            roles=list(user.roles),
            active=user.active,
            organization_id=user.organization_id,
            last_login=user.last_login,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )


class ProfileDTO(BaseModel):
    id: str
    user_id: str
    bio: Optional[str] = None
    avatar_url: Optional[str] = None
    phone_number: Optional[str] = None
    job_title: Optional[str] = None
    department: Optional[str] = None
    preferred_language: Optional[str] = None
    timezone: Optional[str] = None
    address: Optional[AddressDTO] = None
    social_links: dict[str, str] = {}
    updated_at: datetime

    @classmethod
    def from_entity(cls, profile: Profile) -> "ProfileDTO":
        return cls(
            id=profile.id,
            user_id=profile.user_id,
            bio=profile.bio,
            avatar_url=profile.avatar_url,
            phone_number=profile.phone_number,
            job_title=profile.job_title,
            department=profile.department,
            preferred_language=profile.preferred_language,
            timezone=profile.timezone,
            address=AddressDTO.from_value(profile.address),
            social_links=dict(profile.social_links),
            updated_at=profile.updated_at,
        )


class SessionDTO(BaseModel):
    token: str
    token_type: str = "Bearer"
    expires_at: datetime
    user: Optional[UserDTO] = None

    @classmethod
    def from_entity(cls, session: Session, user: Optional[User] = None) -> "SessionDTO":
        return cls(
            token=session.token,
            expires_at=session.expires_at,
            user=UserDTO.from_entity(user) if user else None,
        )
