"""
Project Entity - Belongs to exactly one organization and holds a team.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum
from typing import Optional
from uuid import uuid4


class ProjectStatus(str, Enum):
    PLANNING = "PLANNING"
    ACTIVE = "ACTIVE"
    ON_HOLD = "ON_HOLD"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"


@dataclass
class TeamMember:
    user_id: str
    role: str
    joined_at: datetime


@dataclass
class Project:
    id: str
    name: str
    organization_id: str
    status: ProjectStatus
    created_at: datetime
    updated_at: datetime
    description: Optional[str] = None
    owner_id: Optional[str] = None
    team_members: list[TeamMember] = field(default_factory=list)
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    budget: Optional[Decimal] = None
    tags: list[str] = field(default_factory=list)

    @classmethod
    def create(
        cls,
        name: str,
        organization_id: str,
        description: Optional[str] = None,
        owner_id: Optional[str] = None,
        status: ProjectStatus = ProjectStatus.PLANNING,
        start_date: Optional[datetime] = None,
        end_date: Optional[datetime] = None,
        budget: Optional[Decimal] = None,
        tags: Optional[list[str]] = None,
    ) -> Project:
        now = datetime.now(timezone.utc)
        return cls(
            id=str(uuid4()),
            name=name,
            organization_id=organization_id,
            status=status,
            created_at=now,
            updated_at=now,
            description=description,
            owner_id=owner_id,
            start_date=start_date,
            end_date=end_date,
            budget=budget,
            tags=list(tags or []),
        )

    @property
    def member_ids(self) -> list[str]:
        return [member.user_id for member in self.team_members]

    def has_member(self, user_id: str) -> bool:
        for member in self.team_members:
            if member.user_id == user_id:
                return True
        return False

    def add_member(self, user_id: str, role: str) -> bool:
        """Add a team member. Returns False (and changes nothing) if already present."""
        if self.has_member(user_id):
            return False
        self.team_members.append(
            TeamMember(user_id=user_id, role=role, joined_at=datetime.now(timezone.utc))
        )
        self.touch()
        return True

    def remove_member(self, user_id: str) -> bool:
        remaining = [m for m in self.team_members if m.user_id != user_id]
        if len(remaining) == len(self.team_members):
            return False
        self.team_members = remaining
        self.touch()
        return True

    def replace_team(self, members: list[tuple[str, str]]) -> None:
        """Replace the team, keeping joined_at for users that were already on it."""
        joined = {m.user_id: m.joined_at for m in self.team_members}
        now = datetime.now(timezone.utc)
        team: list[TeamMember] = []
        for user_id, role in members:
            if any(m.user_id == user_id for m in team):
                continue
            team.append(TeamMember(user_id=user_id, role=role, joined_at=joined.get(user_id, now)))
        self.team_members = team
        self.touch()

    def change_status(self, status: ProjectStatus) -> None:
        self.status = status
        self.touch()

    def touch(self) -> None:
        self.updated_at = datetime.now(timezone.utc)
