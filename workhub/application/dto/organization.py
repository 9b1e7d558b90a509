"""Organization DTOs."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from workhub.domain.entities.organization import Organization, OrganizationSettings


class OrganizationSettingsDTO(BaseModel):
    max_projects: int = 50
    allow_public_projects: bool = False
    default_project_role: str = "MEMBER"

    def to_value(self) -> OrganizationSettings:
        return OrganizationSettings(**self.model_dump())


class OrganizationDTO(BaseModel):
    id: str
    name: str
    slug: str
    description: Optional[str] = None
    website: Optional[str] = None
    logo_url: Optional[str] = None
    owner_id: Optional[str] = None
    settings: OrganizationSettingsDTO
    active: bool
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, organization: Organization) -> "OrganizationDTO":
        return cls(
            id=organization.id,
            name=organization.name,
            slug=organization.slug,
            description=organization.description,
            website=organization.website,
            logo_url=organization.logo_url,
            owner_id=organization.owner_id,
            settings=OrganizationSettingsDTO(
                max_projects=organization.settings.max_projects,
                allow_public_projects=organization.settings.allow_public_projects,
                default_project_role=organization.settings.default_project_role,
            ),
            active=organization.active,
            created_at=organization.created_at,
            updated_at=organization.updated_at,
        )
