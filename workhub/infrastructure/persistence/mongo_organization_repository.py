"""MongoDB Organization Repository Implementation."""

from typing import Any, Optional

from pymongo import ASCENDING

from workhub.domain.entities.organization import Organization, OrganizationSettings
from workhub.domain.ports.repositories import OrganizationRepository
from workhub.domain.value_objects.page import Page, PageRequest
from workhub.infrastructure.persistence.mongo_base import (
    MongoRepository,
    contains_ignore_case,
)


class MongoOrganizationRepository(MongoRepository[Organization], OrganizationRepository):
    collection_name = "organizations"
    default_sort = ("name", ASCENDING)

    def _to_entity(self, document: dict[str, Any]) -> Organization:
        settings = document.get("settings") or {}
        return Organization(
            id=document["_id"],
            name=document["name"],
            slug=document["slug"],
            created_at=document["created_at"],
            updated_at=document["updated_at"],
            description=document.get("description"),
            website=document.get("website"),
            logo_url=document.get("logo_url"),
            owner_id=document.get("owner_id"),
            settings=OrganizationSettings(**settings),
            active=document.get("active", True),
        )

    def _to_document(self, organization: Organization) -> dict[str, Any]:
        return {
            "_id": organization.id,
            "name": organization.name,
            "slug": organization.slug,
            "description": organization.description,
            "website": organization.website,
            "logo_url": organization.logo_url,
            "owner_id": organization.owner_id,
            "settings": {
                "max_projects": organization.settings.max_projects,
                "allow_public_projects": organization.settings.allow_public_projects,
                "default_project_role": organization.settings.default_project_role,
            },
            "active": organization.active,
            "created_at": organization.created_at,
            "updated_at": organization.updated_at,
        }

    async def get_by_id(self, organization_id: str) -> Optional[Organization]:
        return await self._find_one({"_id": organization_id})

    async def exists_by_id(self, organization_id: str) -> bool:
        return await self._exists({"_id": organization_id})

    async def exists_by_name(self, name: str) -> bool:
        return await self._exists({"name": name})

    async def find_all(self, page: PageRequest) -> Page[Organization]:
        return await self._find_page({}, page)

    async def search_by_name(self, term: str, page: PageRequest) -> Page[Organization]:
        return await self._find_page({"name": contains_ignore_case(term)}, page)

    async def save(self, organization: Organization) -> None:
        await self._upsert(organization)

    async def delete(self, organization_id: str) -> bool:
        return await self._delete_by_id(organization_id)
