"""
MongoDB Project Repository Implementation.

Mapping:
- team_members stored as an array of {user_id, role, joined_at};
  "team_members.user_id" is indexed for member lookups
- budget stored as Decimal128
"""

from datetime import datetime
from typing import Any, Optional

from workhub.domain.entities.project import Project, ProjectStatus, TeamMember
from workhub.domain.ports.repositories import ProjectRepository
from workhub.domain.value_objects.page import Page, PageRequest
from workhub.infrastructure.persistence.mongo_base import (
    MongoRepository,
    contains_ignore_case,
    from_decimal128,
    to_decimal128,
)


class MongoProjectRepository(MongoRepository[Project], ProjectRepository):
    collection_name = "projects"

    def _to_entity(self, document: dict[str, Any]) -> Project:
        return Project(
            id=document["_id"],
            name=document["name"],
            organization_id=document["organization_id"],
            status=ProjectStatus(document["status"]),
            created_at=document["created_at"],
            updated_at=document["updated_at"],
            description=document.get("description"),
            owner_id=document.get("owner_id"),
            team_members=[
                TeamMember(user_id=m["user_id"], role=m["role"], joined_at=m["joined_at"])
                for m in document.get("team_members") or []
            ],
            start_date=document.get("start_date"),
            end_date=document.get("end_date"),
            budget=from_decimal128(document.get("budget")),
            tags=list(document.get("tags") or []),
        )

    def _to_document(self, project: Project) -> dict[str, Any]:
        return {
            "_id": project.id,
            "name": project.name,
            "description": project.description,
            "organization_id": project.organization_id,
            "owner_id": project.owner_id,
            "team_members": [
                {"user_id": m.user_id, "role": m.role, "joined_at": m.joined_at}
                for m in project.team_members
            ],
            "status": project.status.value,
            "start_date": project.start_date,
            "end_date": project.end_date,
            "budget": to_decimal128(project.budget),
            "tags": list(project.tags),
            "created_at": project.created_at,
            "updated_at": project.updated_at,
        }

    async def get_by_id(self, project_id: str) -> Optional[Project]:
        return await self._find_one({"_id": project_id})

    async def exists_by_id(self, project_id: str) -> bool:
        return await self._exists({"_id": project_id})

    async def find_all(self, page: PageRequest) -> Page[Project]:
        return await self._find_page({}, page)

    async def find_ids_by_organization(self, organization_id: str) -> list[str]:
        return await self._find_ids({"organization_id": organization_id})

    async def find_by_organization(
        self, organization_id: str, page: PageRequest
    ) -> Page[Project]:
        return await self._find_page({"organization_id": organization_id}, page)

    async def find_by_status(
        self, status: ProjectStatus, page: PageRequest
    ) -> Page[Project]:
        return await self._find_page({"status": status.value}, page)

    async def find_by_member(self, user_id: str, page: PageRequest) -> Page[Project]:
        return await self._find_page({"team_members.user_id": user_id}, page)

    async def search(self, term: str, page: PageRequest) -> Page[Project]:
        pattern = contains_ignore_case(term)
        return await self._find_page(
            {"$or": [{"name": pattern}, {"description": pattern}]}, page
        )

    async def find_ending_before(
        self, deadline: datetime, excluded_statuses: list[ProjectStatus]
    ) -> list[Project]:
        return await self._find_many(
            {
                "end_date": {"$ne": None, "$lt": deadline},
                "status": {"$nin": [status.value for status in excluded_statuses]},
            }
        )

    async def save(self, project: Project) -> None:
        await self._upsert(project)

    async def delete(self, project_id: str) -> bool:
        return await self._delete_by_id(project_id)

    async def delete_by_organization(self, organization_id: str) -> int:
        return await self._delete_many({"organization_id": organization_id})
