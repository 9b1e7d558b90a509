"""
Project Repository Port - Interface for project persistence.
Implementation: workhub/infrastructure/persistence/mongo_project_repository.py
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional
from workhub.domain.entities.project import Project, ProjectStatus
from workhub.domain.value_objects.page import Page, PageRequest


class ProjectRepository(ABC):
    # Fields a paged listing may be sorted by ("id" maps to _id)
    sortable_fields = frozenset(
        {
            "id",
            "name",
            "status",
            "start_date",
            "end_date",
            "created_at",
            "updated_at",
        }
    )

    @abstractmethod
    async def get_by_id(self, project_id: str) -> Optional[Project]: ...

    @abstractmethod
    async def exists_by_id(self, project_id: str) -> bool: ...

    @abstractmethod
    async def find_all(self, page: PageRequest) -> Page[Project]: ...

    @abstractmethod
    async def find_ids_by_organization(self, organization_id: str) -> list[str]: ...

    @abstractmethod
    async def find_by_organization(
        self, organization_id: str, page: PageRequest
    ) -> Page[Project]: ...

    @abstractmethod
    async def find_by_status(
        self, status: ProjectStatus, page: PageRequest
    ) -> Page[Project]: ...

    @abstractmethod
    async def find_by_member(self, user_id: str, page: PageRequest) -> Page[Project]: ...

    @abstractmethod
    async def search(self, term: str, page: PageRequest) -> Page[Project]:
        """Case-insensitive substring match on name OR description."""
        ...

    @abstractmethod
    async def find_ending_before(
        self, deadline: datetime, excluded_statuses: list[ProjectStatus]
    ) -> list[Project]: ...

    @abstractmethod
    async def save(self, project: Project) -> None: ...

    @abstractmethod
    async def delete(self, project_id: str) -> bool: ...

    @abstractmethod
    async def delete_by_organization(self, organization_id: str) -> int: ...
