"""
Organization Repository Port - Interface for organization persistence.
Implementation: workhub/infrastructure/persistence/mongo_organization_repository.py
"""

from abc import ABC, abstractmethod
from typing import Optional
from workhub.domain.entities.organization import Organization
from workhub.domain.value_objects.page import Page, PageRequest


class OrganizationRepository(ABC):
    # Fields a paged listing may be sorted by ("id" maps to _id)
    sortable_fields = frozenset({"id", "name", "slug", "created_at", "updated_at"})

    @abstractmethod
    async def get_by_id(self, organization_id: str) -> Optional[Organization]: ...

    @abstractmethod
    async def exists_by_id(self, organization_id: str) -> bool: ...

    @abstractmethod
    async def exists_by_name(self, name: str) -> bool: ...

    @abstractmethod
    async def find_all(self, page: PageRequest) -> Page[Organization]: ...

    @abstractmethod
    async def search_by_name(self, term: str, page: PageRequest) -> Page[Organization]: ...

    @abstractmethod
    async def save(self, organization: Organization) -> None: ...

    @abstractmethod
    async def delete(self, organization_id: str) -> bool: ...
