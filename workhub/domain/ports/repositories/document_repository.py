"""
Document Repository Port - Interface for document persistence.
Implementation: workhub/infrastructure/persistence/mongo_document_repository.py
"""

from abc import ABC, abstractmethod
from typing import Optional
from workhub.domain.entities.document import Document
from workhub.domain.value_objects.page import Page, PageRequest


class DocumentRepository(ABC):
    # Fields a paged listing may be sorted by ("id" maps to _id)
    sortable_fields = frozenset(
        {
            "id",
            "name",
            "type",
            "size",
            "created_at",
            "updated_at",
            "last_accessed_at",
        }
    )

    @abstractmethod
    async def get_by_id(self, document_id: str) -> Optional[Document]: ...

    @abstractmethod
    async def exists_by_id(self, document_id: str) -> bool: ...

    @abstractmethod
    async def find_all(self, page: PageRequest) -> Page[Document]: ...

    @abstractmethod
    async def find_by_project(
        self, project_id: str, page: PageRequest
    ) -> Page[Document]: ...

    @abstractmethod
    async def find_by_organization(
        self, organization_id: str, page: PageRequest
    ) -> Page[Document]: ...

    @abstractmethod
    async def find_by_type(self, type: str, page: PageRequest) -> Page[Document]: ...

    @abstractmethod
    async def search(self, term: str, page: PageRequest) -> Page[Document]: ...

    @abstractmethod
    async def find_ids_by_project(self, project_id: str) -> list[str]: ...

    @abstractmethod
    async def find_ids_by_organization(self, organization_id: str) -> list[str]: ...

    @abstractmethod
    async def save(self, document: Document) -> None: ...

    @abstractmethod
    async def delete(self, document_id: str) -> bool: ...

    @abstractmethod
    async def delete_by_project(self, project_id: str) -> int: ...

    @abstractmethod
    async def delete_by_organization(self, organization_id: str) -> int: ...
