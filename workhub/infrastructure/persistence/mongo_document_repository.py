"""MongoDB Document Repository Implementation (document metadata only)."""

from typing import Any, Optional

from workhub.domain.entities.document import Document
from workhub.domain.ports.repositories import DocumentRepository
from workhub.domain.value_objects.page import Page, PageRequest
from workhub.infrastructure.persistence.mongo_base import (
    MongoRepository,
    contains_ignore_case,
)


class MongoDocumentRepository(MongoRepository[Document], DocumentRepository):
    collection_name = "documents"

    def _to_entity(self, document: dict[str, Any]) -> Document:
        return Document(
            id=document["_id"],
            name=document["name"],
            project_id=document["project_id"],
            organization_id=document["organization_id"],
            created_at=document["created_at"],
            updated_at=document["updated_at"],
            version=document.get("version", 1),
            description=document.get("description"),
            file_url=document.get("file_url"),
            mime_type=document.get("mime_type"),
            size=document.get("size"),
            type=document.get("type"),
            tags=list(document.get("tags") or []),
            uploaded_by=document.get("uploaded_by"),
            public=document.get("public", False),
            last_accessed_at=document.get("last_accessed_at"),
        )

    def _to_document(self, document: Document) -> dict[str, Any]:
        return {
            "_id": document.id,
            "name": document.name,
            "description": document.description,
            "file_url": document.file_url,
            "mime_type": document.mime_type,
            "size": document.size,
            "project_id": document.project_id,
            "organization_id": document.organization_id,
            "type": document.type,
            "tags": list(document.tags),
            "uploaded_by": document.uploaded_by,
            "public": document.public,
            "version": document.version,
            "created_at": document.created_at,
            "updated_at": document.updated_at,
            "last_accessed_at": document.last_accessed_at,
        }

    async def get_by_id(self, document_id: str) -> Optional[Document]:
        return await self._find_one({"_id": document_id})

    async def exists_by_id(self, document_id: str) -> bool:
        return await self._exists({"_id": document_id})

    async def find_all(self, page: PageRequest) -> Page[Document]:
        return await self._find_page({}, page)

    async def find_by_project(
        self, project_id: str, page: PageRequest
    ) -> Page[Document]:
        return await self._find_page({"project_id": project_id}, page)

    async def find_by_organization(
        self, organization_id: str, page: PageRequest
    ) -> Page[Document]:
        return await self._find_page({"organization_id": organization_id}, page)

    async def find_by_type(self, type: str, page: PageRequest) -> Page[Document]:
        return await self._find_page({"type": type}, page)

    async def search(self, term: str, page: PageRequest) -> Page[Document]:
        pattern = contains_ignore_case(term)
        return await self._find_page(
            {"$or": [{"name": pattern}, {"description": pattern}]}, page
        )

    async def find_ids_by_project(self, project_id: str) -> list[str]:
        return await self._find_ids({"project_id": project_id})

    async def find_ids_by_organization(self, organization_id: str) -> list[str]:
        return await self._find_ids({"organization_id": organization_id})

    async def save(self, document: Document) -> None:
        await self._upsert(document)

    async def delete(self, document_id: str) -> bool:
        return await self._delete_by_id(document_id)

    async def delete_by_project(self, project_id: str) -> int:
        return await self._delete_many({"project_id": project_id})

    async def delete_by_organization(self, organization_id: str) -> int:
        return await self._delete_many({"organization_id": organization_id})
