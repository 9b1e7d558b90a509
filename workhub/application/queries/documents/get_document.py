"""Get Document Query. Reading a document stamps last_accessed_at."""

from dataclasses import dataclass

from workhub.application.common.interfaces import Query, QueryHandler
from workhub.domain.entities.document import Document
from workhub.domain.exceptions import EntityNotFoundError
from workhub.domain.ports.repositories import DocumentRepository


@dataclass(frozen=True)
class GetDocumentQuery(Query[Document]):
    document_id: str


class GetDocumentHandler(QueryHandler[Document]):
    def __init__(self, document_repository: DocumentRepository):
        self._document_repository = document_repository

    async def execute(self, query: GetDocumentQuery) -> Document:
        document = await self._document_repository.get_by_id(query.document_id)
        if not document:
            raise EntityNotFoundError.for_id("Document", query.document_id)
        document.mark_accessed()
        await self._document_repository.save(document)
        return document
