"""Update Document Command. Every update bumps the version (last write wins)."""

from dataclasses import dataclass
from logging import getLogger
from typing import Optional

from workhub.application.common.interfaces import Command, CommandHandler
from workhub.domain.entities.document import Document
from workhub.domain.exceptions import DomainValidationError, EntityNotFoundError
from workhub.domain.ports.repositories import DocumentRepository

logger = getLogger(__name__)


@dataclass(frozen=True)
class UpdateDocumentCommand(Command[Document]):
    document_id: str
    name: Optional[str] = None
    description: Optional[str] = None
    file_url: Optional[str] = None
    mime_type: Optional[str] = None
    size: Optional[int] = None
    type: Optional[str] = None
    tags: Optional[tuple[str, ...]] = None
    public: Optional[bool] = None


class UpdateDocumentHandler(CommandHandler[Document]):
    def __init__(self, document_repository: DocumentRepository):
        self._document_repository = document_repository

    async def execute(self, command: UpdateDocumentCommand) -> Document:
        document = await self._document_repository.get_by_id(command.document_id)
        if not document:
            raise EntityNotFoundError.for_id("Document", command.document_id)

        if command.name is not None:
            if not command.name.strip():
                raise DomainValidationError("Document name must not be blank")
            document.name = command.name.strip()
        for name in ("description", "file_url", "mime_type", "size", "type", "public"):
            value = getattr(command, name)
            if value is not None:
                setattr(document, name, value)
        if command.tags is not None:
            document.tags = list(command.tags)

        document.mark_revised()
        await self._document_repository.save(document)
        logger.info("Updated document %s to version %d", document.id, document.version)
        return document
