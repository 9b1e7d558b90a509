"""Delete Document Command. Comments on the document go with it."""

from dataclasses import dataclass
from logging import getLogger

from workhub.application.common.interfaces import Command, CommandHandler
from workhub.domain.exceptions import EntityNotFoundError
from workhub.domain.ports.repositories import CommentRepository, DocumentRepository

logger = getLogger(__name__)


@dataclass(frozen=True)
class DeleteDocumentCommand(Command[bool]):
    document_id: str


class DeleteDocumentHandler(CommandHandler[bool]):
    def __init__(
        self,
        document_repository: DocumentRepository,
        comment_repository: CommentRepository,
    ):
        self._document_repository = document_repository
        self._comment_repository = comment_repository

    async def execute(self, command: DeleteDocumentCommand) -> bool:
        if not await self._document_repository.exists_by_id(command.document_id):
            raise EntityNotFoundError.for_id("Document", command.document_id)
        comments = await self._comment_repository.delete_by_document(command.document_id)
        deleted = await self._document_repository.delete(command.document_id)
        logger.info("Deleted document %s and %d comment(s)", command.document_id, comments)
        return deleted
