"""
Create Comment Command.

The document and the author must exist. A reply's parent must exist and
belong to the same document. New comments start as pending.
"""

from dataclasses import dataclass
from logging import getLogger
from typing import Optional

from workhub.application.common.interfaces import Command, CommandHandler
from workhub.domain.entities.comment import Comment
from workhub.domain.exceptions import DomainValidationError, EntityNotFoundError
from workhub.domain.ports.repositories import (
    CommentRepository,
    DocumentRepository,
    UserRepository,
)

logger = getLogger(__name__)


@dataclass(frozen=True)
class CreateCommentCommand(Command[Comment]):
    document_id: str
    user_id: str
    text: str
    parent_comment_id: Optional[str] = None


class CreateCommentHandler(CommandHandler[Comment]):
    def __init__(
        self,
        comment_repository: CommentRepository,
        document_repository: DocumentRepository,
        user_repository: UserRepository,
    ):
        self._comment_repository = comment_repository
        self._document_repository = document_repository
        self._user_repository = user_repository

    async def execute(self, command: CreateCommentCommand) -> Comment:
        if not command.text or not command.text.strip():
            raise DomainValidationError("Comment text must not be blank")
        if not await self._document_repository.exists_by_id(command.document_id):
            raise EntityNotFoundError.for_id("Document", command.document_id)
        if not await self._user_repository.exists_by_id(command.user_id):
            raise EntityNotFoundError.for_id("User", command.user_id)
        if command.parent_comment_id:
            parent = await self._comment_repository.get_by_id(command.parent_comment_id)
            if not parent:
                raise EntityNotFoundError.for_id("Comment", command.parent_comment_id)
            if parent.document_id != command.document_id:
                raise DomainValidationError(
                    "Parent comment belongs to a different document"
                )

        comment = Comment.create(
            document_id=command.document_id,
            user_id=command.user_id,
            text=command.text.strip(),
            parent_comment_id=command.parent_comment_id,
        )
        await self._comment_repository.save(comment)
        logger.info("Created comment %s on document %s", comment.id, comment.document_id)
        return comment
