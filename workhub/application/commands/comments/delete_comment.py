"""Delete Comment Command. Direct replies are removed with it."""

from dataclasses import dataclass
from logging import getLogger

from workhub.application.common.interfaces import Command, CommandHandler
from workhub.domain.exceptions import EntityNotFoundError
from workhub.domain.ports.repositories import CommentRepository

logger = getLogger(__name__)


@dataclass(frozen=True)
class DeleteCommentCommand(Command[bool]):
    comment_id: str


class DeleteCommentHandler(CommandHandler[bool]):
    def __init__(self, comment_repository: CommentRepository):
        self._comment_repository = comment_repository

    async def execute(self, command: DeleteCommentCommand) -> bool:
        if not await self._comment_repository.get_by_id(command.comment_id):
            raise EntityNotFoundError.for_id("Comment", command.comment_id)
        replies = await self._comment_repository.delete_replies(command.comment_id)
        deleted = await self._comment_repository.delete(command.comment_id)
        logger.info("Deleted comment %s and %d repl(ies)", command.comment_id, replies)
        return deleted
