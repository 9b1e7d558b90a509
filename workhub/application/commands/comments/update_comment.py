"""
Comment mutations: edit text (author only), moderate, like, unlike, flag.
"""

from dataclasses import dataclass
from enum import Enum
from logging import getLogger
from typing import Optional

from workhub.application.common.interfaces import Command, CommandHandler
from workhub.config.settings import Config
from workhub.domain.entities.comment import Comment, CommentStatus
from workhub.domain.exceptions import (
    AccessDeniedError,
    DomainValidationError,
    EntityNotFoundError,
)
from workhub.domain.ports.repositories import CommentRepository

logger = getLogger(__name__)


class CommentReaction(str, Enum):
    LIKE = "like"
    UNLIKE = "unlike"
    FLAG = "flag"


@dataclass(frozen=True)
class EditCommentCommand(Command[Comment]):
    comment_id: str
    user_id: str
    text: str


@dataclass(frozen=True)
class ModerateCommentCommand(Command[Comment]):
    comment_id: str
    status: CommentStatus


@dataclass(frozen=True)
class ReactToCommentCommand(Command[Comment]):
    comment_id: str
    reaction: CommentReaction
    flag_threshold: Optional[int] = None


class _CommentCommandHandler:
    def __init__(self, comment_repository: CommentRepository):
        self._comment_repository = comment_repository

    async def _load(self, comment_id: str) -> Comment:
        comment = await self._comment_repository.get_by_id(comment_id)
        if not comment:
            raise EntityNotFoundError.for_id("Comment", comment_id)
        return comment


class EditCommentHandler(_CommentCommandHandler, CommandHandler[Comment]):
    async def execute(self, command: EditCommentCommand) -> Comment:
        comment = await self._load(command.comment_id)
        if comment.user_id != command.user_id:
            raise AccessDeniedError("Only the author can edit a comment")
        if not command.text or not command.text.strip():
            raise DomainValidationError("Comment text must not be blank")
        comment.edit(command.text.strip())
        await self._comment_repository.save(comment)
        logger.info("Edited comment %s (version %d)", comment.id, comment.version)
        return comment


class ModerateCommentHandler(_CommentCommandHandler, CommandHandler[Comment]):
    async def execute(self, command: ModerateCommentCommand) -> Comment:
        comment = await self._load(command.comment_id)
        comment.moderate(command.status)
        await self._comment_repository.save(comment)
        logger.info("Comment %s moderated to %s", comment.id, command.status.value)
        return comment


class ReactToCommentHandler(_CommentCommandHandler, CommandHandler[Comment]):
    async def execute(self, command: ReactToCommentCommand) -> Comment:
        comment = await self._load(command.comment_id)
        if command.reaction == CommentReaction.LIKE:
            comment.like()
        elif command.reaction == CommentReaction.UNLIKE:
            comment.unlike()
        else:
            comment.flag(command.flag_threshold or Config.COMMENT_FLAG_THRESHOLD)
        await self._comment_repository.save(comment)
        return comment
