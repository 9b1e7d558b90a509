"""Comment commands."""

from .create_comment import CreateCommentCommand, CreateCommentHandler
from .update_comment import (
    CommentReaction,
    EditCommentCommand,
    EditCommentHandler,
    ModerateCommentCommand,
    ModerateCommentHandler,
    ReactToCommentCommand,
    ReactToCommentHandler,
)
from .delete_comment import DeleteCommentCommand, DeleteCommentHandler

__all__ = [
    "CreateCommentCommand",
    "CreateCommentHandler",
    "CommentReaction",
    "EditCommentCommand",
    "EditCommentHandler",
    "ModerateCommentCommand",
    "ModerateCommentHandler",
    "ReactToCommentCommand",
    "ReactToCommentHandler",
    "DeleteCommentCommand",
    "DeleteCommentHandler",
]
