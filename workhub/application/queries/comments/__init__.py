"""Comment queries."""

from .list_comments import (
    ListCommentRepliesHandler,
    ListCommentRepliesQuery,
    ListDocumentCommentsHandler,
    ListDocumentCommentsQuery,
)

__all__ = [
    "ListCommentRepliesHandler",
    "ListCommentRepliesQuery",
    "ListDocumentCommentsHandler",
    "ListDocumentCommentsQuery",
]
