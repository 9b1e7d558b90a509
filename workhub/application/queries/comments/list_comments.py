"""Comment queries: comments of a document (paged) and replies of a comment."""

from dataclasses import dataclass

from workhub.application.common.interfaces import Query, QueryHandler
from workhub.domain.entities.comment import Comment
from workhub.domain.exceptions import EntityNotFoundError
from workhub.domain.ports.repositories import CommentRepository, DocumentRepository
from workhub.domain.value_objects.page import Page, PageRequest


@dataclass(frozen=True)
class ListDocumentCommentsQuery(Query[Page[Comment]]):
    document_id: str
    page: PageRequest


@dataclass(frozen=True)
class ListCommentRepliesQuery(Query[list[Comment]]):
    comment_id: str


class ListDocumentCommentsHandler(QueryHandler[Page[Comment]]):
    def __init__(
        self,
        comment_repository: CommentRepository,
        document_repository: DocumentRepository,
    ):
        self._comment_repository = comment_repository
        self._document_repository = document_repository

    async def execute(self, query: ListDocumentCommentsQuery) -> Page[Comment]:
        if not await self._document_repository.exists_by_id(query.document_id):
            raise EntityNotFoundError.for_id("Document", query.document_id)
        return await self._comment_repository.find_by_document(query.document_id, query.page)


class ListCommentRepliesHandler(QueryHandler[list[Comment]]):
    def __init__(self, comment_repository: CommentRepository):
        self._comment_repository = comment_repository

    async def execute(self, query: ListCommentRepliesQuery) -> list[Comment]:
        if not await self._comment_repository.get_by_id(query.comment_id):
            raise EntityNotFoundError.for_id("Comment", query.comment_id)
        return await self._comment_repository.find_replies(query.comment_id)
