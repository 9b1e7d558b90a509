"""
Tests for documents and their comment threads.

Run with: pytest tests/test_documents.py -v
"""

import pytest

from workhub.application.commands.comments import (
    CommentReaction,
    CreateCommentCommand,
    CreateCommentHandler,
    DeleteCommentCommand,
    DeleteCommentHandler,
    EditCommentCommand,
    EditCommentHandler,
    ReactToCommentCommand,
    ReactToCommentHandler,
)
from workhub.application.commands.documents import (
    CreateDocumentCommand,
    CreateDocumentHandler,
    DeleteDocumentCommand,
    DeleteDocumentHandler,
    UpdateDocumentCommand,
    UpdateDocumentHandler,
)
from workhub.application.queries.documents import GetDocumentHandler, GetDocumentQuery
from workhub.domain.entities.comment import Comment, CommentStatus
from workhub.domain.entities.document import Document
from workhub.domain.entities.project import Project
from workhub.domain.exceptions import (
    AccessDeniedError,
    DomainValidationError,
    EntityNotFoundError,
)


@pytest.fixture()
def project(repos, organization):
    return repos.projects.add(Project.create(name="Apollo", organization_id=organization.id))


@pytest.fixture()
def document(repos, project):
    return repos.documents.add(
        Document.create(name="Design", project_id=project.id, organization_id=project.organization_id)
    )


@pytest.mark.anyio
class TestDocuments:
    async def test_organization_is_taken_from_project(self, repos, project):
        document = await CreateDocumentHandler(repos.documents, repos.projects).execute(
            CreateDocumentCommand(name="Brief", project_id=project.id, size=2048)
        )

        assert document.organization_id == project.organization_id
        assert document.version == 1

    async def test_unknown_project_is_not_found(self, repos):
        with pytest.raises(EntityNotFoundError):
            await CreateDocumentHandler(repos.documents, repos.projects).execute(
                CreateDocumentCommand(name="Brief", project_id="missing")
            )

    async def test_negative_size_is_rejected(self, repos, project):
        with pytest.raises(DomainValidationError):
            await CreateDocumentHandler(repos.documents, repos.projects).execute(
                CreateDocumentCommand(name="Brief", project_id=project.id, size=-1)
            )

    async def test_every_update_bumps_version(self, repos, document):
        handler = UpdateDocumentHandler(repos.documents)

        await handler.execute(UpdateDocumentCommand(document_id=document.id, public=True))
        updated = await handler.execute(
            UpdateDocumentCommand(document_id=document.id, tags=("draft",))
        )

        assert updated.version == 3
        assert updated.public is True
        assert updated.tags == ["draft"]

    async def test_reading_stamps_last_access(self, repos, document):
        assert document.last_accessed_at is None

        await GetDocumentHandler(repos.documents).execute(GetDocumentQuery(document_id=document.id))

        assert (await repos.documents.get_by_id(document.id)).last_accessed_at is not None

    async def test_delete_removes_comments(self, repos, document):
        repos.comments.add(Comment.create(document_id=document.id, user_id="u1", text="hi"))
        handler = DeleteDocumentHandler(repos.documents, repos.comments)

        assert await handler.execute(DeleteDocumentCommand(document_id=document.id))

        assert repos.comments.items == {}
        assert repos.documents.items == {}


@pytest.mark.anyio
class TestComments:
    async def test_reply_must_share_the_document(self, repos, project, document, member):
        other = repos.documents.add(
            Document.create(name="Other", project_id=project.id, organization_id=project.organization_id)
        )
        parent = repos.comments.add(
            Comment.create(document_id=other.id, user_id=member.user.id, text="parent")
        )
        handler = CreateCommentHandler(repos.comments, repos.documents, repos.users)

        with pytest.raises(DomainValidationError):
            await handler.execute(
                CreateCommentCommand(
                    document_id=document.id,
                    user_id=member.user.id,
                    text="reply",
                    parent_comment_id=parent.id,
                )
            )

    async def test_new_comment_is_pending(self, repos, document, member):
        comment = await CreateCommentHandler(repos.comments, repos.documents, repos.users).execute(
            CreateCommentCommand(document_id=document.id, user_id=member.user.id, text=" Nice ")
        )

        assert comment.status == CommentStatus.PENDING
        assert comment.text == "Nice"

    async def test_only_author_may_edit(self, repos, document, member):
        comment = repos.comments.add(
            Comment.create(document_id=document.id, user_id=member.user.id, text="v1")
        )
        handler = EditCommentHandler(repos.comments)

        with pytest.raises(AccessDeniedError):
            await handler.execute(
                EditCommentCommand(comment_id=comment.id, user_id="someone-else", text="v2")
            )

        edited = await handler.execute(
            EditCommentCommand(comment_id=comment.id, user_id=member.user.id, text="v2")
        )
        assert edited.text == "v2"
        assert edited.version == comment.version + 1

    async def test_flags_reaching_threshold_mark_comment_flagged(self, repos, document):
        comment = repos.comments.add(Comment.create(document_id=document.id, user_id="u1", text="x"))
        handler = ReactToCommentHandler(repos.comments)

        for _ in range(2):
            result = await handler.execute(
                ReactToCommentCommand(
                    comment_id=comment.id, reaction=CommentReaction.FLAG, flag_threshold=3
                )
            )
            assert result.status == CommentStatus.PENDING
        result = await handler.execute(
            ReactToCommentCommand(comment_id=comment.id, reaction=CommentReaction.FLAG, flag_threshold=3)
        )

        assert result.flags == 3
        assert result.status == CommentStatus.FLAGGED

    async def test_unlike_never_goes_below_zero(self, repos, document):
        comment = repos.comments.add(Comment.create(document_id=document.id, user_id="u1", text="x"))

        result = await ReactToCommentHandler(repos.comments).execute(
            ReactToCommentCommand(comment_id=comment.id, reaction=CommentReaction.UNLIKE)
        )

        assert result.likes == 0

    async def test_delete_removes_direct_replies(self, repos, document):
        parent = repos.comments.add(Comment.create(document_id=document.id, user_id="u1", text="p"))
        repos.comments.add(
            Comment.create(document_id=document.id, user_id="u2", text="r", parent_comment_id=parent.id)
        )
        kept = repos.comments.add(Comment.create(document_id=document.id, user_id="u3", text="k"))

        await DeleteCommentHandler(repos.comments).execute(DeleteCommentCommand(comment_id=parent.id))

        assert list(repos.comments.items) == [kept.id]


class TestDocumentsApi:
    def test_comment_thread(self, client, member, document):
        res = client.post(
            f"/api/v1/documents/{document.id}/comments",
            headers=member.headers,
            json={"text": "First!"},
        )
        assert res.status_code == 201
        parent_id = res.json()["data"]["id"]

        client.post(
            f"/api/v1/documents/{document.id}/comments",
            headers=member.headers,
            json={"text": "Reply", "parent_comment_id": parent_id},
        )

        res = client.get(f"/api/v1/documents/{document.id}/comments", headers=member.headers)
        assert res.json()["total_elements"] == 2

        res = client.get(f"/api/v1/comments/{parent_id}/replies", headers=member.headers)
        assert [c["text"] for c in res.json()["data"]] == ["Reply"]

    def test_like_reaction(self, client, repos, member, document):
        comment = repos.comments.add(Comment.create(document_id=document.id, user_id="u1", text="x"))

        res = client.post(f"/api/v1/comments/{comment.id}/like", headers=member.headers)

        assert res.status_code == 200
        assert res.json()["data"]["likes"] == 1

    def test_moderation_requires_manager(self, client, repos, member, manager, document):
        comment = repos.comments.add(Comment.create(document_id=document.id, user_id="u1", text="x"))
        url = f"/api/v1/comments/{comment.id}/status"

        assert client.patch(url, headers=member.headers, json={"status": "approved"}).status_code == 403
        res = client.patch(url, headers=manager.headers, json={"status": "approved"})
        assert res.status_code == 200
        assert res.json()["data"]["status"] == "approved"

    def test_update_document_bumps_version(self, client, member, document):
        res = client.put(
            f"/api/v1/documents/{document.id}", headers=member.headers, json={"name": "Design v2"}
        )
        assert res.status_code == 200
        assert res.json()["data"]["version"] == 2
