"""Comments API Router. Creation lives under /documents/{id}/comments."""

from logging import getLogger

from dishka.integrations.fastapi import FromDishka, inject
from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from workhub.application.commands.comments import (
    CommentReaction,
    DeleteCommentCommand,
    DeleteCommentHandler,
    EditCommentCommand,
    EditCommentHandler,
    ModerateCommentCommand,
    ModerateCommentHandler,
    ReactToCommentCommand,
    ReactToCommentHandler,
)
from workhub.application.dto import ApiResponse, CommentDTO
from workhub.application.queries.comments import (
    ListCommentRepliesHandler,
    ListCommentRepliesQuery,
)
from workhub.domain.entities.comment import CommentStatus
from workhub.presentation.dependencies import AuthUser, get_current_user, require_manager

logger = getLogger(__name__)


# ==================== REQUEST/RESPONSE MODELS ====================


class EditCommentRequest(BaseModel):
    text: str = Field(min_length=1)


class ModerateCommentRequest(BaseModel):
    status: CommentStatus


# ==================== ROUTER ====================

router = APIRouter(prefix="/api/v1/comments", tags=["comments"])


# ==================== ENDPOINTS ====================


@router.get("/{comment_id}/replies", response_model=ApiResponse[list[CommentDTO]])
@inject
async def list_replies(
    comment_id: str,
    handler: FromDishka[ListCommentRepliesHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    replies = await handler.execute(ListCommentRepliesQuery(comment_id=comment_id))
    return ApiResponse.ok([CommentDTO.from_entity(c) for c in replies])


@router.put("/{comment_id}", response_model=ApiResponse[CommentDTO])
@inject
async def edit_comment(
    comment_id: str,
    request: EditCommentRequest,
    handler: FromDishka[EditCommentHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    """Only the author may edit; each edit bumps the version."""
    comment = await handler.execute(
        EditCommentCommand(comment_id=comment_id, user_id=current_user.user_id, text=request.text)
    )
    return ApiResponse.ok(CommentDTO.from_entity(comment), "Comment updated")


@router.patch("/{comment_id}/status", response_model=ApiResponse[CommentDTO])
@inject
async def moderate_comment(
    comment_id: str,
    request: ModerateCommentRequest,
    handler: FromDishka[ModerateCommentHandler],
    current_user: AuthUser = Depends(require_manager),
):
    comment = await handler.execute(
        ModerateCommentCommand(comment_id=comment_id, status=request.status)
    )
    return ApiResponse.ok(CommentDTO.from_entity(comment), "Comment moderated")


@router.post("/{comment_id}/{reaction}", response_model=ApiResponse[CommentDTO])
@inject
async def react_to_comment(
    comment_id: str,
    reaction: CommentReaction,
    handler: FromDishka[ReactToCommentHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    """``reaction`` is one of like, unlike, flag."""
    comment = await handler.execute(
        ReactToCommentCommand(comment_id=comment_id, reaction=reaction)
    )
    return ApiResponse.ok(CommentDTO.from_entity(comment))


@router.delete("/{comment_id}", response_model=ApiResponse[None])
@inject
async def delete_comment(
    comment_id: str,
    handler: FromDishka[DeleteCommentHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    """Delete a comment and its direct replies."""
    await handler.execute(DeleteCommentCommand(comment_id=comment_id))
    return ApiResponse.ok(None, "Comment deleted")
