"""Documents API Router. Stores document metadata only; file_url points at the binary."""

from logging import getLogger
from typing import Optional

from dishka.integrations.fastapi import FromDishka, inject
from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel, Field

from workhub.application.commands.comments import CreateCommentCommand, CreateCommentHandler
from workhub.application.commands.documents import (
    CreateDocumentCommand,
    CreateDocumentHandler,
    DeleteDocumentCommand,
    DeleteDocumentHandler,
    UpdateDocumentCommand,
    UpdateDocumentHandler,
)
from workhub.application.dto import ApiResponse, CommentDTO, DocumentDTO, PageResponse
from workhub.application.queries.comments import (
    ListDocumentCommentsHandler,
    ListDocumentCommentsQuery,
)
from workhub.application.queries.documents import (
    GetDocumentHandler,
    GetDocumentQuery,
    ListDocumentsHandler,
    ListDocumentsQuery,
)
from workhub.domain.value_objects.page import PageRequest
from workhub.presentation.dependencies import AuthUser, get_current_user, get_page_request

logger = getLogger(__name__)


# ==================== REQUEST/RESPONSE MODELS ====================


class CreateDocumentRequest(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    project_id: str
    description: Optional[str] = None
    file_url: Optional[str] = None
    mime_type: Optional[str] = None
    size: Optional[int] = Field(default=None, ge=0)
    type: Optional[str] = None
    tags: list[str] = []
    public: bool = False


class UpdateDocumentRequest(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    description: Optional[str] = None
    file_url: Optional[str] = None
    mime_type: Optional[str] = None
    size: Optional[int] = Field(default=None, ge=0)
    type: Optional[str] = None
    tags: Optional[list[str]] = None
    public: Optional[bool] = None


class AddCommentRequest(BaseModel):
    text: str = Field(min_length=1)
    parent_comment_id: Optional[str] = None


# ==================== ROUTER ====================

router = APIRouter(prefix="/api/v1/documents", tags=["documents"])


# ==================== ENDPOINTS ====================


@router.post("", response_model=ApiResponse[DocumentDTO], status_code=status.HTTP_201_CREATED)
@inject
async def create_document(
    request: CreateDocumentRequest,
    handler: FromDishka[CreateDocumentHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    document = await handler.execute(
        CreateDocumentCommand(
            name=request.name,
            project_id=request.project_id,
            description=request.description,
            file_url=request.file_url,
            mime_type=request.mime_type,
            size=request.size,
            type=request.type,
            tags=tuple(request.tags),
            uploaded_by=current_user.user_id,
            public=request.public,
        )
    )
    return ApiResponse.ok(DocumentDTO.from_entity(document), "Document created")


@router.get("", response_model=PageResponse[DocumentDTO])
@inject
async def list_documents(
    handler: FromDishka[ListDocumentsHandler],
    search: Optional[str] = Query(None, alias="q"),
    project_id: Optional[str] = None,
    organization_id: Optional[str] = None,
    type: Optional[str] = None,
    page: PageRequest = Depends(get_page_request),
    current_user: AuthUser = Depends(get_current_user),
):
    """One filter applies at a time, in this order: q, project_id, organization_id, type."""
    result = await handler.execute(
        ListDocumentsQuery(
            page=page,
            search=search,
            project_id=project_id,
            organization_id=organization_id,
            type=type,
        )
    )
    return PageResponse.from_page(result, DocumentDTO.from_entity)


@router.get("/{document_id}", response_model=ApiResponse[DocumentDTO])
@inject
async def get_document(
    document_id: str,
    handler: FromDishka[GetDocumentHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    document = await handler.execute(GetDocumentQuery(document_id=document_id))
    return ApiResponse.ok(DocumentDTO.from_entity(document))


@router.put("/{document_id}", response_model=ApiResponse[DocumentDTO])
@inject
async def update_document(
    document_id: str,
    request: UpdateDocumentRequest,
    handler: FromDishka[UpdateDocumentHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    document = await handler.execute(
        UpdateDocumentCommand(
            document_id=document_id,
            name=request.name,
            description=request.description,
            file_url=request.file_url,
            mime_type=request.mime_type,
            size=request.size,
            type=request.type,
            tags=tuple(request.tags) if request.tags is not None else None,
            public=request.public,
        )
    )
    return ApiResponse.ok(DocumentDTO.from_entity(document), "Document updated")


@router.delete("/{document_id}", response_model=ApiResponse[None])
@inject
async def delete_document(
    document_id: str,
    handler: FromDishka[DeleteDocumentHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    """Delete a document and its comments."""
    await handler.execute(DeleteDocumentCommand(document_id=document_id))
    return ApiResponse.ok(None, "Document deleted")


@router.get("/{document_id}/comments", response_model=PageResponse[CommentDTO])
@inject
async def list_document_comments(
    document_id: str,
    handler: FromDishka[ListDocumentCommentsHandler],
    page: PageRequest = Depends(get_page_request),
    current_user: AuthUser = Depends(get_current_user),
):
    result = await handler.execute(
        ListDocumentCommentsQuery(document_id=document_id, page=page)
    )
    return PageResponse.from_page(result, CommentDTO.from_entity)


@router.post(
    "/{document_id}/comments",
    response_model=ApiResponse[CommentDTO],
    status_code=status.HTTP_201_CREATED,
)
@inject
async def add_document_comment(
    document_id: str,
    request: AddCommentRequest,
    handler: FromDishka[CreateCommentHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    comment = await handler.execute(
        CreateCommentCommand(
            document_id=document_id,
            user_id=current_user.user_id,
            text=request.text,
            parent_comment_id=request.parent_comment_id,
        )
    )
    return ApiResponse.ok(CommentDTO.from_entity(comment), "Comment added")
