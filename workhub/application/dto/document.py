"""Document and comment DTOs."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from workhub.domain.entities.comment import Comment
from workhub.domain.entities.document import Document


class DocumentDTO(BaseModel):
    id: str
    name: str
    description: Optional[str] = None
    file_url: Optional[str] = None
    mime_type: Optional[str] = None
    size: Optional[int] = None
    project_id: str
    organization_id: str
    type: Optional[str] = None
    tags: list[str]
    uploaded_by: Optional[str] = None
    public: bool
    version: int
    created_at: datetime
    updated_at: datetime
    last_accessed_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, document: Document) -> "DocumentDTO":
        return cls(
            id=document.id,
            name=document.name,
            description=document.description,
            file_url=document.file_url,
            mime_type=document.mime_type,
            size=document.size,
            project_id=document.project_id,
            organization_id=document.organization_id,
            type=document.type,
            tags=list(document.tags),
            uploaded_by=document.uploaded_by,
            public=document.public,
            version=document.version,
            created_at=document.created_at,
            updated_at=document.updated_at,
            last_accessed_at=document.last_accessed_at,
        )


class CommentDTO(BaseModel):
    id: str
    document_id: str
    user_id: str
    parent_comment_id: Optional[str] = None
    text: str
    status: str
    likes: int
    flags: int
    version: int
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, comment: Comment) -> "CommentDTO":
        return cls(
            id=comment.id,
            document_id=comment.document_id,
            user_id=comment.user_id,
            parent_comment_id=comment.parent_comment_id,
            text=comment.text,
            status=comment.status.value,
            likes=comment.likes,
            flags=comment.flags,
            version=comment.version,
            created_at=comment.created_at,
            updated_at=comment.updated_at,
        )
