"""Notification and audit log DTOs."""

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel

from workhub.domain.entities.audit_log import AuditLog
from workhub.domain.entities.notification import Notification


class RelatedEntityDTO(BaseModel):
    type: str
    id: str


class NotificationDTO(BaseModel):
    id: str
    user_id: str
    type: str
    title: str
    message: str
    read: bool
    related_to: Optional[RelatedEntityDTO] = None
    created_at: datetime

    @classmethod
    def from_entity(cls, notification: Notification) -> "NotificationDTO":
        related = notification.related_to
        return cls(
            id=notification.id,
            user_id=notification.user_id,
            type=notification.type,
            title=notification.title,
            message=notification.message,
            read=notification.read,
            related_to=RelatedEntityDTO(type=related.type, id=related.id) if related else None,
            created_at=notification.created_at,
        )


class AuditLogDTO(BaseModel):
    id: str
    user_id: Optional[str] = None
    action: str
    entity_type: str
    entity_id: str
    changes: dict[str, Any]
    ip_address: Optional[str] = None
    user_agent: Optional[str] = None
    timestamp: datetime

    @classmethod
    def from_entity(cls, entry: AuditLog) -> "AuditLogDTO":
        return cls(
            id=entry.id,
            user_id=entry.user_id,
            action=entry.action,
            entity_type=entry.entity_type,
            entity_id=entry.entity_id,
            changes=dict(entry.changes),
            ip_address=entry.ip_address,
            user_agent=entry.user_agent,
            timestamp=entry.timestamp,
        )
