"""
AuditLog Entity - Append-only record of who did what to which entity.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Optional
from uuid import uuid4


@dataclass(frozen=True)
class AuditLog:
    id: str
    action: str
    entity_type: str
    entity_id: str
    timestamp: datetime
    user_id: Optional[str] = None
    changes: dict[str, Any] = field(default_factory=dict)
    ip_address: Optional[str] = None
    user_agent: Optional[str] = None

    @classmethod
    def record(
        cls,
        action: str,
        entity_type: str,
        entity_id: str,
        user_id: Optional[str] = None,
        changes: Optional[dict[str, Any]] = None,
        ip_address: Optional[str] = None,
        user_agent: Optional[str] = None,
    ) -> AuditLog:
        return cls(
            id=str(uuid4()),
            action=action,
            entity_type=entity_type,
            entity_id=entity_id,
            timestamp=datetime.now(timezone.utc),
            user_id=user_id,
            changes=dict(changes or {}),
            ip_address=ip_address,
            user_agent=user_agent,
        )
