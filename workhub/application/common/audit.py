"""
Audit Trail - Appends AuditLog entries for user and product changes.
"""

from logging import getLogger
from typing import Any, Optional

from workhub.application.common.actor import Actor, SYSTEM
from workhub.domain.entities.audit_log import AuditLog
from workhub.domain.ports.repositories import AuditLogRepository

logger = getLogger(__name__)


class AuditTrail:
    def __init__(self, audit_log_repository: AuditLogRepository):
        self._audit_log_repository = audit_log_repository

    async def record(
        self,
        action: str,
        entity_type: str,
        entity_id: str,
        actor: Actor = SYSTEM,
        changes: Optional[dict[str, Any]] = None,
    ) -> AuditLog:
        entry = AuditLog.record(
            action=action,
            entity_type=entity_type,
            entity_id=entity_id,
            user_id=actor.user_id,
            changes=changes,
            ip_address=actor.ip_address,
            user_agent=actor.user_agent,
        )
        await self._audit_log_repository.append(entry)
        logger.debug("Audit %s on %s %s by %s", action, entity_type, entity_id, actor.user_id)
        return entry
