"""
AuditLog Repository Port - Append-only audit trail.
Implementation: workhub/infrastructure/persistence/mongo_audit_log_repository.py
"""

from abc import ABC, abstractmethod
from workhub.domain.entities.audit_log import AuditLog
from workhub.domain.value_objects.page import Page, PageRequest


class AuditLogRepository(ABC):
    # Fields a paged listing may be sorted by ("id" maps to _id)
    sortable_fields = frozenset({"id", "timestamp", "action", "entity_type", "user_id"})

    @abstractmethod
    async def append(self, entry: AuditLog) -> None: ...

    @abstractmethod
    async def find_by_entity(
        self, entity_type: str, entity_id: str, page: PageRequest
    ) -> Page[AuditLog]: ...

    @abstractmethod
    async def find_by_user(self, user_id: str, page: PageRequest) -> Page[AuditLog]: ...
