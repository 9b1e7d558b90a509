"""Audit log queries, by entity or by acting user."""

from dataclasses import dataclass
from typing import Optional

from workhub.application.common.interfaces import Query, QueryHandler
from workhub.domain.entities.audit_log import AuditLog
from workhub.domain.exceptions import DomainValidationError
from workhub.domain.ports.repositories import AuditLogRepository
from workhub.domain.value_objects.page import Page, PageRequest


@dataclass(frozen=True)
class ListAuditLogsQuery(Query[Page[AuditLog]]):
    page: PageRequest
    entity_type: Optional[str] = None
    entity_id: Optional[str] = None
    user_id: Optional[str] = None


class ListAuditLogsHandler(QueryHandler[Page[AuditLog]]):
    def __init__(self, audit_log_repository: AuditLogRepository):
        self._audit_log_repository = audit_log_repository

    async def execute(self, query: ListAuditLogsQuery) -> Page[AuditLog]:
        if query.entity_type and query.entity_id:
            return await self._audit_log_repository.find_by_entity(
                query.entity_type, query.entity_id, query.page
            )
        if query.user_id:
            return await self._audit_log_repository.find_by_user(query.user_id, query.page)
        raise DomainValidationError(
            "Either entity_type with entity_id, or user_id, is required"
        )
