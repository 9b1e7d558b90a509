"""Audit Logs API Router (read-only, ADMIN)."""

from typing import Optional

from dishka.integrations.fastapi import FromDishka, inject
from fastapi import APIRouter, Depends

from workhub.application.dto import AuditLogDTO, PageResponse
from workhub.application.queries.audit_logs import ListAuditLogsHandler, ListAuditLogsQuery
from workhub.domain.value_objects.page import PageRequest
from workhub.presentation.dependencies import AuthUser, get_page_request, require_admin

router = APIRouter(prefix="/api/v1/audit-logs", tags=["audit-logs"])


@router.get("", response_model=PageResponse[AuditLogDTO])
@inject
async def list_audit_logs(
    handler: FromDishka[ListAuditLogsHandler],
    entity_type: Optional[str] = None,
    entity_id: Optional[str] = None,
    user_id: Optional[str] = None,
    page: PageRequest = Depends(get_page_request),
    current_user: AuthUser = Depends(require_admin),
):
    """Audit entries by entity (entity_type + entity_id) or by acting user."""
    result = await handler.execute(
        ListAuditLogsQuery(
            page=page, entity_type=entity_type, entity_id=entity_id, user_id=user_id
        )
    )
    return PageResponse.from_page(result, AuditLogDTO.from_entity)
