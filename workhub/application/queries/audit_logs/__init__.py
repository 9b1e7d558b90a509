"""Audit log queries."""

from .list_audit_logs import ListAuditLogsHandler, ListAuditLogsQuery

__all__ = ["ListAuditLogsHandler", "ListAuditLogsQuery"]
