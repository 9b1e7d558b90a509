"""Workflow queries."""

from .workflow_queries import (
    GetWorkflowHandler,
    GetWorkflowQuery,
    ListFormWorkflowsHandler,
    ListFormWorkflowsQuery,
    ListWorkflowsHandler,
    ListWorkflowsQuery,
)

__all__ = [
    "GetWorkflowHandler",
    "GetWorkflowQuery",
    "ListFormWorkflowsHandler",
    "ListFormWorkflowsQuery",
    "ListWorkflowsHandler",
    "ListWorkflowsQuery",
]
