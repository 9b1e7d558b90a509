"""Form queries."""

from .form_queries import (
    GetFormHandler,
    GetFormQuery,
    ListFormsHandler,
    ListFormsQuery,
    ListSubmissionsHandler,
    ListSubmissionsQuery,
)

__all__ = [
    "GetFormHandler",
    "GetFormQuery",
    "ListFormsHandler",
    "ListFormsQuery",
    "ListSubmissionsHandler",
    "ListSubmissionsQuery",
]
