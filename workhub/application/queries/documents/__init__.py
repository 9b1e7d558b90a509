"""Document queries."""

from .get_document import GetDocumentQuery, GetDocumentHandler
from .list_documents import ListDocumentsQuery, ListDocumentsHandler

__all__ = [
    "GetDocumentQuery",
    "GetDocumentHandler",
    "ListDocumentsQuery",
    "ListDocumentsHandler",
]
