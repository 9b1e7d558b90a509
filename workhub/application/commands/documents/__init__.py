"""Document commands."""

from .create_document import CreateDocumentCommand, CreateDocumentHandler
from .update_document import UpdateDocumentCommand, UpdateDocumentHandler
from .delete_document import DeleteDocumentCommand, DeleteDocumentHandler

__all__ = [
    "CreateDocumentCommand",
    "CreateDocumentHandler",
    "UpdateDocumentCommand",
    "UpdateDocumentHandler",
    "DeleteDocumentCommand",
    "DeleteDocumentHandler",
]
