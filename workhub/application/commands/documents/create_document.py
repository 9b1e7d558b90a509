"""Create Document Command. The organization is taken from the project."""

from dataclasses import dataclass
from logging import getLogger
from typing import Optional

from workhub.application.common.interfaces import Command, CommandHandler
from workhub.domain.entities.document import Document
from workhub.domain.exceptions import DomainValidationError, EntityNotFoundError
from workhub.domain.ports.repositories import DocumentRepository, ProjectRepository

logger = getLogger(__name__)


@dataclass(frozen=True)
class CreateDocumentCommand(Command[Document]):
    name: str
    project_id: str
    description: Optional[str] = None
    file_url: Optional[str] = None
    mime_type: Optional[str] = None
    size: Optional[int] = None
    type: Optional[str] = None
    tags: tuple[str, ...] = ()
    uploaded_by: Optional[str] = None
    public: bool = False


class CreateDocumentHandler(CommandHandler[Document]):
    def __init__(
        self,
        document_repository: DocumentRepository,
        project_repository: ProjectRepository,
    ):
        self._document_repository = document_repository
        self._project_repository = project_repository

    async def execute(self, command: CreateDocumentCommand) -> Document:
        if not command.name or not command.name.strip():
            raise DomainValidationError("Document name must not be blank")
        if command.size is not None and command.size < 0:
            raise DomainValidationError("Document size must not be negative")
        project = await self._project_repository.get_by_id(command.project_id)
        if not project:
            raise EntityNotFoundError.for_id("Project", command.project_id)

        document = Document.create(
            name=command.name.strip(),
            project_id=project.id,
            organization_id=project.organization_id,
            description=command.description,
            file_url=command.file_url,
            mime_type=command.mime_type,
            size=command.size,
            type=command.type,
            tags=list(command.tags),
            uploaded_by=command.uploaded_by,
            public=command.public,
        )
        await self._document_repository.save(document)
        logger.info("Created document %s in project %s", document.id, project.id)
        return document
