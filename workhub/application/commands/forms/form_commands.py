"""
Form commands: create, update, delete, activate/deactivate.

A form may not be deleted while workflows reference it; deleting it
removes its submissions first.
"""

from dataclasses import dataclass
from logging import getLogger
from typing import Any, Optional

from workhub.application.common.interfaces import Command, CommandHandler
from workhub.domain.entities.form import Form, FormField
from workhub.domain.exceptions import (
    DomainValidationError,
    EntityAlreadyExistsError,
    EntityNotFoundError,
    InvalidStateError,
)
from workhub.domain.ports.repositories import (
    FormRepository,
    FormSubmissionRepository,
    WorkflowRepository,
)

logger = getLogger(__name__)


def check_fields(fields: tuple[FormField, ...]) -> None:
    if not fields:
        raise DomainValidationError("Form must contain at least one field")
    names = [f.name for f in fields]
    if any(not name or not name.strip() for name in names):
        raise DomainValidationError("Form field names must not be blank")
    if len(set(names)) != len(names):
        raise DomainValidationError("Form field names must be unique")


@dataclass(frozen=True)
class CreateFormCommand(Command[Form]):
    name: str
    fields: tuple[FormField, ...]
    description: Optional[str] = None
    layout: Optional[dict[str, Any]] = None
    created_by: Optional[str] = None


@dataclass(frozen=True)
class UpdateFormCommand(Command[Form]):
    form_id: str
    name: Optional[str] = None
    description: Optional[str] = None
    fields: Optional[tuple[FormField, ...]] = None
    layout: Optional[dict[str, Any]] = None
    modified_by: Optional[str] = None


@dataclass(frozen=True)
class SetFormActiveCommand(Command[Form]):
    form_id: str
    active: bool


@dataclass(frozen=True)
class DeleteFormCommand(Command[bool]):
    form_id: str


class CreateFormHandler(CommandHandler[Form]):
    def __init__(self, form_repository: FormRepository):
        self._form_repository = form_repository

    async def execute(self, command: CreateFormCommand) -> Form:
        if not command.name or not command.name.strip():
            raise DomainValidationError("Form name must not be blank")
        check_fields(command.fields)
        if await self._form_repository.exists_by_name(command.name.strip()):
            raise EntityAlreadyExistsError(f"Form name already in use: {command.name}")

        form = Form.create(
            name=command.name.strip(),
            fields=list(command.fields),
            description=command.description,
            layout=command.layout,
            created_by=command.created_by,
        )
        await self._form_repository.save(form)
        logger.info("Created form %s (%s)", form.id, form.name)
        return form


class UpdateFormHandler(CommandHandler[Form]):
    def __init__(self, form_repository: FormRepository):
        self._form_repository = form_repository

    async def execute(self, command: UpdateFormCommand) -> Form:
        form = await self._form_repository.get_by_id(command.form_id)
        if not form:
            raise EntityNotFoundError.for_id("Form", command.form_id)

        if command.name is not None and command.name.strip() != form.name:
            if not command.name.strip():
                raise DomainValidationError("Form name must not be blank")
            if await self._form_repository.exists_by_name(command.name.strip()):
                raise EntityAlreadyExistsError(f"Form name already in use: {command.name}")
            form.name = command.name.strip()
        if command.fields is not None:
            check_fields(command.fields)
            form.fields = list(command.fields)
        if command.description is not None:
            form.description = command.description
        if command.layout is not None:
            form.layout = dict(command.layout)

        form.mark_revised(command.modified_by)
        await self._form_repository.save(form)
        logger.info("Updated form %s to version %d", form.id, form.version)
        return form


class SetFormActiveHandler(CommandHandler[Form]):
    def __init__(self, form_repository: FormRepository):
        self._form_repository = form_repository

    async def execute(self, command: SetFormActiveCommand) -> Form:
        form = await self._form_repository.get_by_id(command.form_id)
        if not form:
            raise EntityNotFoundError.for_id("Form", command.form_id)
        form.set_active(command.active)
        await self._form_repository.save(form)
        logger.info("Form %s active=%s", form.id, command.active)
        return form


class DeleteFormHandler(CommandHandler[bool]):
    def __init__(
        self,
        form_repository: FormRepository,
        form_submission_repository: FormSubmissionRepository,
        workflow_repository: WorkflowRepository,
    ):
        self._form_repository = form_repository
        self._form_submission_repository = form_submission_repository
        self._workflow_repository = workflow_repository

    async def execute(self, command: DeleteFormCommand) -> bool:
        if not await self._form_repository.get_by_id(command.form_id):
            raise EntityNotFoundError.for_id("Form", command.form_id)
        workflows = await self._workflow_repository.find_by_form(command.form_id)
        if workflows:
            raise InvalidStateError(
                f"Form {command.form_id} is referenced by {len(workflows)} workflow(s)"
            )

        submissions = await self._form_submission_repository.delete_by_form(command.form_id)
        deleted = await self._form_repository.delete(command.form_id)
        logger.info("Deleted form %s and %d submission(s)", command.form_id, submissions)
        return deleted
