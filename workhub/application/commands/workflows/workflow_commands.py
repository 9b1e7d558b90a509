"""
Workflow commands.

Workflows are stored definitions only: an ordered list of steps attached
to a form. New workflows start inactive.
"""

from dataclasses import dataclass
from logging import getLogger
from typing import Optional

from workhub.application.common.interfaces import Command, CommandHandler
from workhub.domain.entities.workflow import Workflow, WorkflowStep
from workhub.domain.exceptions import (
    DomainValidationError,
    EntityAlreadyExistsError,
    EntityNotFoundError,
)
from workhub.domain.ports.repositories import FormRepository, WorkflowRepository

logger = getLogger(__name__)


def check_steps(steps: tuple[WorkflowStep, ...]) -> None:
    if not steps:
        raise DomainValidationError("Workflow must contain at least one step")
    orders = [step.order for step in steps]
    if len(set(orders)) != len(orders):
        raise DomainValidationError("Workflow step orders must be unique")


@dataclass(frozen=True)
class CreateWorkflowCommand(Command[Workflow]):
    name: str
    form_id: str
    steps: tuple[WorkflowStep, ...]
    description: Optional[str] = None
    created_by: Optional[str] = None


@dataclass(frozen=True)
class UpdateWorkflowCommand(Command[Workflow]):
    workflow_id: str
    name: Optional[str] = None
    description: Optional[str] = None
    form_id: Optional[str] = None
    steps: Optional[tuple[WorkflowStep, ...]] = None


@dataclass(frozen=True)
class SetWorkflowActiveCommand(Command[Workflow]):
    workflow_id: str
    active: bool


@dataclass(frozen=True)
class DeleteWorkflowCommand(Command[bool]):
    workflow_id: str


class CreateWorkflowHandler(CommandHandler[Workflow]):
    def __init__(
        self, workflow_repository: WorkflowRepository, form_repository: FormRepository
    ):
        self._workflow_repository = workflow_repository
        self._form_repository = form_repository

    async def execute(self, command: CreateWorkflowCommand) -> Workflow:
        if not command.name or not command.name.strip():
            raise DomainValidationError("Workflow name must not be blank")
        check_steps(command.steps)
        if not await self._form_repository.get_by_id(command.form_id):
            raise EntityNotFoundError.for_id("Form", command.form_id)
        if await self._workflow_repository.exists_by_name(command.name.strip()):
            raise EntityAlreadyExistsError(f"Workflow name already in use: {command.name}")

        workflow = Workflow.create(
            name=command.name.strip(),
            form_id=command.form_id,
            steps=list(command.steps),
            description=command.description,
            created_by=command.created_by,
        )
        await self._workflow_repository.save(workflow)
        logger.info("Created workflow %s for form %s", workflow.id, workflow.form_id)
        return workflow


class UpdateWorkflowHandler(CommandHandler[Workflow]):
    def __init__(
        self, workflow_repository: WorkflowRepository, form_repository: FormRepository
    ):
        self._workflow_repository = workflow_repository
        self._form_repository = form_repository

    async def execute(self, command: UpdateWorkflowCommand) -> Workflow:
        workflow = await self._workflow_repository.get_by_id(command.workflow_id)
        if not workflow:
            raise EntityNotFoundError.for_id("Workflow", command.workflow_id)

        if command.name is not None and command.name.strip() != workflow.name:
            if not command.name.strip():
                raise DomainValidationError("Workflow name must not be blank")
            if await self._workflow_repository.exists_by_name(command.name.strip()):
                raise EntityAlreadyExistsError(
                    f"Workflow name already in use: {command.name}"
                )
            workflow.name = command.name.strip()
        if command.form_id is not None and command.form_id != workflow.form_id:
            if not await self._form_repository.get_by_id(command.form_id):
                raise EntityNotFoundError.for_id("Form", command.form_id)
            workflow.form_id = command.form_id
        if command.steps is not None:
            check_steps(command.steps)
            workflow.steps = sorted(command.steps, key=lambda step: step.order)
        if command.description is not None:
            workflow.description = command.description

        workflow.touch()
        await self._workflow_repository.save(workflow)
        logger.info("Updated workflow %s", workflow.id)
        return workflow


class SetWorkflowActiveHandler(CommandHandler[Workflow]):
    def __init__(self, workflow_repository: WorkflowRepository):
        self._workflow_repository = workflow_repository

    async def execute(self, command: SetWorkflowActiveCommand) -> Workflow:
        workflow = await self._workflow_repository.get_by_id(command.workflow_id)
        if not workflow:
            raise EntityNotFoundError.for_id("Workflow", command.workflow_id)
        workflow.set_active(command.active)
        await self._workflow_repository.save(workflow)
        logger.info("Workflow %s active=%s", workflow.id, command.active)
        return workflow


class DeleteWorkflowHandler(CommandHandler[bool]):
    def __init__(self, workflow_repository: WorkflowRepository):
        self._workflow_repository = workflow_repository

    async def execute(self, command: DeleteWorkflowCommand) -> bool:
        if not await self._workflow_repository.get_by_id(command.workflow_id):
            raise EntityNotFoundError.for_id("Workflow", command.workflow_id)
        deleted = await self._workflow_repository.delete(command.workflow_id)
        logger.info("Deleted workflow %s", command.workflow_id)
        return deleted
