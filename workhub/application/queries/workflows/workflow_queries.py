"""Workflow queries."""

from dataclasses import dataclass

from workhub.application.common.interfaces import Query, QueryHandler
from workhub.domain.entities.workflow import Workflow
from workhub.domain.exceptions import EntityNotFoundError
from workhub.domain.ports.repositories import FormRepository, WorkflowRepository
from workhub.domain.value_objects.page import Page, PageRequest


@dataclass(frozen=True)
class GetWorkflowQuery(Query[Workflow]):
    workflow_id: str


@dataclass(frozen=True)
class ListWorkflowsQuery(Query[Page[Workflow]]):
    page: PageRequest


@dataclass(frozen=True)
class ListFormWorkflowsQuery(Query[list[Workflow]]):
    form_id: str


class GetWorkflowHandler(QueryHandler[Workflow]):
    def __init__(self, workflow_repository: WorkflowRepository):
        self._workflow_repository = workflow_repository

    async def execute(self, query: GetWorkflowQuery) -> Workflow:
        workflow = await self._workflow_repository.get_by_id(query.workflow_id)
        if not workflow:
            raise EntityNotFoundError.for_id("Workflow", query.workflow_id)
        return workflow


class ListWorkflowsHandler(QueryHandler[Page[Workflow]]):
    def __init__(self, workflow_repository: WorkflowRepository):
        self._workflow_repository = workflow_repository

    async def execute(self, query: ListWorkflowsQuery) -> Page[Workflow]:
        return await self._workflow_repository.find_all(query.page)


class ListFormWorkflowsHandler(QueryHandler[list[Workflow]]):
    def __init__(
        self, workflow_repository: WorkflowRepository, form_repository: FormRepository
    ):
        self._workflow_repository = workflow_repository
        self._form_repository = form_repository

    async def execute(self, query: ListFormWorkflowsQuery) -> list[Workflow]:
        if not await self._form_repository.get_by_id(query.form_id):
            raise EntityNotFoundError.for_id("Form", query.form_id)
        return await self._workflow_repository.find_by_form(query.form_id)
