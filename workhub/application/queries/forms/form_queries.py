"""Form queries: one form, all forms, and submissions by form or by user."""

from dataclasses import dataclass
from typing import Optional

from workhub.application.common.interfaces import Query, QueryHandler
from workhub.domain.entities.form import Form, FormSubmission
from workhub.domain.exceptions import DomainValidationError, EntityNotFoundError
from workhub.domain.ports.repositories import FormRepository, FormSubmissionRepository
from workhub.domain.value_objects.page import Page, PageRequest


@dataclass(frozen=True)
class GetFormQuery(Query[Form]):
    form_id: str


@dataclass(frozen=True)
class ListFormsQuery(Query[Page[Form]]):
    page: PageRequest
    active_only: bool = False


@dataclass(frozen=True)
class ListSubmissionsQuery(Query[Page[FormSubmission]]):
    page: PageRequest
    form_id: Optional[str] = None
    user_id: Optional[str] = None


class GetFormHandler(QueryHandler[Form]):
    def __init__(self, form_repository: FormRepository):
        self._form_repository = form_repository

    async def execute(self, query: GetFormQuery) -> Form:
        form = await self._form_repository.get_by_id(query.form_id)
        if not form:
            raise EntityNotFoundError.for_id("Form", query.form_id)
        return form


class ListFormsHandler(QueryHandler[Page[Form]]):
    def __init__(self, form_repository: FormRepository):
        self._form_repository = form_repository

    async def execute(self, query: ListFormsQuery) -> Page[Form]:
        return await self._form_repository.find_all(query.active_only, query.page)


class ListSubmissionsHandler(QueryHandler[Page[FormSubmission]]):
    def __init__(
        self,
        form_repository: FormRepository,
        form_submission_repository: FormSubmissionRepository,
    ):
        self._form_repository = form_repository
        self._form_submission_repository = form_submission_repository

    async def execute(self, query: ListSubmissionsQuery) -> Page[FormSubmission]:
        if query.form_id:
            if not await self._form_repository.get_by_id(query.form_id):
                raise EntityNotFoundError.for_id("Form", query.form_id)
            return await self._form_submission_repository.find_by_form(
                query.form_id, query.page
            )
        if query.user_id:
            return await self._form_submission_repository.find_by_user(
                query.user_id, query.page
            )
        raise DomainValidationError("Either form_id or user_id is required")
