"""
Form and FormSubmission Repository Ports.
Implementation: workhub/infrastructure/persistence/mongo_form_repository.py
"""

from abc import ABC, abstractmethod
from typing import Optional
from workhub.domain.entities.form import Form, FormSubmission
from workhub.domain.value_objects.page import Page, PageRequest


class FormRepository(ABC):
    # Fields a paged listing may be sorted by ("id" maps to _id)
    sortable_fields = frozenset({"id", "name", "version", "created_at", "updated_at"})

    @abstractmethod
    async def get_by_id(self, form_id: str) -> Optional[Form]: ...

    @abstractmethod
    async def exists_by_name(self, name: str) -> bool: ...

    @abstractmethod
    async def find_all(self, active_only: bool, page: PageRequest) -> Page[Form]: ...

    @abstractmethod
    async def save(self, form: Form) -> None: ...

    @abstractmethod
    async def delete(self, form_id: str) -> bool: ...


class FormSubmissionRepository(ABC):
    # Fields a paged listing may be sorted by ("id" maps to _id)
    sortable_fields = frozenset({"id", "status", "submitted_at", "processed_at"})

    @abstractmethod
    async def get_by_id(self, submission_id: str) -> Optional[FormSubmission]: ...

    @abstractmethod
    async def find_by_form(
        self, form_id: str, page: PageRequest
    ) -> Page[FormSubmission]: ...

    @abstractmethod
    async def find_by_user(
        self, user_id: str, page: PageRequest
    ) -> Page[FormSubmission]: ...

    @abstractmethod
    async def save(self, submission: FormSubmission) -> None: ...

    @abstractmethod
    async def delete_by_form(self, form_id: str) -> int: ...
