"""
Workflow Repository Port - Interface for workflow persistence.
Implementation: workhub/infrastructure/persistence/mongo_workflow_repository.py
"""

from abc import ABC, abstractmethod
from typing import Optional
from workhub.domain.entities.workflow import Workflow
from workhub.domain.value_objects.page import Page, PageRequest


class WorkflowRepository(ABC):
    # Fields a paged listing may be sorted by ("id" maps to _id)
    sortable_fields = frozenset({"id", "name", "created_at", "updated_at"})

    @abstractmethod
    async def get_by_id(self, workflow_id: str) -> Optional[Workflow]: ...

    @abstractmethod
    async def exists_by_name(self, name: str) -> bool: ...

    @abstractmethod
    async def find_all(self, page: PageRequest) -> Page[Workflow]: ...

    @abstractmethod
    async def find_by_form(self, form_id: str) -> list[Workflow]: ...

    @abstractmethod
    async def save(self, workflow: Workflow) -> None: ...

    @abstractmethod
    async def delete(self, workflow_id: str) -> bool: ...
