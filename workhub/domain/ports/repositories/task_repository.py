"""
Task Repository Port - Interface for task persistence.
Implementation: workhub/infrastructure/persistence/mongo_task_repository.py
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional
from workhub.domain.entities.task import Task, TaskPriority, TaskStatus
from workhub.domain.value_objects.page import Page, PageRequest


class TaskRepository(ABC):
    # Fields a paged listing may be sorted by ("id" maps to _id)
    sortable_fields = frozenset(
        {
            "id",
            "title",
            "status",
            "priority",
            "due_date",
            "created_at",
            "updated_at",
        }
    )

    @abstractmethod
    async def get_by_id(self, task_id: str) -> Optional[Task]: ...

    @abstractmethod
    async def find_all(self, page: PageRequest) -> Page[Task]: ...

    @abstractmethod
    async def find_by_project(self, project_id: str, page: PageRequest) -> Page[Task]: ...

    @abstractmethod
    async def find_by_assignee(self, user_id: str, page: PageRequest) -> Page[Task]: ...

    @abstractmethod
    async def find_by_status(self, status: TaskStatus, page: PageRequest) -> Page[Task]: ...

    @abstractmethod
    async def find_by_priority(
        self, priority: TaskPriority, page: PageRequest
    ) -> Page[Task]: ...

    @abstractmethod
    async def find_overdue(self, now: datetime, page: PageRequest) -> Page[Task]: ...

    @abstractmethod
    async def search(self, term: str, page: PageRequest) -> Page[Task]:
        """Case-insensitive substring match on title OR description."""
        ...

    @abstractmethod
    async def count_by_project(self, project_id: str) -> int: ...

    @abstractmethod
    async def count_by_project_and_status(
        self, project_id: str, status: TaskStatus
    ) -> int: ...

    @abstractmethod
    async def unassign_user(self, user_id: str) -> int: ...

    @abstractmethod
    async def save(self, task: Task) -> None: ...

    @abstractmethod
    async def delete(self, task_id: str) -> bool: ...

    @abstractmethod
    async def delete_by_project(self, project_id: str) -> int: ...
