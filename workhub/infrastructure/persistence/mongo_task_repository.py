"""MongoDB Task Repository Implementation."""

from datetime import datetime
from typing import Any, Optional

from workhub.domain.entities.task import (
    CLOSED_TASK_STATUSES,
    Task,
    TaskPriority,
    TaskStatus,
)
from workhub.domain.ports.repositories import TaskRepository
from workhub.domain.value_objects.page import Page, PageRequest
from workhub.infrastructure.persistence.mongo_base import (
    MongoRepository,
    contains_ignore_case,
)


class MongoTaskRepository(MongoRepository[Task], TaskRepository):
    collection_name = "tasks"

    def _to_entity(self, document: dict[str, Any]) -> Task:
        return Task(
            id=document["_id"],
            project_id=document["project_id"],
            title=document["title"],
            status=TaskStatus(document["status"]),
            priority=TaskPriority(document["priority"]),
            created_at=document["created_at"],
            updated_at=document["updated_at"],
            description=document.get("description"),
            assignee_id=document.get("assignee_id"),
            due_date=document.get("due_date"),
            estimated_hours=document.get("estimated_hours"),
            actual_hours=document.get("actual_hours"),
            tags=list(document.get("tags") or []),
            created_by=document.get("created_by"),
        )

    def _to_document(self, task: Task) -> dict[str, Any]:
        return {
            "_id": task.id,
            "project_id": task.project_id,
            "title": task.title,
            "description": task.description,
            "status": task.status.value,
            "priority": task.priority.value,
            "assignee_id": task.assignee_id,
            "due_date": task.due_date,
            "estimated_hours": task.estimated_hours,
            "actual_hours": task.actual_hours,
            "tags": list(task.tags),
            "created_by": task.created_by,
            "created_at": task.created_at,
            "updated_at": task.updated_at,
        }

    async def get_by_id(self, task_id: str) -> Optional[Task]:
        return await self._find_one({"_id": task_id})

    async def find_all(self, page: PageRequest) -> Page[Task]:
        return await self._find_page({}, page)

    async def find_by_project(self, project_id: str, page: PageRequest) -> Page[Task]:
        return await self._find_page({"project_id": project_id}, page)

    async def find_by_assignee(self, user_id: str, page: PageRequest) -> Page[Task]:
        return await self._find_page({"assignee_id": user_id}, page)

    async def find_by_status(self, status: TaskStatus, page: PageRequest) -> Page[Task]:
        return await self._find_page({"status": status.value}, page)

    async def find_by_priority(
        self, priority: TaskPriority, page: PageRequest
    ) -> Page[Task]:
        return await self._find_page({"priority": priority.value}, page)

    async def find_overdue(self, now: datetime, page: PageRequest) -> Page[Task]:
        return await self._find_page(
            {
                "due_date": {"$ne": None, "$lt": now},
                "status": {"$nin": [status.value for status in CLOSED_TASK_STATUSES]},
            },
            page,
        )

    async def search(self, term: str, page: PageRequest) -> Page[Task]:
        pattern = contains_ignore_case(term)
        return await self._find_page(
            {"$or": [{"title": pattern}, {"description": pattern}]}, page
        )

    async def count_by_project(self, project_id: str) -> int:
        return await self._count({"project_id": project_id})

    async def count_by_project_and_status(
        self, project_id: str, status: TaskStatus
    ) -> int:
        return await self._count({"project_id": project_id, "status": status.value})

    async def unassign_user(self, user_id: str) -> int:
        return await self._update_many(
            {"assignee_id": user_id}, {"$set": {"assignee_id": None}}
        )

    async def save(self, task: Task) -> None:
        await self._upsert(task)

    async def delete(self, task_id: str) -> bool:
        return await self._delete_by_id(task_id)

    async def delete_by_project(self, project_id: str) -> int:
        return await self._delete_many({"project_id": project_id})
