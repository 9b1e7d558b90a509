"""
Task Entity - A unit of work inside a project.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Optional
from uuid import uuid4


class TaskStatus(str, Enum):
    TODO = "TODO"
    IN_PROGRESS = "IN_PROGRESS"
    REVIEW = "REVIEW"
    DONE = "DONE"
    ARCHIVED = "ARCHIVED"


class TaskPriority(str, Enum):
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"
    CRITICAL = "CRITICAL"


# Tasks in these states are never overdue
CLOSED_TASK_STATUSES = (TaskStatus.DONE, TaskStatus.ARCHIVED)


@dataclass
class Task:
    id: str
    project_id: str
    title: str
    status: TaskStatus
    priority: TaskPriority
    created_at: datetime
    updated_at: datetime
    description: Optional[str] = None
    assignee_id: Optional[str] = None
    due_date: Optional[datetime] = None
    estimated_hours: Optional[float] = None
    actual_hours: Optional[float] = None
    tags: list[str] = field(default_factory=list)
    created_by: Optional[str] = None

    @classmethod
    def create(
        cls,
        project_id: str,
        title: str,
        description: Optional[str] = None,
        status: TaskStatus = TaskStatus.TODO,
        priority: TaskPriority = TaskPriority.MEDIUM,
        assignee_id: Optional[str] = None,
        due_date: Optional[datetime] = None,
        estimated_hours: Optional[float] = None,
        tags: Optional[list[str]] = None,
        created_by: Optional[str] = None,
    ) -> Task:
        now = datetime.now(timezone.utc)
        return cls(
            id=str(uuid4()),
            project_id=project_id,
            title=title,
            status=status,
            priority=priority,
            created_at=now,
            updated_at=now,
            description=description,
            assignee_id=assignee_id,
            due_date=due_date,
            estimated_hours=estimated_hours,
            tags=list(tags or []),
            created_by=created_by,
        )

    def is_overdue(self, now: Optional[datetime] = None) -> bool:
        if self.due_date is None or self.status in CLOSED_TASK_STATUSES:
            return False
        return self.due_date < (now or datetime.now(timezone.utc))

    def change_status(self, status: TaskStatus) -> None:
        # No transition guard: any status may replace any other
        self.status = status
        self.touch()

    def assign(self, assignee_id: Optional[str]) -> None:
        self.assignee_id = assignee_id
        self.touch()

    def touch(self) -> None:
        self.updated_at = datetime.now(timezone.utc)
