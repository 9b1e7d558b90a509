"""Project and task DTOs."""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel

from workhub.application.queries.tasks.task_statistics import TaskStatistics
from workhub.domain.entities.project import Project
from workhub.domain.entities.task import Task


class TeamMemberDTO(BaseModel):
    user_id: str
    role: str
    joined_at: datetime


class ProjectDTO(BaseModel):
    id: str
    name: str
    description: Optional[str] = None
    organization_id: str
    owner_id: Optional[str] = None
    team_members: list[TeamMemberDTO]
    status: str
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    budget: Optional[Decimal] = None
    tags: list[str]
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, project: Project) -> "ProjectDTO":
        return cls(
            id=project.id,
            name=project.name,
            description=project.description,
            organization_id=project.organization_id,
            owner_id=project.owner_id,
            team_members=[
                TeamMemberDTO(user_id=m.user_id, role=m.role, joined_at=m.joined_at)
                for m in project.team_members
            ],
            status=project.status.value,
            start_date=project.start_date,
            end_date=project.end_date,
            budget=project.budget,
            tags=list(project.tags),
            created_at=project.created_at,
            updated_at=project.updated_at,
        )


class TaskDTO(BaseModel):
    id: str
    project_id: str
    title: str
    description: Optional[str] = None
    status: str
    priority: str
    assignee_id: Optional[str] = None
    due_date: Optional[datetime] = None
    estimated_hours: Optional[float] = None
    actual_hours: Optional[float] = None
    tags: list[str]
    created_by: Optional[str] = None
    overdue: bool = False
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, task: Task) -> "TaskDTO":
        return cls(
            id=task.id,
            project_id=task.project_id,
            title=task.title,
            description=task.description,
            status=task.status.value,
            priority=task.priority.value,
            assignee_id=task.assignee_id,
            due_date=task.due_date,
            estimated_hours=task.estimated_hours,
            actual_hours=task.actual_hours,
            tags=list(task.tags),
            created_by=task.created_by,
            overdue=task.is_overdue(),
            created_at=task.created_at,
            updated_at=task.updated_at,
        )


class TaskStatisticsDTO(BaseModel):
    project_id: str
    total: int
    by_status: dict[str, int]

    @classmethod
    def from_result(cls, stats: TaskStatistics) -> "TaskStatisticsDTO":
        return cls(project_id=stats.project_id, total=stats.total, by_status=stats.by_status)
