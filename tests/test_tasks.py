"""
Tests for task commands, task listing and the /api/v1/tasks endpoints.

Run with: pytest tests/test_tasks.py -v
"""

from datetime import datetime, timedelta, timezone

import pytest

from workhub.application.commands.tasks import (
    AssignTaskCommand,
    AssignTaskHandler,
    CreateTaskCommand,
    CreateTaskHandler,
    UpdateTaskCommand,
    UpdateTaskHandler,
    UpdateTaskStatusCommand,
    UpdateTaskStatusHandler,
)
from workhub.application.common.notifier import Notifier
from workhub.application.queries.tasks import ListTasksHandler, ListTasksQuery
from workhub.domain.entities.project import Project
from workhub.domain.entities.task import Task, TaskPriority, TaskStatus
from workhub.domain.exceptions import DomainValidationError, EntityNotFoundError
from workhub.domain.value_objects.page import PageRequest


@pytest.fixture()
def project(repos, organization):
    return repos.projects.add(Project.create(name="Apollo", organization_id=organization.id))


def create_handler(repos) -> CreateTaskHandler:
    return CreateTaskHandler(
        repos.tasks, repos.projects, repos.users, Notifier(repos.notifications)
    )


@pytest.mark.anyio
class TestCreateTask:
    async def test_assignee_is_notified(self, repos, project, make_user):
        bob = make_user("bob")

        task = await create_handler(repos).execute(
            CreateTaskCommand(project_id=project.id, title=" Write tests ", assignee_id=bob.user.id)
        )

        assert task.title == "Write tests"
        assert task.status == TaskStatus.TODO
        notifications = list(repos.notifications.items.values())
        assert [n.type for n in notifications] == ["TASK_ASSIGNED"]
        assert notifications[0].user_id == bob.user.id

    async def test_unknown_project_is_not_found(self, repos):
        with pytest.raises(EntityNotFoundError):
            await create_handler(repos).execute(
                CreateTaskCommand(project_id="missing", title="Orphan")
            )
        assert repos.tasks.items == {}

    async def test_unknown_assignee_is_not_found(self, repos, project):
        with pytest.raises(EntityNotFoundError):
            await create_handler(repos).execute(
                CreateTaskCommand(project_id=project.id, title="Task", assignee_id="ghost")
            )

    async def test_blank_title_is_rejected(self, repos, project):
        with pytest.raises(DomainValidationError):
            await create_handler(repos).execute(
                CreateTaskCommand(project_id=project.id, title="   ")
            )


@pytest.mark.anyio
class TestUpdateTask:
    async def test_reassignment_notifies_new_assignee(self, repos, project, make_user):
        bob = make_user("bob")
        task = repos.tasks.add(Task.create(project_id=project.id, title="Task"))
        handler = UpdateTaskHandler(
            repos.tasks, repos.projects, repos.users, Notifier(repos.notifications)
        )

        updated = await handler.execute(
            UpdateTaskCommand(task_id=task.id, assignee_id=bob.user.id, actual_hours=2.5)
        )

        assert updated.assignee_id == bob.user.id
        assert updated.actual_hours == 2.5
        assert await repos.notifications.count_unread(bob.user.id) == 1

    async def test_moving_to_unknown_project_is_rejected(self, repos, project):
        task = repos.tasks.add(Task.create(project_id=project.id, title="Task"))
        handler = UpdateTaskHandler(
            repos.tasks, repos.projects, repos.users, Notifier(repos.notifications)
        )

        with pytest.raises(EntityNotFoundError):
            await handler.execute(UpdateTaskCommand(task_id=task.id, project_id="missing"))

    async def test_any_status_may_follow_any_other(self, repos, project):
        task = repos.tasks.add(
            Task.create(project_id=project.id, title="Task", status=TaskStatus.DONE)
        )

        updated = await UpdateTaskStatusHandler(repos.tasks).execute(
            UpdateTaskStatusCommand(task_id=task.id, status=TaskStatus.TODO)
        )

        assert updated.status == TaskStatus.TODO

    async def test_assign_unknown_user_is_not_found(self, repos, project):
        task = repos.tasks.add(Task.create(project_id=project.id, title="Task"))
        handler = AssignTaskHandler(repos.tasks, repos.users, Notifier(repos.notifications))
        with pytest.raises(EntityNotFoundError):
            await handler.execute(AssignTaskCommand(task_id=task.id, assignee_id="ghost"))


@pytest.mark.anyio
class TestListTasks:
    async def test_overdue_excludes_closed_and_undated_tasks(self, repos, project):
        past = datetime.now(timezone.utc) - timedelta(days=1)
        late = repos.tasks.add(Task.create(project_id=project.id, title="Late", due_date=past))
        repos.tasks.add(
            Task.create(project_id=project.id, title="Done", due_date=past, status=TaskStatus.DONE)
        )
        repos.tasks.add(
            Task.create(
                project_id=project.id, title="Archived", due_date=past, status=TaskStatus.ARCHIVED
            )
        )
        repos.tasks.add(Task.create(project_id=project.id, title="No date"))
        repos.tasks.add(
            Task.create(
                project_id=project.id,
                title="Future",
                due_date=datetime.now(timezone.utc) + timedelta(days=3),
            )
        )

        page = await ListTasksHandler(repos.tasks, repos.projects).execute(
            ListTasksQuery(page=PageRequest(), overdue=True)
        )

        assert [task.id for task in page.content] == [late.id]

    async def test_priority_filter(self, repos, project):
        repos.tasks.add(Task.create(project_id=project.id, title="a", priority=TaskPriority.HIGH))
        repos.tasks.add(Task.create(project_id=project.id, title="b", priority=TaskPriority.LOW))

        page = await ListTasksHandler(repos.tasks, repos.projects).execute(
            ListTasksQuery(page=PageRequest(), priority=TaskPriority.HIGH)
        )

        assert [task.title for task in page.content] == ["a"]

    async def test_unknown_project_filter_is_not_found(self, repos):
        with pytest.raises(EntityNotFoundError):
            await ListTasksHandler(repos.tasks, repos.projects).execute(
                ListTasksQuery(page=PageRequest(), project_id="missing")
            )


class TestTasksApi:
    def test_create_records_creator(self, client, member, project):
        res = client.post(
            "/api/v1/tasks",
            headers=member.headers,
            json={"project_id": project.id, "title": "Ship it", "priority": "HIGH"},
        )

        assert res.status_code == 201
        data = res.json()["data"]
        assert data["created_by"] == member.user.id
        assert data["priority"] == "HIGH"
        assert data["overdue"] is False

    def test_unknown_status_value_is_400(self, client, member, project):
        res = client.post(
            "/api/v1/tasks",
            headers=member.headers,
            json={"project_id": project.id, "title": "Ship it", "status": "SOMEDAY"},
        )
        assert res.status_code == 400

    def test_my_tasks_lists_assigned_only(self, client, repos, member, project):
        repos.tasks.add(Task.create(project_id=project.id, title="Mine", assignee_id=member.user.id))
        repos.tasks.add(Task.create(project_id=project.id, title="Theirs", assignee_id="other"))

        res = client.get("/api/v1/tasks/mine", headers=member.headers)

        assert res.status_code == 200
        assert [t["title"] for t in res.json()["content"]] == ["Mine"]

    def test_status_patch(self, client, repos, member, project):
        task = repos.tasks.add(Task.create(project_id=project.id, title="Task"))

        res = client.patch(
            f"/api/v1/tasks/{task.id}/status",
            headers=member.headers,
            json={"status": "IN_PROGRESS"},
        )

        assert res.status_code == 200
        assert res.json()["data"]["status"] == "IN_PROGRESS"

    def test_project_statistics_endpoint(self, client, repos, member, project):
        repos.tasks.add(Task.create(project_id=project.id, title="a", status=TaskStatus.REVIEW))

        res = client.get(f"/api/v1/projects/{project.id}/statistics", headers=member.headers)

        assert res.status_code == 200
        data = res.json()["data"]
        assert data["total"] == 1
        assert data["by_status"]["REVIEW"] == 1
        assert data["by_status"]["TODO"] == 0

    def test_missing_task_is_404(self, client, member):
        res = client.get("/api/v1/tasks/nope", headers=member.headers)
        assert res.status_code == 404
        assert res.json()["success"] is False
