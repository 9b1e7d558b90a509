"""
Tests for organizations, projects and their cascades.

Run with: pytest tests/test_projects.py -v
"""

from datetime import datetime, timedelta, timezone

import pytest

from workhub.application.commands.organizations import (
    CreateOrganizationCommand,
    CreateOrganizationHandler,
    DeleteOrganizationCommand,
    DeleteOrganizationHandler,
)
from workhub.application.commands.projects import (
    AddProjectMemberCommand,
    AddProjectMemberHandler,
    CreateProjectCommand,
    CreateProjectHandler,
    DeleteProjectCommand,
    DeleteProjectHandler,
    RemoveProjectMemberCommand,
    RemoveProjectMemberHandler,
    UpdateProjectCommand,
    UpdateProjectHandler,
)
from workhub.application.common.notifier import Notifier
from workhub.application.queries.projects import (
    ListProjectsHandler,
    ListProjectsQuery,
    ProjectsEndingSoonHandler,
    ProjectsEndingSoonQuery,
)
from workhub.application.queries.tasks import TaskStatisticsHandler, TaskStatisticsQuery
from workhub.domain.entities.comment import Comment
from workhub.domain.entities.document import Document
from workhub.domain.entities.project import Project, ProjectStatus
from workhub.domain.entities.task import Task, TaskStatus
from workhub.domain.exceptions import (
    DomainValidationError,
    EntityAlreadyExistsError,
    EntityNotFoundError,
)
from workhub.domain.value_objects.page import PageRequest


def seed_project(repos, organization, name="Apollo", description=None, **kwargs) -> Project:
    return repos.projects.add(
        Project.create(
            name=name, organization_id=organization.id, description=description, **kwargs
        )
    )


def seed_document_with_comment(repos, project) -> Document:
    document = repos.documents.add(
        Document.create(
            name="Spec", project_id=project.id, organization_id=project.organization_id
        )
    )
    repos.comments.add(Comment.create(document_id=document.id, user_id="u1", text="Looks good"))
    return document


@pytest.mark.anyio
class TestCreateProject:
    async def test_unknown_organization_persists_nothing(self, repos):
        handler = CreateProjectHandler(repos.projects, repos.organizations, repos.users)

        with pytest.raises(EntityNotFoundError):
            await handler.execute(CreateProjectCommand(name="Ghost", organization_id="missing"))

        assert repos.projects.items == {}

    async def test_unknown_team_member_persists_nothing(self, repos, organization):
        handler = CreateProjectHandler(repos.projects, repos.organizations, repos.users)

        with pytest.raises(EntityNotFoundError):
            await handler.execute(
                CreateProjectCommand(
                    name="Apollo",
                    organization_id=organization.id,
                    team_members=(("missing-user", "MEMBER"),),
                )
            )
        assert repos.projects.items == {}

    async def test_start_after_end_is_rejected(self, repos, organization):
        now = datetime.now(timezone.utc)
        handler = CreateProjectHandler(repos.projects, repos.organizations, repos.users)

        with pytest.raises(DomainValidationError):
            await handler.execute(
                CreateProjectCommand(
                    name="Apollo",
                    organization_id=organization.id,
                    start_date=now,
                    end_date=now - timedelta(days=1),
                )
            )

    async def test_creates_project_with_members(self, repos, organization, make_user):
        bob = make_user("bob")
        handler = CreateProjectHandler(repos.projects, repos.organizations, repos.users)

        project = await handler.execute(
            CreateProjectCommand(
                name="  Apollo ",
                organization_id=organization.id,
                team_members=((bob.user.id, "LEAD"),),
            )
        )

        assert project.name == "Apollo"
        assert project.status == ProjectStatus.PLANNING
        assert project.member_ids == [bob.user.id]
        assert await repos.projects.exists_by_id(project.id)


@pytest.mark.anyio
class TestUpdateProject:
    async def test_moving_to_unknown_organization_is_rejected(self, repos, organization):
        project = seed_project(repos, organization)
        handler = UpdateProjectHandler(repos.projects, repos.organizations, repos.users)

        with pytest.raises(EntityNotFoundError):
            await handler.execute(
                UpdateProjectCommand(project_id=project.id, organization_id="missing")
            )
        assert (await repos.projects.get_by_id(project.id)).organization_id == organization.id


@pytest.mark.anyio
class TestDeleteProject:
    async def test_cascade_leaves_no_tasks_documents_or_comments(self, repos, organization):
        project = seed_project(repos, organization)
        other = seed_project(repos, organization, name="Gemini")
        for i in range(3):
            repos.tasks.add(Task.create(project_id=project.id, title=f"Task {i}"))
        kept_task = repos.tasks.add(Task.create(project_id=other.id, title="Keep me"))
        document = seed_document_with_comment(repos, project)

        handler = DeleteProjectHandler(
            repos.projects, repos.tasks, repos.documents, repos.comments
        )
        assert await handler.execute(DeleteProjectCommand(project_id=project.id))

        assert await repos.tasks.count_by_project(project.id) == 0
        assert await repos.tasks.get_by_id(kept_task.id) is not None
        assert await repos.documents.find_ids_by_project(project.id) == []
        page = await repos.comments.find_by_document(document.id, PageRequest())
        assert page.total_elements == 0
        assert not await repos.projects.exists_by_id(project.id)

    async def test_missing_project_is_not_found(self, repos):
        handler = DeleteProjectHandler(
            repos.projects, repos.tasks, repos.documents, repos.comments
        )
        with pytest.raises(EntityNotFoundError):
            await handler.execute(DeleteProjectCommand(project_id="missing"))


@pytest.mark.anyio
class TestOrganizations:
    async def test_duplicate_name_is_rejected(self, repos, organization):
        handler = CreateOrganizationHandler(repos.organizations, repos.users)
        with pytest.raises(EntityAlreadyExistsError):
            await handler.execute(CreateOrganizationCommand(name=organization.name))

    async def test_slug_is_derived_from_name(self, repos):
        handler = CreateOrganizationHandler(repos.organizations, repos.users)
        organization = await handler.execute(CreateOrganizationCommand(name="Blue Sky Labs"))
        assert organization.slug == "blue-sky-labs"

    async def test_delete_cascades_through_projects(self, repos, organization):
        project = seed_project(repos, organization)
        repos.tasks.add(Task.create(project_id=project.id, title="Task"))
        seed_document_with_comment(repos, project)

        handler = DeleteOrganizationHandler(
            repos.organizations, repos.projects, repos.tasks, repos.documents, repos.comments
        )
        assert await handler.execute(DeleteOrganizationCommand(organization_id=organization.id))

        assert repos.projects.items == {}
        assert repos.tasks.items == {}
        assert repos.documents.items == {}
        assert repos.comments.items == {}
        assert not await repos.organizations.exists_by_id(organization.id)


@pytest.mark.anyio
class TestProjectSearch:
    async def test_search_matches_name_or_description_case_insensitively(
        self, repos, organization
    ):
        expected = {
            seed_project(repos, organization, name="Mobile Banking App").id,
            seed_project(repos, organization, name="Ops", description="new BANKING backend").id,
        }
        seed_project(repos, organization, name="Website redesign", description="marketing")
        seed_project(repos, organization, name="Bank holiday calendar")

        handler = ListProjectsHandler(repos.projects, repos.organizations)
        page = await handler.execute(
            ListProjectsQuery(page=PageRequest(size=50), search="banking")
        )

        assert {project.id for project in page.content} == expected
        assert page.total_elements == 2

    async def test_filters_apply_one_at_a_time(self, repos, organization):
        seed_project(repos, organization, name="Alpha", status=ProjectStatus.ACTIVE)
        seed_project(repos, organization, name="Beta", status=ProjectStatus.PLANNING)

        handler = ListProjectsHandler(repos.projects, repos.organizations)
        page = await handler.execute(
            ListProjectsQuery(page=PageRequest(), search="alpha", status=ProjectStatus.PLANNING)
        )

        assert [project.name for project in page.content] == ["Alpha"]

    async def test_unknown_organization_filter_is_not_found(self, repos):
        handler = ListProjectsHandler(repos.projects, repos.organizations)
        with pytest.raises(EntityNotFoundError):
            await handler.execute(ListProjectsQuery(page=PageRequest(), organization_id="nope"))

    async def test_paging_reports_totals(self, repos, organization):
        for i in range(5):
            seed_project(repos, organization, name=f"Project {i}")

        handler = ListProjectsHandler(repos.projects, repos.organizations)
        page = await handler.execute(ListProjectsQuery(page=PageRequest(page=1, size=2)))

        assert len(page.content) == 2
        assert page.total_elements == 5
        assert page.total_pages == 3


@pytest.mark.anyio
class TestMembership:
    async def test_add_member_notifies_once(self, repos, organization, make_user):
        bob = make_user("bob")
        project = seed_project(repos, organization)
        handler = AddProjectMemberHandler(repos.projects, repos.users, Notifier(repos.notifications))

        await handler.execute(AddProjectMemberCommand(project_id=project.id, user_id=bob.user.id))
        updated = await handler.execute(
            AddProjectMemberCommand(project_id=project.id, user_id=bob.user.id)
        )

        assert updated.member_ids == [bob.user.id]
        assert await repos.notifications.count_unread(bob.user.id) == 1

    async def test_remove_member(self, repos, organization, make_user):
        bob = make_user("bob")
        project = seed_project(repos, organization)
        project.add_member(bob.user.id, "MEMBER")
        repos.projects.add(project)

        updated = await RemoveProjectMemberHandler(repos.projects, repos.users).execute(
            RemoveProjectMemberCommand(project_id=project.id, user_id=bob.user.id)
        )

        assert updated.member_ids == []

    async def test_add_unknown_user_is_not_found(self, repos, organization):
        project = seed_project(repos, organization)
        handler = AddProjectMemberHandler(repos.projects, repos.users, Notifier(repos.notifications))
        with pytest.raises(EntityNotFoundError):
            await handler.execute(AddProjectMemberCommand(project_id=project.id, user_id="ghost"))


@pytest.mark.anyio
class TestProjectQueries:
    async def test_statistics_count_tasks_by_status(self, repos, organization):
        project = seed_project(repos, organization)
        repos.tasks.add(Task.create(project_id=project.id, title="a"))
        repos.tasks.add(Task.create(project_id=project.id, title="b", status=TaskStatus.DONE))
        repos.tasks.add(Task.create(project_id=project.id, title="c", status=TaskStatus.DONE))

        stats = await TaskStatisticsHandler(repos.tasks, repos.projects).execute(
            TaskStatisticsQuery(project_id=project.id)
        )

        assert stats.total == 3
        assert stats.by_status["TODO"] == 1
        assert stats.by_status["DONE"] == 2

    async def test_ending_soon_skips_completed_and_far_off(self, repos, organization):
        now = datetime.now(timezone.utc)
        soon = seed_project(repos, organization, name="Soon", end_date=now + timedelta(days=2))
        seed_project(
            repos,
            organization,
            name="Done",
            end_date=now + timedelta(days=2),
            status=ProjectStatus.COMPLETED,
        )
        seed_project(repos, organization, name="Later", end_date=now + timedelta(days=30))
        seed_project(repos, organization, name="Open ended")

        projects = await ProjectsEndingSoonHandler(repos.projects).execute(
            ProjectsEndingSoonQuery(days=7)
        )

        assert [project.id for project in projects] == [soon.id]


class TestProjectsApi:
    def test_create_and_fetch(self, client, member, organization):
        res = client.post(
            "/api/v1/projects",
            headers=member.headers,
            json={"name": "Apollo", "organization_id": organization.id, "budget": "1500.50"},
        )
        assert res.status_code == 201
        data = res.json()["data"]
        assert data["owner_id"] == member.user.id

        res = client.get(f"/api/v1/projects/{data['id']}", headers=member.headers)
        assert res.status_code == 200
        assert res.json()["data"]["name"] == "Apollo"

    def test_create_with_unknown_organization_is_404(self, client, repos, member):
        res = client.post(
            "/api/v1/projects",
            headers=member.headers,
            json={"name": "Ghost", "organization_id": "missing"},
        )
        assert res.status_code == 404
        assert res.json()["success"] is False
        assert repos.projects.items == {}

    def test_blank_name_is_400(self, client, member, organization):
        res = client.post(
            "/api/v1/projects",
            headers=member.headers,
            json={"name": "", "organization_id": organization.id},
        )
        assert res.status_code == 400
        assert res.json()["data"]

    def test_list_returns_raw_page(self, client, repos, member, organization):
        seed_project(repos, organization, name="Mobile Banking")
        seed_project(repos, organization, name="Website")

        res = client.get("/api/v1/projects?q=bank&size=10", headers=member.headers)

        assert res.status_code == 200
        body = res.json()
        assert body["total_elements"] == 1
        assert body["content"][0]["name"] == "Mobile Banking"

    def test_delete_requires_manager(self, client, repos, member, manager, organization):
        project = seed_project(repos, organization)

        assert client.delete(f"/api/v1/projects/{project.id}", headers=member.headers).status_code == 403
        assert client.delete(f"/api/v1/projects/{project.id}", headers=manager.headers).status_code == 200
        assert repos.projects.items == {}

    def test_membership_endpoints(self, client, repos, member, organization, make_user):
        bob = make_user("bob")
        project = seed_project(repos, organization)

        res = client.post(
            f"/api/v1/projects/{project.id}/users/{bob.user.id}?role=LEAD",
            headers=member.headers,
        )
        assert res.status_code == 200
        assert res.json()["data"]["team_members"][0]["role"] == "LEAD"

        res = client.delete(f"/api/v1/projects/{project.id}/users/{bob.user.id}", headers=member.headers)
        assert res.json()["data"]["team_members"] == []
