import os

# Must be set before workhub.config.settings is imported
os.environ.setdefault("APP_ENV", "testing")
os.environ["RATELIMIT_ENABLED"] = "false"

from types import SimpleNamespace

import pytest
from dishka import Provider, Scope, provide
from fastapi.testclient import TestClient

from fakes import DEFAULT_PASSWORD, TEST_HASHER, FakeRepositories
from workhub.domain.entities.organization import Organization
from workhub.domain.entities.profile import Profile
from workhub.domain.entities.session import Session
from workhub.domain.entities.user import Role, User
from workhub.domain.ports.password_hasher import PasswordHasher
from workhub.domain.ports.repositories import (
    AuditLogRepository,
    CategoryRepository,
    CommentRepository,
    DocumentRepository,
    FormRepository,
    FormSubmissionRepository,
    InventoryRepository,
    NotificationRepository,
    OrderRepository,
    OrganizationRepository,
    ProductRepository,
    ProfileRepository,
    ProjectRepository,
    SessionRepository,
    TaskRepository,
    UserRepository,
    WorkflowRepository,
)
from workhub.domain.value_objects.email_address import EmailAddress
from workhub.fastapi_app import create_fastapi_app
from workhub.setup.ioc.container import create_container


class FakeRepositoriesProvider(Provider):
    """Overrides every repository port with the test's in-memory fakes."""

    scope = Scope.APP

    def __init__(self, repos: FakeRepositories):
        super().__init__()
        self._repos = repos

    @provide
    def password_hasher(self) -> PasswordHasher:
        return TEST_HASHER

    @provide
    def users(self) -> UserRepository:
        return self._repos.users

    @provide
    def profiles(self) -> ProfileRepository:
        return self._repos.profiles

    @provide
    def sessions(self) -> SessionRepository:
        return self._repos.sessions

    @provide
    def organizations(self) -> OrganizationRepository:
        return self._repos.organizations

    @provide
    def projects(self) -> ProjectRepository:
        return self._repos.projects

    @provide
    def tasks(self) -> TaskRepository:
        return self._repos.tasks

    @provide
    def documents(self) -> DocumentRepository:
        return self._repos.documents

    @provide
    def comments(self) -> CommentRepository:
        return self._repos.comments

    @provide
    def notifications(self) -> NotificationRepository:
        return self._repos.notifications

    @provide
    def audit_logs(self) -> AuditLogRepository:
        return self._repos.audit_logs

    @provide
    def forms(self) -> FormRepository:
        return self._repos.forms

    @provide
    def form_submissions(self) -> FormSubmissionRepository:
        return self._repos.form_submissions

    @provide
    def workflows(self) -> WorkflowRepository:
        return self._repos.workflows

    @provide
    def categories(self) -> CategoryRepository:
        return self._repos.categories

    @provide
    def products(self) -> ProductRepository:
        return self._repos.products

    @provide
    def inventory(self) -> InventoryRepository:
        return self._repos.inventory

    @provide
    def orders(self) -> OrderRepository:
        return self._repos.orders


@pytest.fixture()
def anyio_backend():
    return "asyncio"


@pytest.fixture()
def repos():
    """Fresh in-memory repositories for each test."""
    return FakeRepositories()


@pytest.fixture()
def app(repos):
    """Create and configure a new FastAPI app instance for each test."""
    return create_fastapi_app(create_container(FakeRepositoriesProvider(repos)))


@pytest.fixture()
def client(app):
    """A test client for the FastAPI app (lifespan runs inside the with-block)."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def make_user(repos):
    """Seed an active user with an open session; returns user, session and auth headers."""

    def _make(username="alice", roles=(Role.USER.value,), organization_id=None):
        user = User.create(
            username=username,
            email=EmailAddress(f"{username}@example.com"),
            password_hash=TEST_HASHER.hash(DEFAULT_PASSWORD),
            roles=list(roles),
            organization_id=organization_id,
        )
        repos.users.add(user)
        repos.profiles.add(Profile.empty_for(user.id))
        session = repos.sessions.add(Session.start(user_id=user.id, ttl_minutes=60))
        return SimpleNamespace(
            user=user,
            session=session,
            headers={"Authorization": f"Bearer {session.token}"},
        )

    return _make


@pytest.fixture()
def admin(make_user):
    return make_user("admin", roles=(Role.ADMIN.value,))


@pytest.fixture()
def manager(make_user):
    return make_user("manager", roles=(Role.MANAGER.value,))


@pytest.fixture()
def member(make_user):
    return make_user("member")


@pytest.fixture()
def organization(repos):
    return repos.organizations.add(Organization.create(name="Acme Corp"))
