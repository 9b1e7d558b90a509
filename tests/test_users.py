"""
Unit tests for the user and profile handlers.

Run with: pytest tests/test_users.py -v
"""

import pytest

from fakes import DEFAULT_PASSWORD, TEST_HASHER
from workhub.application.commands.users import (
    ChangePasswordCommand,
    ChangePasswordHandler,
    CreateUserCommand,
    CreateUserHandler,
    DeleteUserCommand,
    DeleteUserHandler,
    SetUserActiveCommand,
    SetUserActiveHandler,
    UpdateUserCommand,
    UpdateUserHandler,
)
from workhub.application.common.audit import AuditTrail
from workhub.domain.entities.session import Session
from workhub.domain.entities.task import Task
from workhub.domain.exceptions import (
    DomainValidationError,
    EntityAlreadyExistsError,
    EntityNotFoundError,
)
from workhub.domain.value_objects.email_address import EmailAddress

pytestmark = pytest.mark.anyio


def create_handler(repos) -> CreateUserHandler:
    return CreateUserHandler(
        repos.users,
        repos.organizations,
        repos.profiles,
        TEST_HASHER,
        AuditTrail(repos.audit_logs),
    )


class TestCreateUser:
    async def test_creates_user_with_profile_and_audit_entry(self, repos):
        user = await create_handler(repos).execute(
            CreateUserCommand(username="bob", email="Bob@Example.com", password="secret-pass")
        )

        assert user.roles == ["USER"]
        assert user.active
        assert user.email.value == "bob@example.com"
        assert user.password_hash != "secret-pass"
        assert await repos.profiles.get_by_user_id(user.id) is not None
        actions = [entry.action for entry in repos.audit_logs.items.values()]
        assert actions == ["USER_CREATED"]

    async def test_duplicate_email_is_rejected(self, repos):
        """A second user with the same email (any case) is refused."""
        handler = create_handler(repos)
        await handler.execute(
            CreateUserCommand(username="first", email="dup@example.com", password="secret-pass")
        )

        with pytest.raises(EntityAlreadyExistsError):
            await handler.execute(
                CreateUserCommand(
                    username="second", email="DUP@example.com", password="secret-pass"
                )
            )
        assert len(repos.users.items) == 1

    async def test_duplicate_username_is_rejected(self, repos):
        handler = create_handler(repos)
        await handler.execute(
            CreateUserCommand(username="same", email="a@example.com", password="secret-pass")
        )
        with pytest.raises(EntityAlreadyExistsError):
            await handler.execute(
                CreateUserCommand(username="same", email="b@example.com", password="secret-pass")
            )

    async def test_unknown_organization_is_rejected(self, repos):
        with pytest.raises(EntityNotFoundError):
            await create_handler(repos).execute(
                CreateUserCommand(
                    username="bob",
                    email="bob@example.com",
                    password="secret-pass",
                    organization_id="missing",
                )
            )
        assert repos.users.items == {}

    async def test_short_password_is_rejected(self, repos):
        with pytest.raises(DomainValidationError):
            await create_handler(repos).execute(
                CreateUserCommand(username="bob", email="bob@example.com", password="short")
            )

    async def test_invalid_email_is_rejected(self, repos):
        with pytest.raises(DomainValidationError):
            await create_handler(repos).execute(
                CreateUserCommand(username="bob", email="not-an-email", password="secret-pass")
            )


class TestUpdateUser:
    async def test_changing_email_to_taken_one_is_rejected(self, repos, make_user):
        make_user("carol")
        dave = make_user("dave")
        handler = UpdateUserHandler(repos.users, repos.organizations, AuditTrail(repos.audit_logs))

        with pytest.raises(EntityAlreadyExistsError):
            await handler.execute(
                UpdateUserCommand(user_id=dave.user.id, email="carol@example.com")
            )

    async def test_keeping_own_email_is_allowed(self, repos, make_user):
        dave = make_user("dave")
        handler = UpdateUserHandler(repos.users, repos.organizations, AuditTrail(repos.audit_logs))

        user = await handler.execute(
            UpdateUserCommand(user_id=dave.user.id, email="dave@example.com", first_name="Dave")
        )

        assert user.first_name == "Dave"

    async def test_unknown_role_is_rejected(self, repos, make_user):
        dave = make_user("dave")
        handler = UpdateUserHandler(repos.users, repos.organizations, AuditTrail(repos.audit_logs))

        with pytest.raises(DomainValidationError):
            await handler.execute(UpdateUserCommand(user_id=dave.user.id, roles=("ROOT",)))


class TestChangePassword:
    async def test_wrong_current_password_is_rejected(self, repos, make_user):
        erin = make_user("erin")
        handler = ChangePasswordHandler(
            repos.users, repos.sessions, TEST_HASHER, AuditTrail(repos.audit_logs)
        )

        with pytest.raises(DomainValidationError):
            await handler.execute(
                ChangePasswordCommand(
                    user_id=erin.user.id,
                    current_password="wrong-password",
                    new_password="brand-new-pass",
                )
            )

    async def test_other_sessions_are_revoked(self, repos, make_user):
        erin = make_user("erin")
        other = repos.sessions.add(Session.start(user_id=erin.user.id, ttl_minutes=60))
        handler = ChangePasswordHandler(
            repos.users, repos.sessions, TEST_HASHER, AuditTrail(repos.audit_logs)
        )

        await handler.execute(
            ChangePasswordCommand(
                user_id=erin.user.id,
                current_password=DEFAULT_PASSWORD,
                new_password="brand-new-pass",
                keep_session_id=erin.session.id,
            )
        )

        assert (await repos.sessions.get_by_token(erin.session.token)).active
        assert not (await repos.sessions.get_by_token(other.token)).active
        user = await repos.users.get_by_id(erin.user.id)
        assert TEST_HASHER.verify(user.password_hash, "brand-new-pass")


class TestSetUserActive:
    async def test_deactivation_revokes_sessions(self, repos, make_user):
        frank = make_user("frank")
        handler = SetUserActiveHandler(repos.users, repos.sessions, AuditTrail(repos.audit_logs))

        user = await handler.execute(SetUserActiveCommand(user_id=frank.user.id, active=False))

        assert not user.active
        assert await repos.sessions.find_active_by_user(frank.user.id) == []


class TestDeleteUser:
    async def test_cascade_removes_sessions_profile_and_unassigns_tasks(self, repos, make_user):
        gina = make_user("gina")
        task = repos.tasks.add(
            Task.create(project_id="p1", title="Write docs", assignee_id=gina.user.id)
        )
        handler = DeleteUserHandler(
            repos.users,
            repos.profiles,
            repos.sessions,
            repos.notifications,
            repos.tasks,
            AuditTrail(repos.audit_logs),
        )

        assert await handler.execute(DeleteUserCommand(user_id=gina.user.id))

        assert not await repos.users.exists_by_email(EmailAddress("gina@example.com"))
        assert await repos.profiles.get_by_user_id(gina.user.id) is None
        assert await repos.sessions.get_by_token(gina.session.token) is None
        assert (await repos.tasks.get_by_id(task.id)).assignee_id is None

    async def test_missing_user_is_not_found(self, repos):
        handler = DeleteUserHandler(
            repos.users,
            repos.profiles,
            repos.sessions,
            repos.notifications,
            repos.tasks,
            AuditTrail(repos.audit_logs),
        )
        with pytest.raises(EntityNotFoundError):
            await handler.execute(DeleteUserCommand(user_id="missing"))
