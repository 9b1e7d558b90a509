"""
Tests for login, session validation and the /api/v1/auth endpoints.

Run with: pytest tests/test_auth.py -v
"""

from datetime import datetime, timedelta, timezone

import pytest

from fakes import DEFAULT_PASSWORD, TEST_HASHER
from workhub.application.commands.auth import (
    ExtendSessionCommand,
    ExtendSessionHandler,
    LoginCommand,
    LoginHandler,
    LogoutCommand,
    LogoutHandler,
)
from workhub.application.queries.auth import (
    AuthenticateSessionHandler,
    AuthenticateSessionQuery,
)
from workhub.domain.exceptions import DomainValidationError, InvalidCredentialsError


def expire(repos, session) -> None:
    """Move a stored session's expiry into the past without removing it."""
    stored = repos.sessions.items[session.id]
    stored.expires_at = datetime.now(timezone.utc) - timedelta(seconds=1)


@pytest.mark.anyio
class TestLogin:
    async def test_login_by_username_opens_session(self, repos, make_user):
        alice = make_user("alice")
        handler = LoginHandler(repos.users, repos.sessions, TEST_HASHER)

        result = await handler.execute(
            LoginCommand(username_or_email="alice", password=DEFAULT_PASSWORD, ip_address="10.0.0.1")
        )

        assert result.user.id == alice.user.id
        assert result.session.active
        assert result.session.ip_address == "10.0.0.1"
        assert (await repos.users.get_by_id(alice.user.id)).last_login is not None
        assert await repos.sessions.get_by_token(result.session.token) is not None

    async def test_login_by_email_is_case_insensitive(self, repos, make_user):
        make_user("alice")
        handler = LoginHandler(repos.users, repos.sessions, TEST_HASHER)

        result = await handler.execute(
            LoginCommand(username_or_email="ALICE@example.com", password=DEFAULT_PASSWORD)
        )

        assert result.user.username == "alice"

    @pytest.mark.parametrize("identifier,password", [
        ("alice", "wrong-password"),
        ("nobody", DEFAULT_PASSWORD),
        ("nobody@example.com", DEFAULT_PASSWORD),
    ])
    async def test_bad_credentials_are_rejected(self, repos, make_user, identifier, password):
        make_user("alice")
        handler = LoginHandler(repos.users, repos.sessions, TEST_HASHER)

        with pytest.raises(InvalidCredentialsError):
            await handler.execute(LoginCommand(username_or_email=identifier, password=password))

    async def test_inactive_user_cannot_log_in(self, repos, make_user):
        alice = make_user("alice")
        repos.users.items[alice.user.id].active = False
        handler = LoginHandler(repos.users, repos.sessions, TEST_HASHER)

        with pytest.raises(InvalidCredentialsError):
            await handler.execute(LoginCommand(username_or_email="alice", password=DEFAULT_PASSWORD))


@pytest.mark.anyio
class TestAuthenticateSession:
    async def test_valid_token_resolves_user(self, repos, make_user):
        alice = make_user("alice")
        handler = AuthenticateSessionHandler(repos.sessions, repos.users)

        result = await handler.execute(AuthenticateSessionQuery(token=alice.session.token))

        assert result.user.id == alice.user.id

    async def test_expired_token_is_rejected_although_record_exists(self, repos, make_user):
        alice = make_user("alice")
        expire(repos, alice.session)
        handler = AuthenticateSessionHandler(repos.sessions, repos.users)

        assert await repos.sessions.get_by_token(alice.session.token) is not None
        with pytest.raises(InvalidCredentialsError):
            await handler.execute(AuthenticateSessionQuery(token=alice.session.token))

    async def test_unknown_token_is_rejected(self, repos):
        handler = AuthenticateSessionHandler(repos.sessions, repos.users)
        with pytest.raises(InvalidCredentialsError):
            await handler.execute(AuthenticateSessionQuery(token="no-such-token"))

    async def test_closed_session_is_rejected(self, repos, make_user):
        alice = make_user("alice")
        await LogoutHandler(repos.sessions).execute(LogoutCommand(token=alice.session.token))

        with pytest.raises(InvalidCredentialsError):
            await AuthenticateSessionHandler(repos.sessions, repos.users).execute(
                AuthenticateSessionQuery(token=alice.session.token)
            )


@pytest.mark.anyio
class TestExtendSession:
    async def test_extends_expiry(self, repos, make_user):
        alice = make_user("alice")
        before = alice.session.expires_at

        session = await ExtendSessionHandler(repos.sessions).execute(
            ExtendSessionCommand(token=alice.session.token, minutes=30)
        )

        assert session.expires_at == before + timedelta(minutes=30)

    async def test_non_positive_minutes_rejected(self, repos, make_user):
        alice = make_user("alice")
        with pytest.raises(DomainValidationError):
            await ExtendSessionHandler(repos.sessions).execute(
                ExtendSessionCommand(token=alice.session.token, minutes=0)
            )

    async def test_expired_session_cannot_be_extended(self, repos, make_user):
        alice = make_user("alice")
        expire(repos, alice.session)
        with pytest.raises(InvalidCredentialsError):
            await ExtendSessionHandler(repos.sessions).execute(
                ExtendSessionCommand(token=alice.session.token, minutes=30)
            )


class TestAuthApi:
    def test_register_then_login_then_me(self, client):
        res = client.post(
            "/api/v1/auth/register",
            json={"username": "newbie", "email": "newbie@example.com", "password": "long-enough-1"},
        )
        assert res.status_code == 201
        assert res.json()["data"]["roles"] == ["USER"]

        res = client.post(
            "/api/v1/auth/login",
            json={"username_or_email": "newbie", "password": "long-enough-1"},
        )
        assert res.status_code == 200
        body = res.json()
        assert body["success"] is True
        token = body["data"]["token"]
        assert body["data"]["user"]["username"] == "newbie"
        assert "password_hash" not in body["data"]["user"]

        res = client.get("/api/v1/auth/me", headers={"Authorization": f"Bearer {token}"})
        assert res.status_code == 200
        assert res.json()["data"]["email"] == "newbie@example.com"

    def test_wrong_password_is_401_envelope(self, client, make_user):
        make_user("alice")
        res = client.post(
            "/api/v1/auth/login",
            json={"username_or_email": "alice", "password": "nope"},
        )
        assert res.status_code == 401
        assert res.json()["success"] is False

    def test_missing_token_is_401(self, client):
        assert client.get("/api/v1/auth/me").status_code == 401

    def test_expired_token_is_401(self, client, repos, make_user):
        alice = make_user("alice")
        expire(repos, alice.session)
        assert client.get("/api/v1/auth/me", headers=alice.headers).status_code == 401

    def test_logout_closes_session(self, client, make_user):
        alice = make_user("alice")
        assert client.post("/api/v1/auth/logout", headers=alice.headers).status_code == 200
        assert client.get("/api/v1/auth/me", headers=alice.headers).status_code == 401

    def test_extend_without_body_uses_default_ttl(self, client, make_user):
        alice = make_user("alice")
        res = client.post("/api/v1/auth/extend", headers=alice.headers)
        assert res.status_code == 200
        assert res.json()["data"]["token"] == alice.session.token
