import pytest

from workhub.presentation.api.auth import limiter


@pytest.fixture()
def rate_limited(monkeypatch):
    monkeypatch.setattr(limiter, "enabled", True)
    limiter.reset()
    yield limiter
    limiter.reset()


def test_login_rate_limit(client, make_user, rate_limited):
    make_user("alice")
    payload = {"username_or_email": "alice", "password": "wrong-password"}

    status_codes = []
    for _ in range(15):
        res = client.post("/api/v1/auth/login", json=payload)
        status_codes.append(res.status_code)

    assert any(code == 429 for code in status_codes), "Expected at least one 429 Too Many Requests response"
    assert status_codes[0] == 401
    assert client.post("/api/v1/auth/login", json=payload).json()["success"] is False
