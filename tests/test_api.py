"""
Tests for the application shell: health checks, middleware, error envelopes,
metrics and the bootstrap admin.

Run with: pytest tests/test_api.py -v
"""

import pytest
from fastapi.testclient import TestClient

from workhub.config.settings import Config
from workhub.domain.entities.user import Role


class TestHealth:
    def test_root(self, client):
        res = client.get("/")
        assert res.status_code == 200
        assert res.json() == {"message": "WorkHub API is running."}

    def test_health(self, client):
        assert client.get("/health").json() == {"status": "healthy"}


class TestCorrelationId:
    def test_header_is_echoed(self, client):
        res = client.get("/health", headers={"X-Correlation-ID": "req-42"})
        assert res.headers["X-Correlation-ID"] == "req-42"

    def test_default_when_absent(self, client):
        assert client.get("/health").headers["X-Correlation-ID"] == "NO Correlation ID"


class TestErrorEnvelope:
    def test_unknown_entity_is_404(self, client, member):
        res = client.get("/api/v1/projects/does-not-exist", headers=member.headers)
        assert res.status_code == 404
        body = res.json()
        assert body["success"] is False
        assert body["data"] is None

    def test_duplicate_is_409(self, client, admin, organization):
        res = client.post("/api/v1/organizations", headers=admin.headers, json={"name": "Acme Corp"})
        assert res.status_code == 409
        assert res.json()["success"] is False

    def test_page_size_out_of_range_is_400(self, client, member):
        for size in (0, 500):
            res = client.get(f"/api/v1/projects?size={size}", headers=member.headers)
            assert res.status_code == 400
            assert res.json()["success"] is False

    @pytest.mark.parametrize("sort", ["password_hash,asc", "$where,asc", "no_such_field,desc"])
    def test_unsortable_field_is_400(self, client, admin, sort):
        res = client.get("/api/v1/users", headers=admin.headers, params={"sort": sort})
        assert res.status_code == 400
        assert res.json()["success"] is False

    def test_sort_by_listed_field(self, client, admin, make_user):
        make_user("zoe")
        make_user("bob")

        res = client.get("/api/v1/users?sort=username,desc", headers=admin.headers)

        assert res.status_code == 200
        assert [u["username"] for u in res.json()["content"]] == ["zoe", "bob", "admin"]

    def test_missing_token_is_401(self, client):
        res = client.get("/api/v1/projects")
        assert res.status_code == 401
        assert res.json()["success"] is False

    def test_unknown_token_is_401(self, client):
        res = client.get("/api/v1/projects", headers={"Authorization": "Bearer nope"})
        assert res.status_code == 401

    def test_unknown_route_uses_envelope(self, client):
        res = client.get("/api/v1/nothing-here")
        assert res.status_code == 404
        assert res.json()["success"] is False


class TestMetrics:
    def test_exposes_prometheus_text(self, client, member):
        client.get("/api/v1/projects/missing", headers=member.headers)

        res = client.get("/metrics")

        assert res.status_code == 200
        assert res.headers["content-type"].startswith("text/plain")
        assert "http_server_request_duration_seconds" in res.text
        assert 'workhub_errors_total{error_type="not_found"}' in res.text
        assert 'route="/api/v1/projects/{project_id}"' in res.text


class TestBootstrapAdmin:
    def test_created_when_configured(self, app, repos, monkeypatch):
        monkeypatch.setattr(Config, "BOOTSTRAP_ADMIN_USERNAME", "root")
        monkeypatch.setattr(Config, "BOOTSTRAP_ADMIN_EMAIL", "root@example.com")
        monkeypatch.setattr(Config, "BOOTSTRAP_ADMIN_PASSWORD", "s3cret-pass")

        with TestClient(app):
            pass

        users = list(repos.users.items.values())
        assert [u.username for u in users] == ["root"]
        assert users[0].roles == [Role.ADMIN.value]

    def test_skipped_when_incomplete(self, app, repos, monkeypatch):
        monkeypatch.setattr(Config, "BOOTSTRAP_ADMIN_USERNAME", "root")
        monkeypatch.setattr(Config, "BOOTSTRAP_ADMIN_EMAIL", "")

        with TestClient(app):
            pass

        assert repos.users.items == {}
