"""
Tests for notifications and the audit log listing.

Run with: pytest tests/test_notifications.py -v
"""

from dataclasses import replace
from datetime import timedelta

import pytest

from workhub.application.commands.notifications import (
    DeleteNotificationCommand,
    DeleteNotificationHandler,
    MarkAllNotificationsReadCommand,
    MarkAllNotificationsReadHandler,
    MarkNotificationReadCommand,
    MarkNotificationReadHandler,
)
from workhub.application.common.actor import Actor
from workhub.application.common.audit import AuditTrail
from workhub.application.queries.audit_logs import ListAuditLogsHandler, ListAuditLogsQuery
from workhub.domain.entities.notification import Notification
from workhub.domain.exceptions import AccessDeniedError, DomainValidationError
from workhub.domain.value_objects.page import PageRequest


def notify(repos, user_id, title="Hello"):
    return repos.notifications.add(
        Notification.create(user_id=user_id, type="INFO", title=title, message="...")
    )


@pytest.mark.anyio
class TestNotifications:
    async def test_mark_read_is_owner_only(self, repos):
        notification = notify(repos, "alice")
        handler = MarkNotificationReadHandler(repos.notifications)

        with pytest.raises(AccessDeniedError):
            await handler.execute(MarkNotificationReadCommand(notification.id, user_id="bob"))

        read = await handler.execute(MarkNotificationReadCommand(notification.id, user_id="alice"))
        assert read.read
        assert (await repos.notifications.get_by_id(notification.id)).read

    async def test_mark_all_read_touches_only_own_unread(self, repos):
        notify(repos, "alice")
        notify(repos, "alice")
        notify(repos, "bob")

        updated = await MarkAllNotificationsReadHandler(repos.notifications).execute(
            MarkAllNotificationsReadCommand(user_id="alice")
        )

        assert updated == 2
        assert await repos.notifications.count_unread("alice") == 0
        assert await repos.notifications.count_unread("bob") == 1

    async def test_delete_is_owner_only(self, repos):
        notification = notify(repos, "alice")
        with pytest.raises(AccessDeniedError):
            await DeleteNotificationHandler(repos.notifications).execute(
                DeleteNotificationCommand(notification.id, user_id="bob")
            )
        assert notification.id in repos.notifications.items


@pytest.mark.anyio
class TestAuditLogs:
    async def test_listing_by_entity_is_newest_first(self, repos):
        trail = AuditTrail(repos.audit_logs)
        created = await trail.record("PRODUCT_CREATED", "Product", "p1", actor=Actor(user_id="u1"))
        repos.audit_logs.add(replace(created, timestamp=created.timestamp - timedelta(minutes=5)))
        await trail.record("PRODUCT_UPDATED", "Product", "p1", actor=Actor(user_id="u1"))
        await trail.record("PRODUCT_CREATED", "Product", "p2")

        page = await ListAuditLogsHandler(repos.audit_logs).execute(
            ListAuditLogsQuery(page=PageRequest(), entity_type="Product", entity_id="p1")
        )

        assert [e.action for e in page.content] == ["PRODUCT_UPDATED", "PRODUCT_CREATED"]

    async def test_filter_is_required(self, repos):
        with pytest.raises(DomainValidationError):
            await ListAuditLogsHandler(repos.audit_logs).execute(
                ListAuditLogsQuery(page=PageRequest(), entity_type="Product")
            )


class TestNotificationsApi:
    def test_unread_count_and_read_all(self, client, repos, member):
        notify(repos, member.user.id)
        notify(repos, member.user.id)

        res = client.get("/api/v1/notifications/unread-count", headers=member.headers)
        assert res.json()["data"]["unread"] == 2

        res = client.post("/api/v1/notifications/read-all", headers=member.headers)
        assert res.json()["data"]["updated"] == 2

        res = client.get("/api/v1/notifications?unread_only=true", headers=member.headers)
        assert res.json()["total_elements"] == 0

    def test_reading_someone_elses_notification_is_403(self, client, repos, member):
        notification = notify(repos, "someone-else")
        res = client.patch(f"/api/v1/notifications/{notification.id}/read", headers=member.headers)
        assert res.status_code == 403

    def test_audit_logs_require_admin(self, client, member, admin):
        url = f"/api/v1/audit-logs?user_id={member.user.id}"
        assert client.get(url, headers=member.headers).status_code == 403
        assert client.get(url, headers=admin.headers).status_code == 200
