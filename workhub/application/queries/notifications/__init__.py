"""Notification queries."""

from .list_notifications import (
    CountUnreadNotificationsHandler,
    CountUnreadNotificationsQuery,
    ListNotificationsHandler,
    ListNotificationsQuery,
)

__all__ = [
    "CountUnreadNotificationsHandler",
    "CountUnreadNotificationsQuery",
    "ListNotificationsHandler",
    "ListNotificationsQuery",
]
