"""Notification commands."""

from .notification_commands import (
    CreateNotificationCommand,
    CreateNotificationHandler,
    DeleteNotificationCommand,
    DeleteNotificationHandler,
    MarkAllNotificationsReadCommand,
    MarkAllNotificationsReadHandler,
    MarkNotificationReadCommand,
    MarkNotificationReadHandler,
)

__all__ = [
    "CreateNotificationCommand",
    "CreateNotificationHandler",
    "DeleteNotificationCommand",
    "DeleteNotificationHandler",
    "MarkAllNotificationsReadCommand",
    "MarkAllNotificationsReadHandler",
    "MarkNotificationReadCommand",
    "MarkNotificationReadHandler",
]
