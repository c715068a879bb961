"""Notification use cases."""

from .delete_notification import (
    DeleteNotificationRequest,
    DeleteNotificationResponse,
    DeleteNotificationUseCase,
)
from .list_notifications import (
    ListNotificationsRequest,
    ListNotificationsResponse,
    ListNotificationsUseCase,
    NotificationResponse,
)
from .mark_read import MarkReadRequest, MarkReadResponse, MarkReadUseCase

__all__ = [
    "DeleteNotificationRequest",
    "DeleteNotificationResponse",
    "DeleteNotificationUseCase",
    "ListNotificationsRequest",
    "ListNotificationsResponse",
    "ListNotificationsUseCase",
    "MarkReadRequest",
    "MarkReadResponse",
    "MarkReadUseCase",
    "NotificationResponse",
]
