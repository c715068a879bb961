"""List notifications use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from quill.domain.model import Notification
from quill.domain.service import NotificationService
from quill.domain.value import NotificationTargetType, NotificationType, UserId


class NotificationResponse(BaseModel):
    """A notification as returned by the API."""

    id: str
    type: NotificationType
    target_type: NotificationTargetType
    actor_id: str
    recipient_id: str
    article_id: str | None
    comment_id: str | None
    is_read: bool
    created_at: datetime

    @classmethod
    def from_notification(cls, notification: Notification) -> "NotificationResponse":
        return cls(
            id=str(notification.id),
            type=notification.type,
            target_type=notification.target_type,
            actor_id=str(notification.actor_id),
            recipient_id=str(notification.recipient_id),
            article_id=str(notification.article_id) if notification.article_id else None,
            comment_id=str(notification.comment_id) if notification.comment_id else None,
            is_read=notification.is_read,
            created_at=notification.created_at,
        )


class ListNotificationsRequest(BaseModel):
    """List notifications request."""

    user_id: str  # User ID from authenticated user


class ListNotificationsResponse(BaseModel):
    """The user's notifications, newest first."""

    notifications: list[NotificationResponse]
    unread_count: int


class ListNotificationsUseCase:
    """Use case for reading the current user's notifications."""

    def __init__(self, notification_service: NotificationService) -> None:
        self.notification_service = notification_service

    async def execute(
        self, request: ListNotificationsRequest
    ) -> ListNotificationsResponse:
        notifications = await self.notification_service.list_for_user(
            UserId(UUID(request.user_id))
        )
        return ListNotificationsResponse(
            notifications=[
                NotificationResponse.from_notification(n) for n in notifications
            ],
            unread_count=sum(1 for n in notifications if not n.is_read),
        )
