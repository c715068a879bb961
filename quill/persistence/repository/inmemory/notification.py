"""In-memory notification repository for testing."""

from typing import Sequence

from quill.domain.model.notification import Notification
from quill.domain.repository.notification import NotificationRepository
from quill.domain.value import NotificationId, UserId


class InMemoryNotificationRepository(NotificationRepository):
    """In-memory implementation of NotificationRepository for testing."""

    def __init__(self) -> None:
        self._notifications: dict[NotificationId, Notification] = {}

    async def find_by_recipient(self, recipient_id: UserId) -> list[Notification]:
        """Find a user's notifications, newest first."""
        owned = [
            n for n in self._notifications.values() if n.recipient_id == recipient_id
        ]
        return sorted(owned, key=lambda n: n.created_at, reverse=True)

    async def save(self, notification: Notification) -> Notification:
        """Save a notification."""
        self._notifications[notification.id] = notification
        return notification

    async def mark_read(
        self, recipient_id: UserId, notification_ids: Sequence[NotificationId]
    ) -> int:
        """Mark some of a user's notifications as read."""
        updated = 0
        for notification_id in set(notification_ids):
            notification = self._notifications.get(notification_id)
            if notification and notification.recipient_id == recipient_id:
                self._notifications[notification_id] = notification.model_copy(
                    update={"is_read": True}
                )
                updated += 1
        return updated

    async def delete_for_recipient(
        self, recipient_id: UserId, notification_id: NotificationId
    ) -> bool:
        """Delete one of a user's notifications."""
        notification = self._notifications.get(notification_id)
        if not notification or notification.recipient_id != recipient_id:
            return False
        del self._notifications[notification_id]
        return True
