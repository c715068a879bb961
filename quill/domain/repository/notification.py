"""Notification repository interface."""

from abc import ABC, abstractmethod
from typing import List, Sequence

from quill.domain.model.notification import Notification
from quill.domain.value import NotificationId, UserId


class NotificationRepository(ABC):
    """Repository for Notification entity."""

    @abstractmethod
    async def find_by_recipient(self, recipient_id: UserId) -> List[Notification]:
        """Find a user's notifications, newest first."""
        pass

    @abstractmethod
    async def save(self, notification: Notification) -> Notification:
        """Save a notification."""
        pass

    @abstractmethod
    async def mark_read(
        self, recipient_id: UserId, notification_ids: Sequence[NotificationId]
    ) -> int:
        """Mark notifications as read.

        Only rows owned by ``recipient_id`` are touched.

        Returns:
            Number of notifications updated
        """
        pass

    @abstractmethod
    async def delete_for_recipient(
        self, recipient_id: UserId, notification_id: NotificationId
    ) -> bool:
        """Delete one of a user's notifications.

        Returns:
            True if a row was deleted, False otherwise
        """
        pass
