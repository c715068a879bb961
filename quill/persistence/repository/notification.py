"""PostgreSQL implementation of Notification repository."""

from typing import List, Sequence

from sqlalchemy import and_, delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from quill.domain.model import Notification
from quill.domain.repository import NotificationRepository
from quill.domain.value import NotificationId, UserId
from quill.persistence.mappers import notification_to_dict, row_to_notification
from quill.persistence.tables import notifications_table


class PostgresNotificationRepository(NotificationRepository):
    """PostgreSQL implementation of NotificationRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_recipient(self, recipient_id: UserId) -> List[Notification]:
        """Find a user's notifications, newest first."""
        stmt = (
            select(notifications_table)
            .where(notifications_table.c.recipient_id == recipient_id)
            .order_by(notifications_table.c.created_at.desc())
        )
        result = await self.session.execute(stmt)
        return [row_to_notification(dict(row)) for row in result.mappings().all()]

    async def save(self, notification: Notification) -> Notification:
        """Save a notification."""
        stmt = notifications_table.insert().values(
            **notification_to_dict(notification)
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return notification

    async def mark_read(
        self, recipient_id: UserId, notification_ids: Sequence[NotificationId]
    ) -> int:
        """Mark some of a user's notifications as read."""
        if not notification_ids:
            return 0

        stmt = (
            update(notifications_table)
            .where(
                and_(
                    notifications_table.c.recipient_id == recipient_id,
                    notifications_table.c.id.in_(notification_ids),
                )
            )
            .values(is_read=True)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount  # type: ignore[attr-defined]

    async def delete_for_recipient(
        self, recipient_id: UserId, notification_id: NotificationId
    ) -> bool:
        """Delete one of a user's notifications."""
        stmt = delete(notifications_table).where(
            and_(
                notifications_table.c.id == notification_id,
                notifications_table.c.recipient_id == recipient_id,
            )
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]
