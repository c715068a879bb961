"""Notification domain service.

Notifications are side effects of comments and votes: each one is stored
and pushed to the recipient's live connections straight away.
"""

from typing import Any
from uuid import uuid4

import logfire

from quill.domain.error import NotFoundError
from quill.domain.model import Node, Notification, User
from quill.domain.repository import (
    NodeRepository,
    NotificationRepository,
    UserRepository,
)
from quill.domain.value import (
    NodeId,
    NotificationId,
    NotificationTargetType,
    NotificationType,
    UserId,
    VoteDirection,
)

from .base import Service
from .events import NOTIFICATION, EventPublisher


def notification_payload(
    notification: Notification, actor: User | None
) -> dict[str, Any]:
    """Serialize a notification the way it is pushed to clients."""
    return {
        **notification.model_dump(mode="json"),
        "actor": {
            "id": str(notification.actor_id),
            "username": actor.username if actor else None,
        },
    }


class NotificationService(Service):
    """Domain service for notification operations."""

    def __init__(
        self,
        notification_repository: NotificationRepository,
        node_repository: NodeRepository,
        user_repository: UserRepository,
        publisher: EventPublisher,
    ) -> None:
        """Initialize notification service.

        Args:
            notification_repository: Notification repository
            node_repository: Node repository, used to walk up comment threads
            user_repository: User repository, used to describe the actor
            publisher: Real-time event publisher
        """
        self.notification_repository = notification_repository
        self.node_repository = node_repository
        self.user_repository = user_repository
        self.publisher = publisher

    async def create_notification(
        self,
        recipient_id: UserId | None,
        actor_id: UserId,
        type: NotificationType,
        target_type: NotificationTargetType,
        article_id: NodeId | None = None,
        comment_id: NodeId | None = None,
    ) -> Notification | None:
        """Store a notification and push it to the recipient.

        Nothing happens when there is no recipient or when users act on
        their own content.

        Returns:
            The stored notification, or None if none was created
        """
        with logfire.span(
            "notification_service.create_notification",
            recipient_id=str(recipient_id) if recipient_id else None,
            actor_id=str(actor_id),
            type=type.value,
        ):
            if not recipient_id or recipient_id == actor_id:
                logfire.debug("Notification skipped", reason="self or no recipient")
                return None

            notification = Notification(
                id=NotificationId(uuid4()),
                type=type,
                target_type=target_type,
                actor_id=actor_id,
                recipient_id=recipient_id,
                article_id=article_id,
                comment_id=comment_id,
            )
            saved = await self.notification_repository.save(notification)

            actor = await self.user_repository.find_by_id(actor_id)
            delivered = await self.publisher.publish_to_user(
                str(recipient_id), NOTIFICATION, notification_payload(saved, actor)
            )
            logfire.info(
                "Notification created",
                notification_id=str(saved.id),
                recipient_id=str(recipient_id),
                delivered=delivered,
            )
            return saved

    async def resolve_root_article_id(self, node: Node) -> NodeId:
        """Walk up the parent chain to the article at the top of the thread."""
        with logfire.span(
            "notification_service.resolve_root_article_id", node_id=str(node.id)
        ):
            current = node
            while current.parent_id is not None:
                parent = await self.node_repository.find_by_id(current.parent_id)
                if parent is None:
                    logfire.warn(
                        "Broken parent chain",
                        node_id=str(current.id),
                        parent_id=str(current.parent_id),
                    )
                    break
                current = parent
            return current.id

    async def notify_comment(
        self, comment: Node, parent: Node, root_article_id: NodeId | None = None
    ) -> Notification | None:
        """Tell the parent's author about a new comment or reply.

        A comment on an article references the article and the new comment.
        A reply to a comment references the root article and the comment
        that was replied to.
        """
        if parent.is_article:
            return await self.create_notification(
                recipient_id=parent.author_id,
                actor_id=comment.author_id,
                type=NotificationType.COMMENT,
                target_type=NotificationTargetType.ARTICLE,
                article_id=parent.id,
                comment_id=comment.id,
            )

        if root_article_id is None:
            root_article_id = await self.resolve_root_article_id(parent)
        return await self.create_notification(
            recipient_id=parent.author_id,
            actor_id=comment.author_id,
            type=NotificationType.REPLY,
            target_type=NotificationTargetType.COMMENT,
            article_id=root_article_id,
            comment_id=parent.id,
        )

    async def notify_vote(
        self, node: Node, voter_id: UserId, direction: VoteDirection
    ) -> Notification | None:
        """Tell a node's author that someone voted on it."""
        if node.author_id == voter_id:
            return None

        if node.is_article:
            return await self.create_notification(
                recipient_id=node.author_id,
                actor_id=voter_id,
                type=NotificationType.for_vote(direction),
                target_type=NotificationTargetType.ARTICLE,
                article_id=node.id,
            )

        return await self.create_notification(
            recipient_id=node.author_id,
            actor_id=voter_id,
            type=NotificationType.for_vote(direction),
            target_type=NotificationTargetType.COMMENT,
            article_id=await self.resolve_root_article_id(node),
            comment_id=node.id,
        )

    async def list_for_user(self, recipient_id: UserId) -> list[Notification]:
        """List a user's notifications, newest first."""
        with logfire.span(
            "notification_service.list_for_user", recipient_id=str(recipient_id)
        ):
            return await self.notification_repository.find_by_recipient(recipient_id)

    async def mark_as_read(
        self, recipient_id: UserId, notification_ids: list[NotificationId]
    ) -> int:
        """Mark some of a user's notifications as read.

        Returns:
            Number of notifications updated
        """
        with logfire.span(
            "notification_service.mark_as_read",
            recipient_id=str(recipient_id),
            count=len(notification_ids),
        ):
            if not notification_ids:
                return 0
            updated = await self.notification_repository.mark_read(
                recipient_id, notification_ids
            )
            logfire.info("Notifications marked as read", updated=updated)
            return updated

    async def remove(
        self, recipient_id: UserId, notification_id: NotificationId
    ) -> None:
        """Delete one of a user's notifications.

        Raises:
            NotFoundError: If the notification does not exist or belongs to
                someone else
        """
        with logfire.span(
            "notification_service.remove",
            recipient_id=str(recipient_id),
            notification_id=str(notification_id),
        ):
            deleted = await self.notification_repository.delete_for_recipient(
                recipient_id, notification_id
            )
            if not deleted:
                logfire.warn(
                    "Notification not found", notification_id=str(notification_id)
                )
                raise NotFoundError("Notification", str(notification_id))
            logfire.info("Notification deleted", notification_id=str(notification_id))
