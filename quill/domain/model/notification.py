"""Notification entity."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from quill.domain.model.common import DomainModel
from quill.domain.value import (
    NodeId,
    NotificationId,
    NotificationTargetType,
    NotificationType,
    UserId,
)


class Notification(DomainModel):
    """In-app notification for a user.

    ``article_id`` always points at the root article of the thread;
    ``comment_id`` points at the comment involved, if any.
    """

    id: NotificationId
    type: NotificationType
    target_type: NotificationTargetType
    actor_id: UserId
    recipient_id: UserId
    article_id: Optional[NodeId] = None
    comment_id: Optional[NodeId] = None
    is_read: bool = False
    created_at: datetime = Field(default_factory=datetime.now)
