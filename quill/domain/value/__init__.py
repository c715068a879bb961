"""Domain value objects for Quill."""

from quill.domain.value.identifiers import (
    ImageId,
    NodeId,
    NotificationId,
    UserId,
)
from quill.domain.value.types import (
    NotificationTargetType,
    NotificationType,
    Role,
    SortField,
    SortOrder,
    VoteDirection,
    VoteTally,
)

__all__ = [
    # Identifiers
    "UserId",
    "NodeId",
    "NotificationId",
    "ImageId",
    # Types
    "VoteDirection",
    "VoteTally",
    "Role",
    "NotificationType",
    "NotificationTargetType",
    "SortField",
    "SortOrder",
]
