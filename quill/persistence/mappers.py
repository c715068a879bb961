"""Mappers for converting between database rows and domain models.

Domain models are immutable pydantic models, so rows are mapped by hand
instead of through SQLAlchemy's ORM.
"""

from typing import Any, Dict

from quill.domain.model import Image, Node, Notification, User
from quill.domain.value import (
    ImageId,
    NodeId,
    NotificationId,
    NotificationTargetType,
    NotificationType,
    Role,
    UserId,
)


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model."""
    return User(
        id=UserId(row["id"]),
        email=row["email"],
        username=row["username"],
        password=row["password"],
        name=row.get("name"),
        last_name=row.get("last_name"),
        bio=row.get("bio"),
        role=Role(row["role"]),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict."""
    data = user.model_dump()
    data["role"] = user.role.value
    return data


def row_to_node(row: Dict[str, Any]) -> Node:
    """Convert database row to Node domain model."""
    parent_id = row.get("parent_id")
    return Node(
        id=NodeId(row["id"]),
        title=row["title"],
        content=row["content"],
        author_id=UserId(row["author_id"]),
        author_username=row["author_username"],
        parent_id=NodeId(parent_id) if parent_id else None,
        depth=row["depth"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def node_to_dict(node: Node) -> Dict[str, Any]:
    """Convert Node domain model to database dict."""
    return node.model_dump()


def row_to_notification(row: Dict[str, Any]) -> Notification:
    """Convert database row to Notification domain model."""
    article_id = row.get("article_id")
    comment_id = row.get("comment_id")
    return Notification(
        id=NotificationId(row["id"]),
        type=NotificationType(row["type"]),
        target_type=NotificationTargetType(row["target_type"]),
        actor_id=UserId(row["actor_id"]),
        recipient_id=UserId(row["recipient_id"]),
        article_id=NodeId(article_id) if article_id else None,
        comment_id=NodeId(comment_id) if comment_id else None,
        is_read=row["is_read"],
        created_at=row["created_at"],
    )


def notification_to_dict(notification: Notification) -> Dict[str, Any]:
    """Convert Notification domain model to database dict."""
    data = notification.model_dump()
    data["type"] = notification.type.value
    data["target_type"] = notification.target_type.value
    return data


def row_to_image(row: Dict[str, Any]) -> Image:
    """Convert database row to Image domain model."""
    return Image(
        id=ImageId(row["id"]),
        filename=row["filename"],
        original_filename=row["original_filename"],
        path=row["path"],
        mimetype=row["mimetype"],
        size=row["size"],
        article_id=NodeId(row["article_id"]),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def image_to_dict(image: Image) -> Dict[str, Any]:
    """Convert Image domain model to database dict."""
    return image.model_dump()
