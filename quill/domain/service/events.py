"""Real-time event publishing interface.

Services push events through an ``EventPublisher``; the WebSocket adapter
implements it. Every message sent to a client has the shape
``{"event": <name>, "data": <payload>}``.
"""

from typing import Any

ARTICLE_CREATED = "articleCreated"
ARTICLE_UPDATED = "articleUpdated"
ARTICLE_DELETED = "articleDeleted"
COMMENT_CREATED = "commentCreated"
NOTIFICATION = "notification"


def article_room(article_id: object) -> str:
    """Name of the room clients join to follow one article."""
    return f"article:{article_id}"


class EventPublisher:
    """Generic publisher interface for server-pushed events."""

    async def publish(self, event: str, data: Any) -> None:
        """Send an event to every open connection."""
        raise NotImplementedError

    async def publish_to_room(self, room: str, event: str, data: Any) -> None:
        """Send an event to the connections that joined ``room``."""
        raise NotImplementedError

    async def publish_to_user(self, user_id: str, event: str, data: Any) -> int:
        """Send an event to every connection of one user.

        Returns:
            Number of connections the event was delivered to
        """
        raise NotImplementedError
