"""Test configuration and helpers."""

from datetime import datetime, timedelta
from typing import Any
from uuid import uuid4

from quill.domain.model import Node, User
from quill.domain.value import NodeId, Role, UserId

# Fixed reference time so ordering assertions never depend on the clock
BASE_TIME = datetime(2026, 1, 1, 12, 0, 0)


def make_user(
    username: str = "alice",
    email: str | None = None,
    password: str = "secret123",
    role: Role = Role.USER,
) -> User:
    """Build a user with a plain-text password (hashed when saved via UserService)."""
    return User(
        id=UserId(uuid4()),
        email=email or f"{username}@example.com",
        username=username,
        password=password,
        role=role,
    )


def make_node(
    author: User,
    parent: Node | None = None,
    title: str = "Test article",
    content: str = "Some interesting content",
    minutes: int = 0,
) -> Node:
    """Build an article, or a comment when ``parent`` is given.

    ``minutes`` offsets ``created_at`` from BASE_TIME to control ordering.
    """
    created_at = BASE_TIME + timedelta(minutes=minutes)
    return Node(
        id=NodeId(uuid4()),
        title=title,
        content=content,
        author_id=author.id,
        author_username=author.username,
        parent_id=parent.id if parent else None,
        depth=parent.depth + 1 if parent else 0,
        created_at=created_at,
        updated_at=created_at,
    )


class FakeSocket:
    """Records messages sent through the connection registry."""

    def __init__(self, broken: bool = False) -> None:
        self.sent: list[dict[str, Any]] = []
        self.broken = broken

    async def send_json(self, data: Any, mode: str = "text") -> None:
        if self.broken:
            raise RuntimeError("Connection closed")
        self.sent.append(data)

    def events(self) -> list[str]:
        return [message["event"] for message in self.sent]
