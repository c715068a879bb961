"""In-memory repository implementations for testing."""

from .image import InMemoryImageRepository
from .node import InMemoryNodeRepository
from .notification import InMemoryNotificationRepository
from .user import InMemoryUserRepository
from .vote import InMemoryVoteRepository

__all__ = [
    "InMemoryImageRepository",
    "InMemoryNodeRepository",
    "InMemoryNotificationRepository",
    "InMemoryUserRepository",
    "InMemoryVoteRepository",
]
