"""Repository interfaces for Quill domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from quill.domain.repository.image import ImageRepository
from quill.domain.repository.node import NodeRepository
from quill.domain.repository.notification import NotificationRepository
from quill.domain.repository.user import UserRepository
from quill.domain.repository.vote import VoteRepository

__all__ = [
    "ImageRepository",
    "NodeRepository",
    "NotificationRepository",
    "UserRepository",
    "VoteRepository",
]
