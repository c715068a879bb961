"""PostgreSQL repository implementations."""

from quill.persistence.repository.image import PostgresImageRepository
from quill.persistence.repository.node import PostgresNodeRepository
from quill.persistence.repository.notification import PostgresNotificationRepository
from quill.persistence.repository.user import PostgresUserRepository
from quill.persistence.repository.vote import PostgresVoteRepository

__all__ = [
    "PostgresImageRepository",
    "PostgresNodeRepository",
    "PostgresNotificationRepository",
    "PostgresUserRepository",
    "PostgresVoteRepository",
]
