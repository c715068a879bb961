"""Mock persistence providers for testing."""

from dishka import Scope, provide

from quill.domain.repository import (
    ImageRepository,
    NodeRepository,
    NotificationRepository,
    UserRepository,
    VoteRepository,
)
from quill.persistence.repository.inmemory import (
    InMemoryImageRepository,
    InMemoryNodeRepository,
    InMemoryNotificationRepository,
    InMemoryUserRepository,
    InMemoryVoteRepository,
)
from quill.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    Uses APP scope so data survives across the requests of one test client;
    every test builds its own container, which keeps tests isolated.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_user_repository(self) -> UserRepository:
        """Provide in-memory user repository."""
        return InMemoryUserRepository()

    @provide(scope=Scope.APP)
    def get_node_repository(self) -> NodeRepository:
        """Provide in-memory node repository."""
        return InMemoryNodeRepository()

    @provide(scope=Scope.APP)
    def get_vote_repository(self) -> VoteRepository:
        """Provide in-memory vote repository."""
        return InMemoryVoteRepository()

    @provide(scope=Scope.APP)
    def get_notification_repository(self) -> NotificationRepository:
        """Provide in-memory notification repository."""
        return InMemoryNotificationRepository()

    @provide(scope=Scope.APP)
    def get_image_repository(self) -> ImageRepository:
        """Provide in-memory image repository."""
        return InMemoryImageRepository()
