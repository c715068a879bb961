"""Mock storage providers for testing."""

from dishka import Scope, alias, provide

from quill.adapter.storage import InMemoryImageStorage
from quill.domain.service import ImageStorage
from quill.util.di.infrastructure.storage import StorageProvider


class MockStorageProvider(StorageProvider):
    """Keeps uploaded files in memory.

    ``InMemoryImageStorage`` is exposed too so tests can inspect the files.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_in_memory_storage(self) -> InMemoryImageStorage:
        """Provide in-memory image storage."""
        return InMemoryImageStorage()

    image_storage = alias(source=InMemoryImageStorage, provides=ImageStorage)
