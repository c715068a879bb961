"""Real-time infrastructure provider."""

from collections.abc import Iterator

from dishka import Scope, alias, provide

from quill.adapter.realtime import ConnectionRegistry
from quill.domain.service import EventPublisher
from quill.util.di.base import ProviderBase


class RealtimeProvider(ProviderBase):
    """Provides the WebSocket connection registry.

    One registry per container: it is created on first use and cleared when
    the container closes at shutdown.
    """

    scope = Scope.APP

    @provide
    def get_connection_registry(self) -> Iterator[ConnectionRegistry]:
        """Provide the connection registry."""
        registry = ConnectionRegistry()
        yield registry
        registry.clear()

    publisher = alias(source=ConnectionRegistry, provides=EventPublisher)
