"""WebSocket connection registry.

Tracks live sockets by user and by room, and implements the domain's
``EventPublisher`` on top of them. One registry lives for the lifetime of
the DI container; everything runs on the event loop, so there is no locking.
"""

from collections import defaultdict
from typing import Any, Iterable, Protocol

import logfire

from quill.domain.service.events import EventPublisher


class Socket(Protocol):
    """The part of a Starlette ``WebSocket`` the registry needs."""

    async def send_json(self, data: Any, mode: str = "text") -> None: ...


class ConnectionRegistry(EventPublisher):
    """Maps user ids and rooms to sets of open sockets."""

    def __init__(self) -> None:
        self._by_user: dict[str, set[Socket]] = defaultdict(set)
        self._by_room: dict[str, set[Socket]] = defaultdict(set)
        # socket -> user id
        self._owners: dict[Socket, str] = {}

    def connect(self, user_id: str, socket: Socket) -> None:
        """Register an accepted socket for a user."""
        self._by_user[user_id].add(socket)
        self._owners[socket] = user_id
        logfire.info(
            "WebSocket registered",
            user_id=user_id,
            user_connections=len(self._by_user[user_id]),
            total_connections=len(self._owners),
        )

    def disconnect(self, socket: Socket) -> None:
        """Forget a socket and drop it from every room."""
        user_id = self._owners.pop(socket, None)
        if user_id is not None:
            self._discard(self._by_user, user_id, socket)
        for room in list(self._by_room):
            self._discard(self._by_room, room, socket)
        logfire.info(
            "WebSocket unregistered",
            user_id=user_id,
            total_connections=len(self._owners),
        )

    def join(self, room: str, socket: Socket) -> None:
        """Subscribe a socket to a room."""
        self._by_room[room].add(socket)

    def leave(self, room: str, socket: Socket) -> None:
        """Unsubscribe a socket from a room."""
        self._discard(self._by_room, room, socket)

    def connection_count(self, user_id: str | None = None) -> int:
        """Number of open sockets, overall or for one user."""
        if user_id is not None:
            return len(self._by_user.get(user_id, ()))
        return len(self._owners)

    def room_size(self, room: str) -> int:
        return len(self._by_room.get(room, ()))

    async def publish(self, event: str, data: Any) -> None:
        """Send an event to every open connection."""
        await self._send(list(self._owners), event, data)

    async def publish_to_room(self, room: str, event: str, data: Any) -> None:
        """Send an event to the sockets in a room."""
        await self._send(list(self._by_room.get(room, ())), event, data)

    async def publish_to_user(self, user_id: str, event: str, data: Any) -> int:
        """Send an event to every socket of one user."""
        return await self._send(list(self._by_user.get(user_id, ())), event, data)

    def clear(self) -> None:
        """Forget every connection."""
        self._by_user.clear()
        self._by_room.clear()
        self._owners.clear()

    async def _send(self, sockets: Iterable[Socket], event: str, data: Any) -> int:
        message = {"event": event, "data": data}
        delivered = 0
        dead: list[Socket] = []

        for socket in sockets:
            try:
                await socket.send_json(message)
                delivered += 1
            except Exception as e:
                logfire.warn("Failed to send to WebSocket", event=event, error=str(e))
                dead.append(socket)

        for socket in dead:
            self.disconnect(socket)

        if dead:
            logfire.info("Dropped dead connections", count=len(dead))

        return delivered

    @staticmethod
    def _discard(index: dict[str, set[Socket]], key: str, socket: Socket) -> None:
        sockets = index.get(key)
        if sockets is None:
            return
        sockets.discard(socket)
        if not sockets:
            del index[key]
