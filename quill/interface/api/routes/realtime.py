"""WebSocket channel for live article, comment and notification events."""

import json
import logging
from typing import Any
from uuid import UUID

from dishka import AsyncContainer
from fastapi import APIRouter, Query, WebSocket, WebSocketDisconnect

from quill.adapter.realtime import ConnectionRegistry
from quill.config import AuthSettings
from quill.domain.service.events import article_room
from quill.util.jwt import JWTError, verify_token

logger = logging.getLogger(__name__)

router = APIRouter(tags=["realtime"])

# Close code sent when the handshake token is missing or invalid
UNAUTHORIZED_CLOSE_CODE = 4001


@router.websocket("/ws")
async def websocket_endpoint(
    websocket: WebSocket,
    token: str | None = Query(default=None),
) -> None:
    """Authenticated event stream.

    Connect with ``/ws?token=<jwt>``. Server events arrive as
    ``{"event": ..., "data": ...}``. Clients send ``joinArticle`` and
    ``leaveArticle`` with ``{"articleId": ...}`` to follow an article's
    comments, and ``ping`` to keep the connection alive.
    """
    container: AsyncContainer = websocket.app.state.dishka_container
    auth_settings = await container.get(AuthSettings)
    registry = await container.get(ConnectionRegistry)

    # Close codes only reach the client once the handshake has completed
    await websocket.accept()

    if not token:
        logger.warning("WebSocket rejected: missing token")
        await websocket.close(code=UNAUTHORIZED_CLOSE_CODE, reason="Missing token")
        return

    try:
        payload = verify_token(token, auth_settings)
    except JWTError as e:
        logger.warning(f"WebSocket rejected: {e}")
        await websocket.close(code=UNAUTHORIZED_CLOSE_CODE, reason=str(e))
        return

    registry.connect(payload.user_id, websocket)
    logger.info(f"WebSocket connected for user {payload.user_id}")

    try:
        await websocket.send_json(
            {"event": "connected", "data": {"userId": payload.user_id}}
        )
        while True:
            raw = await websocket.receive_text()
            await _handle_message(registry, websocket, raw)
    except WebSocketDisconnect:
        logger.info(f"WebSocket disconnected for user {payload.user_id}")
    finally:
        registry.disconnect(websocket)


async def _handle_message(
    registry: ConnectionRegistry, websocket: WebSocket, raw: str
) -> None:
    try:
        message = json.loads(raw)
    except json.JSONDecodeError:
        await _send_error(websocket, "Invalid JSON")
        return

    if not isinstance(message, dict):
        await _send_error(websocket, "Expected an object")
        return

    event = message.get("event")
    data: Any = message.get("data") or {}

    if event == "ping":
        await websocket.send_json({"event": "pong", "data": None})
        return

    if event in ("joinArticle", "leaveArticle"):
        raw_id = data.get("articleId") if isinstance(data, dict) else None
        if not raw_id:
            await _send_error(websocket, "articleId is required")
            return
        try:
            # Rooms are keyed by the canonical form the server publishes with
            article_id = str(UUID(str(raw_id)))
        except ValueError:
            await _send_error(websocket, "articleId must be a UUID")
            return

        room = article_room(article_id)
        if event == "joinArticle":
            registry.join(room, websocket)
            reply = "joinedArticle"
        else:
            registry.leave(room, websocket)
            reply = "leftArticle"
        await websocket.send_json({"event": reply, "data": {"articleId": article_id}})
        return

    await _send_error(websocket, f"Unknown event: {event}")


async def _send_error(websocket: WebSocket, message: str) -> None:
    await websocket.send_json({"event": "error", "data": {"message": message}})
