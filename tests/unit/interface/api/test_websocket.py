"""API tests for the WebSocket event channel."""

import pytest
from starlette.websockets import WebSocketDisconnect

from quill.interface.api.routes.realtime import UNAUTHORIZED_CLOSE_CODE
from tests.unit.interface.api.helpers import (
    create_article,
    create_comment,
    register,
)


class TestWebSocketAuth:
    """Handshake authentication."""

    def test_missing_token_is_closed_with_4001(self, client):
        # The handshake completes so clients receive the close code
        with client.websocket_connect("/ws") as ws:
            with pytest.raises(WebSocketDisconnect) as exc_info:
                ws.receive_json()

        assert exc_info.value.code == UNAUTHORIZED_CLOSE_CODE
        assert exc_info.value.reason == "Missing token"

    def test_invalid_token_is_closed_with_4001(self, client):
        with client.websocket_connect("/ws?token=not-a-jwt") as ws:
            with pytest.raises(WebSocketDisconnect) as exc_info:
                ws.receive_json()

        assert exc_info.value.code == UNAUTHORIZED_CLOSE_CODE

    def test_rejected_socket_is_not_registered(self, client):
        with client.websocket_connect("/ws?token=not-a-jwt") as ws:
            with pytest.raises(WebSocketDisconnect):
                ws.receive_json()

        assert client.get("/health").json()["websocket_connections"] == 0

    def test_valid_token_connects(self, client):
        alice = register(client, "alice")

        with client.websocket_connect(f"/ws?token={alice['token']}") as ws:
            hello = ws.receive_json()

        assert hello == {"event": "connected", "data": {"userId": alice["id"]}}


class TestWebSocketMessages:
    """Client messages and server pushes."""

    def test_ping_pong_and_errors(self, client):
        alice = register(client, "alice")

        with client.websocket_connect(f"/ws?token={alice['token']}") as ws:
            ws.receive_json()

            ws.send_json({"event": "ping"})
            assert ws.receive_json() == {"event": "pong", "data": None}

            ws.send_text("not json")
            assert ws.receive_json()["event"] == "error"

            ws.send_json({"event": "dance"})
            assert ws.receive_json() == {
                "event": "error",
                "data": {"message": "Unknown event: dance"},
            }

    def test_article_created_is_broadcast(self, client):
        alice = register(client, "alice")
        bob = register(client, "bob")

        with client.websocket_connect(f"/ws?token={bob['token']}") as ws:
            ws.receive_json()
            article = create_article(client, alice)
            message = ws.receive_json()

        assert message["event"] == "articleCreated"
        assert message["data"]["id"] == article["id"]

    def test_room_and_notification_pushes(self, client):
        alice = register(client, "alice")
        bob = register(client, "bob")
        article = create_article(client, alice)

        with client.websocket_connect(f"/ws?token={alice['token']}") as ws:
            ws.receive_json()
            ws.send_json({"event": "joinArticle", "data": {"articleId": article["id"]}})
            assert ws.receive_json() == {
                "event": "joinedArticle",
                "data": {"articleId": article["id"]},
            }

            comment = create_comment(client, bob, article["id"])

            created = ws.receive_json()
            assert created["event"] == "commentCreated"
            assert created["data"]["id"] == comment["id"]
            assert created["data"]["article_id"] == article["id"]

            notification = ws.receive_json()
            assert notification["event"] == "notification"
            assert notification["data"]["type"] == "comment"
            assert notification["data"]["actor"] == {
                "id": bob["id"],
                "username": "bob",
            }

    def test_join_requires_article_id(self, client):
        alice = register(client, "alice")

        with client.websocket_connect(f"/ws?token={alice['token']}") as ws:
            ws.receive_json()
            ws.send_json({"event": "joinArticle", "data": {}})

            assert ws.receive_json() == {
                "event": "error",
                "data": {"message": "articleId is required"},
            }

    def test_health_counts_connections(self, client):
        alice = register(client, "alice")

        with client.websocket_connect(f"/ws?token={alice['token']}") as ws:
            ws.receive_json()
            health = client.get("/health").json()

        assert health["status"] == "healthy"
        assert health["websocket_connections"] == 1

    def test_join_accepts_any_uuid_spelling(self, client):
        alice = register(client, "alice")
        bob = register(client, "bob")
        article = create_article(client, alice)

        with client.websocket_connect(f"/ws?token={alice['token']}") as ws:
            ws.receive_json()
            ws.send_json(
                {"event": "joinArticle", "data": {"articleId": article["id"].upper()}}
            )
            assert ws.receive_json() == {
                "event": "joinedArticle",
                "data": {"articleId": article["id"]},
            }

            comment = create_comment(client, bob, article["id"])

            created = ws.receive_json()
            assert created["event"] == "commentCreated"
            assert created["data"]["id"] == comment["id"]

    def test_join_rejects_malformed_article_id(self, client):
        alice = register(client, "alice")

        with client.websocket_connect(f"/ws?token={alice['token']}") as ws:
            ws.receive_json()
            ws.send_json({"event": "joinArticle", "data": {"articleId": "not-a-uuid"}})

            assert ws.receive_json() == {
                "event": "error",
                "data": {"message": "articleId must be a UUID"},
            }
