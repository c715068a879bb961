"""Real-time (WebSocket) adapter."""

from .registry import ConnectionRegistry

__all__ = ["ConnectionRegistry"]
