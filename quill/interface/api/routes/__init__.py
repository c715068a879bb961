"""API routes."""

from . import articles, auth, health, images, notifications, realtime, users

__all__ = [
    "articles",
    "auth",
    "health",
    "images",
    "notifications",
    "realtime",
    "users",
]
