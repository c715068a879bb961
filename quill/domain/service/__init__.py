"""Domain services."""

from .auth_service import AuthService
from .base import Service
from .comment_tree_service import CommentTreeNode, CommentTreeService
from .events import EventPublisher
from .image_service import ImageService, ImageStorage
from .jwt_service import JWTService
from .node_service import NodeService
from .notification_service import NotificationService
from .user_service import UserService
from .vote_service import VoteResult, VoteService, VoteStatus

__all__ = [
    "AuthService",
    "CommentTreeNode",
    "CommentTreeService",
    "EventPublisher",
    "ImageService",
    "ImageStorage",
    "JWTService",
    "NodeService",
    "NotificationService",
    "Service",
    "UserService",
    "VoteResult",
    "VoteService",
    "VoteStatus",
]
