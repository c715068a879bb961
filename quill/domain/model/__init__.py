"""Domain model entities for Quill."""

from quill.domain.model.image import Image
from quill.domain.model.node import Node
from quill.domain.model.notification import Notification
from quill.domain.model.user import User

__all__ = [
    "Image",
    "Node",
    "Notification",
    "User",
]
