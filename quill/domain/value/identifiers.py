"""Strongly typed identifiers for Quill domain entities.

Articles and comments share one identifier type because they are the
same entity: a node with or without a parent.
"""

from typing import NewType
from uuid import UUID

UserId = NewType("UserId", UUID)
NodeId = NewType("NodeId", UUID)
NotificationId = NewType("NotificationId", UUID)
ImageId = NewType("ImageId", UUID)
