"""Node aggregate root.

Articles and comments are the same entity. A node without a parent is a
top-level article; a node with a parent is a comment (or a reply when the
parent is itself a comment).
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from quill.domain.model.common import DomainModel
from quill.domain.value import NodeId, UserId


class Node(DomainModel):
    """Article or comment.

    ``depth`` is 0 for articles and ``parent.depth + 1`` for comments. It is
    always derived from the parent when the node is created.
    """

    id: NodeId
    title: str = Field(min_length=1, max_length=300)
    content: str = Field(min_length=1)
    author_id: UserId
    author_username: str  # Copied from the author at creation time
    parent_id: Optional[NodeId] = None
    depth: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @property
    def is_article(self) -> bool:
        """Whether this node is a top-level article."""
        return self.parent_id is None
