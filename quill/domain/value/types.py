"""Domain value objects for Quill.

Value objects are immutable and defined by their values, not identity.
"""

from enum import Enum

from pydantic import Field, computed_field

from quill.domain.value.common import ValueObject


class VoteDirection(str, Enum):
    """Direction of a vote on a node."""

    UP = "up"
    DOWN = "down"

    @property
    def opposite(self) -> "VoteDirection":
        return VoteDirection.DOWN if self is VoteDirection.UP else VoteDirection.UP


class Role(str, Enum):
    """User role."""

    USER = "user"
    ADMIN = "admin"


class NotificationType(str, Enum):
    """What happened to trigger a notification."""

    COMMENT = "comment"
    REPLY = "reply"
    UPVOTE = "upvote"
    DOWNVOTE = "downvote"

    @classmethod
    def for_vote(cls, direction: VoteDirection) -> "NotificationType":
        return cls.UPVOTE if direction is VoteDirection.UP else cls.DOWNVOTE


class NotificationTargetType(str, Enum):
    """Kind of node a notification points at."""

    ARTICLE = "article"
    COMMENT = "comment"


class SortField(str, Enum):
    """Columns article searches can be ordered by."""

    CREATED_AT = "created_at"
    UPDATED_AT = "updated_at"
    TITLE = "title"


class SortOrder(str, Enum):
    """Sort direction."""

    ASC = "asc"
    DESC = "desc"


class VoteTally(ValueObject):
    """Upvote and downvote counts for a node."""

    upvotes: int = Field(default=0, ge=0)
    downvotes: int = Field(default=0, ge=0)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def score(self) -> int:
        """Net score: upvotes minus downvotes."""
        return self.upvotes - self.downvotes
