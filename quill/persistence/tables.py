"""SQLAlchemy table definitions for Quill.

They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    Column,
    Enum,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    PrimaryKeyConstraint,
    String,
    Table,
    Text,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

user_role = Enum("user", "admin", name="user_role")
vote_direction = Enum("up", "down", name="vote_direction")
notification_type = Enum(
    "comment", "reply", "upvote", "downvote", name="notification_type"
)
notification_target_type = Enum(
    "article", "comment", name="notification_target_type"
)

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column("email", String(255), nullable=False, unique=True),
    Column("username", String(20), nullable=False, unique=True),
    Column("password", String(255), nullable=False),  # bcrypt hash
    Column("name", String(100), nullable=True),
    Column("last_name", String(100), nullable=True),
    Column("bio", Text, nullable=True),
    Column("role", user_role, nullable=False, server_default="user"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# ============================================================================
# NODES TABLE (articles and comments)
# ============================================================================
nodes_table = Table(
    "nodes",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column("title", String(300), nullable=False),
    Column("content", Text, nullable=False),
    Column(
        "author_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column("author_username", String(20), nullable=False),  # Denormalized
    # NULL for articles; deleting a node deletes its whole subtree
    Column(
        "parent_id", UUID, ForeignKey("nodes.id", ondelete="CASCADE"), nullable=True
    ),
    Column("depth", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_nodes_parent_id", nodes_table.c.parent_id)
Index("idx_nodes_author_id", nodes_table.c.author_id)
Index("idx_nodes_created_at", nodes_table.c.created_at.desc())

# ============================================================================
# VOTES TABLE
# ============================================================================
# One row per (node, user): a user is never both upvoter and downvoter
votes_table = Table(
    "votes",
    metadata,
    Column("node_id", UUID, ForeignKey("nodes.id", ondelete="CASCADE"), nullable=False),
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column("direction", vote_direction, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    PrimaryKeyConstraint("node_id", "user_id", name="pk_votes"),
)

Index("idx_votes_user_id", votes_table.c.user_id)

# ============================================================================
# NOTIFICATIONS TABLE
# ============================================================================
notifications_table = Table(
    "notifications",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column("type", notification_type, nullable=False),
    Column("target_type", notification_target_type, nullable=False),
    Column(
        "actor_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "recipient_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "article_id", UUID, ForeignKey("nodes.id", ondelete="CASCADE"), nullable=True
    ),
    Column(
        "comment_id", UUID, ForeignKey("nodes.id", ondelete="CASCADE"), nullable=True
    ),
    Column("is_read", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index(
    "idx_notifications_recipient_created",
    notifications_table.c.recipient_id,
    notifications_table.c.created_at.desc(),
)

# ============================================================================
# IMAGES TABLE
# ============================================================================
images_table = Table(
    "images",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column("filename", String(255), nullable=False),
    Column("original_filename", String(255), nullable=False),
    Column("path", Text, nullable=False),
    Column("mimetype", String(50), nullable=False),
    Column("size", Integer, nullable=False),
    Column(
        "article_id", UUID, ForeignKey("nodes.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_images_article_id", images_table.c.article_id)
