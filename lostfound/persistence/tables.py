"""SQLAlchemy table definitions for Lost & Found.

Users and items are owned by other collaborators; only the columns the
comment subsystem reads are declared for them. They match the schema
defined in Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    MetaData,
    String,
    Table,
    Text,
    text,
)
from sqlalchemy.dialects import postgresql
from sqlalchemy.dialects.postgresql import ARRAY, TIMESTAMP, UUID

# Shared by the repositories, alembic autogenerate and the integration tests
metadata = MetaData()

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column(
        "id", UUID, primary_key=True, server_default=text("uuid_generate_v4()")
    ),
    Column("name", String(255), nullable=False),
    Column("username", String(255), nullable=False, unique=True),
    Column("email", String(255), nullable=True),
    Column("profile_picture", Text, nullable=True),
    Column(
        "created_at",
        TIMESTAMP(timezone=False),
        nullable=False,
        server_default=text("now()"),
    ),
)

Index("idx_users_username", users_table.c.username, unique=True)

# ============================================================================
# ITEMS TABLE
# ============================================================================
items_table = Table(
    "items",
    metadata,
    Column(
        "id", UUID, primary_key=True, server_default=text("uuid_generate_v4()")
    ),
    Column("item_name", String(200), nullable=False),
    Column(
        "type",
        postgresql.ENUM("lost", "found", name="item_type", create_type=False),
        nullable=False,
    ),
    Column(
        "status",
        postgresql.ENUM(
            "available", "claimed", "resolved", name="item_status", create_type=False
        ),
        nullable=False,
        server_default="available",
    ),
    Column(
        "reported_by", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "created_at",
        TIMESTAMP(timezone=False),
        nullable=False,
        server_default=text("now()"),
    ),
    Column(
        "updated_at",
        TIMESTAMP(timezone=False),
        nullable=False,
        server_default=text("now()"),
    ),
)

Index("idx_items_reported_by", items_table.c.reported_by)

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column(
        "id", UUID, primary_key=True, server_default=text("uuid_generate_v4()")
    ),
    Column("item_id", UUID, ForeignKey("items.id", ondelete="CASCADE"), nullable=False),
    Column(
        "author_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column("text", Text, nullable=False),
    Column(
        "mentioned_user_ids",
        ARRAY(UUID),
        nullable=False,
        server_default="{}",
    ),
    Column(
        "parent_id", UUID, ForeignKey("comments.id", ondelete="CASCADE"), nullable=True
    ),
    Column("is_reply", Boolean, nullable=False, server_default="false"),
    Column("liker_ids", ARRAY(UUID), nullable=False, server_default="{}"),
    Column("is_edited", Boolean, nullable=False, server_default="false"),
    Column("edited_at", TIMESTAMP(timezone=False), nullable=True),
    Column(
        "created_at",
        TIMESTAMP(timezone=False),
        nullable=False,
        server_default=text("now()"),
    ),
    Column(
        "updated_at",
        TIMESTAMP(timezone=False),
        nullable=False,
        server_default=text("now()"),
    ),
    CheckConstraint("length(btrim(text)) > 0", name="text_not_blank"),
    CheckConstraint(
        "is_reply = (parent_id IS NOT NULL)", name="is_reply_matches_parent"
    ),
    CheckConstraint(
        "is_edited = (edited_at IS NOT NULL)", name="is_edited_matches_edited_at"
    ),
)

Index(
    "idx_comments_item_created",
    comments_table.c.item_id,
    comments_table.c.created_at.desc(),
    comments_table.c.id.desc(),
)
Index("idx_comments_parent_id", comments_table.c.parent_id)
Index("idx_comments_author_id", comments_table.c.author_id)
Index(
    "idx_comments_mentioned_user_ids",
    comments_table.c.mentioned_user_ids,
    postgresql_using="gin",
)
