"""SQLAlchemy table definitions for ComiCraft.

These table definitions are used with SQLAlchemy Core.
They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    Enum,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    SmallInteger,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# COMMUNITIES TABLE
# ============================================================================
communities_table = Table(
    "communities",
    metadata,
    Column("id", String(21), primary_key=True),  # The community name
    Column("creator_id", String(128), nullable=False),  # External auth user ID
    Column("number_of_members", Integer, nullable=False, server_default="0"),
    Column(
        "privacy_type",
        Enum("public", "restricted", "private", name="privacy_type", create_type=False),
        nullable=False,
        server_default="public",
    ),
    Column("image_url", Text, nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("number_of_members >= 0", name="communities_members_non_negative"),
)

Index("idx_communities_members", communities_table.c.number_of_members.desc())

# ============================================================================
# COMMUNITY SNIPPETS TABLE (one row per membership)
# ============================================================================
community_snippets_table = Table(
    "community_snippets",
    metadata,
    Column("user_id", String(128), primary_key=True),
    Column(
        "community_id",
        String(21),
        ForeignKey("communities.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column("is_moderator", Boolean, nullable=False, server_default="false"),
    Column("image_url", Text, nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_community_snippets_community_id", community_snippets_table.c.community_id)

# ============================================================================
# POSTS TABLE
# ============================================================================
posts_table = Table(
    "posts",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "community_id",
        String(21),
        ForeignKey("communities.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("creator_id", String(128), nullable=False),
    Column("creator_display_name", String(255), nullable=False),
    Column("title", String(300), nullable=False),
    Column("body", Text, nullable=False, server_default=""),
    Column("number_of_comments", Integer, nullable=False, server_default="0"),
    Column("vote_status", Integer, nullable=False, server_default="0"),
    Column("image_url", Text, nullable=True),
    Column("community_image_url", Text, nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("char_length(title) >= 1", name="posts_title_not_empty"),
)

Index("idx_posts_community_created", posts_table.c.community_id, posts_table.c.created_at.desc())
Index("idx_posts_creator_id", posts_table.c.creator_id)

# ============================================================================
# POST VOTES TABLE
# ============================================================================
post_votes_table = Table(
    "post_votes",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("user_id", String(128), nullable=False),
    Column("post_id", UUID, ForeignKey("posts.id", ondelete="CASCADE"), nullable=False),
    Column("community_id", String(21), nullable=False),
    Column("vote_value", SmallInteger, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("user_id", "post_id", name="unique_post_vote"),
    CheckConstraint("vote_value IN (-1, 1)", name="post_votes_value_check"),
)

Index("idx_post_votes_user_community", post_votes_table.c.user_id, post_votes_table.c.community_id)
