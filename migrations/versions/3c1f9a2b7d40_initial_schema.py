"""initial_schema

Create the ComiCraft schema:
- Communities (identified by name, denormalized member count)
- Community snippets (one row per membership)
- Posts
- Post votes (one per user and post, value +1 or -1)

Revision ID: 3c1f9a2b7d40
Revises:
Create Date: 2026-10-19 10:12:44.512031

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3c1f9a2b7d40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.execute('CREATE EXTENSION IF NOT EXISTS "uuid-ossp"')

    # Create ENUM types (idempotent)
    op.execute("""
        DO $$ BEGIN
            CREATE TYPE privacy_type AS ENUM ('public', 'restricted', 'private');
        EXCEPTION
            WHEN duplicate_object THEN null;
        END $$;
    """)

    # ========================================================================
    # COMMUNITIES table
    # ========================================================================
    op.create_table(
        "communities",
        sa.Column("id", sa.String(21), nullable=False),
        sa.Column("creator_id", sa.String(128), nullable=False),
        sa.Column("number_of_members", sa.Integer(), nullable=False, server_default="0"),
        sa.Column(
            "privacy_type",
            postgresql.ENUM(
                "public", "restricted", "private", name="privacy_type", create_type=False
            ),
            nullable=False,
            server_default="public",
        ),
        sa.Column("image_url", sa.Text(), nullable=True),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(
            "number_of_members >= 0", name="communities_members_non_negative"
        ),
    )
    op.create_index(
        "idx_communities_members", "communities", [sa.text("number_of_members DESC")]
    )

    # ========================================================================
    # COMMUNITY_SNIPPETS table
    # ========================================================================
    op.create_table(
        "community_snippets",
        sa.Column("user_id", sa.String(128), nullable=False),
        sa.Column("community_id", sa.String(21), nullable=False),
        sa.Column("is_moderator", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column("image_url", sa.Text(), nullable=True),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("user_id", "community_id"),
        sa.ForeignKeyConstraint(
            ["community_id"], ["communities.id"], ondelete="CASCADE"
        ),
    )
    op.create_index(
        "idx_community_snippets_community_id", "community_snippets", ["community_id"]
    )

    # ========================================================================
    # POSTS table
    # ========================================================================
    op.create_table(
        "posts",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("community_id", sa.String(21), nullable=False),
        sa.Column("creator_id", sa.String(128), nullable=False),
        sa.Column("creator_display_name", sa.String(255), nullable=False),
        sa.Column("title", sa.String(300), nullable=False),
        sa.Column("body", sa.Text(), nullable=False, server_default=""),
        sa.Column("number_of_comments", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("vote_status", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("image_url", sa.Text(), nullable=True),
        sa.Column("community_image_url", sa.Text(), nullable=True),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(
            ["community_id"], ["communities.id"], ondelete="CASCADE"
        ),
        sa.CheckConstraint("char_length(title) >= 1", name="posts_title_not_empty"),
    )
    op.create_index(
        "idx_posts_community_created",
        "posts",
        ["community_id", sa.text("created_at DESC")],
    )
    op.create_index("idx_posts_creator_id", "posts", ["creator_id"])

    # ========================================================================
    # POST_VOTES table
    # ========================================================================
    op.create_table(
        "post_votes",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("user_id", sa.String(128), nullable=False),
        sa.Column("post_id", sa.UUID(), nullable=False),
        sa.Column("community_id", sa.String(21), nullable=False),
        sa.Column("vote_value", sa.SmallInteger(), nullable=False),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["post_id"], ["posts.id"], ondelete="CASCADE"),
        sa.UniqueConstraint("user_id", "post_id", name="unique_post_vote"),
        sa.CheckConstraint("vote_value IN (-1, 1)", name="post_votes_value_check"),
    )
    op.create_index(
        "idx_post_votes_user_community", "post_votes", ["user_id", "community_id"]
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("idx_post_votes_user_community", table_name="post_votes")
    op.drop_table("post_votes")

    op.drop_index("idx_posts_creator_id", table_name="posts")
    op.drop_index("idx_posts_community_created", table_name="posts")
    op.drop_table("posts")

    op.drop_index("idx_community_snippets_community_id", table_name="community_snippets")
    op.drop_table("community_snippets")

    op.drop_index("idx_communities_members", table_name="communities")
    op.drop_table("communities")

    op.execute("DROP TYPE IF EXISTS privacy_type")
