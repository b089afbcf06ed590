"""initial_schema

Create the schema for ForumHub:
- Users (email login, role, membership badge)
- Posts (tags array, visibility, vote and comment counters)
- Post votes (one live up/down vote per user per post)
- Comments (flat, with report feedbacks)
- Announcements
- Tags

Revision ID: 3c6f1a9d2b47
Revises:
Create Date: 2026-10-17 10:12:44.318205

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3c6f1a9d2b47"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _id_column() -> sa.Column:
    return sa.Column(
        "id",
        sa.UUID(),
        server_default=sa.text("uuid_generate_v4()"),
        nullable=False,
    )


def _created_at_column() -> sa.Column:
    return sa.Column(
        "created_at",
        sa.TIMESTAMP(timezone=True),
        nullable=False,
        server_default=sa.text("NOW()"),
    )


def upgrade() -> None:
    """Upgrade schema."""
    op.execute('CREATE EXTENSION IF NOT EXISTS "uuid-ossp"')

    # ========================================================================
    # USERS table
    # ========================================================================
    op.create_table(
        "users",
        _id_column(),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("username", sa.String(255), nullable=False, server_default=""),
        sa.Column("photo_url", sa.Text(), nullable=True),
        sa.Column("role", sa.String(20), nullable=False, server_default="user"),
        sa.Column("badge", sa.String(20), nullable=False, server_default="Bronze"),
        sa.Column("about_me", sa.Text(), nullable=True),
        _created_at_column(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("email", name="uq_users_email"),
        sa.CheckConstraint("role IN ('user', 'admin')", name="role_valid"),
    )
    op.create_index("idx_users_username", "users", ["username"])

    # ========================================================================
    # POSTS table
    # ========================================================================
    op.create_table(
        "posts",
        _id_column(),
        sa.Column("author_email", sa.String(255), nullable=False),
        sa.Column("author_name", sa.String(255), nullable=False, server_default=""),
        sa.Column("author_image", sa.Text(), nullable=True),
        sa.Column("title", sa.String(300), nullable=False),
        sa.Column("description", sa.Text(), nullable=False, server_default=""),
        sa.Column(
            "tags",
            postgresql.ARRAY(sa.String(50)),
            nullable=False,
            server_default="{}",
        ),
        sa.Column("visibility", sa.String(20), nullable=False, server_default="public"),
        sa.Column("up_votes", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("down_votes", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("comments_count", sa.Integer(), nullable=False, server_default="0"),
        _created_at_column(),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("up_votes >= 0", name="up_votes_non_negative"),
        sa.CheckConstraint("down_votes >= 0", name="down_votes_non_negative"),
        sa.CheckConstraint("comments_count >= 0", name="comments_count_non_negative"),
        sa.CheckConstraint(
            "visibility IN ('public', 'private')", name="visibility_valid"
        ),
    )
    op.create_index(
        "idx_posts_created_at", "posts", [sa.text("created_at DESC")]
    )
    op.create_index("idx_posts_author_email", "posts", ["author_email"])

    # ========================================================================
    # POST_VOTES table (the vote ledger's records)
    # ========================================================================
    op.create_table(
        "post_votes",
        _id_column(),
        sa.Column("post_id", sa.UUID(), nullable=False),
        sa.Column("user_email", sa.String(255), nullable=False),
        sa.Column("vote_type", sa.String(10), nullable=False),
        _created_at_column(),
        sa.ForeignKeyConstraint(["post_id"], ["posts.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("post_id", "user_email", name="uq_post_vote_user"),
        sa.CheckConstraint("vote_type IN ('up', 'down')", name="vote_type_valid"),
    )
    op.create_index("idx_post_votes_post_id", "post_votes", ["post_id"])

    # ========================================================================
    # COMMENTS table
    # ========================================================================
    op.create_table(
        "comments",
        _id_column(),
        sa.Column("post_id", sa.UUID(), nullable=False),
        sa.Column("commenter_email", sa.String(255), nullable=False),
        sa.Column("commenter_name", sa.String(255), nullable=False, server_default=""),
        sa.Column("commenter_image", sa.Text(), nullable=True),
        sa.Column("comment_text", sa.Text(), nullable=False),
        sa.Column("feedbacks", sa.String(500), nullable=False, server_default=""),
        _created_at_column(),
        sa.ForeignKeyConstraint(["post_id"], ["posts.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_comments_post_id", "comments", ["post_id"])
    op.create_index("idx_comments_created_at", "comments", ["created_at"])

    # ========================================================================
    # ANNOUNCEMENTS table
    # ========================================================================
    op.create_table(
        "announcements",
        _id_column(),
        sa.Column("author_name", sa.String(255), nullable=False, server_default=""),
        sa.Column("author_image", sa.Text(), nullable=True),
        sa.Column("title", sa.String(300), nullable=False),
        sa.Column("description", sa.Text(), nullable=False, server_default=""),
        _created_at_column(),
        sa.PrimaryKeyConstraint("id"),
    )

    # ========================================================================
    # TAGS table
    # ========================================================================
    op.create_table(
        "tags",
        _id_column(),
        sa.Column("tag_name", sa.String(50), nullable=False),
        _created_at_column(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("tag_name", name="uq_tag_name"),
    )


def downgrade() -> None:
    """Downgrade schema."""
    # Drop tables (in reverse order of dependencies)
    op.drop_table("tags")
    op.drop_table("announcements")
    op.drop_table("comments")
    op.drop_table("post_votes")
    op.drop_table("posts")
    op.drop_table("users")

    # Extension left in place, it may be shared
    # op.execute("DROP EXTENSION IF EXISTS \"uuid-ossp\"")
