"""SQLAlchemy table definitions for ForumHub.

They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import ARRAY, TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("email", String(255), nullable=False, unique=True),
    Column("username", String(255), nullable=False, server_default=""),
    Column("photo_url", Text, nullable=True),
    Column("role", String(20), nullable=False, server_default="user"),  # user|admin
    Column("badge", String(20), nullable=False, server_default="Bronze"),
    Column("about_me", Text, nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_users_username", users_table.c.username)

# ============================================================================
# POSTS TABLE
# ============================================================================
posts_table = Table(
    "posts",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("author_email", String(255), nullable=False),
    Column("author_name", String(255), nullable=False, server_default=""),
    Column("author_image", Text, nullable=True),
    Column("title", String(300), nullable=False),
    Column("description", Text, nullable=False, server_default=""),
    Column("tags", ARRAY(String(50)), nullable=False, server_default="{}"),
    Column("visibility", String(20), nullable=False, server_default="public"),
    # Vote ledger counters, kept equal to the post_votes rows
    Column("up_votes", Integer, nullable=False, server_default="0"),
    Column("down_votes", Integer, nullable=False, server_default="0"),
    Column("comments_count", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("up_votes >= 0", name="up_votes_non_negative"),
    CheckConstraint("down_votes >= 0", name="down_votes_non_negative"),
    CheckConstraint("comments_count >= 0", name="comments_count_non_negative"),
)

Index("idx_posts_created_at", posts_table.c.created_at.desc())
Index("idx_posts_author_email", posts_table.c.author_email)

# ============================================================================
# POST_VOTES TABLE (one live vote per user per post)
# ============================================================================
post_votes_table = Table(
    "post_votes",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("post_id", UUID, ForeignKey("posts.id", ondelete="CASCADE"), nullable=False),
    Column("user_email", String(255), nullable=False),
    Column("vote_type", String(10), nullable=False),  # up|down
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("post_id", "user_email", name="uq_post_vote_user"),
    CheckConstraint("vote_type IN ('up', 'down')", name="vote_type_valid"),
)

Index("idx_post_votes_post_id", post_votes_table.c.post_id)

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("post_id", UUID, ForeignKey("posts.id", ondelete="CASCADE"), nullable=False),
    Column("commenter_email", String(255), nullable=False),
    Column("commenter_name", String(255), nullable=False, server_default=""),
    Column("commenter_image", Text, nullable=True),
    Column("comment_text", Text, nullable=False),
    Column("feedbacks", String(500), nullable=False, server_default=""),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_comments_post_id", comments_table.c.post_id)
Index("idx_comments_created_at", comments_table.c.created_at)

# ============================================================================
# ANNOUNCEMENTS TABLE
# ============================================================================
announcements_table = Table(
    "announcements",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("author_name", String(255), nullable=False, server_default=""),
    Column("author_image", Text, nullable=True),
    Column("title", String(300), nullable=False),
    Column("description", Text, nullable=False, server_default=""),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# ============================================================================
# TAGS TABLE
# ============================================================================
tags_table = Table(
    "tags",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("tag_name", String(50), nullable=False, unique=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)
