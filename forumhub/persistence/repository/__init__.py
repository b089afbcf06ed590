"""PostgreSQL repository implementations."""

from forumhub.persistence.repository.announcement import (
    PostgresAnnouncementRepository,
)
from forumhub.persistence.repository.comment import PostgresCommentRepository
from forumhub.persistence.repository.post import PostgresPostRepository
from forumhub.persistence.repository.tag import PostgresTagRepository
from forumhub.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresUserRepository",
    "PostgresPostRepository",
    "PostgresCommentRepository",
    "PostgresAnnouncementRepository",
    "PostgresTagRepository",
]
