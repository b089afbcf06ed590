"""In-memory repository implementations for testing."""

from .announcement import InMemoryAnnouncementRepository
from .comment import InMemoryCommentRepository
from .post import InMemoryPostRepository
from .tag import InMemoryTagRepository
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryAnnouncementRepository",
    "InMemoryCommentRepository",
    "InMemoryPostRepository",
    "InMemoryTagRepository",
    "InMemoryUserRepository",
]
