"""Repository interfaces for ForumHub domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from forumhub.domain.repository.announcement import AnnouncementRepository
from forumhub.domain.repository.comment import CommentRepository
from forumhub.domain.repository.post import PostRepository, PostSortOrder
from forumhub.domain.repository.tag import TagRepository
from forumhub.domain.repository.user import UserRepository

__all__ = [
    "AnnouncementRepository",
    "CommentRepository",
    "PostRepository",
    "PostSortOrder",
    "TagRepository",
    "UserRepository",
]
