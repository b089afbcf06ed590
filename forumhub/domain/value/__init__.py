"""Domain value objects for ForumHub."""

from forumhub.domain.value.identifiers import (
    AnnouncementId,
    CommentId,
    PostId,
    TagId,
    UserId,
)
from forumhub.domain.value.types import (
    Badge,
    Email,
    Role,
    TagName,
    Visibility,
    VoteType,
)

__all__ = [
    # Identifiers
    "UserId",
    "PostId",
    "CommentId",
    "AnnouncementId",
    "TagId",
    # Types
    "Badge",
    "Email",
    "Role",
    "TagName",
    "Visibility",
    "VoteType",
]
