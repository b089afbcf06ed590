"""Domain model entities for ForumHub."""

from forumhub.domain.model.announcement import Announcement
from forumhub.domain.model.auth import AuthContext
from forumhub.domain.model.comment import Comment
from forumhub.domain.model.post import Post
from forumhub.domain.model.tag import Tag
from forumhub.domain.model.user import User
from forumhub.domain.model.vote import (
    VoteOutcome,
    VoteRecord,
    VoteStatus,
    VoteTransition,
    resolve_vote,
)

__all__ = [
    "Announcement",
    "AuthContext",
    "Comment",
    "Post",
    "Tag",
    "User",
    "VoteOutcome",
    "VoteRecord",
    "VoteStatus",
    "VoteTransition",
    "resolve_vote",
]
