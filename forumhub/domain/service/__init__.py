"""Domain services for ForumHub."""

from .announcement_service import AnnouncementService
from .base import Service
from .comment_service import CommentService
from .jwt_service import JWTService
from .post_service import PostService
from .tag_service import TagService
from .user_service import UserService
from .vote_service import VoteService

__all__ = [
    "Service",
    "AnnouncementService",
    "CommentService",
    "JWTService",
    "PostService",
    "TagService",
    "UserService",
    "VoteService",
]
