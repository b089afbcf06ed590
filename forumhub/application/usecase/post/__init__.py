"""Post use cases."""

from .create_post import CreatePostRequest, CreatePostResponse, CreatePostUseCase
from .get_post import GetPostRequest, GetPostUseCase, PostItem, VoteItem
from .list_posts import (
    ListAuthorPostsRequest,
    ListAuthorPostsUseCase,
    ListPostsRequest,
    ListPostsUseCase,
)
from .manage_post import (
    DeletePostRequest,
    DeletePostUseCase,
    UpdateVisibilityRequest,
    UpdateVisibilityUseCase,
)

__all__ = [
    "CreatePostRequest",
    "CreatePostResponse",
    "CreatePostUseCase",
    "GetPostRequest",
    "GetPostUseCase",
    "PostItem",
    "VoteItem",
    "ListAuthorPostsRequest",
    "ListAuthorPostsUseCase",
    "ListPostsRequest",
    "ListPostsUseCase",
    "DeletePostRequest",
    "DeletePostUseCase",
    "UpdateVisibilityRequest",
    "UpdateVisibilityUseCase",
]
