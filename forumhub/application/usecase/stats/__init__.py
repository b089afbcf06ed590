"""Count use cases."""

from .counts import (
    AuthorPostCountRequest,
    AuthorPostCountUseCase,
    PostCommentCountRequest,
    PostCommentCountUseCase,
    SiteCounts,
    SiteCountsUseCase,
)

__all__ = [
    "AuthorPostCountRequest",
    "AuthorPostCountUseCase",
    "PostCommentCountRequest",
    "PostCommentCountUseCase",
    "SiteCounts",
    "SiteCountsUseCase",
]
