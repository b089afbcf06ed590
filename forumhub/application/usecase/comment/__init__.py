"""Comment use cases."""

from .create_comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
)
from .list_comments import CommentItem, ListCommentsRequest, ListCommentsUseCase
from .moderate_comment import (
    DeleteCommentRequest,
    DeleteCommentUseCase,
    ListReportedCommentsUseCase,
    ReportCommentRequest,
    ReportCommentUseCase,
    ResolveCommentRequest,
    ResolveCommentUseCase,
)

__all__ = [
    "CreateCommentRequest",
    "CreateCommentResponse",
    "CreateCommentUseCase",
    "CommentItem",
    "ListCommentsRequest",
    "ListCommentsUseCase",
    "DeleteCommentRequest",
    "DeleteCommentUseCase",
    "ListReportedCommentsUseCase",
    "ReportCommentRequest",
    "ReportCommentUseCase",
    "ResolveCommentRequest",
    "ResolveCommentUseCase",
]
