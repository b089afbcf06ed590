"""Comment moderation use cases: report, review, resolve, delete."""

import logfire
from pydantic import BaseModel

from forumhub.application.usecase.base import BaseUseCase, SuccessResponse, parse_uuid
from forumhub.application.usecase.comment.list_comments import CommentItem
from forumhub.domain.error import NotAuthorizedError, ValidationError
from forumhub.domain.model import AuthContext
from forumhub.domain.service import CommentService, PostService
from forumhub.domain.value import CommentId


class ReportCommentRequest(BaseModel):
    """Report comment request."""

    comment_id: str
    feedbacks: str


class ReportCommentUseCase(BaseUseCase):
    """Use case for flagging a comment for admin review."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: ReportCommentRequest) -> SuccessResponse:
        """Execute report comment flow.

        Raises:
            ValidationError: If the id is malformed or the reason is blank
            NotFoundError: If the comment doesn't exist
        """
        comment_id = CommentId(parse_uuid(request.comment_id, "comment"))
        feedbacks = request.feedbacks.strip()
        if not feedbacks:
            raise ValidationError("feedbacks is required")

        await self.comment_service.report(comment_id, feedbacks)
        return SuccessResponse()


class ListReportedCommentsUseCase(BaseUseCase):
    """Use case for the admin queue of reported comments."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: None = None) -> list[CommentItem]:
        comments = await self.comment_service.list_reported()
        return [CommentItem.from_comment(comment) for comment in comments]


class ResolveCommentRequest(BaseModel):
    """Resolve comment request."""

    comment_id: str


class ResolveCommentUseCase(BaseUseCase):
    """Use case for dismissing a comment's report."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: ResolveCommentRequest) -> SuccessResponse:
        """Execute resolve comment flow.

        Raises:
            ValidationError: If the comment id is malformed
            NotFoundError: If the comment doesn't exist
        """
        comment_id = CommentId(parse_uuid(request.comment_id, "comment"))
        await self.comment_service.resolve(comment_id)
        return SuccessResponse()


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    actor: AuthContext
    comment_id: str
    post_id: str | None = None  # As sent by the client


class DeleteCommentUseCase(BaseUseCase):
    """Use case for deleting a comment and decrementing its post's count."""

    def __init__(
        self, comment_service: CommentService, post_service: PostService
    ) -> None:
        """Initialize delete comment use case.

        Args:
            comment_service: Comment domain service
            post_service: Post domain service
        """
        self.comment_service = comment_service
        self.post_service = post_service

    async def execute(self, request: DeleteCommentRequest) -> SuccessResponse:
        """Execute delete comment flow.

        The stored comment decides which post is decremented; a differing
        postId from the client is only logged.

        Raises:
            ValidationError: If the comment id is malformed
            NotFoundError: If the comment doesn't exist
            NotAuthorizedError: If the actor is neither the commenter nor an admin
        """
        comment_id = CommentId(parse_uuid(request.comment_id, "comment"))
        with logfire.span(
            "delete_comment.execute",
            comment_id=str(comment_id),
            actor=request.actor.email.root,
        ):
            comment = await self.comment_service.require_comment(comment_id)

            if not request.actor.can_modify(comment.commenter_email):
                raise NotAuthorizedError(
                    "comment", str(comment_id), request.actor.email.root
                )

            if request.post_id and request.post_id != str(comment.post_id):
                logfire.warn(
                    "Delete comment postId does not match comment",
                    comment_id=str(comment_id),
                    claimed_post_id=request.post_id,
                )

            await self.comment_service.delete_comment(comment_id)
            await self.post_service.decrement_comment_count(comment.post_id)
            return SuccessResponse()
