"""Create comment use case."""

from datetime import datetime
from uuid import uuid4

import logfire
from pydantic import BaseModel

from forumhub.application.usecase.base import BaseUseCase, CamelModel, parse_uuid
from forumhub.domain.model import AuthContext, Comment
from forumhub.domain.service import CommentService, PostService
from forumhub.domain.value import CommentId, PostId


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    actor: AuthContext
    post_id: str
    comment_text: str
    commenter_name: str = ""
    commenter_image: str | None = None


class CreateCommentResponse(CamelModel):
    """Create comment response."""

    success: bool = True
    comment_id: str


class CreateCommentUseCase(BaseUseCase):
    """Use case for commenting on a post."""

    def __init__(
        self, comment_service: CommentService, post_service: PostService
    ) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
            post_service: Post domain service
        """
        self.comment_service = comment_service
        self.post_service = post_service

    async def execute(self, request: CreateCommentRequest) -> CreateCommentResponse:
        """Execute create comment flow.

        Steps:
        1. Check the post exists
        2. Save the comment, attributed to the authenticated user
        3. Increment the post's comment count

        Args:
            request: Create comment request

        Returns:
            Create comment response with the new comment ID

        Raises:
            ValidationError: If the post id is malformed
            NotFoundError: If the post doesn't exist
            ValueError: If the comment text is empty
        """
        post_id = PostId(parse_uuid(request.post_id, "post"))
        with logfire.span(
            "create_comment.execute",
            post_id=str(post_id),
            commenter=request.actor.email.root,
        ):
            await self.post_service.require_post(post_id)

            comment = Comment(
                id=CommentId(uuid4()),
                post_id=post_id,
                commenter_email=request.actor.email,
                commenter_name=request.commenter_name,
                commenter_image=request.commenter_image,
                comment_text=request.comment_text,
                created_at=datetime.now(),
            )
            saved = await self.comment_service.save_comment(comment)
            await self.post_service.increment_comment_count(post_id)

            logfire.info("Comment created", comment_id=str(saved.id))
            return CreateCommentResponse(comment_id=str(saved.id))
