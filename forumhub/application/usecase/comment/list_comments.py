"""List comments use case."""

from datetime import datetime

from pydantic import BaseModel

from forumhub.application.usecase.base import BaseUseCase, CamelModel, parse_uuid
from forumhub.domain.model import Comment
from forumhub.domain.service import CommentService
from forumhub.domain.value import PostId


class CommentItem(CamelModel):
    """Comment in responses."""

    id: str
    post_id: str
    commenter_email: str
    commenter_name: str
    commenter_image: str | None
    comment_text: str
    feedbacks: str
    created_at: datetime

    @classmethod
    def from_comment(cls, comment: Comment) -> "CommentItem":
        return cls(
            id=str(comment.id),
            post_id=str(comment.post_id),
            commenter_email=comment.commenter_email.root,
            commenter_name=comment.commenter_name,
            commenter_image=comment.commenter_image,
            comment_text=comment.comment_text,
            feedbacks=comment.feedbacks,
            created_at=comment.created_at,
        )


class ListCommentsRequest(BaseModel):
    """List comments request."""

    post_id: str


class ListCommentsUseCase(BaseUseCase):
    """Use case for reading the comments on a post, newest first."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: ListCommentsRequest) -> list[CommentItem]:
        """Execute list comments flow.

        Raises:
            ValidationError: If the post id is malformed
        """
        post_id = PostId(parse_uuid(request.post_id, "post"))
        comments = await self.comment_service.list_for_post(post_id)
        return [CommentItem.from_comment(comment) for comment in comments]
