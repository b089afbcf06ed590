"""Owner actions on a post: change visibility, delete."""

import logfire
from pydantic import BaseModel

from forumhub.application.usecase.base import BaseUseCase, SuccessResponse, parse_uuid
from forumhub.domain.error import NotAuthorizedError
from forumhub.domain.model import AuthContext
from forumhub.domain.service import CommentService, PostService
from forumhub.domain.value import PostId, Visibility


class UpdateVisibilityRequest(BaseModel):
    """Update visibility request."""

    actor: AuthContext
    post_id: str
    visibility: Visibility


class UpdateVisibilityUseCase(BaseUseCase):
    """Use case for hiding a post from, or showing it in, public listings."""

    def __init__(self, post_service: PostService) -> None:
        self.post_service = post_service

    async def execute(self, request: UpdateVisibilityRequest) -> SuccessResponse:
        """Execute update visibility flow.

        Args:
            request: Update visibility request

        Returns:
            Success acknowledgement

        Raises:
            ValidationError: If the post id is malformed
            NotFoundError: If the post doesn't exist
            NotAuthorizedError: If the actor is neither the author nor an admin
        """
        post_id = PostId(parse_uuid(request.post_id, "post"))
        post = await self.post_service.require_post(post_id)

        if not request.actor.can_modify(post.author_email):
            raise NotAuthorizedError("post", str(post_id), request.actor.email.root)

        await self.post_service.update_visibility(post_id, request.visibility)
        return SuccessResponse()


class DeletePostRequest(BaseModel):
    """Delete post request."""

    actor: AuthContext
    post_id: str


class DeletePostUseCase(BaseUseCase):
    """Use case for deleting a post together with its comments and votes."""

    def __init__(
        self, post_service: PostService, comment_service: CommentService
    ) -> None:
        """Initialize delete post use case.

        Args:
            post_service: Post domain service
            comment_service: Comment domain service
        """
        self.post_service = post_service
        self.comment_service = comment_service

    async def execute(self, request: DeletePostRequest) -> SuccessResponse:
        """Execute delete post flow.

        Raises:
            ValidationError: If the post id is malformed
            NotFoundError: If the post doesn't exist
            NotAuthorizedError: If the actor is neither the author nor an admin
        """
        post_id = PostId(parse_uuid(request.post_id, "post"))
        with logfire.span(
            "delete_post.execute",
            post_id=str(post_id),
            actor=request.actor.email.root,
        ):
            post = await self.post_service.require_post(post_id)

            if not request.actor.can_modify(post.author_email):
                raise NotAuthorizedError(
                    "post", str(post_id), request.actor.email.root
                )

            await self.comment_service.delete_for_post(post_id)
            await self.post_service.delete_post(post_id)
            return SuccessResponse()
