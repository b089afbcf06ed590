"""Create post use case."""

from datetime import datetime
from uuid import uuid4

import logfire
from pydantic import BaseModel

from forumhub.application.usecase.base import BaseUseCase, CamelModel
from forumhub.domain.model import AuthContext, Post
from forumhub.domain.service import PostService
from forumhub.domain.value import PostId, TagName, Visibility


class CreatePostRequest(BaseModel):
    """Create post request."""

    actor: AuthContext  # Authenticated author
    title: str
    description: str = ""
    tags: list[str] = []
    visibility: Visibility = Visibility.PUBLIC
    author_email: str | None = None  # As sent by the client
    author_name: str = ""
    author_image: str | None = None


class CreatePostResponse(CamelModel):
    """Create post response."""

    success: bool = True
    post_id: str


class CreatePostUseCase(BaseUseCase):
    """Use case for creating a new post."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize create post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: CreatePostRequest) -> CreatePostResponse:
        """Execute create post flow.

        The post is always attributed to the authenticated user. Creation
        time is set here and the vote ledger starts empty.

        Args:
            request: Create post request

        Returns:
            Create post response with the new post ID

        Raises:
            ValueError: If the title, description or tags are invalid
        """
        actor = request.actor
        with logfire.span(
            "create_post.execute",
            title=request.title,
            tags=request.tags,
            author=actor.email.root,
        ):
            if request.author_email and request.author_email.strip() != actor.email.root:
                logfire.warn(
                    "Post author differs from authenticated user",
                    claimed=request.author_email,
                    actor=actor.email.root,
                )

            post = Post(
                id=PostId(uuid4()),
                author_email=actor.email,
                author_name=request.author_name,
                author_image=request.author_image,
                title=request.title,
                description=request.description,
                tags=[TagName(name) for name in request.tags],
                visibility=request.visibility,
                created_at=datetime.now(),
            )

            saved_post = await self.post_service.save_post(post)

            logfire.info("Post created successfully", post_id=str(saved_post.id))
            return CreatePostResponse(post_id=str(saved_post.id))
