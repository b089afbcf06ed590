"""List posts use cases."""

import logfire
from pydantic import BaseModel, Field

from forumhub.application.usecase.base import BaseUseCase, parse_email
from forumhub.application.usecase.post.get_post import PostItem
from forumhub.domain.repository.post import PostSortOrder
from forumhub.domain.service import PostService


class ListPostsRequest(BaseModel):
    """List posts request."""

    sort: PostSortOrder = PostSortOrder.RECENT
    tag_search: str | None = None  # Substring of a tag name
    limit: int = Field(default=5, ge=1, le=100)
    offset: int = Field(default=0, ge=0)


class ListPostsUseCase(BaseUseCase):
    """Use case for the public post feed. Private posts are never listed."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize list posts use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: ListPostsRequest) -> list[PostItem]:
        """Execute list posts flow.

        Args:
            request: List posts request with filters and pagination

        Returns:
            Posts on the requested page
        """
        with logfire.span(
            "list_posts.execute",
            sort=request.sort.value,
            tag_search=request.tag_search,
            limit=request.limit,
            offset=request.offset,
        ):
            posts = await self.post_service.list_public(
                sort=request.sort,
                tag_search=request.tag_search,
                limit=request.limit,
                offset=request.offset,
            )
            return [PostItem.from_post(post) for post in posts]


class ListAuthorPostsRequest(BaseModel):
    """List author posts request."""

    email: str
    limit: int = Field(default=10, ge=1, le=100)
    offset: int = Field(default=0, ge=0)


class ListAuthorPostsUseCase(BaseUseCase):
    """Use case for a user's own posts (private ones included), newest first."""

    def __init__(self, post_service: PostService) -> None:
        self.post_service = post_service

    async def execute(self, request: ListAuthorPostsRequest) -> list[PostItem]:
        """Execute list author posts flow.

        Raises:
            ValidationError: If the email is blank
        """
        posts = await self.post_service.list_by_author(
            parse_email(request.email), limit=request.limit, offset=request.offset
        )
        return [PostItem.from_post(post) for post in posts]
