"""Count use cases for dashboards and profile pages."""

import logfire
from pydantic import BaseModel

from forumhub.application.usecase.base import (
    BaseUseCase,
    CamelModel,
    CountResponse,
    parse_email,
    parse_uuid,
)
from forumhub.domain.service import (
    AnnouncementService,
    CommentService,
    PostService,
    UserService,
)
from forumhub.domain.value import PostId


class SiteCounts(CamelModel):
    """Totals across the forum."""

    users: int
    posts: int
    comments: int
    announcements: int


class SiteCountsUseCase(BaseUseCase):
    """Use case for the site-wide totals shown on the admin dashboard."""

    def __init__(
        self,
        user_service: UserService,
        post_service: PostService,
        comment_service: CommentService,
        announcement_service: AnnouncementService,
    ) -> None:
        self.user_service = user_service
        self.post_service = post_service
        self.comment_service = comment_service
        self.announcement_service = announcement_service

    async def execute(self, request: None = None) -> SiteCounts:
        """Execute site counts flow.

        Queries run one after another: they share the request's session.
        """
        with logfire.span("site_counts.execute"):
            return SiteCounts(
                users=await self.user_service.count(),
                posts=await self.post_service.count(),
                comments=await self.comment_service.count(),
                announcements=await self.announcement_service.count(),
            )


class AuthorPostCountRequest(BaseModel):
    """Author post count request."""

    email: str


class AuthorPostCountUseCase(BaseUseCase):
    """Use case for counting one user's posts."""

    def __init__(self, post_service: PostService) -> None:
        self.post_service = post_service

    async def execute(self, request: AuthorPostCountRequest) -> CountResponse:
        """Raises ValidationError if the email is blank."""
        count = await self.post_service.count_by_author(parse_email(request.email))
        return CountResponse(count=count)


class PostCommentCountRequest(BaseModel):
    """Post comment count request."""

    post_id: str


class PostCommentCountUseCase(BaseUseCase):
    """Use case for counting the comments on a post."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: PostCommentCountRequest) -> CountResponse:
        """Raises ValidationError if the post id is malformed."""
        post_id = PostId(parse_uuid(request.post_id, "post"))
        return CountResponse(count=await self.comment_service.count_for_post(post_id))
