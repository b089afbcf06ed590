"""Get post use case."""

from datetime import datetime

import logfire
from pydantic import BaseModel

from forumhub.application.usecase.base import BaseUseCase, CamelModel, parse_uuid
from forumhub.domain.model import Post
from forumhub.domain.service import PostService
from forumhub.domain.value import PostId, Visibility, VoteType


class VoteItem(CamelModel):
    """A voter's live vote on a post."""

    user_email: str
    vote_type: VoteType


class PostItem(CamelModel):
    """Post in responses, with votesCount computed on read."""

    id: str
    author_email: str
    author_name: str
    author_image: str | None
    title: str
    description: str
    tags: list[str]
    visibility: Visibility
    votes: list[VoteItem]
    up_votes: int
    down_votes: int
    votes_count: int
    comments_count: int
    created_at: datetime

    @classmethod
    def from_post(cls, post: Post) -> "PostItem":
        return cls(
            id=str(post.id),
            author_email=post.author_email.root,
            author_name=post.author_name,
            author_image=post.author_image,
            title=post.title,
            description=post.description,
            tags=[tag.root for tag in post.tags],
            visibility=post.visibility,
            votes=[
                VoteItem(user_email=vote.user_email.root, vote_type=vote.vote_type)
                for vote in post.votes
            ],
            up_votes=post.up_votes,
            down_votes=post.down_votes,
            votes_count=post.vote_score,
            comments_count=post.comments_count,
            created_at=post.created_at,
        )


class GetPostRequest(BaseModel):
    """Get post request."""

    post_id: str


class GetPostUseCase(BaseUseCase):
    """Use case for fetching a single post."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize get post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: GetPostRequest) -> PostItem:
        """Execute get post flow.

        Args:
            request: Get post request

        Returns:
            The post

        Raises:
            ValidationError: If the post id is malformed
            NotFoundError: If the post doesn't exist
        """
        post_id = PostId(parse_uuid(request.post_id, "post"))
        with logfire.span("get_post.execute", post_id=str(post_id)):
            post = await self.post_service.require_post(post_id)
            return PostItem.from_post(post)
