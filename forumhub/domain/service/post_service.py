"""Post domain service."""

from typing import Optional

import logfire

from forumhub.domain.error import NotFoundError
from forumhub.domain.model.post import Post
from forumhub.domain.repository import PostRepository, PostSortOrder
from forumhub.domain.value import Email, PostId, Visibility

from .base import Service


class PostService(Service):
    """Domain service for post operations."""

    def __init__(self, post_repository: PostRepository) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
        """
        self.post_repository = post_repository

    async def save_post(self, post: Post) -> Post:
        """Save a new post.

        Args:
            post: Post to save

        Returns:
            Saved post
        """
        with logfire.span(
            "post_service.save_post", post_id=str(post.id), title=post.title
        ):
            saved = await self.post_repository.save(post)
            logfire.info("Post saved", post_id=str(saved.id))
            return saved

    async def get_post_by_id(self, post_id: PostId) -> Post | None:
        """Get a post by ID.

        Args:
            post_id: Post ID

        Returns:
            Post if found, None otherwise
        """
        with logfire.span("post_service.get_post_by_id", post_id=str(post_id)):
            post = await self.post_repository.find_by_id(post_id)

            if post:
                logfire.info("Post found", post_id=str(post_id), title=post.title)
            else:
                logfire.warn("Post not found", post_id=str(post_id))

            return post

    async def require_post(self, post_id: PostId) -> Post:
        """Get a post by ID or raise.

        Raises:
            NotFoundError: If post not found
        """
        post = await self.get_post_by_id(post_id)
        if not post:
            raise NotFoundError("Post", str(post_id))
        return post

    async def list_public(
        self,
        sort: PostSortOrder,
        tag_search: Optional[str],
        limit: int,
        offset: int,
    ) -> list[Post]:
        """List non-private posts.

        Args:
            sort: Sort order
            tag_search: Tag substring filter (None or "" for all)
            limit: Page size
            offset: Rows to skip

        Returns:
            Posts on the requested page
        """
        with logfire.span(
            "post_service.list_public",
            sort=sort.value,
            tag_search=tag_search,
            limit=limit,
            offset=offset,
        ):
            posts = await self.post_repository.find_public(
                sort=sort,
                tag_search=tag_search or None,
                limit=limit,
                offset=offset,
            )
            logfire.info("Posts listed", count=len(posts))
            return posts

    async def list_by_author(
        self, author_email: Email, limit: int, offset: int
    ) -> list[Post]:
        """List an author's posts, newest first."""
        with logfire.span(
            "post_service.list_by_author",
            author_email=author_email.root,
            limit=limit,
            offset=offset,
        ):
            return await self.post_repository.find_by_author(
                author_email, limit=limit, offset=offset
            )

    async def count(self) -> int:
        """Count all posts."""
        return await self.post_repository.count()

    async def count_by_author(self, author_email: Email) -> int:
        """Count an author's posts."""
        return await self.post_repository.count_by_author(author_email)

    async def update_visibility(self, post_id: PostId, visibility: Visibility) -> Post:
        """Change a post's visibility.

        Raises:
            NotFoundError: If post not found
        """
        with logfire.span(
            "post_service.update_visibility",
            post_id=str(post_id),
            visibility=visibility.value,
        ):
            updated = await self.post_repository.update_visibility(post_id, visibility)
            if not updated:
                logfire.warn("Post not found for visibility update", post_id=str(post_id))
                raise NotFoundError("Post", str(post_id))
            logfire.info("Post visibility updated", post_id=str(post_id))
            return updated

    async def increment_comment_count(self, post_id: PostId) -> None:
        """Atomically increment a post's comment count.

        Raises:
            NotFoundError: If post not found
        """
        with logfire.span("post_service.increment_comment_count", post_id=str(post_id)):
            if not await self.post_repository.adjust_comments_count(post_id, 1):
                logfire.error(
                    "Post not found for comment count increment", post_id=str(post_id)
                )
                raise NotFoundError("Post", str(post_id))
            logfire.info("Comment count incremented", post_id=str(post_id))

    async def decrement_comment_count(self, post_id: PostId) -> None:
        """Atomically decrement a post's comment count (minimum 0).

        A missing post is ignored: the comment may outlive a deleted post.
        """
        with logfire.span("post_service.decrement_comment_count", post_id=str(post_id)):
            if not await self.post_repository.adjust_comments_count(post_id, -1):
                logfire.warn(
                    "Post not found for comment count decrement", post_id=str(post_id)
                )

    async def delete_post(self, post_id: PostId) -> None:
        """Delete a post and its votes.

        Raises:
            NotFoundError: If post not found
        """
        with logfire.span("post_service.delete_post", post_id=str(post_id)):
            if not await self.post_repository.delete(post_id):
                raise NotFoundError("Post", str(post_id))
            logfire.info("Post deleted", post_id=str(post_id))
