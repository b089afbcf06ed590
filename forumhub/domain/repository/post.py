"""Post repository interface."""

from abc import ABC, abstractmethod
from enum import Enum
from typing import List, Optional

from forumhub.domain.model.post import Post
from forumhub.domain.model.vote import VoteOutcome
from forumhub.domain.value import Email, PostId, Visibility, VoteType


class PostSortOrder(str, Enum):
    """Sort order for post listings."""

    RECENT = "recent"  # Sort by created_at DESC
    POPULAR = "popular"  # Sort by up_votes - down_votes DESC, then created_at DESC


class PostRepository(ABC):
    """Repository for Post aggregate.

    Defines the contract for post persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID.

        Args:
            post_id: The post's unique identifier

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_public(
        self,
        sort: PostSortOrder = PostSortOrder.RECENT,
        tag_search: Optional[str] = None,
        limit: int = 5,
        offset: int = 0,
    ) -> List[Post]:
        """Find non-private posts with filtering and pagination.

        Args:
            sort: Sort order (recent or popular)
            tag_search: Case-insensitive substring that one of the post's
                tags must contain (None for all posts)
            limit: Maximum number of posts to return
            offset: Number of posts to skip

        Returns:
            List of posts matching the criteria
        """
        pass

    @abstractmethod
    async def find_by_author(
        self,
        author_email: Email,
        limit: int = 10,
        offset: int = 0,
    ) -> List[Post]:
        """Find posts by a specific author, newest first.

        Private posts are included: authors see all of their own posts.

        Args:
            author_email: The author's email
            limit: Maximum number of posts to return
            offset: Number of posts to skip

        Returns:
            List of posts by the author
        """
        pass

    @abstractmethod
    async def count(self) -> int:
        """Count all posts.

        Returns:
            Total number of posts
        """
        pass

    @abstractmethod
    async def count_by_author(self, author_email: Email) -> int:
        """Count posts by a specific author.

        Args:
            author_email: The author's email

        Returns:
            Number of posts by the author
        """
        pass

    @abstractmethod
    async def save(self, post: Post) -> Post:
        """Insert a new post.

        Args:
            post: The post to save

        Returns:
            The saved post
        """
        pass

    @abstractmethod
    async def update_visibility(
        self, post_id: PostId, visibility: Visibility
    ) -> Optional[Post]:
        """Change a post's visibility.

        Args:
            post_id: The post ID
            visibility: New visibility

        Returns:
            Updated post, or None if the post doesn't exist
        """
        pass

    @abstractmethod
    async def adjust_comments_count(self, post_id: PostId, delta: int) -> bool:
        """Atomically add delta to the comment counter (never below 0).

        Args:
            post_id: The post ID
            delta: Amount to add (negative to decrement)

        Returns:
            True if the post exists, False otherwise
        """
        pass

    @abstractmethod
    async def delete(self, post_id: PostId) -> bool:
        """Delete a post (hard delete) together with its votes.

        Args:
            post_id: The post ID to delete

        Returns:
            True if a post was deleted, False if none existed
        """
        pass

    @abstractmethod
    async def apply_vote(
        self, post_id: PostId, voter: Email, requested: VoteType
    ) -> Optional[VoteOutcome]:
        """Cast a vote as one atomic unit against the post.

        Reads the voter's current vote, resolves the toggle transition and
        writes the vote record change plus the counter adjustment so that no
        intermediate state is observable. Either everything is applied or
        nothing is.

        Args:
            post_id: The post being voted on
            voter: The voter's email
            requested: The vote being cast

        Returns:
            The outcome with the new counters, or None if the post doesn't exist

        Raises:
            VoteConflictError: If the voter's vote changed underneath the write
        """
        pass
