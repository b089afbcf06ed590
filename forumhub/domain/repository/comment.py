"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from forumhub.domain.model.comment import Comment
from forumhub.domain.value import CommentId, PostId


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_post(self, post_id: PostId) -> List[Comment]:
        """Find all comments on a post, newest first.

        Args:
            post_id: The post's ID

        Returns:
            List of comments on the post
        """
        pass

    @abstractmethod
    async def count_by_post(self, post_id: PostId) -> int:
        """Count comments on a post."""
        pass

    @abstractmethod
    async def find_reported(self) -> List[Comment]:
        """Find comments with a non-empty report, newest first."""
        pass

    @abstractmethod
    async def count(self) -> int:
        """Count all comments."""
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Insert a new comment.

        Args:
            comment: The comment to save

        Returns:
            The saved comment
        """
        pass

    @abstractmethod
    async def update_feedbacks(
        self, comment_id: CommentId, feedbacks: str
    ) -> Optional[Comment]:
        """Set the report text of a comment ("" clears the report).

        Args:
            comment_id: The comment ID
            feedbacks: Report text

        Returns:
            Updated comment, or None if the comment doesn't exist
        """
        pass

    @abstractmethod
    async def delete(self, comment_id: CommentId) -> bool:
        """Delete a comment.

        Returns:
            True if a comment was deleted, False if none existed
        """
        pass

    @abstractmethod
    async def delete_by_post(self, post_id: PostId) -> int:
        """Delete all comments on a post.

        Returns:
            Number of comments deleted
        """
        pass
