"""Comment domain service."""

import logfire

from forumhub.domain.error import NotFoundError
from forumhub.domain.model.comment import Comment
from forumhub.domain.repository import CommentRepository
from forumhub.domain.value import CommentId, PostId

from .base import Service


class CommentService(Service):
    """Domain service for comment operations.

    Keeping the post's comments_count in step with inserts and deletes is the
    caller's job (see the comment use cases), since it spans two aggregates.
    """

    def __init__(self, comment_repository: CommentRepository) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
        """
        self.comment_repository = comment_repository

    async def save_comment(self, comment: Comment) -> Comment:
        """Save a new comment.

        Args:
            comment: Comment to save

        Returns:
            Saved comment
        """
        with logfire.span(
            "comment_service.save_comment",
            comment_id=str(comment.id),
            post_id=str(comment.post_id),
        ):
            saved = await self.comment_repository.save(comment)
            logfire.info("Comment saved", comment_id=str(saved.id))
            return saved

    async def require_comment(self, comment_id: CommentId) -> Comment:
        """Get a comment by ID or raise.

        Raises:
            NotFoundError: If comment not found
        """
        comment = await self.comment_repository.find_by_id(comment_id)
        if not comment:
            logfire.warn("Comment not found", comment_id=str(comment_id))
            raise NotFoundError("Comment", str(comment_id))
        return comment

    async def list_for_post(self, post_id: PostId) -> list[Comment]:
        """List comments on a post, newest first."""
        with logfire.span("comment_service.list_for_post", post_id=str(post_id)):
            comments = await self.comment_repository.find_by_post(post_id)
            logfire.info("Comments listed", post_id=str(post_id), count=len(comments))
            return comments

    async def count_for_post(self, post_id: PostId) -> int:
        return await self.comment_repository.count_by_post(post_id)

    async def count(self) -> int:
        return await self.comment_repository.count()

    async def report(self, comment_id: CommentId, feedbacks: str) -> Comment:
        """Attach a report reason to a comment.

        Args:
            comment_id: Comment ID
            feedbacks: Reason given by the reporter

        Returns:
            Updated comment

        Raises:
            NotFoundError: If comment not found
        """
        with logfire.span("comment_service.report", comment_id=str(comment_id)):
            updated = await self.comment_repository.update_feedbacks(
                comment_id, feedbacks
            )
            if not updated:
                logfire.warn("Comment not found for report", comment_id=str(comment_id))
                raise NotFoundError("Comment", str(comment_id))
            logfire.info("Comment reported", comment_id=str(comment_id))
            return updated

    async def resolve(self, comment_id: CommentId) -> Comment:
        """Clear a comment's report.

        Raises:
            NotFoundError: If comment not found
        """
        with logfire.span("comment_service.resolve", comment_id=str(comment_id)):
            updated = await self.comment_repository.update_feedbacks(comment_id, "")
            if not updated:
                raise NotFoundError("Comment", str(comment_id))
            logfire.info("Comment report resolved", comment_id=str(comment_id))
            return updated

    async def list_reported(self) -> list[Comment]:
        """List reported comments, newest first."""
        with logfire.span("comment_service.list_reported"):
            return await self.comment_repository.find_reported()

    async def delete_comment(self, comment_id: CommentId) -> None:
        """Delete a comment.

        Raises:
            NotFoundError: If comment not found
        """
        with logfire.span("comment_service.delete_comment", comment_id=str(comment_id)):
            if not await self.comment_repository.delete(comment_id):
                logfire.warn("Comment not found for delete", comment_id=str(comment_id))
                raise NotFoundError("Comment", str(comment_id))
            logfire.info("Comment deleted", comment_id=str(comment_id))

    async def delete_for_post(self, post_id: PostId) -> int:
        """Delete every comment on a post.

        Returns:
            Number of comments deleted
        """
        with logfire.span("comment_service.delete_for_post", post_id=str(post_id)):
            deleted = await self.comment_repository.delete_by_post(post_id)
            logfire.info("Post comments deleted", post_id=str(post_id), count=deleted)
            return deleted
