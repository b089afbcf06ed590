"""In-memory comment repository for testing."""

from typing import Optional

from forumhub.domain.model.comment import Comment
from forumhub.domain.repository.comment import CommentRepository
from forumhub.domain.value import CommentId, PostId


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def find_by_post(self, post_id: PostId) -> list[Comment]:
        """Find all comments on a post, newest first."""
        comments = [c for c in self._comments.values() if c.post_id == post_id]
        return sorted(comments, key=lambda c: c.created_at, reverse=True)

    async def count_by_post(self, post_id: PostId) -> int:
        return sum(1 for c in self._comments.values() if c.post_id == post_id)

    async def find_reported(self) -> list[Comment]:
        comments = [c for c in self._comments.values() if c.is_reported]
        return sorted(comments, key=lambda c: c.created_at, reverse=True)

    async def count(self) -> int:
        return len(self._comments)

    async def save(self, comment: Comment) -> Comment:
        """Insert a new comment."""
        self._comments[comment.id] = comment
        return comment

    async def update_feedbacks(
        self, comment_id: CommentId, feedbacks: str
    ) -> Optional[Comment]:
        comment = self._comments.get(comment_id)
        if not comment:
            return None
        updated = comment.model_copy(update={"feedbacks": feedbacks})
        self._comments[comment_id] = updated
        return updated

    async def delete(self, comment_id: CommentId) -> bool:
        return self._comments.pop(comment_id, None) is not None

    async def delete_by_post(self, post_id: PostId) -> int:
        doomed = [cid for cid, c in self._comments.items() if c.post_id == post_id]
        for comment_id in doomed:
            del self._comments[comment_id]
        return len(doomed)
