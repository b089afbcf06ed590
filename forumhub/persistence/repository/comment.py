"""PostgreSQL implementation of Comment repository."""

from typing import List, Optional

import logfire
from sqlalchemy import delete, desc, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from forumhub.domain.model import Comment
from forumhub.domain.repository import CommentRepository
from forumhub.domain.value import CommentId, PostId
from forumhub.persistence.mappers import comment_to_dict, row_to_comment
from forumhub.persistence.tables import comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_comment(dict(row)) if row else None

    async def find_by_post(self, post_id: PostId) -> List[Comment]:
        """Find all comments on a post, newest first."""
        with logfire.span("comment_repository.find_by_post", post_id=str(post_id)):
            stmt = (
                select(comments_table)
                .where(comments_table.c.post_id == post_id)
                .order_by(desc(comments_table.c.created_at))
            )
            result = await self.session.execute(stmt)
            return [row_to_comment(dict(row)) for row in result.mappings()]

    async def count_by_post(self, post_id: PostId) -> int:
        stmt = (
            select(func.count())
            .select_from(comments_table)
            .where(comments_table.c.post_id == post_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def find_reported(self) -> List[Comment]:
        """Find comments with a non-empty report."""
        stmt = (
            select(comments_table)
            .where(comments_table.c.feedbacks != "")
            .order_by(desc(comments_table.c.created_at))
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(dict(row)) for row in result.mappings()]

    async def count(self) -> int:
        stmt = select(func.count()).select_from(comments_table)
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def save(self, comment: Comment) -> Comment:
        """Insert a new comment."""
        with logfire.span(
            "comment_repository.save",
            comment_id=str(comment.id),
            post_id=str(comment.post_id),
        ):
            stmt = comments_table.insert().values(**comment_to_dict(comment))
            await self.session.execute(stmt)
            await self.session.flush()
            return comment

    async def update_feedbacks(
        self, comment_id: CommentId, feedbacks: str
    ) -> Optional[Comment]:
        """Set or clear a comment's report text."""
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment_id)
            .values(feedbacks=feedbacks)
            .returning(comments_table)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        await self.session.flush()
        return row_to_comment(dict(row)) if row else None

    async def delete(self, comment_id: CommentId) -> bool:
        """Delete a comment (hard delete)."""
        stmt = (
            delete(comments_table)
            .where(comments_table.c.id == comment_id)
            .returning(comments_table.c.id)
        )
        result = await self.session.execute(stmt)
        deleted = result.fetchone() is not None
        await self.session.flush()
        return deleted

    async def delete_by_post(self, post_id: PostId) -> int:
        """Delete all comments on a post."""
        stmt = (
            delete(comments_table)
            .where(comments_table.c.post_id == post_id)
            .returning(comments_table.c.id)
        )
        result = await self.session.execute(stmt)
        deleted = len(result.fetchall())
        await self.session.flush()
        return deleted
