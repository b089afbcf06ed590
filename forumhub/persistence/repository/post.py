"""PostgreSQL implementation of Post repository."""

from collections import defaultdict
from typing import List, Optional
from uuid import UUID

import logfire
from sqlalchemy import delete, desc, func, select, update
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from forumhub.domain.error import VoteConflictError
from forumhub.domain.model import Post, VoteOutcome, VoteRecord, resolve_vote
from forumhub.domain.repository.post import PostRepository, PostSortOrder
from forumhub.domain.value import Email, PostId, Visibility, VoteType
from forumhub.persistence.mappers import post_to_dict, row_to_post, row_to_vote
from forumhub.persistence.tables import post_votes_table, posts_table


class PostgresPostRepository(PostRepository):
    """PostgreSQL implementation of PostRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _fetch_votes_for_posts(
        self, post_ids: list[UUID]
    ) -> dict[UUID, list[VoteRecord]]:
        """Fetch vote records for multiple posts in a single query.

        Args:
            post_ids: List of post IDs

        Returns:
            Dict mapping post_id -> list of vote records
        """
        if not post_ids:
            return {}

        stmt = (
            select(post_votes_table)
            .where(post_votes_table.c.post_id.in_(post_ids))
            .order_by(post_votes_table.c.created_at, post_votes_table.c.id)
        )
        result = await self.session.execute(stmt)

        post_vote_map: dict[UUID, list[VoteRecord]] = defaultdict(list)
        for row in result.mappings():
            post_vote_map[row["post_id"]].append(row_to_vote(dict(row)))

        return post_vote_map

    async def _build_posts(self, rows: list) -> List[Post]:
        if not rows:
            return []

        post_vote_map = await self._fetch_votes_for_posts([row.id for row in rows])
        return [
            row_to_post(row._asdict(), votes=post_vote_map.get(row.id, []))
            for row in rows
        ]

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        with logfire.span("post_repository.find_by_id", post_id=str(post_id)):
            stmt = select(posts_table).where(posts_table.c.id == post_id)
            result = await self.session.execute(stmt)
            row = result.fetchone()

            if not row:
                logfire.warn("Post not found", post_id=str(post_id))
                return None

            posts = await self._build_posts([row])
            return posts[0]

    async def find_public(
        self,
        sort: PostSortOrder = PostSortOrder.RECENT,
        tag_search: Optional[str] = None,
        limit: int = 5,
        offset: int = 0,
    ) -> List[Post]:
        """Find non-private posts with filtering and pagination."""
        with logfire.span(
            "post_repository.find_public",
            sort=sort.value,
            tag_search=tag_search,
            limit=limit,
            offset=offset,
        ):
            stmt = select(posts_table).where(
                posts_table.c.visibility != Visibility.PRIVATE.value
            )

            # Substring match against any tag, case-insensitive
            if tag_search:
                stmt = stmt.where(
                    func.array_to_string(posts_table.c.tags, ",").icontains(
                        tag_search, autoescape=True
                    )
                )

            if sort == PostSortOrder.POPULAR:
                score = posts_table.c.up_votes - posts_table.c.down_votes
                stmt = stmt.order_by(desc(score), desc(posts_table.c.created_at))
            else:
                stmt = stmt.order_by(desc(posts_table.c.created_at))

            stmt = stmt.limit(limit).offset(offset)

            result = await self.session.execute(stmt)
            posts = await self._build_posts(result.fetchall())

            logfire.info("Found posts", count=len(posts))
            return posts

    async def find_by_author(
        self,
        author_email: Email,
        limit: int = 10,
        offset: int = 0,
    ) -> List[Post]:
        """Find posts by a specific author."""
        stmt = (
            select(posts_table)
            .where(posts_table.c.author_email == author_email.root)
            .order_by(desc(posts_table.c.created_at))
            .limit(limit)
            .offset(offset)
        )

        result = await self.session.execute(stmt)
        return await self._build_posts(result.fetchall())

    async def count(self) -> int:
        """Count all posts."""
        stmt = select(func.count()).select_from(posts_table)
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def count_by_author(self, author_email: Email) -> int:
        """Count posts by a specific author."""
        stmt = (
            select(func.count())
            .select_from(posts_table)
            .where(posts_table.c.author_email == author_email.root)
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def save(self, post: Post) -> Post:
        """Insert a new post together with any vote records it carries."""
        with logfire.span(
            "post_repository.save",
            post_id=str(post.id),
            title=post.title,
            tags=[t.root for t in post.tags],
        ):
            await self.session.execute(posts_table.insert().values(**post_to_dict(post)))

            if post.votes:
                await self.session.execute(
                    post_votes_table.insert(),
                    [
                        {
                            "post_id": post.id,
                            "user_email": vote.user_email.root,
                            "vote_type": vote.vote_type.value,
                        }
                        for vote in post.votes
                    ],
                )

            await self.session.flush()
            logfire.info("Post saved successfully", post_id=str(post.id))
            return post

    async def update_visibility(
        self, post_id: PostId, visibility: Visibility
    ) -> Optional[Post]:
        """Change a post's visibility."""
        with logfire.span(
            "post_repository.update_visibility",
            post_id=str(post_id),
            visibility=visibility.value,
        ):
            stmt = (
                update(posts_table)
                .where(posts_table.c.id == post_id)
                .values(visibility=visibility.value)
                .returning(posts_table)
            )
            result = await self.session.execute(stmt)
            row = result.fetchone()

            if row is None:
                logfire.warn("Post not found", post_id=str(post_id))
                return None

            await self.session.flush()
            posts = await self._build_posts([row])
            return posts[0]

    async def adjust_comments_count(self, post_id: PostId, delta: int) -> bool:
        """Atomically add delta to comments_count (minimum 0)."""
        stmt = (
            update(posts_table)
            .where(posts_table.c.id == post_id)
            .values(
                comments_count=func.greatest(posts_table.c.comments_count + delta, 0)
            )
            .returning(posts_table.c.id)
        )
        result = await self.session.execute(stmt)
        found = result.fetchone() is not None
        await self.session.flush()
        return found

    async def delete(self, post_id: PostId) -> bool:
        """Delete a post (hard delete). Votes go with it via ON DELETE CASCADE."""
        stmt = (
            delete(posts_table)
            .where(posts_table.c.id == post_id)
            .returning(posts_table.c.id)
        )
        result = await self.session.execute(stmt)
        deleted = result.fetchone() is not None
        await self.session.flush()
        return deleted

    async def apply_vote(
        self, post_id: PostId, voter: Email, requested: VoteType
    ) -> Optional[VoteOutcome]:
        """Cast a vote inside a savepoint, holding the post row lock.

        The vote row write is conditioned on the previously read vote type,
        so a write that matches nothing means another transaction changed the
        voter's vote and the whole savepoint is rolled back.
        """
        with logfire.span(
            "post_repository.apply_vote",
            post_id=str(post_id),
            voter=voter.root,
            requested=requested.value,
        ):
            async with self.session.begin_nested():
                # Serialize votes on this post
                lock_stmt = (
                    select(posts_table.c.id)
                    .where(posts_table.c.id == post_id)
                    .with_for_update()
                )
                locked = await self.session.execute(lock_stmt)
                if locked.fetchone() is None:
                    logfire.warn("Post not found for vote", post_id=str(post_id))
                    return None

                current_stmt = select(post_votes_table.c.vote_type).where(
                    post_votes_table.c.post_id == post_id,
                    post_votes_table.c.user_email == voter.root,
                )
                current = (await self.session.execute(current_stmt)).scalar()
                previous = VoteType(current) if current is not None else None

                transition = resolve_vote(previous, requested)

                if transition.previous is None:
                    record_stmt = (
                        insert(post_votes_table)
                        .values(
                            post_id=post_id,
                            user_email=voter.root,
                            vote_type=requested.value,
                        )
                        .on_conflict_do_nothing(constraint="uq_post_vote_user")
                    )
                elif transition.current is None:
                    record_stmt = delete(post_votes_table).where(
                        post_votes_table.c.post_id == post_id,
                        post_votes_table.c.user_email == voter.root,
                        post_votes_table.c.vote_type == transition.previous.value,
                    )
                else:
                    record_stmt = (
                        update(post_votes_table)
                        .where(
                            post_votes_table.c.post_id == post_id,
                            post_votes_table.c.user_email == voter.root,
                            post_votes_table.c.vote_type == transition.previous.value,
                        )
                        .values(vote_type=transition.current.value)
                    )

                record_result = await self.session.execute(record_stmt)
                if record_result.rowcount != 1:
                    logfire.error(
                        "Vote record changed concurrently",
                        post_id=str(post_id),
                        voter=voter.root,
                    )
                    raise VoteConflictError(str(post_id), voter.root)

                counter_stmt = (
                    update(posts_table)
                    .where(posts_table.c.id == post_id)
                    .values(
                        up_votes=posts_table.c.up_votes + transition.up_delta,
                        down_votes=posts_table.c.down_votes + transition.down_delta,
                    )
                    .returning(posts_table.c.up_votes, posts_table.c.down_votes)
                )
                counters = (await self.session.execute(counter_stmt)).one()

            await self.session.flush()
            return VoteOutcome(
                post_id=post_id,
                voter=voter,
                transition=transition,
                up_votes=counters.up_votes,
                down_votes=counters.down_votes,
            )
