"""In-memory post repository for testing."""

from typing import Optional

from forumhub.domain.model import VoteOutcome, resolve_vote
from forumhub.domain.model.post import Post
from forumhub.domain.repository.post import PostRepository, PostSortOrder
from forumhub.domain.value import Email, PostId, Visibility, VoteType


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing."""

    def __init__(self) -> None:
        self._posts: dict[PostId, Post] = {}

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        return self._posts.get(post_id)

    async def find_public(
        self,
        sort: PostSortOrder = PostSortOrder.RECENT,
        tag_search: Optional[str] = None,
        limit: int = 5,
        offset: int = 0,
    ) -> list[Post]:
        """Find non-private posts with filtering and pagination."""
        posts = [p for p in self._posts.values() if not p.is_private]

        if tag_search:
            needle = tag_search.lower()
            posts = [
                p for p in posts if any(needle in tag.root.lower() for tag in p.tags)
            ]

        # Stable sorts: newest first, then by score when popular
        posts.sort(key=lambda p: p.created_at, reverse=True)
        if sort == PostSortOrder.POPULAR:
            posts.sort(key=lambda p: p.vote_score, reverse=True)

        return posts[offset : offset + limit]

    async def find_by_author(
        self,
        author_email: Email,
        limit: int = 10,
        offset: int = 0,
    ) -> list[Post]:
        """Find posts by a specific author."""
        posts = [p for p in self._posts.values() if p.author_email == author_email]
        posts.sort(key=lambda p: p.created_at, reverse=True)
        return posts[offset : offset + limit]

    async def count(self) -> int:
        return len(self._posts)

    async def count_by_author(self, author_email: Email) -> int:
        return sum(1 for p in self._posts.values() if p.author_email == author_email)

    async def save(self, post: Post) -> Post:
        """Insert a new post."""
        self._posts[post.id] = post
        return post

    async def update_visibility(
        self, post_id: PostId, visibility: Visibility
    ) -> Optional[Post]:
        """Change a post's visibility."""
        post = self._posts.get(post_id)
        if not post:
            return None
        updated = post.model_copy(update={"visibility": visibility})
        self._posts[post_id] = updated
        return updated

    async def adjust_comments_count(self, post_id: PostId, delta: int) -> bool:
        """Add delta to the comment counter (minimum 0)."""
        post = self._posts.get(post_id)
        if not post:
            return False
        self._posts[post_id] = post.model_copy(
            update={"comments_count": max(post.comments_count + delta, 0)}
        )
        return True

    async def delete(self, post_id: PostId) -> bool:
        """Delete a post (hard delete)."""
        return self._posts.pop(post_id, None) is not None

    async def apply_vote(
        self, post_id: PostId, voter: Email, requested: VoteType
    ) -> Optional[VoteOutcome]:
        """Cast a vote.

        There is no await between reading and replacing the post, so the
        read-resolve-write sequence cannot interleave with another task.
        """
        post = self._posts.get(post_id)
        if not post:
            return None

        transition = resolve_vote(post.vote_of(voter), requested)
        updated = post.apply_vote(voter, transition)
        self._posts[post_id] = updated

        return VoteOutcome(
            post_id=post_id,
            voter=voter,
            transition=transition,
            up_votes=updated.up_votes,
            down_votes=updated.down_votes,
        )
