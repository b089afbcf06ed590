"""Unit tests for public post listing in the in-memory repository."""

import pytest

from forumhub.domain.model import resolve_vote
from forumhub.domain.repository.post import PostSortOrder
from forumhub.domain.value import Email, Visibility, VoteType
from forumhub.persistence.repository.inmemory.post import InMemoryPostRepository
from tests.conftest import make_post


def _with_votes(post, ups: int, downs: int):
    for i in range(ups):
        post = post.apply_vote(
            Email(f"up{i}@example.com"), resolve_vote(None, VoteType.UP)
        )
    for i in range(downs):
        post = post.apply_vote(
            Email(f"down{i}@example.com"), resolve_vote(None, VoteType.DOWN)
        )
    return post


class TestPostListing:
    """Tests for find_public."""

    @pytest.mark.asyncio
    async def test_recent_is_newest_first(self):
        repo = InMemoryPostRepository()
        old = await repo.save(make_post(title="Old", age_minutes=60))
        new = await repo.save(make_post(title="New", age_minutes=1))

        posts = await repo.find_public(PostSortOrder.RECENT)

        assert [p.id for p in posts] == [new.id, old.id]

    @pytest.mark.asyncio
    async def test_popular_orders_by_score_then_recency(self):
        repo = InMemoryPostRepository()
        low = await repo.save(_with_votes(make_post(age_minutes=1), ups=1, downs=2))
        high = await repo.save(_with_votes(make_post(age_minutes=30), ups=3, downs=0))
        tie_old = await repo.save(_with_votes(make_post(age_minutes=20), ups=1, downs=0))
        tie_new = await repo.save(_with_votes(make_post(age_minutes=10), ups=1, downs=0))

        posts = await repo.find_public(PostSortOrder.POPULAR, limit=10)

        assert [p.id for p in posts] == [high.id, tie_new.id, tie_old.id, low.id]

    @pytest.mark.asyncio
    async def test_tag_search_is_case_insensitive_substring(self):
        repo = InMemoryPostRepository()
        match = await repo.save(make_post(tags=["MachineLearning"]))
        await repo.save(make_post(tags=["cooking"]))
        await repo.save(
            make_post(tags=["learning"], visibility=Visibility.PRIVATE)
        )

        posts = await repo.find_public(tag_search="LEARN")

        assert [p.id for p in posts] == [match.id]

    @pytest.mark.asyncio
    async def test_pagination(self):
        repo = InMemoryPostRepository()
        for i in range(7):
            await repo.save(make_post(title=f"Post {i}", age_minutes=i))

        first = await repo.find_public(limit=5, offset=0)
        second = await repo.find_public(limit=5, offset=5)

        assert len(first) == 5
        assert len(second) == 2
        assert first[0].title == "Post 0"
