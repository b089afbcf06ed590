"""Integration tests for the PostgreSQL vote ledger.

Requires a migrated PostgreSQL database at DATABASE__URL.
"""

import asyncio
import os
from uuid import uuid4

import pytest
import pytest_asyncio
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from forumhub.domain.repository import PostRepository
from forumhub.domain.value import Email, PostId, VoteType
from tests.conftest import make_post
from tests.di import build_test_container

pytestmark = pytest.mark.skipif(
    "DATABASE__URL" not in os.environ,
    reason="DATABASE__URL not set; PostgreSQL integration tests skipped",
)

ALICE = Email("alice@example.com")
BOB = Email("bob@example.com")


@pytest_asyncio.fixture
async def container():
    """Container with real persistence, tables truncated before each test."""
    app_container = build_test_container(unmock={"persistence"})
    async with app_container() as request_container:
        session = await request_container.get(AsyncSession)
        await session.execute(
            text(
                "TRUNCATE TABLE post_votes, comments, posts, users, tags, "
                "announcements CASCADE"
            )
        )

    yield app_container

    await app_container.close()


async def _save_post(container):
    async with container() as request_container:
        repo = await request_container.get(PostRepository)
        return await repo.save(make_post())


async def _vote(container, post_id, voter, vote_type):
    async with container() as request_container:
        repo = await request_container.get(PostRepository)
        return await repo.apply_vote(post_id, voter, vote_type)


async def _load(container, post_id):
    async with container() as request_container:
        repo = await request_container.get(PostRepository)
        return await repo.find_by_id(post_id)


class TestPostgresVoteLedger:
    """Vote ledger against a real database."""

    @pytest.mark.asyncio
    async def test_toggle_and_switch_persist(self, container):
        post = await _save_post(container)

        added = await _vote(container, post.id, ALICE, VoteType.UP)
        switched = await _vote(container, post.id, ALICE, VoteType.DOWN)

        assert (added.up_votes, added.down_votes) == (1, 0)
        assert (switched.up_votes, switched.down_votes) == (0, 1)
        assert switched.message == "Vote switched to downvote"

        stored = await _load(container, post.id)
        assert stored.vote_of(ALICE) == VoteType.DOWN
        assert stored.down_votes == 1

        removed = await _vote(container, post.id, ALICE, VoteType.DOWN)
        assert (removed.up_votes, removed.down_votes) == (0, 0)
        assert (await _load(container, post.id)).votes == []

    @pytest.mark.asyncio
    async def test_unknown_post_returns_none(self, container):
        assert await _vote(container, PostId(uuid4()), ALICE, VoteType.UP) is None

    @pytest.mark.asyncio
    async def test_concurrent_voters_both_counted(self, container):
        """Row locking serializes the two votes; both land."""
        post = await _save_post(container)

        await asyncio.gather(
            _vote(container, post.id, ALICE, VoteType.UP),
            _vote(container, post.id, BOB, VoteType.DOWN),
        )

        stored = await _load(container, post.id)
        assert stored.up_votes == 1
        assert stored.down_votes == 1
        assert len(stored.votes) == 2

    @pytest.mark.asyncio
    async def test_concurrent_repeat_votes_from_same_user(self, container):
        """The second upvote waits on the row lock, then removes the first."""
        post = await _save_post(container)

        outcomes = await asyncio.gather(
            _vote(container, post.id, ALICE, VoteType.UP),
            _vote(container, post.id, ALICE, VoteType.UP),
        )

        assert {outcome.message for outcome in outcomes} == {
            "Upvote added",
            "Upvote removed",
        }
        stored = await _load(container, post.id)
        assert stored.vote_of(ALICE) is None
        assert (stored.up_votes, stored.down_votes) == (0, 0)
        assert stored.votes == []
