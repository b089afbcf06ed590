"""Unit tests for VoteService."""

import asyncio
from uuid import uuid4

import pytest

from forumhub.domain.error import NotFoundError
from forumhub.domain.model import VoteStatus
from forumhub.domain.repository import PostRepository
from forumhub.domain.service import VoteService
from forumhub.domain.value import Email, PostId, VoteType
from tests.conftest import make_post
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no database needed
unit_env = create_env_fixture()

ALICE = Email("alice@example.com")
BOB = Email("bob@example.com")


class TestCastVote:
    """Tests for cast_vote."""

    @pytest.mark.asyncio
    async def test_voting_sequence(self, unit_env):
        """Walks a post through add, remove, add and switch."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.save(make_post())

        # Act & Assert
        outcome = await vote_service.cast_vote(post.id, ALICE, VoteType.UP)
        assert (outcome.up_votes, outcome.down_votes) == (1, 0)
        assert outcome.message == "Upvote added"

        outcome = await vote_service.cast_vote(post.id, ALICE, VoteType.UP)
        assert (outcome.up_votes, outcome.down_votes) == (0, 0)
        assert outcome.message == "Upvote removed"

        outcome = await vote_service.cast_vote(post.id, ALICE, VoteType.DOWN)
        assert (outcome.up_votes, outcome.down_votes) == (0, 1)
        assert outcome.message == "Downvote added"

        outcome = await vote_service.cast_vote(post.id, BOB, VoteType.UP)
        assert (outcome.up_votes, outcome.down_votes) == (1, 1)

        outcome = await vote_service.cast_vote(post.id, BOB, VoteType.DOWN)
        assert outcome.transition.status == VoteStatus.SWITCHED
        assert outcome.message == "Vote switched to downvote"
        # Alice's down plus Bob's down
        assert (outcome.up_votes, outcome.down_votes) == (0, 2)
        assert outcome.vote_score == -2

        # Verify the stored ledger agrees with the counters
        stored = await post_repo.find_by_id(post.id)
        assert stored.vote_of(ALICE) == VoteType.DOWN
        assert stored.vote_of(BOB) == VoteType.DOWN
        assert stored.down_votes == 2
        assert stored.up_votes == 0

    @pytest.mark.asyncio
    async def test_unknown_post_raises_and_creates_nothing(self, unit_env):
        """Voting on a missing post raises NotFoundError."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        post_repo = await unit_env.get(PostRepository)
        missing = PostId(uuid4())

        # Act & Assert
        with pytest.raises(NotFoundError) as exc_info:
            await vote_service.cast_vote(missing, ALICE, VoteType.UP)

        assert exc_info.value.resource == "Post"
        assert await post_repo.find_by_id(missing) is None
        assert await post_repo.count() == 0

    @pytest.mark.asyncio
    async def test_concurrent_votes_from_distinct_users(self, unit_env):
        """Concurrent votes from different users all land."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.save(make_post())
        voters = [Email(f"voter{i}@example.com") for i in range(10)]

        # Act
        await asyncio.gather(
            *(
                vote_service.cast_vote(
                    post.id, voter, VoteType.UP if i % 2 == 0 else VoteType.DOWN
                )
                for i, voter in enumerate(voters)
            )
        )

        # Assert
        stored = await post_repo.find_by_id(post.id)
        assert stored.up_votes == 5
        assert stored.down_votes == 5
        assert len(stored.votes) == 10

    @pytest.mark.asyncio
    async def test_concurrent_repeat_votes_from_same_user(self, unit_env):
        """A double-clicked upvote adds then removes; neither update is lost."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.save(make_post())

        # Act
        outcomes = await asyncio.gather(
            vote_service.cast_vote(post.id, ALICE, VoteType.UP),
            vote_service.cast_vote(post.id, ALICE, VoteType.UP),
        )

        # Assert
        assert {outcome.message for outcome in outcomes} == {
            "Upvote added",
            "Upvote removed",
        }
        stored = await post_repo.find_by_id(post.id)
        assert stored.vote_of(ALICE) is None
        assert (stored.up_votes, stored.down_votes) == (0, 0)
        assert stored.votes == []

    @pytest.mark.asyncio
    async def test_votes_on_other_posts_are_independent(self, unit_env):
        # Arrange
        vote_service = await unit_env.get(VoteService)
        post_repo = await unit_env.get(PostRepository)
        first = await post_repo.save(make_post(title="First"))
        second = await post_repo.save(make_post(title="Second"))

        # Act
        await vote_service.cast_vote(first.id, ALICE, VoteType.UP)
        outcome = await vote_service.cast_vote(second.id, ALICE, VoteType.UP)

        # Assert - second post saw a fresh add, not a removal
        assert outcome.message == "Upvote added"
        assert (await post_repo.find_by_id(first.id)).up_votes == 1
