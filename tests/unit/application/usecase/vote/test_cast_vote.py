"""Unit tests for CastVoteUseCase."""

from uuid import uuid4

import pytest

from forumhub.application.usecase.vote import CastVoteRequest, CastVoteUseCase
from forumhub.domain.error import NotFoundError, ValidationError
from forumhub.domain.repository import PostRepository
from forumhub.domain.value import Email, VoteType
from tests.conftest import make_actor, make_post, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestCastVoteUseCase:
    """Tests for CastVoteUseCase."""

    @pytest.mark.asyncio
    async def test_upvote_returns_counters_and_score(self, unit_env):
        # Arrange
        use_case = await unit_env.get(CastVoteUseCase)
        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.save(make_post())

        # Act
        response = await use_case.execute(
            CastVoteRequest(
                post_id=str(post.id),
                user_email="alice@example.com",
                vote_type=VoteType.UP,
            )
        )

        # Assert
        assert response.message == "Upvote added"
        assert response.up_votes == 1
        assert response.down_votes == 0
        assert response.votes_count == 1
        assert response.model_dump(by_alias=True) == {
            "message": "Upvote added",
            "upVotes": 1,
            "downVotes": 0,
            "votesCount": 1,
        }

    @pytest.mark.asyncio
    async def test_malformed_post_id_raises_validation_error(self, unit_env):
        use_case = await unit_env.get(CastVoteUseCase)

        with pytest.raises(ValidationError, match="Invalid post id"):
            await use_case.execute(
                CastVoteRequest(
                    post_id="not-a-uuid",
                    user_email="alice@example.com",
                    vote_type=VoteType.UP,
                )
            )

    @pytest.mark.asyncio
    @pytest.mark.parametrize("email", [None, "", "   "])
    async def test_blank_email_raises_validation_error(self, unit_env, email):
        use_case = await unit_env.get(CastVoteUseCase)
        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.save(make_post())

        with pytest.raises(ValidationError, match="userEmail is required"):
            await use_case.execute(
                CastVoteRequest(
                    post_id=str(post.id), user_email=email, vote_type=VoteType.DOWN
                )
            )

        # Ledger untouched
        assert (await post_repo.find_by_id(post.id)).votes == []

    @pytest.mark.asyncio
    async def test_unknown_post_raises_not_found(self, unit_env):
        use_case = await unit_env.get(CastVoteUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                CastVoteRequest(
                    post_id=str(uuid4()),
                    user_email="alice@example.com",
                    vote_type=VoteType.UP,
                )
            )

    @pytest.mark.asyncio
    async def test_body_email_is_the_voter_key(self, unit_env):
        """A body email differing from the actor is still the recorded voter."""
        use_case = await unit_env.get(CastVoteUseCase)
        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.save(make_post())
        actor = make_actor(make_user("actor@example.com"))

        await use_case.execute(
            CastVoteRequest(
                post_id=str(post.id),
                user_email="someone-else@example.com",
                vote_type=VoteType.UP,
                actor=actor,
            )
        )

        stored = await post_repo.find_by_id(post.id)
        assert stored.vote_of(Email("someone-else@example.com")) == VoteType.UP
        assert stored.vote_of(actor.email) is None
