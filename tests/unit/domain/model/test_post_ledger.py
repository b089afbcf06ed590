"""Unit tests for the vote ledger embedded in Post."""

import pytest
from pydantic import ValidationError

from forumhub.domain.error import VoteConflictError
from forumhub.domain.model import Post, VoteRecord, resolve_vote
from forumhub.domain.value import Email, VoteType
from tests.conftest import make_post

ALICE = Email("alice@example.com")
BOB = Email("bob@example.com")


class TestPostLedgerValidation:
    """The post refuses ledgers whose counters disagree with its records."""

    def test_counters_must_match_records(self):
        """up_votes must equal the number of up records."""
        data = make_post().model_dump()
        data["votes"] = [{"user_email": "alice@example.com", "vote_type": "up"}]
        data["up_votes"] = 0

        with pytest.raises(ValidationError, match="out of sync"):
            Post.model_validate(data)

    def test_one_vote_per_voter(self):
        """A voter cannot have two records on the same post."""
        data = make_post().model_dump()
        data["votes"] = [
            {"user_email": "alice@example.com", "vote_type": "up"},
            {"user_email": "alice@example.com", "vote_type": "down"},
        ]
        data["up_votes"] = 1
        data["down_votes"] = 1

        with pytest.raises(ValidationError, match="one vote per post"):
            Post.model_validate(data)

    def test_negative_counters_rejected(self):
        data = make_post().model_dump()
        data["down_votes"] = -1

        with pytest.raises(ValidationError):
            Post.model_validate(data)


class TestPostApplyVote:
    """Tests for Post.apply_vote."""

    def test_first_vote_adds_record(self):
        post = make_post()

        updated = post.apply_vote(ALICE, resolve_vote(None, VoteType.UP))

        assert updated.votes == [VoteRecord(user_email=ALICE, vote_type=VoteType.UP)]
        assert updated.up_votes == 1
        assert updated.down_votes == 0
        # Original is untouched
        assert post.votes == []

    def test_switch_keeps_record_position(self):
        post = make_post()
        post = post.apply_vote(ALICE, resolve_vote(None, VoteType.UP))
        post = post.apply_vote(BOB, resolve_vote(None, VoteType.UP))

        updated = post.apply_vote(ALICE, resolve_vote(VoteType.UP, VoteType.DOWN))

        assert [v.user_email for v in updated.votes] == [ALICE, BOB]
        assert updated.vote_of(ALICE) == VoteType.DOWN
        assert updated.up_votes == 1
        assert updated.down_votes == 1
        assert updated.vote_score == 0

    def test_repeat_removes_record(self):
        post = make_post().apply_vote(ALICE, resolve_vote(None, VoteType.DOWN))

        updated = post.apply_vote(ALICE, resolve_vote(VoteType.DOWN, VoteType.DOWN))

        assert updated.votes == []
        assert updated.down_votes == 0

    def test_stale_transition_raises_conflict(self):
        """A transition computed from an outdated state is rejected."""
        post = make_post().apply_vote(ALICE, resolve_vote(None, VoteType.UP))

        with pytest.raises(VoteConflictError):
            post.apply_vote(ALICE, resolve_vote(None, VoteType.UP))
