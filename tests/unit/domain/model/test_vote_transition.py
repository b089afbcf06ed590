"""Unit tests for the vote toggle transition."""

import pytest

from forumhub.domain.model import VoteStatus, resolve_vote
from forumhub.domain.value import VoteType

UP = VoteType.UP
DOWN = VoteType.DOWN


class TestResolveVote:
    """The transition is total over (current state, requested vote)."""

    @pytest.mark.parametrize(
        "previous, requested, current, up_delta, down_delta, status, message",
        [
            (None, UP, UP, 1, 0, VoteStatus.ADDED, "Upvote added"),
            (None, DOWN, DOWN, 0, 1, VoteStatus.ADDED, "Downvote added"),
            (UP, UP, None, -1, 0, VoteStatus.REMOVED, "Upvote removed"),
            (UP, DOWN, DOWN, -1, 1, VoteStatus.SWITCHED, "Vote switched to downvote"),
            (DOWN, DOWN, None, 0, -1, VoteStatus.REMOVED, "Downvote removed"),
            (DOWN, UP, UP, 1, -1, VoteStatus.SWITCHED, "Vote switched to upvote"),
        ],
    )
    def test_transition_table(
        self, previous, requested, current, up_delta, down_delta, status, message
    ):
        """Every reachable (state, input) pair maps to exactly one outcome."""
        transition = resolve_vote(previous, requested)

        assert transition.previous == previous
        assert transition.requested == requested
        assert transition.current == current
        assert transition.up_delta == up_delta
        assert transition.down_delta == down_delta
        assert transition.status == status
        assert transition.message == message

    @pytest.mark.parametrize("previous", [None, UP, DOWN])
    @pytest.mark.parametrize("requested", [UP, DOWN])
    def test_deltas_match_state_change(self, previous, requested):
        """Counter deltas equal the change in per-user state."""
        transition = resolve_vote(previous, requested)

        def counts(state):
            return (1 if state == UP else 0, 1 if state == DOWN else 0)

        before_up, before_down = counts(previous)
        after_up, after_down = counts(transition.current)
        assert transition.up_delta == after_up - before_up
        assert transition.down_delta == after_down - before_down

    @pytest.mark.parametrize("previous", [None, UP, DOWN])
    @pytest.mark.parametrize("requested", [UP, DOWN])
    def test_same_vote_twice(self, previous, requested):
        """Repeating a vote undoes it, unless the first cast was a switch."""
        first = resolve_vote(previous, requested)
        second = resolve_vote(first.current, requested)

        if previous is None or previous == requested:
            assert second.current == previous
        else:
            # Switched, then removed
            assert second.current is None
