"""Vote ledger.

Each post records at most one vote per user (up or down) together with
denormalized upVotes/downVotes counters. Casting a vote is a toggle:

    current  requested  new    delta
    none     up         up     up +1
    none     down       down   down +1
    up       up         none   up -1
    up       down       down   up -1, down +1
    down     down       none   down -1
    down     up         up     down -1, up +1
"""

from enum import Enum
from typing import Optional

from forumhub.domain.model.common import DomainModel
from forumhub.domain.value import Email, PostId, VoteType


class VoteRecord(DomainModel):
    """A single user's current vote on a post.

    The voter is keyed by email, matching the data the frontend sends.
    An email change orphans the user's vote history.
    """

    user_email: Email
    vote_type: VoteType


class VoteStatus(str, Enum):
    """Which branch of the toggle was taken."""

    ADDED = "added"
    REMOVED = "removed"
    SWITCHED = "switched"


_LABELS = {VoteType.UP: "upvote", VoteType.DOWN: "downvote"}


def _delta(vote_type: VoteType, amount: int) -> tuple[int, int]:
    if vote_type == VoteType.UP:
        return amount, 0
    return 0, amount


class VoteTransition(DomainModel):
    """Result of applying a requested vote to a voter's current state."""

    requested: VoteType
    previous: Optional[VoteType]
    current: Optional[VoteType]
    up_delta: int
    down_delta: int
    status: VoteStatus

    @property
    def message(self) -> str:
        """Human-readable description of the transition."""
        label = _LABELS[self.requested]
        if self.status == VoteStatus.ADDED:
            return f"{label.capitalize()} added"
        if self.status == VoteStatus.REMOVED:
            return f"{label.capitalize()} removed"
        return f"Vote switched to {label}"


def resolve_vote(previous: Optional[VoteType], requested: VoteType) -> VoteTransition:
    """Compute the toggle transition for one voter.

    Args:
        previous: The voter's recorded vote (None if they have not voted)
        requested: The vote being cast

    Returns:
        The transition, including counter deltas
    """
    if previous is None:
        up, down = _delta(requested, 1)
        return VoteTransition(
            requested=requested,
            previous=None,
            current=requested,
            up_delta=up,
            down_delta=down,
            status=VoteStatus.ADDED,
        )

    if previous == requested:
        up, down = _delta(requested, -1)
        return VoteTransition(
            requested=requested,
            previous=previous,
            current=None,
            up_delta=up,
            down_delta=down,
            status=VoteStatus.REMOVED,
        )

    add_up, add_down = _delta(requested, 1)
    sub_up, sub_down = _delta(previous, -1)
    return VoteTransition(
        requested=requested,
        previous=previous,
        current=requested,
        up_delta=add_up + sub_up,
        down_delta=add_down + sub_down,
        status=VoteStatus.SWITCHED,
    )


class VoteOutcome(DomainModel):
    """Post counters after a vote has been applied."""

    post_id: PostId
    voter: Email
    transition: VoteTransition
    up_votes: int
    down_votes: int

    @property
    def vote_score(self) -> int:
        """upVotes minus downVotes."""
        return self.up_votes - self.down_votes

    @property
    def message(self) -> str:
        """Transition message."""
        return self.transition.message
