"""Post aggregate root.

Posts embed their vote ledger: the list of per-user votes and the
upVotes/downVotes counters derived from it.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, model_validator

from forumhub.domain.error import VoteConflictError
from forumhub.domain.model.common import DomainModel
from forumhub.domain.model.vote import VoteRecord, VoteTransition
from forumhub.domain.value import Email, PostId, TagName, Visibility, VoteType


class Post(DomainModel):
    """Post aggregate root.

    Invariants:
    - At most one vote per voter email
    - up_votes/down_votes equal the number of up/down vote records
    """

    id: PostId
    author_email: Email
    author_name: str = Field(default="", max_length=255)
    author_image: Optional[str] = None
    title: str = Field(min_length=1, max_length=300)
    description: str = Field(default="", max_length=10000)
    tags: list[TagName] = Field(default_factory=list)
    visibility: Visibility = Visibility.PUBLIC
    votes: list[VoteRecord] = Field(default_factory=list)
    up_votes: int = Field(default=0, ge=0)
    down_votes: int = Field(default=0, ge=0)
    comments_count: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=datetime.now)

    @model_validator(mode="after")
    def validate_vote_ledger(self) -> "Post":
        """Validate the vote list and counters agree."""
        voters = [vote.user_email.root for vote in self.votes]
        if len(voters) != len(set(voters)):
            raise ValueError("A user can only have one vote per post")

        ups = sum(1 for vote in self.votes if vote.vote_type == VoteType.UP)
        downs = len(self.votes) - ups
        if ups != self.up_votes or downs != self.down_votes:
            raise ValueError(
                f"Vote counters out of sync: up_votes={self.up_votes} (records {ups}), "
                f"down_votes={self.down_votes} (records {downs})"
            )
        return self

    @property
    def vote_score(self) -> int:
        """upVotes minus downVotes, used for popularity ordering."""
        return self.up_votes - self.down_votes

    @property
    def is_private(self) -> bool:
        return self.visibility == Visibility.PRIVATE

    def vote_of(self, voter: Email) -> Optional[VoteType]:
        """Return the voter's recorded vote, if any."""
        for vote in self.votes:
            if vote.user_email == voter:
                return vote.vote_type
        return None

    def apply_vote(self, voter: Email, transition: VoteTransition) -> "Post":
        """Return a copy of the post with the transition applied.

        The transition must have been computed from the voter's current state.

        Raises:
            VoteConflictError: If the voter's recorded vote differs from
                transition.previous
        """
        if self.vote_of(voter) != transition.previous:
            raise VoteConflictError(str(self.id), voter.root)

        if transition.previous is None:
            votes = [
                *self.votes,
                VoteRecord(user_email=voter, vote_type=transition.requested),
            ]
        elif transition.current is None:
            votes = [vote for vote in self.votes if vote.user_email != voter]
        else:
            # Switch in place, keeping the record's position
            votes = [
                VoteRecord(user_email=voter, vote_type=transition.current)
                if vote.user_email == voter
                else vote
                for vote in self.votes
            ]

        return self.model_copy(
            update={
                "votes": votes,
                "up_votes": self.up_votes + transition.up_delta,
                "down_votes": self.down_votes + transition.down_delta,
            }
        )
