"""Cast vote use case."""

import logfire
from pydantic import BaseModel

from forumhub.application.usecase.base import (
    BaseUseCase,
    CamelModel,
    parse_email,
    parse_uuid,
)
from forumhub.domain.model import AuthContext
from forumhub.domain.service import VoteService
from forumhub.domain.value import PostId, VoteType


class CastVoteRequest(BaseModel):
    """Cast vote request."""

    post_id: str  # UUID string
    user_email: str | None  # Voter key, as sent by the client
    vote_type: VoteType
    actor: AuthContext | None = None  # Authenticated user, if known


class CastVoteResponse(CamelModel):
    """Cast vote response."""

    message: str
    up_votes: int
    down_votes: int
    votes_count: int


class CastVoteUseCase(BaseUseCase):
    """Use case for up/down voting a post with toggle semantics."""

    def __init__(self, vote_service: VoteService) -> None:
        """Initialize cast vote use case.

        Args:
            vote_service: Vote domain service
        """
        self.vote_service = vote_service

    async def execute(self, request: CastVoteRequest) -> CastVoteResponse:
        """Execute cast vote flow.

        The voter is identified by the email in the request body. When it
        differs from the authenticated user the vote still goes through
        under the body email and the mismatch is logged.

        Args:
            request: Cast vote request

        Returns:
            Transition message and the post's new counters

        Raises:
            ValidationError: If the post id is malformed or the email is blank
            NotFoundError: If the post doesn't exist
            VoteConflictError: If the voter's vote changed concurrently
        """
        post_id = PostId(parse_uuid(request.post_id, "post"))
        voter = parse_email(request.user_email, "userEmail")

        if request.actor and request.actor.email != voter:
            logfire.warn(
                "Vote email differs from authenticated user",
                post_id=str(post_id),
                voter=voter.root,
                actor=request.actor.email.root,
            )

        outcome = await self.vote_service.cast_vote(post_id, voter, request.vote_type)

        return CastVoteResponse(
            message=outcome.message,
            up_votes=outcome.up_votes,
            down_votes=outcome.down_votes,
            votes_count=outcome.vote_score,
        )
