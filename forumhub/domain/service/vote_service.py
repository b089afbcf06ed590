"""Vote domain service."""

import logfire

from forumhub.domain.error import NotFoundError
from forumhub.domain.model.vote import VoteOutcome
from forumhub.domain.repository import PostRepository
from forumhub.domain.value import Email, PostId, VoteType

from .base import Service


class VoteService(Service):
    """Domain service for the per-post vote ledger."""

    def __init__(self, post_repository: PostRepository) -> None:
        """Initialize vote service.

        Args:
            post_repository: Post repository (votes are embedded in posts)
        """
        self.post_repository = post_repository

    async def cast_vote(
        self, post_id: PostId, voter: Email, requested: VoteType
    ) -> VoteOutcome:
        """Cast an up or down vote on a post, toggling the voter's state.

        Repeating the same vote removes it; casting the opposite vote switches
        it. The record change and counter adjustment are applied atomically
        by the repository.

        Args:
            post_id: Post ID
            voter: Voter email
            requested: Vote being cast

        Returns:
            Outcome with the transition taken and the new counters

        Raises:
            NotFoundError: If the post doesn't exist
            VoteConflictError: If the voter's vote changed concurrently
        """
        with logfire.span(
            "vote_service.cast_vote",
            post_id=str(post_id),
            voter=voter.root,
            requested=requested.value,
        ):
            outcome = await self.post_repository.apply_vote(post_id, voter, requested)
            if outcome is None:
                logfire.warn("Vote on non-existent post", post_id=str(post_id))
                raise NotFoundError("Post", str(post_id))

            logfire.info(
                "Vote cast",
                post_id=str(post_id),
                voter=voter.root,
                status=outcome.transition.status.value,
                up_votes=outcome.up_votes,
                down_votes=outcome.down_votes,
            )
            return outcome
