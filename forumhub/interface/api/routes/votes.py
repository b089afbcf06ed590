"""Vote routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request

from forumhub.application.usecase.auth import AuthenticateUseCase
from forumhub.application.usecase.base import CamelModel
from forumhub.application.usecase.vote import (
    CastVoteRequest,
    CastVoteResponse,
    CastVoteUseCase,
)
from forumhub.domain.error import DomainError
from forumhub.domain.value import VoteType
from forumhub.interface.api.errors import to_http_error
from forumhub.interface.api.security import require_user

router = APIRouter(tags=["votes"], route_class=DishkaRoute)


class VoteAPIRequest(CamelModel):
    """API request for casting a vote."""

    user_email: str | None = None


async def _cast(
    post_id: str,
    vote_type: VoteType,
    body: VoteAPIRequest,
    request: Request,
    cast_vote_use_case: CastVoteUseCase,
    authenticate_use_case: AuthenticateUseCase,
) -> CastVoteResponse:
    actor = await require_user(request, authenticate_use_case)
    try:
        return await cast_vote_use_case.execute(
            CastVoteRequest(
                post_id=post_id,
                user_email=body.user_email,
                vote_type=vote_type,
                actor=actor,
            )
        )
    except (DomainError, ValueError) as e:
        raise to_http_error(e)


@router.post("/post-upvote/{post_id}", response_model=CastVoteResponse)
async def upvote(
    post_id: str,
    body: VoteAPIRequest,
    request: Request,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
    authenticate_use_case: FromDishka[AuthenticateUseCase],
) -> CastVoteResponse:
    """Toggle an upvote on a post.

    Voting again with the same type removes the vote; voting with the other
    type switches it.

    Args:
        post_id: Post ID
        body: Voter email
        request: Incoming request (session cookie)
        cast_vote_use_case: Cast vote use case from DI
        authenticate_use_case: Authenticate use case from DI

    Returns:
        Transition message and the post's new counters

    Raises:
        HTTPException: 401/400 on auth failure, 400 on bad input,
            404 if the post doesn't exist
    """
    return await _cast(
        post_id, VoteType.UP, body, request, cast_vote_use_case, authenticate_use_case
    )


@router.post("/post-downvote/{post_id}", response_model=CastVoteResponse)
async def downvote(
    post_id: str,
    body: VoteAPIRequest,
    request: Request,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
    authenticate_use_case: FromDishka[AuthenticateUseCase],
) -> CastVoteResponse:
    """Toggle a downvote on a post. Same semantics as upvote."""
    return await _cast(
        post_id, VoteType.DOWN, body, request, cast_vote_use_case, authenticate_use_case
    )
