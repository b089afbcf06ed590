"""Comment routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request
from pydantic import Field

from forumhub.application.usecase.auth import AuthenticateUseCase
from forumhub.application.usecase.base import CamelModel, CountResponse, SuccessResponse
from forumhub.application.usecase.comment import (
    CommentItem,
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentUseCase,
    ListCommentsRequest,
    ListCommentsUseCase,
    ListReportedCommentsUseCase,
    ReportCommentRequest,
    ReportCommentUseCase,
    ResolveCommentRequest,
    ResolveCommentUseCase,
)
from forumhub.application.usecase.stats import (
    PostCommentCountRequest,
    PostCommentCountUseCase,
    SiteCountsUseCase,
)
from forumhub.domain.error import DomainError
from forumhub.interface.api.errors import to_http_error
from forumhub.interface.api.security import require_admin, require_user

router = APIRouter(tags=["comments"], route_class=DishkaRoute)


class CommentPayload(CamelModel):
    """Comment fields as sent by the web client."""

    post_id: str
    comment_text: str = Field(min_length=1, max_length=5000)
    commenter_email: str | None = None
    commenter_name: str = ""
    commenter_image: str | None = None


class CreateCommentAPIRequest(CamelModel):
    """API request for creating a comment."""

    comment: CommentPayload


class ReportCommentAPIRequest(CamelModel):
    """API request for reporting a comment."""

    feedbacks: str = ""


class DeleteCommentAPIRequest(CamelModel):
    """API request for deleting a comment."""

    post_id: str | None = None


class CommentCountResponse(CamelModel):
    """Dashboard totals."""

    count: int
    user_count: int
    post_count: int


@router.post("/new-comment", response_model=CreateCommentResponse)
async def create_comment(
    body: CreateCommentAPIRequest,
    request: Request,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    authenticate_use_case: FromDishka[AuthenticateUseCase],
) -> CreateCommentResponse:
    """Comment on a post and bump its comment count.

    Requires authentication. The commenter is the logged-in user.

    Args:
        body: Comment data
        request: Incoming request (session cookie)
        create_comment_use_case: Create comment use case from DI
        authenticate_use_case: Authenticate use case from DI

    Returns:
        Created comment ID

    Raises:
        HTTPException: 404 if the post doesn't exist
    """
    actor = await require_user(request, authenticate_use_case)
    try:
        return await create_comment_use_case.execute(
            CreateCommentRequest(
                actor=actor,
                post_id=body.comment.post_id,
                comment_text=body.comment.comment_text,
                commenter_name=body.comment.commenter_name,
                commenter_image=body.comment.commenter_image,
            )
        )
    except (DomainError, ValueError) as e:
        raise to_http_error(e)


@router.get("/post-comments/{post_id}", response_model=list[CommentItem])
async def list_post_comments(
    post_id: str,
    list_comments_use_case: FromDishka[ListCommentsUseCase],
) -> list[CommentItem]:
    """Comments on a post, newest first."""
    try:
        return await list_comments_use_case.execute(ListCommentsRequest(post_id=post_id))
    except (DomainError, ValueError) as e:
        raise to_http_error(e)


@router.get("/post-comment-count/{post_id}", response_model=CountResponse)
async def post_comment_count(
    post_id: str,
    post_comment_count_use_case: FromDishka[PostCommentCountUseCase],
) -> CountResponse:
    """Number of comments on a post."""
    try:
        return await post_comment_count_use_case.execute(
            PostCommentCountRequest(post_id=post_id)
        )
    except (DomainError, ValueError) as e:
        raise to_http_error(e)


@router.patch("/report-comment/{comment_id}", response_model=SuccessResponse)
async def report_comment(
    comment_id: str,
    body: ReportCommentAPIRequest,
    request: Request,
    report_comment_use_case: FromDishka[ReportCommentUseCase],
    authenticate_use_case: FromDishka[AuthenticateUseCase],
) -> SuccessResponse:
    """Flag a comment for moderation with a reason."""
    await require_user(request, authenticate_use_case)
    try:
        return await report_comment_use_case.execute(
            ReportCommentRequest(comment_id=comment_id, feedbacks=body.feedbacks)
        )
    except (DomainError, ValueError) as e:
        raise to_http_error(e)


@router.get("/all-reported-comments", response_model=list[CommentItem])
async def list_reported_comments(
    request: Request,
    list_reported_use_case: FromDishka[ListReportedCommentsUseCase],
    authenticate_use_case: FromDishka[AuthenticateUseCase],
) -> list[CommentItem]:
    """Moderation queue. Admin only."""
    await require_admin(request, authenticate_use_case)
    return await list_reported_use_case.execute()


@router.patch("/resolve-comment/{comment_id}", response_model=SuccessResponse)
async def resolve_comment(
    comment_id: str,
    request: Request,
    resolve_comment_use_case: FromDishka[ResolveCommentUseCase],
    authenticate_use_case: FromDishka[AuthenticateUseCase],
) -> SuccessResponse:
    """Clear a comment's report. Admin only."""
    await require_admin(request, authenticate_use_case)
    try:
        return await resolve_comment_use_case.execute(
            ResolveCommentRequest(comment_id=comment_id)
        )
    except (DomainError, ValueError) as e:
        raise to_http_error(e)


@router.delete("/delete-comment/{comment_id}", response_model=SuccessResponse)
async def delete_comment(
    comment_id: str,
    request: Request,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    authenticate_use_case: FromDishka[AuthenticateUseCase],
    body: DeleteCommentAPIRequest | None = None,
) -> SuccessResponse:
    """Delete a comment and decrement its post's comment count.

    Only the commenter or an admin may delete a comment.
    """
    actor = await require_user(request, authenticate_use_case)
    try:
        return await delete_comment_use_case.execute(
            DeleteCommentRequest(
                actor=actor,
                comment_id=comment_id,
                post_id=body.post_id if body else None,
            )
        )
    except (DomainError, ValueError) as e:
        raise to_http_error(e)


@router.get("/comment-count", response_model=CommentCountResponse)
async def comment_count(
    request: Request,
    site_counts_use_case: FromDishka[SiteCountsUseCase],
    authenticate_use_case: FromDishka[AuthenticateUseCase],
) -> CommentCountResponse:
    """Comment, user and post totals for the admin dashboard."""
    await require_admin(request, authenticate_use_case)
    counts = await site_counts_use_case.execute()
    return CommentCountResponse(
        count=counts.comments, user_count=counts.users, post_count=counts.posts
    )
