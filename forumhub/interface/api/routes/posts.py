"""Post routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query, Request
from pydantic import Field

from forumhub.application.usecase.auth import AuthenticateUseCase
from forumhub.application.usecase.base import CamelModel, CountResponse, SuccessResponse
from forumhub.application.usecase.post import (
    CreatePostRequest,
    CreatePostResponse,
    CreatePostUseCase,
    DeletePostRequest,
    DeletePostUseCase,
    GetPostRequest,
    GetPostUseCase,
    ListAuthorPostsRequest,
    ListAuthorPostsUseCase,
    ListPostsRequest,
    ListPostsUseCase,
    PostItem,
    UpdateVisibilityRequest,
    UpdateVisibilityUseCase,
)
from forumhub.application.usecase.stats import (
    AuthorPostCountRequest,
    AuthorPostCountUseCase,
)
from forumhub.config import PaginationSettings
from forumhub.domain.error import DomainError
from forumhub.domain.repository.post import PostSortOrder
from forumhub.domain.service import PostService
from forumhub.domain.value import Visibility
from forumhub.interface.api.errors import to_http_error
from forumhub.interface.api.pagination import page_window
from forumhub.interface.api.security import require_user

router = APIRouter(tags=["posts"], route_class=DishkaRoute)


class CreatePostAPIRequest(CamelModel):
    """API request for creating a post."""

    title: str = Field(min_length=1, max_length=300)
    description: str = Field(default="", max_length=10000)
    tags: list[str] = Field(default_factory=list)
    visibility: Visibility = Visibility.PUBLIC
    author_email: str | None = None
    author_name: str = ""
    author_image: str | None = None


class UpdateVisibilityAPIRequest(CamelModel):
    """API request for changing a post's visibility."""

    visibility: Visibility


@router.post("/new-post", response_model=CreatePostResponse)
async def create_post(
    body: CreatePostAPIRequest,
    request: Request,
    create_post_use_case: FromDishka[CreatePostUseCase],
    authenticate_use_case: FromDishka[AuthenticateUseCase],
) -> CreatePostResponse:
    """Create a new post.

    Requires authentication. The post is always authored by the logged-in
    user, whatever author email the body carries.

    Args:
        body: Post creation data
        request: Incoming request (session cookie)
        create_post_use_case: Create post use case from DI
        authenticate_use_case: Authenticate use case from DI

    Returns:
        Created post ID

    Raises:
        HTTPException: If not authenticated or validation fails
    """
    actor = await require_user(request, authenticate_use_case)
    try:
        return await create_post_use_case.execute(
            CreatePostRequest(
                actor=actor,
                title=body.title,
                description=body.description,
                tags=body.tags,
                visibility=body.visibility,
                author_email=body.author_email,
                author_name=body.author_name,
                author_image=body.author_image,
            )
        )
    except (DomainError, ValueError) as e:
        raise to_http_error(e)


@router.get("/all-posts", response_model=list[PostItem])
async def list_posts(
    list_posts_use_case: FromDishka[ListPostsUseCase],
    pagination: FromDishka[PaginationSettings],
    page: str | None = None,
    limit: str | None = None,
    search_term: str | None = Query(default=None, alias="searchTerm"),
) -> list[PostItem]:
    """List public posts, newest first, optionally filtered by tag.

    Args:
        list_posts_use_case: List posts use case from DI
        pagination: Page size defaults from DI
        page: 1-based page number
        limit: Page size (default 5)
        search_term: Case-insensitive substring of a tag name

    Returns:
        Posts on the requested page
    """
    size, offset = page_window(page, limit, pagination.posts_limit, pagination.max_limit)
    try:
        return await list_posts_use_case.execute(
            ListPostsRequest(
                sort=PostSortOrder.RECENT,
                tag_search=search_term,
                limit=size,
                offset=offset,
            )
        )
    except (DomainError, ValueError) as e:
        raise to_http_error(e)


@router.get("/all-posts/sort-by-popularity", response_model=list[PostItem])
async def list_popular_posts(
    list_posts_use_case: FromDishka[ListPostsUseCase],
    pagination: FromDishka[PaginationSettings],
    page: str | None = None,
    limit: str | None = None,
) -> list[PostItem]:
    """List public posts by votesCount, highest first (ties newest first)."""
    size, offset = page_window(page, limit, pagination.max_limit, pagination.max_limit)
    try:
        return await list_posts_use_case.execute(
            ListPostsRequest(sort=PostSortOrder.POPULAR, limit=size, offset=offset)
        )
    except (DomainError, ValueError) as e:
        raise to_http_error(e)


@router.get("/post-details/{post_id}", response_model=PostItem)
async def get_post(
    post_id: str,
    get_post_use_case: FromDishka[GetPostUseCase],
) -> PostItem:
    """Get a single post with its votes.

    Raises:
        HTTPException: 400 for a malformed ID, 404 if the post doesn't exist
    """
    try:
        return await get_post_use_case.execute(GetPostRequest(post_id=post_id))
    except (DomainError, ValueError) as e:
        raise to_http_error(e)


@router.get("/post-count", response_model=CountResponse)
async def post_count(post_service: FromDishka[PostService]) -> CountResponse:
    """Total number of posts."""
    return CountResponse(count=await post_service.count())


@router.get("/my-posts", response_model=list[PostItem])
async def list_my_posts(
    request: Request,
    list_author_posts_use_case: FromDishka[ListAuthorPostsUseCase],
    authenticate_use_case: FromDishka[AuthenticateUseCase],
    pagination: FromDishka[PaginationSettings],
    email: str | None = None,
    page: str | None = None,
    limit: str | None = None,
) -> list[PostItem]:
    """List an author's posts (private ones included), newest first.

    Requires authentication.
    """
    await require_user(request, authenticate_use_case)
    size, offset = page_window(
        page, limit, pagination.my_posts_limit, pagination.max_limit
    )
    try:
        return await list_author_posts_use_case.execute(
            ListAuthorPostsRequest(email=email or "", limit=size, offset=offset)
        )
    except (DomainError, ValueError) as e:
        raise to_http_error(e)


@router.get("/my-recent-posts", response_model=list[PostItem])
async def list_my_recent_posts(
    request: Request,
    list_author_posts_use_case: FromDishka[ListAuthorPostsUseCase],
    authenticate_use_case: FromDishka[AuthenticateUseCase],
    pagination: FromDishka[PaginationSettings],
    email: str | None = None,
) -> list[PostItem]:
    """An author's three newest posts, for the dashboard."""
    await require_user(request, authenticate_use_case)
    try:
        return await list_author_posts_use_case.execute(
            ListAuthorPostsRequest(email=email or "", limit=pagination.recent_posts)
        )
    except (DomainError, ValueError) as e:
        raise to_http_error(e)


@router.get("/user-post-count", response_model=CountResponse)
async def user_post_count(
    request: Request,
    author_post_count_use_case: FromDishka[AuthorPostCountUseCase],
    authenticate_use_case: FromDishka[AuthenticateUseCase],
    email: str | None = None,
) -> CountResponse:
    """Number of posts written by a user. Requires authentication."""
    await require_user(request, authenticate_use_case)
    try:
        return await author_post_count_use_case.execute(
            AuthorPostCountRequest(email=email or "")
        )
    except (DomainError, ValueError) as e:
        raise to_http_error(e)


@router.patch("/update-post-visibility/{post_id}", response_model=SuccessResponse)
async def update_post_visibility(
    post_id: str,
    body: UpdateVisibilityAPIRequest,
    request: Request,
    update_visibility_use_case: FromDishka[UpdateVisibilityUseCase],
    authenticate_use_case: FromDishka[AuthenticateUseCase],
) -> SuccessResponse:
    """Make a post public or private.

    Only the author or an admin may change visibility.

    Raises:
        HTTPException: 403 for other users, 404 if the post doesn't exist
    """
    actor = await require_user(request, authenticate_use_case)
    try:
        return await update_visibility_use_case.execute(
            UpdateVisibilityRequest(
                actor=actor, post_id=post_id, visibility=body.visibility
            )
        )
    except (DomainError, ValueError) as e:
        raise to_http_error(e)


@router.delete("/delete-post/{post_id}", response_model=SuccessResponse)
async def delete_post(
    post_id: str,
    request: Request,
    delete_post_use_case: FromDishka[DeletePostUseCase],
    authenticate_use_case: FromDishka[AuthenticateUseCase],
) -> SuccessResponse:
    """Delete a post together with its comments and votes.

    Only the author or an admin may delete a post.
    """
    actor = await require_user(request, authenticate_use_case)
    try:
        return await delete_post_use_case.execute(
            DeletePostRequest(actor=actor, post_id=post_id)
        )
    except (DomainError, ValueError) as e:
        raise to_http_error(e)
