"""User routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request

from forumhub.application.usecase.auth import AuthenticateUseCase
from forumhub.application.usecase.base import CamelModel, CountResponse, SuccessResponse
from forumhub.application.usecase.user import (
    GetProfileRequest,
    GetProfileUseCase,
    ListUsersRequest,
    ListUsersUseCase,
    RegisterUserRequest,
    RegisterUserUseCase,
    ToggleAdminRequest,
    ToggleAdminUseCase,
    UpdateAboutMeRequest,
    UpdateAboutMeUseCase,
    UpgradeBadgeRequest,
    UpgradeBadgeUseCase,
    UserItem,
)
from forumhub.config import PaginationSettings
from forumhub.domain.error import DomainError
from forumhub.domain.service import UserService
from forumhub.interface.api.errors import to_http_error
from forumhub.interface.api.pagination import page_window
from forumhub.interface.api.security import require_admin, require_user

router = APIRouter(tags=["users"], route_class=DishkaRoute)


class RegisterUserAPIRequest(CamelModel):
    """API request for registering a user after sign-up on the frontend."""

    email: str | None = None
    username: str = ""
    photo_url: str | None = None


class UpdateAboutMeAPIRequest(CamelModel):
    """API request for editing the profile blurb."""

    about_me: str | None = None


@router.post("/new-user", response_model=SuccessResponse)
async def register_user(
    body: RegisterUserAPIRequest,
    register_user_use_case: FromDishka[RegisterUserUseCase],
) -> SuccessResponse:
    """Record a user the first time they sign in.

    Registering an existing email is a no-op and still succeeds.

    Args:
        body: User data
        register_user_use_case: Register user use case from DI

    Returns:
        Success acknowledgement

    Raises:
        HTTPException: 400 if the email is missing or malformed
    """
    try:
        return await register_user_use_case.execute(
            RegisterUserRequest(
                email=body.email or "",
                username=body.username,
                photo_url=body.photo_url,
            )
        )
    except (DomainError, ValueError) as e:
        raise to_http_error(e)


@router.get("/my-profile", response_model=UserItem)
async def get_my_profile(
    request: Request,
    get_profile_use_case: FromDishka[GetProfileUseCase],
    authenticate_use_case: FromDishka[AuthenticateUseCase],
    email: str | None = None,
) -> UserItem:
    """Get a user's profile. Requires authentication."""
    await require_user(request, authenticate_use_case)
    try:
        return await get_profile_use_case.execute(GetProfileRequest(email=email or ""))
    except (DomainError, ValueError) as e:
        raise to_http_error(e)


@router.get("/all-users", response_model=list[UserItem])
async def list_users(
    request: Request,
    list_users_use_case: FromDishka[ListUsersUseCase],
    authenticate_use_case: FromDishka[AuthenticateUseCase],
    pagination: FromDishka[PaginationSettings],
    page: str | None = None,
    limit: str | None = None,
    search: str | None = None,
) -> list[UserItem]:
    """User directory, optionally filtered by username. Admin only.

    Args:
        request: Incoming request (session cookie)
        list_users_use_case: List users use case from DI
        authenticate_use_case: Authenticate use case from DI
        pagination: Page size defaults from DI
        page: 1-based page number
        limit: Page size (default 10)
        search: Case-insensitive username substring

    Returns:
        Users on the requested page
    """
    await require_admin(request, authenticate_use_case)
    size, offset = page_window(page, limit, pagination.users_limit, pagination.max_limit)
    try:
        return await list_users_use_case.execute(
            ListUsersRequest(search=search, limit=size, offset=offset)
        )
    except (DomainError, ValueError) as e:
        raise to_http_error(e)


@router.patch("/users/make-admin", response_model=SuccessResponse)
async def toggle_admin(
    request: Request,
    toggle_admin_use_case: FromDishka[ToggleAdminUseCase],
    authenticate_use_case: FromDishka[AuthenticateUseCase],
    email: str | None = None,
) -> SuccessResponse:
    """Toggle a user between user and admin. Admin only."""
    await require_admin(request, authenticate_use_case)
    try:
        return await toggle_admin_use_case.execute(ToggleAdminRequest(email=email or ""))
    except (DomainError, ValueError) as e:
        raise to_http_error(e)


@router.patch("/update-badge", response_model=SuccessResponse)
async def upgrade_badge(
    request: Request,
    upgrade_badge_use_case: FromDishka[UpgradeBadgeUseCase],
    authenticate_use_case: FromDishka[AuthenticateUseCase],
    email: str | None = None,
) -> SuccessResponse:
    """Award the Gold membership badge."""
    await require_user(request, authenticate_use_case)
    try:
        return await upgrade_badge_use_case.execute(
            UpgradeBadgeRequest(email=email or "")
        )
    except (DomainError, ValueError) as e:
        raise to_http_error(e)


@router.patch("/edit-about-me", response_model=SuccessResponse)
async def edit_about_me(
    body: UpdateAboutMeAPIRequest,
    request: Request,
    update_about_me_use_case: FromDishka[UpdateAboutMeUseCase],
    authenticate_use_case: FromDishka[AuthenticateUseCase],
    email: str | None = None,
) -> SuccessResponse:
    """Edit the profile blurb."""
    await require_user(request, authenticate_use_case)
    try:
        return await update_about_me_use_case.execute(
            UpdateAboutMeRequest(email=email or "", about_me=body.about_me)
        )
    except (DomainError, ValueError) as e:
        raise to_http_error(e)


@router.get("/user-count", response_model=CountResponse)
async def user_count(
    request: Request,
    user_service: FromDishka[UserService],
    authenticate_use_case: FromDishka[AuthenticateUseCase],
) -> CountResponse:
    """Total number of users. Admin only."""
    await require_admin(request, authenticate_use_case)
    return CountResponse(count=await user_service.count())
