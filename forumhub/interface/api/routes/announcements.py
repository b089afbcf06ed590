"""Announcement routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request
from pydantic import Field

from forumhub.application.usecase.announcement import (
    AnnouncementItem,
    CreateAnnouncementRequest,
    CreateAnnouncementUseCase,
    ListAnnouncementsRequest,
    ListAnnouncementsUseCase,
)
from forumhub.application.usecase.auth import AuthenticateUseCase
from forumhub.application.usecase.base import CamelModel, CountResponse, SuccessResponse
from forumhub.config import PaginationSettings
from forumhub.domain.error import DomainError
from forumhub.domain.service import AnnouncementService
from forumhub.interface.api.errors import to_http_error
from forumhub.interface.api.security import require_admin

router = APIRouter(tags=["announcements"], route_class=DishkaRoute)


class CreateAnnouncementAPIRequest(CamelModel):
    """API request for publishing an announcement."""

    title: str = Field(min_length=1, max_length=300)
    description: str = Field(default="", max_length=10000)
    author_name: str = ""
    author_image: str | None = None


@router.post("/new-announcement", response_model=SuccessResponse)
async def create_announcement(
    body: CreateAnnouncementAPIRequest,
    request: Request,
    create_announcement_use_case: FromDishka[CreateAnnouncementUseCase],
    authenticate_use_case: FromDishka[AuthenticateUseCase],
) -> SuccessResponse:
    """Publish an announcement. Admin only.

    Args:
        body: Announcement data
        request: Incoming request (session cookie)
        create_announcement_use_case: Create announcement use case from DI
        authenticate_use_case: Authenticate use case from DI

    Returns:
        Success acknowledgement
    """
    await require_admin(request, authenticate_use_case)
    try:
        return await create_announcement_use_case.execute(
            CreateAnnouncementRequest(
                title=body.title,
                description=body.description,
                author_name=body.author_name,
                author_image=body.author_image,
            )
        )
    except (DomainError, ValueError) as e:
        raise to_http_error(e)


@router.get("/all-announcements", response_model=list[AnnouncementItem])
async def list_announcements(
    list_announcements_use_case: FromDishka[ListAnnouncementsUseCase],
    pagination: FromDishka[PaginationSettings],
) -> list[AnnouncementItem]:
    """The newest announcements."""
    return await list_announcements_use_case.execute(
        ListAnnouncementsRequest(limit=pagination.announcements)
    )


@router.get("/announcement-count", response_model=CountResponse)
async def announcement_count(
    announcement_service: FromDishka[AnnouncementService],
) -> CountResponse:
    return CountResponse(count=await announcement_service.count())
