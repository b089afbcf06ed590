"""Announcement use cases."""

from datetime import datetime
from uuid import uuid4

import logfire
from pydantic import BaseModel, Field

from forumhub.application.usecase.base import BaseUseCase, CamelModel, SuccessResponse
from forumhub.domain.model import Announcement
from forumhub.domain.service import AnnouncementService
from forumhub.domain.value import AnnouncementId


class AnnouncementItem(CamelModel):
    """Announcement in responses."""

    id: str
    author_name: str
    author_image: str | None
    title: str
    description: str
    created_at: datetime

    @classmethod
    def from_announcement(cls, announcement: Announcement) -> "AnnouncementItem":
        return cls(
            id=str(announcement.id),
            author_name=announcement.author_name,
            author_image=announcement.author_image,
            title=announcement.title,
            description=announcement.description,
            created_at=announcement.created_at,
        )


class CreateAnnouncementRequest(BaseModel):
    """Create announcement request."""

    title: str
    description: str = ""
    author_name: str = ""
    author_image: str | None = None


class CreateAnnouncementUseCase(BaseUseCase):
    """Use case for publishing an announcement (admins only)."""

    def __init__(self, announcement_service: AnnouncementService) -> None:
        self.announcement_service = announcement_service

    async def execute(self, request: CreateAnnouncementRequest) -> SuccessResponse:
        """Execute create announcement flow.

        Raises:
            ValueError: If the title is empty
        """
        with logfire.span("create_announcement.execute", title=request.title):
            announcement = Announcement(
                id=AnnouncementId(uuid4()),
                author_name=request.author_name,
                author_image=request.author_image,
                title=request.title,
                description=request.description,
                created_at=datetime.now(),
            )
            await self.announcement_service.publish(announcement)
            return SuccessResponse()


class ListAnnouncementsRequest(BaseModel):
    """List announcements request."""

    limit: int = Field(default=3, ge=1, le=100)


class ListAnnouncementsUseCase(BaseUseCase):
    """Use case for the newest announcements."""

    def __init__(self, announcement_service: AnnouncementService) -> None:
        self.announcement_service = announcement_service

    async def execute(self, request: ListAnnouncementsRequest) -> list[AnnouncementItem]:
        announcements = await self.announcement_service.latest(request.limit)
        return [AnnouncementItem.from_announcement(a) for a in announcements]
