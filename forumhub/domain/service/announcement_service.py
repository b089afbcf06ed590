"""Announcement domain service."""

import logfire

from forumhub.domain.model.announcement import Announcement
from forumhub.domain.repository import AnnouncementRepository

from .base import Service


class AnnouncementService(Service):
    """Domain service for announcements."""

    def __init__(self, announcement_repository: AnnouncementRepository) -> None:
        self.announcement_repository = announcement_repository

    async def publish(self, announcement: Announcement) -> Announcement:
        """Publish a new announcement."""
        with logfire.span(
            "announcement_service.publish",
            announcement_id=str(announcement.id),
            title=announcement.title,
        ):
            saved = await self.announcement_repository.save(announcement)
            logfire.info("Announcement published", announcement_id=str(saved.id))
            return saved

    async def latest(self, limit: int) -> list[Announcement]:
        """Get the newest announcements."""
        with logfire.span("announcement_service.latest", limit=limit):
            return await self.announcement_repository.find_latest(limit=limit)

    async def count(self) -> int:
        return await self.announcement_repository.count()
