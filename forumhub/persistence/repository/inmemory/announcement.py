"""In-memory announcement repository for testing."""

from forumhub.domain.model.announcement import Announcement
from forumhub.domain.repository.announcement import AnnouncementRepository
from forumhub.domain.value import AnnouncementId


class InMemoryAnnouncementRepository(AnnouncementRepository):
    """In-memory implementation of AnnouncementRepository for testing."""

    def __init__(self) -> None:
        self._announcements: dict[AnnouncementId, Announcement] = {}

    async def save(self, announcement: Announcement) -> Announcement:
        self._announcements[announcement.id] = announcement
        return announcement

    async def find_latest(self, limit: int = 3) -> list[Announcement]:
        announcements = sorted(
            self._announcements.values(), key=lambda a: a.created_at, reverse=True
        )
        return announcements[:limit]

    async def count(self) -> int:
        return len(self._announcements)
