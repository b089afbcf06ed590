"""Announcement repository interface."""

from abc import ABC, abstractmethod
from typing import List

from forumhub.domain.model.announcement import Announcement


class AnnouncementRepository(ABC):
    """Repository interface for Announcement entity."""

    @abstractmethod
    async def save(self, announcement: Announcement) -> Announcement:
        """Insert a new announcement.

        Args:
            announcement: Announcement to save

        Returns:
            Saved announcement
        """
        pass

    @abstractmethod
    async def find_latest(self, limit: int = 3) -> List[Announcement]:
        """Find the most recent announcements, newest first.

        Args:
            limit: Maximum number of announcements to return

        Returns:
            List of announcements
        """
        pass

    @abstractmethod
    async def count(self) -> int:
        """Count all announcements."""
        pass
