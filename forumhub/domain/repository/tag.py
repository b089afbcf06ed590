"""Tag repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from forumhub.domain.model.tag import Tag
from forumhub.domain.value import TagName


class TagRepository(ABC):
    """Repository interface for Tag aggregate."""

    @abstractmethod
    async def save(self, tag: Tag) -> Tag:
        """Insert a new tag.

        Args:
            tag: Tag to save

        Returns:
            Saved tag
        """
        pass

    @abstractmethod
    async def find_by_name(self, name: TagName) -> Optional[Tag]:
        """Find tag by name.

        Args:
            name: Tag name

        Returns:
            Tag if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self) -> list[Tag]:
        """Find all tags ordered by name."""
        pass
