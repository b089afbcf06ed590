"""In-memory tag repository for testing."""

from typing import Optional

from forumhub.domain.model.tag import Tag
from forumhub.domain.repository.tag import TagRepository
from forumhub.domain.value import TagId, TagName


class InMemoryTagRepository(TagRepository):
    """In-memory implementation of TagRepository for testing."""

    def __init__(self) -> None:
        self._tags: dict[TagId, Tag] = {}

    async def save(self, tag: Tag) -> Tag:
        """Save a tag."""
        self._tags[tag.id] = tag
        return tag

    async def find_by_name(self, name: TagName) -> Optional[Tag]:
        """Find tag by name."""
        for tag in self._tags.values():
            if tag.name == name:
                return tag
        return None

    async def find_all(self) -> list[Tag]:
        """Find all tags ordered by name."""
        return sorted(self._tags.values(), key=lambda t: t.name.root)
