"""Tag domain service."""

from uuid import uuid4

import logfire

from forumhub.domain.model.tag import Tag
from forumhub.domain.repository import TagRepository
from forumhub.domain.value import TagId, TagName

from .base import Service


class TagService(Service):
    """Domain service for tag operations."""

    def __init__(self, tag_repository: TagRepository) -> None:
        """Initialize tag service.

        Args:
            tag_repository: Tag repository
        """
        self.tag_repository = tag_repository

    async def create_tag(self, name: TagName) -> Tag | None:
        """Create a tag unless one with this name exists.

        Args:
            name: Tag name

        Returns:
            The new tag, or None if the name is already taken
        """
        with logfire.span("tag_service.create_tag", name=name.root):
            existing = await self.tag_repository.find_by_name(name)
            if existing:
                logfire.info("Tag already exists", name=name.root)
                return None

            tag = await self.tag_repository.save(Tag(id=TagId(uuid4()), name=name))
            logfire.info("Tag created", tag_id=str(tag.id), name=name.root)
            return tag

    async def list_tags(self) -> list[Tag]:
        """List all tags ordered by name."""
        with logfire.span("tag_service.list_tags"):
            return await self.tag_repository.find_all()
