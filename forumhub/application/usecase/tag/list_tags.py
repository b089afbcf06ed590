"""List tags use case."""

from datetime import datetime

from forumhub.application.usecase.base import BaseUseCase, CamelModel
from forumhub.domain.service import TagService


class TagItem(CamelModel):
    """Tag in responses."""

    id: str
    tag_name: str
    created_at: datetime


class ListTagsUseCase(BaseUseCase):
    """Use case for listing all tags."""

    def __init__(self, tag_service: TagService) -> None:
        """Initialize list tags use case.

        Args:
            tag_service: Tag domain service
        """
        self.tag_service = tag_service

    async def execute(self, request: None = None) -> list[TagItem]:
        """Execute list tags flow.

        Returns:
            All tags ordered by name
        """
        tags = await self.tag_service.list_tags()
        return [
            TagItem(id=str(tag.id), tag_name=tag.name.root, created_at=tag.created_at)
            for tag in tags
        ]
