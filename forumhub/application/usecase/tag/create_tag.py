"""Create tag use case."""

from pydantic import BaseModel

from forumhub.application.usecase.base import BaseUseCase, SuccessResponse
from forumhub.domain.error import ValidationError
from forumhub.domain.service import TagService
from forumhub.domain.value import TagName


class CreateTagRequest(BaseModel):
    """Create tag request."""

    tag_name: str


class CreateTagUseCase(BaseUseCase):
    """Use case for adding a tag to the curated list (admins only)."""

    def __init__(self, tag_service: TagService) -> None:
        """Initialize create tag use case.

        Args:
            tag_service: Tag domain service
        """
        self.tag_service = tag_service

    async def execute(self, request: CreateTagRequest) -> SuccessResponse:
        """Execute create tag flow.

        Args:
            request: Create tag request

        Returns:
            success=True when created, success=False when the name is taken

        Raises:
            ValidationError: If the tag name is blank or too long
        """
        try:
            name = TagName(request.tag_name)
        except ValueError:
            raise ValidationError("Tag name must be 1-50 characters")

        tag = await self.tag_service.create_tag(name)
        return SuccessResponse(success=tag is not None)
