"""Tag routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request

from forumhub.application.usecase.auth import AuthenticateUseCase
from forumhub.application.usecase.base import CamelModel, SuccessResponse
from forumhub.application.usecase.tag import (
    CreateTagRequest,
    CreateTagUseCase,
    ListTagsUseCase,
    TagItem,
)
from forumhub.domain.error import DomainError
from forumhub.interface.api.errors import to_http_error
from forumhub.interface.api.security import require_admin

router = APIRouter(tags=["tags"], route_class=DishkaRoute)


class CreateTagAPIRequest(CamelModel):
    """API request for creating a tag."""

    tag_name: str = ""


@router.post("/new-tag", response_model=SuccessResponse)
async def create_tag(
    body: CreateTagAPIRequest,
    request: Request,
    create_tag_use_case: FromDishka[CreateTagUseCase],
    authenticate_use_case: FromDishka[AuthenticateUseCase],
) -> SuccessResponse:
    """Create a tag. Admin only.

    Returns:
        success true when created, false when the name already exists
    """
    await require_admin(request, authenticate_use_case)
    try:
        return await create_tag_use_case.execute(CreateTagRequest(tag_name=body.tag_name))
    except (DomainError, ValueError) as e:
        raise to_http_error(e)


@router.get("/all-tags", response_model=list[TagItem])
async def list_tags(list_tags_use_case: FromDishka[ListTagsUseCase]) -> list[TagItem]:
    """All tags, for the post composer."""
    return await list_tags_use_case.execute()
