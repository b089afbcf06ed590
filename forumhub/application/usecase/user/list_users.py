"""List users use case."""

import logfire
from pydantic import BaseModel, Field

from forumhub.application.usecase.base import BaseUseCase
from forumhub.application.usecase.user.get_profile import UserItem
from forumhub.domain.service import UserService


class ListUsersRequest(BaseModel):
    """List users request."""

    search: str | None = None  # Username substring
    limit: int = Field(default=10, ge=1, le=100)
    offset: int = Field(default=0, ge=0)


class ListUsersUseCase(BaseUseCase):
    """Use case for the admin user directory."""

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(self, request: ListUsersRequest) -> list[UserItem]:
        """Execute list users flow.

        Args:
            request: List users request with search and pagination

        Returns:
            Users on the requested page
        """
        with logfire.span(
            "list_users.execute",
            search=request.search,
            limit=request.limit,
            offset=request.offset,
        ):
            users = await self.user_service.list_users(
                search=request.search, limit=request.limit, offset=request.offset
            )
            return [UserItem.from_user(user) for user in users]
