"""Get profile use case."""

from datetime import datetime

from pydantic import BaseModel

from forumhub.application.usecase.base import BaseUseCase, CamelModel, parse_email
from forumhub.domain.model import User
from forumhub.domain.service import UserService
from forumhub.domain.value import Badge, Role


class UserItem(CamelModel):
    """User profile in responses."""

    id: str
    email: str
    username: str
    photo_url: str | None
    role: Role
    badge: Badge
    about_me: str | None
    created_at: datetime

    @classmethod
    def from_user(cls, user: User) -> "UserItem":
        return cls(
            id=str(user.id),
            email=user.email.root,
            username=user.username,
            photo_url=user.photo_url,
            role=user.role,
            badge=user.badge,
            about_me=user.about_me,
            created_at=user.created_at,
        )


class GetProfileRequest(BaseModel):
    """Get profile request."""

    email: str


class GetProfileUseCase(BaseUseCase):
    """Use case for reading a user's profile by email."""

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(self, request: GetProfileRequest) -> UserItem:
        """Execute get profile flow.

        Raises:
            ValidationError: If the email is blank
            NotFoundError: If user not found
        """
        user = await self.user_service.get_by_email(parse_email(request.email))
        return UserItem.from_user(user)
