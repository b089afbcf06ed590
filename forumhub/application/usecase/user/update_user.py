"""Update user use cases: role, badge and about-me."""

from pydantic import BaseModel

from forumhub.application.usecase.base import BaseUseCase, SuccessResponse, parse_email
from forumhub.domain.service import UserService


class ToggleAdminRequest(BaseModel):
    """Toggle admin request."""

    email: str


class ToggleAdminUseCase(BaseUseCase):
    """Use case for flipping a user between user and admin roles."""

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(self, request: ToggleAdminRequest) -> SuccessResponse:
        """Execute toggle admin flow.

        Raises:
            ValidationError: If the email is blank
            NotFoundError: If user not found
        """
        await self.user_service.toggle_admin(parse_email(request.email))
        return SuccessResponse()


class UpgradeBadgeRequest(BaseModel):
    """Upgrade badge request."""

    email: str


class UpgradeBadgeUseCase(BaseUseCase):
    """Use case for awarding the Gold membership badge."""

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(self, request: UpgradeBadgeRequest) -> SuccessResponse:
        """Execute upgrade badge flow.

        Raises:
            ValidationError: If the email is blank
            NotFoundError: If user not found
        """
        await self.user_service.upgrade_badge(parse_email(request.email))
        return SuccessResponse()


class UpdateAboutMeRequest(BaseModel):
    """Update about-me request."""

    email: str
    about_me: str | None = None


class UpdateAboutMeUseCase(BaseUseCase):
    """Use case for editing the about-me text on a profile."""

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(self, request: UpdateAboutMeRequest) -> SuccessResponse:
        """Execute update about-me flow.

        Raises:
            ValidationError: If the email is blank
            NotFoundError: If user not found
        """
        await self.user_service.update_about_me(
            parse_email(request.email), request.about_me
        )
        return SuccessResponse()
