"""Register user use case."""

from pydantic import BaseModel

from forumhub.application.usecase.base import BaseUseCase, SuccessResponse, parse_email
from forumhub.domain.service import UserService


class RegisterUserRequest(BaseModel):
    """Register user request."""

    email: str
    username: str = ""
    photo_url: str | None = None


class RegisterUserUseCase(BaseUseCase):
    """Use case for storing a user after the client signs them in.

    Registering an existing email is a no-op: the stored profile and role
    are kept.
    """

    def __init__(self, user_service: UserService) -> None:
        """Initialize register user use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: RegisterUserRequest) -> SuccessResponse:
        """Execute register user flow.

        Args:
            request: Register user request

        Returns:
            Always a success acknowledgement

        Raises:
            ValidationError: If the email is blank or malformed
        """
        await self.user_service.register(
            email=parse_email(request.email),
            username=request.username.strip(),
            photo_url=request.photo_url,
        )
        return SuccessResponse()
