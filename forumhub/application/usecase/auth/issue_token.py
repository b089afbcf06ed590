"""Issue token use case."""

from pydantic import BaseModel

from forumhub.application.usecase.base import BaseUseCase, parse_email
from forumhub.domain.service import JWTService, UserService


class IssueTokenRequest(BaseModel):
    """Issue token request."""

    email: str


class IssueTokenResponse(BaseModel):
    """Issue token response."""

    token: str
    user_id: str


class IssueTokenUseCase(BaseUseCase):
    """Use case for logging in a registered user by email."""

    def __init__(self, user_service: UserService, jwt_service: JWTService) -> None:
        """Initialize issue token use case.

        Args:
            user_service: User domain service
            jwt_service: JWT domain service
        """
        self.user_service = user_service
        self.jwt_service = jwt_service

    async def execute(self, request: IssueTokenRequest) -> IssueTokenResponse:
        """Look up the user and sign a session token for them.

        Args:
            request: Issue token request

        Returns:
            Signed token

        Raises:
            ValidationError: If the email is blank
            NotFoundError: If no user has this email
        """
        user = await self.user_service.get_by_email(parse_email(request.email))
        token = self.jwt_service.create_token(str(user.id), user.email.root)
        return IssueTokenResponse(token=token, user_id=str(user.id))
