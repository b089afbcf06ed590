"""Authenticate use case."""

from uuid import UUID

from pydantic import BaseModel

from forumhub.application.usecase.base import BaseUseCase
from forumhub.config import AuthSettings
from forumhub.domain.model import AuthContext
from forumhub.domain.service import JWTService, UserService
from forumhub.domain.value import UserId
from forumhub.util.jwt import JWTError


class AuthenticateRequest(BaseModel):
    """Authenticate request."""

    token: str  # JWT token from cookie


class AuthenticateUseCase(BaseUseCase):
    """Use case resolving the session cookie into an AuthContext.

    The role is read from the user record on every request, so a role
    change applies without re-issuing the token.
    """

    def __init__(
        self,
        jwt_service: JWTService,
        user_service: UserService,
        auth_settings: AuthSettings,
    ) -> None:
        """Initialize authenticate use case.

        Args:
            jwt_service: JWT domain service
            user_service: User domain service
            auth_settings: Authentication settings
        """
        self.jwt_service = jwt_service
        self.user_service = user_service
        self.cookie_name = auth_settings.cookie_name

    async def execute(self, request: AuthenticateRequest) -> AuthContext:
        """Verify the token and load the principal.

        Args:
            request: Authenticate request

        Returns:
            The authenticated principal

        Raises:
            JWTError: If the token is invalid or expired
            NotFoundError: If the token's user no longer exists
        """
        payload = self.jwt_service.verify_token(request.token)
        try:
            user_id = UserId(UUID(payload.user_id))
        except ValueError:
            raise JWTError("Invalid token")

        user = await self.user_service.get_by_id(user_id)
        return AuthContext(user_id=user.id, email=user.email, role=user.role)
