"""Authentication routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Response, status
from pydantic import BaseModel

from forumhub.application.usecase.auth import IssueTokenRequest, IssueTokenUseCase
from forumhub.application.usecase.base import SuccessResponse
from forumhub.config import AuthSettings
from forumhub.domain.error import DomainError, NotFoundError
from forumhub.interface.api.errors import to_http_error
from forumhub.interface.api.security import clear_auth_cookie, set_auth_cookie

router = APIRouter(tags=["auth"], route_class=DishkaRoute)


class IssueTokenAPIRequest(BaseModel):
    """API request for logging in."""

    email: str | None = None


@router.post("/jwt", response_model=SuccessResponse)
async def issue_token(
    request: IssueTokenAPIRequest,
    response: Response,
    issue_token_use_case: FromDishka[IssueTokenUseCase],
    auth_settings: FromDishka[AuthSettings],
) -> SuccessResponse:
    """Log a registered user in by setting the session cookie.

    Args:
        request: Login data
        response: Outgoing response the cookie is set on
        issue_token_use_case: Issue token use case from DI
        auth_settings: Cookie settings from DI

    Returns:
        Success acknowledgement

    Raises:
        HTTPException: 401 if no user has this email
    """
    try:
        result = await issue_token_use_case.execute(
            IssueTokenRequest(email=request.email or "")
        )
    except NotFoundError:
        logfire.info("Login attempt for unknown email")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail="User not found"
        )
    except (DomainError, ValueError) as e:
        raise to_http_error(e)

    set_auth_cookie(response, result.token, auth_settings)
    logfire.info("User logged in", user_id=result.user_id)
    return SuccessResponse()


@router.post("/logout", response_model=SuccessResponse)
async def logout(
    response: Response, auth_settings: FromDishka[AuthSettings]
) -> SuccessResponse:
    """Clear the session cookie."""
    clear_auth_cookie(response, auth_settings)
    return SuccessResponse()
