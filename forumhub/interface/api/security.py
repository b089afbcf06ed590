"""Cookie session helpers for routes."""

import logfire
from fastapi import HTTPException, Request, Response, status

from forumhub.application.usecase.auth import AuthenticateRequest, AuthenticateUseCase
from forumhub.config import AuthSettings
from forumhub.domain.error import NotFoundError
from forumhub.domain.model import AuthContext
from forumhub.interface.api.errors import ACCESS_DENIED
from forumhub.util.jwt import JWTError


async def require_user(
    request: Request, authenticate: AuthenticateUseCase
) -> AuthContext:
    """Resolve the session cookie into the authenticated principal.

    Args:
        request: Incoming request carrying the cookie
        authenticate: Authenticate use case

    Returns:
        The authenticated principal

    Raises:
        HTTPException: 401 without a cookie or when the user is gone,
            400 when the token is invalid or expired
    """
    token = request.cookies.get(authenticate.cookie_name)
    if not token:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=ACCESS_DENIED)

    try:
        return await authenticate.execute(AuthenticateRequest(token=token))
    except JWTError:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid Token")
    except NotFoundError:
        logfire.warn("Token for unknown user", path=request.url.path)
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=ACCESS_DENIED)


async def require_admin(
    request: Request, authenticate: AuthenticateUseCase
) -> AuthContext:
    """Like require_user, but the principal must also be an admin.

    Raises:
        HTTPException: 401 when the principal is not an admin
    """
    actor = await require_user(request, authenticate)
    if not actor.is_admin:
        logfire.warn("Admin access denied", email=actor.email.root, path=request.url.path)
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=ACCESS_DENIED)
    return actor


def set_auth_cookie(response: Response, token: str, settings: AuthSettings) -> None:
    """Set the http-only session cookie."""
    response.set_cookie(
        key=settings.cookie_name,
        value=token,
        httponly=True,
        secure=settings.cookie_secure,
        samesite=settings.cookie_samesite,
        max_age=settings.jwt_expiry_hours * 3600,
    )


def clear_auth_cookie(response: Response, settings: AuthSettings) -> None:
    """Clear the session cookie. Attributes must match the ones it was set with."""
    response.delete_cookie(
        key=settings.cookie_name,
        httponly=True,
        secure=settings.cookie_secure,
        samesite=settings.cookie_samesite,
    )
