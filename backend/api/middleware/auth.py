"""
Bearer token authentication.

Verifies session tokens issued at login and resolves them to the
stored user. Every failure is a 401 with the same shape.
"""

from typing import Optional
from fastapi import Depends, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from modules.auth.interfaces import IAuthService
from modules.auth.exceptions import MissingTokenError, UserNotFoundError
from shared.exceptions import AuthenticationError
from shared.models import AuthenticatedUser

from ..dependencies import get_auth_service
from ..errors import ApiError

# Bearer token extractor
bearer_scheme = HTTPBearer(auto_error=False)


class AuthError(ApiError):
    """401 carrying the Bearer challenge."""

    def __init__(self, detail: str, code: Optional[str] = None):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=detail,
            code=code,
            headers={"WWW-Authenticate": "Bearer"},
        )


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    auth: IAuthService = Depends(get_auth_service),
) -> AuthenticatedUser:
    """
    Dependency that requires authentication.

    Usage:
        @router.get("/protected")
        async def protected_route(user: AuthenticatedUser = Depends(get_current_user)):
            return {"user_id": user.id}
    """
    if credentials is None:
        missing = MissingTokenError()
        raise AuthError(missing.message, missing.code)

    try:
        return await auth.authenticate(credentials.credentials)
    except UserNotFoundError as e:
        raise AuthError("Not found", e.code)
    except AuthenticationError as e:
        raise AuthError(e.message, e.code)
