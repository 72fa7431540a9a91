"""
Session token issuing and verification.

Tokens are HS256 JWTs signed with the server secret. They are stateless:
there is no revocation list, so a token stays valid until it expires.
"""

from datetime import datetime, timedelta, timezone
from typing import Callable, Optional

import jwt
from pydantic import ValidationError as PydanticValidationError

from shared.exceptions import AuthenticationError

from .exceptions import InvalidTokenError, MissingTokenError
from .models import TokenPayload, User


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TokenManager:
    """Issues and verifies session tokens."""

    def __init__(
        self,
        secret: str,
        algorithm: str = "HS256",
        expiry: timedelta = timedelta(days=7),
        now: Optional[Callable[[], datetime]] = None,
    ):
        self._secret = secret
        self._algorithm = algorithm
        self._expiry = expiry
        self._now = now or _utcnow

    def _require_secret(self) -> str:
        if not self._secret:
            raise AuthenticationError(
                "Server authentication not configured",
                code="AUTH_NOT_CONFIGURED",
            )
        return self._secret

    def issue(self, user: User) -> tuple[str, datetime]:
        """
        Sign a token for a user.

        Returns:
            The encoded token and its expiry time
        """
        secret = self._require_secret()
        issued_at = self._now()
        expires_at = issued_at + self._expiry
        payload = {
            "sub": user.id,
            "phone": user.phone,
            "iat": int(issued_at.timestamp()),
            "exp": int(expires_at.timestamp()),
        }
        token = jwt.encode(payload, secret, algorithm=self._algorithm)
        return token, expires_at

    def verify(self, token: str) -> TokenPayload:
        """
        Decode and validate a token.

        Raises:
            MissingTokenError: If the token is empty
            InvalidTokenError: For any malformed, tampered, or expired token,
                or one whose claims have the wrong types
        """
        if not token:
            raise MissingTokenError()

        secret = self._require_secret()

        try:
            payload = jwt.decode(
                token,
                secret,
                algorithms=[self._algorithm],
                options={"require": ["sub", "exp", "iat"]},
            )
            return TokenPayload(**payload)
        except (jwt.PyJWTError, PydanticValidationError):
            raise InvalidTokenError()
