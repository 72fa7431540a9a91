"""
Authentication module interfaces.

Other modules should depend on IAuthService, not the concrete implementation.
The service itself depends on IUserRepository and IOtpSender, which lets
tests swap in an in-memory store and a capturing sender.
"""

from datetime import datetime
from typing import Protocol, Optional, runtime_checkable

from shared.models import AuthenticatedUser

from .models import (
    LoginResponse,
    RegisterRequest,
    User,
)


@runtime_checkable
class IUserRepository(Protocol):
    """
    Persistence contract for user records.

    Every mutation is a single-row update so concurrent requests for the
    same user cannot lose each other's writes.
    """

    def create_user(self, phone: str, email: str, password_hash: str) -> User:
        """
        Insert a new user.

        Raises:
            DuplicateIdentityError: If the phone or email is already taken
        """
        ...

    def get_by_id(self, user_id: str) -> Optional[User]: ...

    def get_by_phone(self, phone: str) -> Optional[User]: ...

    def get_by_email(self, email: str) -> Optional[User]: ...

    def find_by_identifier(self, identifier: str) -> Optional[User]:
        """Look a user up by phone number or email."""
        ...

    def update_password(self, user_id: str, password_hash: str) -> None: ...

    def set_otp(self, user_id: str, code: str, expires_at: datetime) -> None:
        """Store a reset code, replacing any pending one."""
        ...

    def clear_otp(self, user_id: str, code: Optional[str] = None) -> bool:
        """
        Clear the pending reset code.

        When ``code`` is given, only a pending code equal to it is cleared.

        Returns:
            True if a row was updated
        """
        ...

    def reset_password(self, user_id: str, code: str, password_hash: str) -> bool:
        """
        Store a new password hash and clear the reset code in one write.

        The write only applies while ``code`` is still the pending code.

        Returns:
            True if the password was changed
        """
        ...

    def add_bookmark(self, user_id: str, course_id: str) -> None:
        """Add a course to the user's bookmarks (no-op if present)."""
        ...

    def remove_bookmark(self, user_id: str, course_id: str) -> None:
        """Remove a course from the user's bookmarks (no-op if absent)."""
        ...

    def get_bookmark_ids(self, user_id: str) -> list[str]: ...


@runtime_checkable
class IOtpSender(Protocol):
    """Delivers a password-reset code to the owner of a phone number."""

    async def send(self, phone: str, code: str) -> None: ...


@runtime_checkable
class IAuthService(Protocol):
    """
    Interface for account and session operations.

    This protocol defines the contract that the auth module exposes
    to the API layer and to other modules.
    """

    async def register(self, request: RegisterRequest) -> User:
        """
        Create an account.

        Raises:
            PasswordMismatchError, InvalidPhoneError, DuplicateIdentityError
        """
        ...

    async def login(self, identifier: str, password: str) -> LoginResponse:
        """
        Check credentials and issue a session token.

        Raises:
            InvalidCredentialsError: For an unknown user or a wrong password
        """
        ...

    async def authenticate(self, token: str) -> AuthenticatedUser:
        """
        Resolve a bearer token to the user it was issued to.

        Raises:
            MissingTokenError, InvalidTokenError, UserNotFoundError
        """
        ...

    async def request_otp(self, phone: str) -> None:
        """
        Issue a reset code and hand it to the OTP sender.

        Raises:
            UserNotFoundError: If no user has this phone number
        """
        ...

    async def verify_otp(self, phone: str, code: str) -> None:
        """
        Check a reset code without consuming it.

        Raises:
            UserNotFoundError, NoPendingOtpError, OtpMismatchError, OtpExpiredError
        """
        ...

    async def reset_password(self, phone: str, code: str, new_password: str) -> None:
        """
        Consume a reset code and replace the user's password.

        Raises:
            UserNotFoundError, NoPendingOtpError, OtpMismatchError, OtpExpiredError
        """
        ...
