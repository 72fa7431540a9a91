"""
Authentication module.

Handles registration, login with session tokens, bearer-token
authentication, and phone/OTP password recovery.

Public API:
- IAuthService: Interface for auth operations
- IUserRepository: Persistence contract for user records
- User, TokenPayload, LoginResponse: Models
- Auth exceptions: InvalidTokenError, DuplicateIdentityError, OTP errors, etc.
"""

from .interfaces import IAuthService, IOtpSender, IUserRepository
from .models import LoginResponse, TokenPayload, User
from .exceptions import (
    DuplicateIdentityError,
    InvalidCredentialsError,
    InvalidPhoneError,
    InvalidTokenError,
    MissingTokenError,
    NoPendingOtpError,
    OtpError,
    OtpExpiredError,
    OtpMismatchError,
    PasswordMismatchError,
    PasswordTooLongError,
    UserNotFoundError,
)

__all__ = [
    # Interfaces
    "IAuthService",
    "IOtpSender",
    "IUserRepository",
    # Models
    "LoginResponse",
    "TokenPayload",
    "User",
    # Exceptions
    "DuplicateIdentityError",
    "InvalidCredentialsError",
    "InvalidPhoneError",
    "InvalidTokenError",
    "MissingTokenError",
    "NoPendingOtpError",
    "OtpError",
    "OtpExpiredError",
    "OtpMismatchError",
    "PasswordMismatchError",
    "PasswordTooLongError",
    "UserNotFoundError",
]
