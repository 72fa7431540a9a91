"""
Authentication module exceptions.

These exceptions are raised by the auth module and caught by the
route handlers, which translate them into HTTP responses.
"""

from shared.exceptions import (
    AuthenticationError,
    ConflictError,
    NotFoundError,
    ValidationError,
)


class InvalidTokenError(AuthenticationError):
    """
    Raised when a session token is malformed, tampered with, or expired.

    The cases are deliberately not distinguished.
    """

    def __init__(self, message: str = "Invalid token"):
        super().__init__(message, code="INVALID_TOKEN")


class MissingTokenError(AuthenticationError):
    """Raised when no authentication token is provided."""

    def __init__(self, message: str = "No token"):
        super().__init__(message, code="MISSING_TOKEN")


class InvalidCredentialsError(AuthenticationError):
    """Raised on login failure, whether the user is unknown or the password is wrong."""

    def __init__(self):
        super().__init__("Invalid credentials", code="INVALID_CREDENTIALS")


class UserNotFoundError(NotFoundError):
    """Raised when a referenced user doesn't exist."""

    def __init__(self, identifier: str):
        super().__init__(
            "User not found",
            code="USER_NOT_FOUND",
            details={"identifier": identifier},
        )


class DuplicateIdentityError(ConflictError):
    """Raised when a phone number or email is already registered."""

    def __init__(self, field: str):
        super().__init__(
            f"{field.capitalize()} already registered",
            code="DUPLICATE_IDENTITY",
            details={"field": field},
        )
        self.field = field


class PasswordMismatchError(ValidationError):
    """Raised when password and its confirmation differ."""

    def __init__(self):
        super().__init__("Passwords do not match", code="PASSWORD_MISMATCH")


class InvalidPhoneError(ValidationError):
    """Raised when a phone number is not exactly 10 digits."""

    def __init__(self, phone: str):
        super().__init__(
            "Invalid phone number",
            code="INVALID_PHONE",
            details={"phone": phone},
        )


class OtpError(ValidationError):
    """Base exception for password-reset code failures."""

    pass


class NoPendingOtpError(OtpError):
    """Raised when no reset code has been requested (or it was already used)."""

    def __init__(self):
        super().__init__("OTP not requested", code="NO_PENDING_OTP")


class OtpMismatchError(OtpError):
    """Raised when the submitted code differs from the pending one."""

    def __init__(self):
        super().__init__("Invalid OTP", code="OTP_MISMATCH")


class OtpExpiredError(OtpError):
    """Raised when the pending code is past its expiry."""

    def __init__(self):
        super().__init__("OTP expired", code="OTP_EXPIRED")


class PasswordTooLongError(ValidationError):
    """Raised when a password exceeds what bcrypt can hash."""

    def __init__(self, max_bytes: int):
        super().__init__(
            f"Password must be at most {max_bytes} bytes",
            code="PASSWORD_TOO_LONG",
            details={"max_bytes": max_bytes},
        )
