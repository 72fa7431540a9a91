"""
Authentication module data models.

These models define the stored user record, the session token payload,
and the request/response bodies of the account endpoints.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field, EmailStr


class User(BaseModel):
    """
    A registered user as stored in the ``users`` table.

    ``otp_code`` and ``otp_expires_at`` are written and cleared together,
    so a pending code always carries its expiry.
    """

    id: str = Field(..., description="User ID (UUID)")
    phone: str = Field(..., description="10-digit phone number")
    email: str = Field(..., description="Email address (lower-cased)")
    password_hash: str = Field(..., description="bcrypt digest", repr=False)
    otp_code: Optional[str] = Field(None, description="Pending password-reset code", repr=False)
    otp_expires_at: Optional[datetime] = Field(None, description="Expiry of the pending code")
    bookmarks: list[str] = Field(default_factory=list, description="Bookmarked course IDs")
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def has_pending_otp(self) -> bool:
        return self.otp_code is not None and self.otp_expires_at is not None


class TokenPayload(BaseModel):
    """Decoded session token claims."""

    sub: str = Field(..., description="Subject (user ID)")
    phone: Optional[str] = Field(None, description="User's phone number")
    exp: int = Field(..., description="Expiration timestamp")
    iat: int = Field(..., description="Issued at timestamp")


# -----------------------------------------------------------------------------
# Request / response bodies
# -----------------------------------------------------------------------------


class RegisterRequest(BaseModel):
    """Request to create an account."""

    phone: str = Field(..., min_length=1)
    email: EmailStr
    password: str = Field(..., min_length=1)
    repassword: str = Field(..., min_length=1)


class LoginRequest(BaseModel):
    """Login with either a phone number or an email address."""

    identifier: str = Field(..., min_length=1, description="Phone number or email")
    password: str = Field(..., min_length=1)


class LoginResponse(BaseModel):
    """Successful login with the issued session token."""

    success: bool = True
    token: str
    token_type: str = "bearer"
    expires_at: datetime


class RequestOtpRequest(BaseModel):
    """Request a password-reset code for a phone number."""

    phone: str = Field(..., min_length=1)


class VerifyOtpRequest(BaseModel):
    """Check a password-reset code without consuming it."""

    phone: str = Field(..., min_length=1)
    otp: str = Field(..., min_length=1)


class ResetPasswordRequest(BaseModel):
    """Set a new password using a pending reset code."""

    phone: str = Field(..., min_length=1)
    newpassword: str = Field(..., min_length=1)
    otp: str = Field(..., min_length=1)
