"""
Shared data models used across modules.

These models are shared infrastructure, not business logic.
Module-specific models should stay in their respective module directories.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field


class AuthenticatedUser(BaseModel):
    """
    Represents an authenticated user in the system.

    Populated from a verified session token and the user's stored record,
    and made available to route handlers via dependency injection.
    """

    id: str = Field(..., description="User ID (UUID)")
    phone: str = Field(..., description="10-digit phone number")
    email: str = Field(..., description="User's email address")

    # Timestamps
    token_issued_at: Optional[datetime] = Field(None, description="When the session token was issued")

    model_config = {
        "frozen": True,  # Make immutable for safety
        "extra": "ignore",
    }


class SuccessResponse(BaseModel):
    """Plain acknowledgement returned by mutating endpoints."""

    success: bool = True
