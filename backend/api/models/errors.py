"""
Error response bodies.

Handled failures carry a human-readable ``detail`` and the machine-readable
``code`` of the GatePrepError behind them. Request validation failures list
every offending field instead.
"""

from typing import Optional

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Body of a handled 4xx error."""

    detail: str
    code: Optional[str] = Field(None, description="Error code, e.g. OTP_EXPIRED or INVALID_TOKEN")


class ValidationErrorResponse(BaseModel):
    """Body of a 400 raised by request parsing (missing or mistyped fields)."""

    error: str = "Validation Error"
    detail: list[dict]
