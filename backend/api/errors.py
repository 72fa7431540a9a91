"""
HTTP translation of domain errors.

Route handlers catch the GatePrepError subclasses they expect and raise
ApiError with the status code the endpoint documents. The registered
handler renders it as an ErrorResponse.
"""

from typing import Optional

from fastapi import HTTPException, Request
from fastapi.responses import JSONResponse

from shared.exceptions import GatePrepError

from .models.errors import ErrorResponse


class ApiError(HTTPException):
    """HTTPException that also carries an error code."""

    def __init__(
        self,
        status_code: int,
        detail: str,
        code: Optional[str] = None,
        headers: Optional[dict[str, str]] = None,
    ):
        super().__init__(status_code=status_code, detail=detail, headers=headers)
        self.code = code

    @classmethod
    def from_error(
        cls,
        status_code: int,
        error: GatePrepError,
        detail: Optional[str] = None,
    ) -> "ApiError":
        """Build from a domain error, optionally overriding its message."""
        return cls(status_code, detail or error.message, code=error.code)


async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    body = ErrorResponse(detail=exc.detail, code=exc.code)
    return JSONResponse(status_code=exc.status_code, content=body.model_dump(), headers=exc.headers)
