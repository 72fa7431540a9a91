"""
Account API endpoints.

Registration, login, and the forgot-password flow. None of these
require authentication. Every failure is reported as 400.
"""

from fastapi import APIRouter, Depends

from api.dependencies import get_auth_service
from api.errors import ApiError
from api.models.errors import ErrorResponse
from shared.exceptions import GatePrepError, ValidationError
from shared.models import SuccessResponse

from .exceptions import InvalidCredentialsError, OtpError, UserNotFoundError
from .interfaces import IAuthService
from .models import (
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    RequestOtpRequest,
    ResetPasswordRequest,
    VerifyOtpRequest,
)

router = APIRouter()

BAD_REQUEST = {400: {"model": ErrorResponse}}


@router.post("/register", response_model=SuccessResponse, responses=BAD_REQUEST)
async def register(
    request: RegisterRequest,
    service: IAuthService = Depends(get_auth_service),
) -> SuccessResponse:
    """
    Create an account.

    Fails with 400 if the passwords differ, the phone number is not
    10 digits, the password is over 72 bytes, or the phone or email is
    already registered.
    """
    try:
        await service.register(request)
    except GatePrepError as e:
        raise ApiError.from_error(400, e)
    return SuccessResponse()


@router.post("/login", response_model=LoginResponse, responses=BAD_REQUEST)
async def login(
    request: LoginRequest,
    service: IAuthService = Depends(get_auth_service),
) -> LoginResponse:
    """Log in with a phone number or email and receive a session token."""
    try:
        return await service.login(request.identifier, request.password)
    except InvalidCredentialsError as e:
        raise ApiError.from_error(400, e)


@router.post("/request-otp", response_model=SuccessResponse, responses=BAD_REQUEST)
async def request_otp(
    request: RequestOtpRequest,
    service: IAuthService = Depends(get_auth_service),
) -> SuccessResponse:
    """
    Send a password-reset code to the phone number.

    The code is delivered out of band and never included in the response.
    """
    try:
        await service.request_otp(request.phone)
    except UserNotFoundError as e:
        raise ApiError.from_error(400, e)
    return SuccessResponse()


@router.post("/verify-otp", response_model=SuccessResponse, responses=BAD_REQUEST)
async def verify_otp(
    request: VerifyOtpRequest,
    service: IAuthService = Depends(get_auth_service),
) -> SuccessResponse:
    """Check a reset code. The code stays usable for reset-password."""
    try:
        await service.verify_otp(request.phone, request.otp)
    except (UserNotFoundError, OtpError) as e:
        raise ApiError.from_error(400, e)
    return SuccessResponse()


@router.post("/reset-password", response_model=SuccessResponse, responses=BAD_REQUEST)
async def reset_password(
    request: ResetPasswordRequest,
    service: IAuthService = Depends(get_auth_service),
) -> SuccessResponse:
    """
    Set a new password and consume the reset code.

    Fails with 400 for an unknown phone, any reset-code failure, or a
    password longer than 72 bytes. A failed reset leaves the code usable.
    """
    try:
        await service.reset_password(request.phone, request.otp, request.newpassword)
    except (UserNotFoundError, ValidationError) as e:
        raise ApiError.from_error(400, e)
    return SuccessResponse()
