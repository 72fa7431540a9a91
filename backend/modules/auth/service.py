"""
Authentication service implementation.

Registration, login with session tokens, bearer-token authentication,
and the phone/OTP password-reset flow.
"""

import logging
import re
from datetime import datetime, timezone

from shared.models import AuthenticatedUser

from .exceptions import (
    DuplicateIdentityError,
    InvalidCredentialsError,
    InvalidPhoneError,
    NoPendingOtpError,
    PasswordMismatchError,
    UserNotFoundError,
)
from .interfaces import IAuthService, IOtpSender, IUserRepository
from .models import LoginResponse, RegisterRequest, User
from .otp import OtpManager
from .passwords import PasswordHasher
from .tokens import TokenManager

logger = logging.getLogger(__name__)

PHONE_PATTERN = re.compile(r"[0-9]{10}")


class AuthService(IAuthService):
    """
    Implementation of the authentication service.

    All collaborators are injected; see api.dependencies for the wiring.
    """

    def __init__(
        self,
        repository: IUserRepository,
        hasher: PasswordHasher,
        tokens: TokenManager,
        otp: OtpManager,
        otp_sender: IOtpSender,
    ):
        self._repo = repository
        self._hasher = hasher
        self._tokens = tokens
        self._otp = otp
        self._otp_sender = otp_sender

    # -------------------------------------------------------------------------
    # Accounts and sessions
    # -------------------------------------------------------------------------

    async def register(self, request: RegisterRequest) -> User:
        if request.password != request.repassword:
            raise PasswordMismatchError()
        if not PHONE_PATTERN.fullmatch(request.phone):
            raise InvalidPhoneError(request.phone)
        self._hasher.check_length(request.password)

        email = str(request.email).strip().lower()

        # Checked in this order so a taken phone is reported even when the
        # email is also taken. The unique constraints still catch races.
        if self._repo.get_by_phone(request.phone) is not None:
            raise DuplicateIdentityError("phone")
        if self._repo.get_by_email(email) is not None:
            raise DuplicateIdentityError("email")

        password_hash = await self._hasher.hash_async(request.password)
        user = self._repo.create_user(request.phone, email, password_hash)
        logger.info("Registered user %s", user.id)
        return user

    async def login(self, identifier: str, password: str) -> LoginResponse:
        user = self._repo.find_by_identifier(identifier)
        if user is None:
            logger.info("Login failed for %s", identifier)
            raise InvalidCredentialsError()

        if not await self._hasher.verify_async(password, user.password_hash):
            logger.info("Login failed for %s", identifier)
            raise InvalidCredentialsError()

        token, expires_at = self._tokens.issue(user)
        return LoginResponse(token=token, expires_at=expires_at)

    async def authenticate(self, token: str) -> AuthenticatedUser:
        payload = self._tokens.verify(token)

        user = self._repo.get_by_id(payload.sub)
        if user is None:
            raise UserNotFoundError(payload.sub)

        return AuthenticatedUser(
            id=user.id,
            phone=user.phone,
            email=user.email,
            token_issued_at=datetime.fromtimestamp(payload.iat, tz=timezone.utc),
        )

    # -------------------------------------------------------------------------
    # Password reset
    # -------------------------------------------------------------------------

    def _get_user_by_phone(self, phone: str) -> User:
        user = self._repo.get_by_phone(phone)
        if user is None:
            raise UserNotFoundError(phone)
        return user

    async def request_otp(self, phone: str) -> None:
        user = self._get_user_by_phone(phone)
        code = self._otp.issue(user)
        await self._otp_sender.send(user.phone, code)
        logger.info("Issued password reset code for user %s", user.id)

    async def verify_otp(self, phone: str, code: str) -> None:
        user = self._get_user_by_phone(phone)
        self._otp.verify(user, code)

    async def reset_password(self, phone: str, code: str, new_password: str) -> None:
        self._hasher.check_length(new_password)
        user = self._get_user_by_phone(phone)
        self._otp.verify(user, code)

        password_hash = await self._hasher.hash_async(new_password)

        # One conditional write: only one request can consume a given code,
        # and a failure before it leaves the code pending.
        if not self._repo.reset_password(user.id, code, password_hash):
            raise NoPendingOtpError()
        logger.info("Password reset for user %s", user.id)
