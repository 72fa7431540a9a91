"""
One-time password-reset codes.

A code is a 6-digit number bound to a user with a short expiry. Issuing a
new code replaces any pending one. Verifying does not consume the code;
only a password reset does (see AuthService.reset_password), so a client
can confirm a code before submitting the new password in a second step.
A verified but unused code therefore stays valid until it expires.
"""

import hmac
import logging
import secrets
from datetime import datetime, timedelta, timezone
from typing import Callable, Optional

from .exceptions import NoPendingOtpError, OtpExpiredError, OtpMismatchError
from .interfaces import IUserRepository
from .models import User

logger = logging.getLogger(__name__)

OTP_MIN = 100000
OTP_MAX = 999999


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def generate_code() -> str:
    """Uniformly random code in [100000, 999999], so it never has a leading zero."""
    return str(OTP_MIN + secrets.randbelow(OTP_MAX - OTP_MIN + 1))


class OtpManager:
    """Issues, stores, and checks password-reset codes."""

    def __init__(
        self,
        repository: IUserRepository,
        ttl: timedelta = timedelta(minutes=10),
        now: Optional[Callable[[], datetime]] = None,
    ):
        self._repo = repository
        self._ttl = ttl
        self._now = now or _utcnow

    def issue(self, user: User) -> str:
        """
        Generate and store a fresh code for a user.

        Returns:
            The code, for delivery only. It must never go back to the requester.
        """
        code = generate_code()
        expires_at = self._now() + self._ttl
        self._repo.set_otp(user.id, code, expires_at)
        return code

    def verify(self, user: User, submitted: str) -> None:
        """
        Check a submitted code against the user's pending one.

        Raises:
            NoPendingOtpError: If no code is pending
            OtpMismatchError: If the code differs (compared as strings)
            OtpExpiredError: If the pending code is past its expiry
        """
        if not user.has_pending_otp:
            raise NoPendingOtpError()

        if not hmac.compare_digest(user.otp_code.encode("utf-8"), submitted.encode("utf-8")):
            raise OtpMismatchError()

        if self._now() >= user.otp_expires_at:
            raise OtpExpiredError()


class LoggingOtpSender:
    """
    Stand-in delivery that writes the code to the server log.

    Replace with an SMS gateway client in production.
    """

    async def send(self, phone: str, code: str) -> None:
        logger.info("OTP for %s: %s", phone, code)
