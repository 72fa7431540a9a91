"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules:
a JWT helper, an in-memory user repository, a controllable clock, and an
OTP sender that records what it was asked to deliver.
"""

import uuid
from datetime import datetime, timezone, timedelta
from typing import Optional

import jwt  # PyJWT
import pytest

from api.dependencies import reset_container
from modules.auth.exceptions import DuplicateIdentityError
from modules.auth.models import User
from modules.auth.otp import OtpManager
from modules.auth.passwords import PasswordHasher
from modules.auth.service import AuthService
from modules.auth.tokens import TokenManager


# Test JWT secret (only for testing)
TEST_JWT_SECRET = "test-secret-key-for-testing-only"


def create_test_token(
    user_id: str = "test-user-123",
    phone: str = "9876543210",
    expired: bool = False,
    secret: str = TEST_JWT_SECRET,
) -> str:
    """
    Create a test JWT token for authentication.

    Args:
        user_id: User ID to include in the token
        phone: Phone number to include in the token
        expired: If True, creates an expired token
        secret: Signing secret

    Returns:
        JWT token string
    """
    now = datetime.now(timezone.utc)
    exp = now - timedelta(hours=1) if expired else now + timedelta(days=7)

    payload = {
        "sub": user_id,
        "phone": phone,
        "exp": int(exp.timestamp()),
        "iat": int(now.timestamp()),
    }
    return jwt.encode(payload, secret, algorithm="HS256")


class FakeClock:
    """A clock that only moves when told to."""

    def __init__(self, start: Optional[datetime] = None):
        self.current = start or datetime(2026, 1, 1, 12, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        return self.current

    def advance(self, **kwargs) -> None:
        self.current += timedelta(**kwargs)


class InMemoryUserRepository:
    """Dict-backed IUserRepository with the same semantics as UserRepository."""

    def __init__(self):
        self.users: dict[str, User] = {}

    def _save(self, user: User) -> None:
        self.users[user.id] = user

    def create_user(self, phone: str, email: str, password_hash: str) -> User:
        for existing in self.users.values():
            if existing.phone == phone:
                raise DuplicateIdentityError("phone")
            if existing.email == email:
                raise DuplicateIdentityError("email")
        user = User(
            id=str(uuid.uuid4()),
            phone=phone,
            email=email,
            password_hash=password_hash,
            created_at=datetime.now(timezone.utc),
        )
        self._save(user)
        return user

    def get_by_id(self, user_id: str) -> Optional[User]:
        return self.users.get(user_id)

    def get_by_phone(self, phone: str) -> Optional[User]:
        return next((u for u in self.users.values() if u.phone == phone), None)

    def get_by_email(self, email: str) -> Optional[User]:
        email = email.strip().lower()
        return next((u for u in self.users.values() if u.email == email), None)

    def find_by_identifier(self, identifier: str) -> Optional[User]:
        return self.get_by_phone(identifier) or self.get_by_email(identifier)

    def update_password(self, user_id: str, password_hash: str) -> None:
        self._save(self.users[user_id].model_copy(update={"password_hash": password_hash}))

    def set_otp(self, user_id: str, code: str, expires_at: datetime) -> None:
        self._save(
            self.users[user_id].model_copy(update={"otp_code": code, "otp_expires_at": expires_at})
        )

    def clear_otp(self, user_id: str, code: Optional[str] = None) -> bool:
        user = self.users.get(user_id)
        if user is None:
            return False
        if code is not None and user.otp_code != code:
            return False
        self._save(user.model_copy(update={"otp_code": None, "otp_expires_at": None}))
        return True

    def reset_password(self, user_id: str, code: str, password_hash: str) -> bool:
        user = self.users.get(user_id)
        if user is None or user.otp_code != code:
            return False
        self._save(
            user.model_copy(
                update={"password_hash": password_hash, "otp_code": None, "otp_expires_at": None}
            )
        )
        return True

    def add_bookmark(self, user_id: str, course_id: str) -> None:
        user = self.users.get(user_id)
        if user is not None and course_id not in user.bookmarks:
            self._save(user.model_copy(update={"bookmarks": [*user.bookmarks, course_id]}))

    def remove_bookmark(self, user_id: str, course_id: str) -> None:
        user = self.users.get(user_id)
        if user is not None:
            remaining = [b for b in user.bookmarks if b != course_id]
            self._save(user.model_copy(update={"bookmarks": remaining}))

    def get_bookmark_ids(self, user_id: str) -> list[str]:
        user = self.users.get(user_id)
        return list(user.bookmarks) if user else []


class CapturingOtpSender:
    """Records delivered codes instead of sending them."""

    def __init__(self):
        self.sent: list[tuple[str, str]] = []

    async def send(self, phone: str, code: str) -> None:
        self.sent.append((phone, code))

    @property
    def last_code(self) -> str:
        return self.sent[-1][1]


@pytest.fixture(autouse=True)
def reset_service_container():
    """Reset the service container before and after each test."""
    reset_container()
    yield
    reset_container()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def user_repo() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def otp_sender() -> CapturingOtpSender:
    return CapturingOtpSender()


@pytest.fixture
def hasher() -> PasswordHasher:
    """Minimum bcrypt cost keeps the tests fast."""
    return PasswordHasher(rounds=4)


@pytest.fixture
def token_manager() -> TokenManager:
    return TokenManager(secret=TEST_JWT_SECRET)


@pytest.fixture
def auth_service(user_repo, hasher, token_manager, clock, otp_sender) -> AuthService:
    """AuthService wired to in-memory collaborators and a fake clock."""
    return AuthService(
        repository=user_repo,
        hasher=hasher,
        tokens=token_manager,
        otp=OtpManager(user_repo, ttl=timedelta(minutes=10), now=clock),
        otp_sender=otp_sender,
    )


@pytest.fixture
def test_user_id() -> str:
    """Provide a consistent test user ID."""
    return "test-user-123"


@pytest.fixture
def auth_token(test_user_id: str) -> str:
    """Create a valid auth token for testing."""
    return create_test_token(user_id=test_user_id)


@pytest.fixture
def auth_headers(auth_token: str) -> dict[str, str]:
    """Create authorization headers with a valid token."""
    return {"Authorization": f"Bearer {auth_token}"}
