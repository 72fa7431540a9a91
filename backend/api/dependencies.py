"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together all module
implementations. Each module exposes its service through an interface,
and this file creates the concrete implementations from the settings
loaded at startup.
"""

from typing import TYPE_CHECKING

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from modules.auth.interfaces import IAuthService, IUserRepository
    from modules.bookmarks.interfaces import IBookmarkService
    from modules.courses.interfaces import ICourseService
    from modules.courses.repository import CourseRepository
    from shared.config import Settings


class ServiceContainer:
    """
    Container for all service instances.

    This class manages the lifecycle of service instances and their
    dependencies. Services are created lazily on first access.

    All services are cached as singletons within the container.
    Use reset() to clear all cached services for testing.
    """

    def __init__(self, settings: "Settings | None" = None) -> None:
        self._settings = settings
        self._user_repository: "IUserRepository | None" = None
        self._course_repository: "CourseRepository | None" = None
        self._auth_service: "IAuthService | None" = None
        self._course_service: "ICourseService | None" = None
        self._bookmark_service: "IBookmarkService | None" = None

    @property
    def settings(self) -> "Settings":
        if self._settings is None:
            from shared.config import get_settings
            self._settings = get_settings()
        return self._settings

    @property
    def user_repository(self) -> "IUserRepository":
        """Get the user repository instance."""
        if self._user_repository is None:
            from modules.auth.repository import UserRepository
            from shared.database import get_supabase_client
            self._user_repository = UserRepository(get_supabase_client())
        return self._user_repository

    @property
    def course_repository(self) -> "CourseRepository":
        """Get the course repository instance."""
        if self._course_repository is None:
            from modules.courses.repository import CourseRepository
            from shared.database import get_supabase_client
            self._course_repository = CourseRepository(get_supabase_client())
        return self._course_repository

    @property
    def auth(self) -> "IAuthService":
        """Get the auth service instance."""
        if self._auth_service is None:
            from datetime import timedelta
            from modules.auth.otp import LoggingOtpSender, OtpManager
            from modules.auth.passwords import PasswordHasher
            from modules.auth.service import AuthService
            from modules.auth.tokens import TokenManager

            settings = self.settings
            self._auth_service = AuthService(
                repository=self.user_repository,
                hasher=PasswordHasher(rounds=settings.bcrypt_rounds),
                tokens=TokenManager(
                    secret=settings.jwt_secret,
                    algorithm=settings.jwt_algorithm,
                    expiry=timedelta(days=settings.jwt_expiry_days),
                ),
                otp=OtpManager(
                    self.user_repository,
                    ttl=timedelta(minutes=settings.otp_ttl_minutes),
                ),
                otp_sender=LoggingOtpSender(),
            )
        return self._auth_service

    @property
    def courses(self) -> "ICourseService":
        """Get the course service instance."""
        if self._course_service is None:
            from modules.courses.service import CourseService
            from modules.courses.storage import SyllabusStorage
            self._course_service = CourseService(
                repository=self.course_repository,
                storage=SyllabusStorage(self.settings.upload_dir),
            )
        return self._course_service

    @property
    def bookmarks(self) -> "IBookmarkService":
        """Get the bookmark service instance."""
        if self._bookmark_service is None:
            from modules.bookmarks.service import BookmarkService
            self._bookmark_service = BookmarkService(
                users=self.user_repository,
                courses=self.courses,
            )
        return self._bookmark_service

    def reset(self) -> None:
        """
        Reset all cached services.

        This is primarily for testing - allows tests to get fresh
        service instances with different mock dependencies.
        """
        self._settings = None
        self._user_repository = None
        self._course_repository = None
        self._auth_service = None
        self._course_service = None
        self._bookmark_service = None


# Module-level container singleton
_container: ServiceContainer | None = None


def get_container() -> ServiceContainer:
    """Get the singleton service container."""
    global _container
    if _container is None:
        _container = ServiceContainer()
    return _container


def reset_container() -> None:
    """
    Reset the service container.

    This clears the cached container, so the next call to get_container()
    will create a fresh container with new service instances.

    Primarily used for testing.
    """
    global _container
    _container = None


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_auth_service() -> "IAuthService":
    """FastAPI dependency for auth service."""
    return get_container().auth


def get_course_service() -> "ICourseService":
    """FastAPI dependency for course service."""
    return get_container().courses


def get_bookmark_service() -> "IBookmarkService":
    """FastAPI dependency for bookmark service."""
    return get_container().bookmarks
