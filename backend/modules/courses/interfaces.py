"""
Course catalog interface.

The bookmarks module resolves bookmarked IDs through ICourseService.
"""

from typing import Protocol, Optional, runtime_checkable

from .models import Course, CourseCreate, CourseUpdate
from .storage import SyllabusUpload


@runtime_checkable
class ICourseService(Protocol):
    """Interface for course catalog operations."""

    async def list_courses(
        self,
        branch: Optional[str] = None,
        page: int = 1,
        limit: int = 20,
    ) -> list[Course]:
        """
        List courses with pagination.

        Args:
            branch: Branch code, or None / "ALL" for every branch
            page: Page number (1-indexed)
            limit: Items per page
        """
        ...

    async def get_course(self, course_id: str) -> Course:
        """
        Raises:
            CourseNotFoundError: If the course doesn't exist
        """
        ...

    async def get_courses_by_ids(self, course_ids: list[str]) -> list[Course]:
        """Resolve IDs to courses, skipping any that no longer exist."""
        ...

    async def create_course(
        self,
        data: CourseCreate,
        syllabus: Optional[SyllabusUpload] = None,
    ) -> Course: ...

    async def update_course(
        self,
        course_id: str,
        data: CourseUpdate,
        syllabus: Optional[SyllabusUpload] = None,
    ) -> Course:
        """
        Raises:
            CourseNotFoundError: If the course doesn't exist
        """
        ...

    async def delete_course(self, course_id: str) -> None: ...

    async def search_courses(self, query: str) -> list[Course]:
        """Case-insensitive substring search over titles and topics."""
        ...

    async def seed_courses(self) -> int:
        """Insert the starter catalog if it is empty. Returns rows inserted."""
        ...
