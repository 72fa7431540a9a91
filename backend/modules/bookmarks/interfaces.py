"""
Bookmarks module interface.
"""

from typing import Protocol, runtime_checkable

from modules.courses.models import Course


@runtime_checkable
class IBookmarkService(Protocol):
    """
    Interface for a user's saved courses.

    Add and remove are idempotent. Bookmarking a course does not check
    that it exists; listing omits courses that can't be resolved.
    """

    async def add_bookmark(self, user_id: str, course_id: str) -> None: ...

    async def remove_bookmark(self, user_id: str, course_id: str) -> None: ...

    async def list_bookmarks(self, user_id: str) -> list[Course]:
        """
        Get the user's bookmarked courses in the order they were added.
        """
        ...
