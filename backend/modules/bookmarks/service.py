"""
Bookmark service implementation.

Bookmarks are stored on the user record as course IDs. Reads resolve
them against the catalog; courses that no longer exist are dropped.
"""

from modules.auth.interfaces import IUserRepository
from modules.courses.interfaces import ICourseService
from modules.courses.models import Course

from .interfaces import IBookmarkService


class BookmarkService(IBookmarkService):
    """Per-user bookmark set on top of the user repository."""

    def __init__(self, users: IUserRepository, courses: ICourseService):
        self._users = users
        self._courses = courses

    async def add_bookmark(self, user_id: str, course_id: str) -> None:
        self._users.add_bookmark(user_id, course_id)

    async def remove_bookmark(self, user_id: str, course_id: str) -> None:
        self._users.remove_bookmark(user_id, course_id)

    async def list_bookmarks(self, user_id: str) -> list[Course]:
        course_ids = self._users.get_bookmark_ids(user_id)
        return await self._courses.get_courses_by_ids(course_ids)
