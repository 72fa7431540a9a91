"""
Course catalog service implementation.
"""

import logging
from typing import Optional

from .exceptions import CourseNotFoundError
from .interfaces import ICourseService
from .models import Course, CourseCreate, CourseUpdate
from .repository import CourseRepository
from .seed import DUMMY_COURSES
from .storage import SyllabusStorage, SyllabusUpload

logger = logging.getLogger(__name__)

ALL_BRANCHES = "ALL"


class CourseService(ICourseService):
    """
    Course catalog backed by the courses table.

    Syllabus documents are written to local disk via SyllabusStorage.
    """

    def __init__(self, repository: CourseRepository, storage: SyllabusStorage):
        self._repo = repository
        self._storage = storage

    async def list_courses(
        self,
        branch: Optional[str] = None,
        page: int = 1,
        limit: int = 20,
    ) -> list[Course]:
        branch_filter = None if not branch or branch == ALL_BRANCHES else branch
        offset = (page - 1) * limit
        return self._repo.list_courses(branch_filter, offset, limit)

    async def get_course(self, course_id: str) -> Course:
        course = self._repo.get_by_id(course_id)
        if course is None:
            raise CourseNotFoundError(course_id)
        return course

    async def get_courses_by_ids(self, course_ids: list[str]) -> list[Course]:
        return self._repo.get_by_ids(course_ids)

    async def create_course(
        self,
        data: CourseCreate,
        syllabus: Optional[SyllabusUpload] = None,
    ) -> Course:
        row = data.model_dump(mode="json")
        row["syllabus_url"] = self._storage.save(syllabus) if syllabus else ""
        course = self._repo.create(row)
        logger.info("Created course %s", course.id)
        return course

    async def update_course(
        self,
        course_id: str,
        data: CourseUpdate,
        syllabus: Optional[SyllabusUpload] = None,
    ) -> Course:
        changes = data.model_dump(mode="json", exclude_none=True)
        if not changes and not syllabus:
            return await self.get_course(course_id)

        # Nothing is written to disk for a course that doesn't exist.
        if syllabus:
            await self.get_course(course_id)
            changes["syllabus_url"] = self._storage.save(syllabus)

        course = self._repo.update(course_id, changes)
        if course is None:
            if syllabus:
                self._storage.delete(changes["syllabus_url"])
            raise CourseNotFoundError(course_id)
        return course

    async def delete_course(self, course_id: str) -> None:
        self._repo.delete(course_id)

    async def search_courses(self, query: str) -> list[Course]:
        if not query:
            return []
        return [course for course in self._repo.list_all() if course.matches(query)]

    async def seed_courses(self) -> int:
        if self._repo.count() > 0:
            return 0
        inserted = self._repo.create_many(DUMMY_COURSES)
        logger.info("Seeded %d dummy courses", inserted)
        return inserted
