"""
Course repository for database access.

Encapsulates all Supabase queries for the ``courses`` table.
"""

from typing import Any, Optional

from shared.repository import BaseRepository

from .models import Course


class CourseRepository(BaseRepository[Course]):
    """Repository for course records."""

    table = "courses"

    def count(self) -> int:
        result = self._db.table(self.table).select("id", count="exact").limit(1).execute()
        return result.count or 0

    def list_courses(
        self,
        branch: Optional[str] = None,
        offset: int = 0,
        limit: int = 20,
    ) -> list[Course]:
        """List courses, optionally for one branch, oldest first."""
        query = self._db.table(self.table).select("*")
        if branch:
            query = query.eq("branch", branch)
        result = query.order("created_at").range(offset, offset + limit - 1).execute()
        return [self._map_to_course(row) for row in result.data]

    def list_all(self) -> list[Course]:
        result = self._db.table(self.table).select("*").order("created_at").execute()
        return [self._map_to_course(row) for row in result.data]

    def get_by_id(self, course_id: str) -> Optional[Course]:
        result = self._db.table(self.table).select("*").eq("id", course_id).limit(1).execute()
        row = self._first(result)
        return self._map_to_course(row) if row else None

    def get_by_ids(self, course_ids: list[str]) -> list[Course]:
        """
        Fetch several courses at once.

        Missing IDs are skipped; the result follows the order of ``course_ids``.
        """
        if not course_ids:
            return []
        result = self._db.table(self.table).select("*").in_("id", course_ids).execute()
        by_id = {str(row["id"]): self._map_to_course(row) for row in result.data}
        return [by_id[course_id] for course_id in course_ids if course_id in by_id]

    def create(self, data: dict[str, Any]) -> Course:
        result = self._db.table(self.table).insert(data).execute()
        return self._map_to_course(result.data[0])

    def create_many(self, rows: list[dict[str, Any]]) -> int:
        result = self._db.table(self.table).insert(rows).execute()
        return len(result.data)

    def update(self, course_id: str, data: dict[str, Any]) -> Optional[Course]:
        """Apply a partial update. Returns None if the course doesn't exist."""
        result = self._db.table(self.table).update(data).eq("id", course_id).execute()
        row = self._first(result)
        return self._map_to_course(row) if row else None

    def delete(self, course_id: str) -> None:
        self._db.table(self.table).delete().eq("id", course_id).execute()

    def _map_to_course(self, data: dict[str, Any]) -> Course:
        """Map database row to Course model."""
        price = data.get("price")
        return Course(
            id=str(data["id"]),
            title=data["title"],
            branch=data["branch"],
            description=data.get("description") or "",
            topics=data.get("topics") or [],
            syllabus_url=data.get("syllabus_url") or None,
            price=float(price) if price is not None else None,
            created_at=data.get("created_at"),
        )
