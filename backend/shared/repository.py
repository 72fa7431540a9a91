"""
Base repository class for database access.

Provides a common abstraction layer for all repositories, encapsulating
Supabase client access and providing shared utilities for data operations.
"""

from typing import Any, TypeVar, Generic
from supabase import Client


T = TypeVar("T")


class BaseRepository(Generic[T]):
    """
    Base class for all repositories.

    Provides common functionality for database operations:
    - Supabase client access via self._db
    - Generic type parameter for model type hints

    Subclasses should implement domain-specific data access methods
    and handle dict-to-Pydantic model mapping internally.

    Example:
        class CourseRepository(BaseRepository[Course]):
            def get_by_id(self, course_id: str) -> Optional[Course]:
                result = self._db.table("courses").select("*").eq("id", course_id).execute()
                if not result.data:
                    return None
                return self._map_to_course(result.data[0])
    """

    table: str = ""

    def __init__(self, db: Client) -> None:
        """
        Initialize the repository with a Supabase client.

        Args:
            db: Supabase client instance for database operations.
        """
        self._db = db

    def _first(self, result: Any) -> dict[str, Any] | None:
        """Return the first row of a query result, or None if empty."""
        if not result.data:
            return None
        return result.data[0]
