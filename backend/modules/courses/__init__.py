"""
Course catalog module.

Lists courses by branch, supports search, and manages course records
with optional syllabus uploads.

Public API:
- ICourseService: Interface for catalog operations
- Course, CourseCreate, CourseUpdate, Branch: Models
- CourseNotFoundError: Raised for unknown course IDs
"""

from .interfaces import ICourseService
from .models import BRANCHES, Branch, Course, CourseCreate, CourseUpdate
from .exceptions import CourseNotFoundError

__all__ = [
    # Interface
    "ICourseService",
    # Models
    "BRANCHES",
    "Branch",
    "Course",
    "CourseCreate",
    "CourseUpdate",
    # Exceptions
    "CourseNotFoundError",
]
