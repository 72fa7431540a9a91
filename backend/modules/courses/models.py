"""
Course catalog data models.
"""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, field_validator


class Branch(str, Enum):
    """GATE engineering branches."""

    CSE = "CSE"
    ECE = "ECE"
    ME = "ME"
    CE = "CE"
    EE = "EE"
    IN = "IN"


BRANCHES: list[str] = [branch.value for branch in Branch]


def split_topics(value: object) -> object:
    """Accept topics as a list or a comma-separated string."""
    if isinstance(value, str):
        return [topic.strip() for topic in value.split(",") if topic.strip()]
    return value


class CourseBase(BaseModel):
    title: str = Field(..., min_length=1, max_length=300)
    branch: Branch
    description: str = ""
    topics: list[str] = []
    price: Optional[float] = Field(None, ge=0)

    @field_validator("topics", mode="before")
    @classmethod
    def parse_topics(cls, value: object) -> object:
        return split_topics(value)


class CourseCreate(CourseBase):
    pass


class CourseUpdate(BaseModel):
    title: Optional[str] = Field(None, min_length=1, max_length=300)
    branch: Optional[Branch] = None
    description: Optional[str] = None
    topics: Optional[list[str]] = None
    price: Optional[float] = Field(None, ge=0)

    @field_validator("topics", mode="before")
    @classmethod
    def parse_topics(cls, value: object) -> object:
        return split_topics(value)


class Course(CourseBase):
    id: str
    syllabus_url: Optional[str] = None
    created_at: Optional[datetime] = None

    def matches(self, query: str) -> bool:
        """Case-insensitive substring match on title or any topic."""
        needle = query.lower()
        if needle in self.title.lower():
            return True
        return any(needle in topic.lower() for topic in self.topics)
