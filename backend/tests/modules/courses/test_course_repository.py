"""Tests for the course repository."""

import pytest
from unittest.mock import MagicMock

from modules.courses.repository import CourseRepository


def course_row(course_id: str = "c1", **overrides) -> dict:
    row = {
        "id": course_id,
        "title": "Data Structures",
        "branch": "CSE",
        "description": "Core DS",
        "topics": ["Arrays"],
        "syllabus_url": "",
        "price": "499.00",
        "created_at": "2026-01-01T00:00:00+00:00",
    }
    row.update(overrides)
    return row


@pytest.fixture
def mock_db():
    return MagicMock()


@pytest.fixture
def repo(mock_db):
    return CourseRepository(mock_db)


class TestCourseRepository:
    def test_list_courses_with_branch(self, repo, mock_db):
        select = mock_db.table.return_value.select.return_value
        select.eq.return_value.order.return_value.range.return_value.execute.return_value = MagicMock(
            data=[course_row()]
        )

        courses = repo.list_courses("CSE", offset=20, limit=10)

        assert [c.id for c in courses] == ["c1"]
        select.eq.assert_called_once_with("branch", "CSE")
        select.eq.return_value.order.return_value.range.assert_called_once_with(20, 29)

    def test_list_courses_without_branch(self, repo, mock_db):
        select = mock_db.table.return_value.select.return_value
        select.order.return_value.range.return_value.execute.return_value = MagicMock(data=[])

        assert repo.list_courses(None, 0, 20) == []
        select.eq.assert_not_called()
        select.order.return_value.range.assert_called_once_with(0, 19)

    def test_maps_price_and_empty_syllabus(self, repo, mock_db):
        select = mock_db.table.return_value.select.return_value
        select.eq.return_value.limit.return_value.execute.return_value = MagicMock(data=[course_row()])

        course = repo.get_by_id("c1")

        assert course.price == 499.0
        assert course.syllabus_url is None

    def test_get_by_id_missing(self, repo, mock_db):
        select = mock_db.table.return_value.select.return_value
        select.eq.return_value.limit.return_value.execute.return_value = MagicMock(data=[])
        assert repo.get_by_id("c1") is None

    def test_get_by_ids_keeps_requested_order(self, repo, mock_db):
        select = mock_db.table.return_value.select.return_value
        select.in_.return_value.execute.return_value = MagicMock(
            data=[course_row("c1"), course_row("c3")]
        )

        courses = repo.get_by_ids(["c3", "c2", "c1"])

        assert [c.id for c in courses] == ["c3", "c1"]
        select.in_.assert_called_once_with("id", ["c3", "c2", "c1"])

    def test_get_by_ids_empty(self, repo, mock_db):
        assert repo.get_by_ids([]) == []
        mock_db.table.assert_not_called()

    def test_count(self, repo, mock_db):
        select = mock_db.table.return_value.select.return_value
        select.limit.return_value.execute.return_value = MagicMock(data=[{"id": "c1"}], count=12)

        assert repo.count() == 12
        mock_db.table.return_value.select.assert_called_once_with("id", count="exact")

    def test_update_missing_returns_none(self, repo, mock_db):
        mock_db.table.return_value.update.return_value.eq.return_value.execute.return_value = MagicMock(data=[])
        assert repo.update("c1", {"title": "New"}) is None

    def test_create_many(self, repo, mock_db):
        mock_db.table.return_value.insert.return_value.execute.return_value = MagicMock(
            data=[course_row("c1"), course_row("c2")]
        )
        assert repo.create_many([{}, {}]) == 2
