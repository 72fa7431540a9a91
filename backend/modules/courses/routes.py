"""
Course catalog API endpoints.

Branch listing, course CRUD with syllabus upload, and search.
"""

from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, File, Form, Query, UploadFile
from pydantic import ValidationError as PydanticValidationError

from api.dependencies import get_course_service
from api.errors import ApiError
from shared.models import SuccessResponse

from .exceptions import CourseNotFoundError
from .interfaces import ICourseService
from .models import BRANCHES, Branch, Course, CourseCreate, CourseUpdate
from .storage import SyllabusUpload

router = APIRouter()


def _to_upload(file: Optional[UploadFile]) -> Optional[SyllabusUpload]:
    if file is None or not file.filename:
        return None
    return SyllabusUpload(filename=file.filename, content=file.file)


@router.get("/branches", response_model=list[str])
async def list_branches() -> list[str]:
    """List the branch codes courses are grouped under."""
    return BRANCHES


@router.get("/courses", response_model=list[Course])
async def list_courses(
    branch: Optional[str] = Query(default=None, description="Branch code or ALL"),
    page: int = Query(default=1, ge=1, description="Page number (1-indexed)"),
    limit: int = Query(default=20, ge=1, le=100, description="Items per page"),
    service: ICourseService = Depends(get_course_service),
) -> list[Course]:
    return await service.list_courses(branch, page, limit)


# Declared before /courses/{course_id} so "search" is not taken as an ID.
@router.get("/courses/search", response_model=list[Course])
async def search_courses(
    q: str = Query(default=""),
    service: ICourseService = Depends(get_course_service),
) -> list[Course]:
    """Case-insensitive match on course titles and topics."""
    return await service.search_courses(q)


@router.get("/courses/{course_id}", response_model=Course)
async def get_course(
    course_id: UUID,
    service: ICourseService = Depends(get_course_service),
) -> Course:
    try:
        return await service.get_course(str(course_id))
    except CourseNotFoundError as e:
        raise ApiError.from_error(404, e, detail="Not found")


@router.post("/courses", response_model=Course, status_code=201)
async def create_course(
    title: str = Form(...),
    branch: Branch = Form(...),
    description: str = Form(""),
    topics: str = Form(""),
    price: Optional[float] = Form(None),
    syllabus: Optional[UploadFile] = File(None),
    service: ICourseService = Depends(get_course_service),
) -> Course:
    """
    Create a course.

    Accepts multipart form data; ``topics`` is comma-separated and
    ``syllabus`` is an optional document upload.
    """
    try:
        data = CourseCreate(
            title=title,
            branch=branch,
            description=description,
            topics=topics,
            price=price,
        )
    except PydanticValidationError as e:
        raise ApiError(400, str(e), code="INVALID_COURSE")

    return await service.create_course(data, _to_upload(syllabus))


@router.put("/courses/{course_id}", response_model=Course)
async def update_course(
    course_id: UUID,
    title: Optional[str] = Form(None),
    branch: Optional[Branch] = Form(None),
    description: Optional[str] = Form(None),
    topics: Optional[str] = Form(None),
    price: Optional[float] = Form(None),
    syllabus: Optional[UploadFile] = File(None),
    service: ICourseService = Depends(get_course_service),
) -> Course:
    """Update the given fields of a course; a new syllabus replaces the old link."""
    try:
        data = CourseUpdate(
            title=title,
            branch=branch,
            description=description,
            topics=topics,
            price=price,
        )
    except PydanticValidationError as e:
        raise ApiError(400, str(e), code="INVALID_COURSE")

    try:
        return await service.update_course(str(course_id), data, _to_upload(syllabus))
    except CourseNotFoundError as e:
        raise ApiError.from_error(404, e, detail="Not found")


@router.delete("/courses/{course_id}", response_model=SuccessResponse)
async def delete_course(
    course_id: UUID,
    service: ICourseService = Depends(get_course_service),
) -> SuccessResponse:
    await service.delete_course(str(course_id))
    return SuccessResponse()
