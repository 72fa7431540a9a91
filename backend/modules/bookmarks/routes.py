"""
Bookmark API endpoints.

All routes require a bearer token.
"""

from uuid import UUID

from fastapi import APIRouter, Depends

from api.dependencies import get_bookmark_service
from api.middleware.auth import get_current_user
from modules.courses.models import Course
from shared.models import AuthenticatedUser, SuccessResponse

from .interfaces import IBookmarkService

router = APIRouter()


@router.post("/bookmarks/{course_id}", response_model=SuccessResponse)
async def add_bookmark(
    course_id: UUID,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IBookmarkService = Depends(get_bookmark_service),
) -> SuccessResponse:
    await service.add_bookmark(user.id, str(course_id))
    return SuccessResponse()


@router.delete("/bookmarks/{course_id}", response_model=SuccessResponse)
async def remove_bookmark(
    course_id: UUID,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IBookmarkService = Depends(get_bookmark_service),
) -> SuccessResponse:
    await service.remove_bookmark(user.id, str(course_id))
    return SuccessResponse()


@router.get("/bookmarks", response_model=list[Course])
async def list_bookmarks(
    user: AuthenticatedUser = Depends(get_current_user),
    service: IBookmarkService = Depends(get_bookmark_service),
) -> list[Course]:
    """Get the current user's bookmarked courses."""
    return await service.list_bookmarks(user.id)
