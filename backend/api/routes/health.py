"""
Health check endpoints.

Provides endpoints for monitoring application health and readiness.
"""

import logging

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from shared.config import get_settings

from ..dependencies import get_course_service
from modules.courses.interfaces import ICourseService

logger = logging.getLogger(__name__)

router = APIRouter()


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    version: str


class ReadinessResponse(BaseModel):
    """Readiness check response model."""

    status: str
    database: str


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """
    Basic health check endpoint.

    Returns 200 if the API is running.
    """
    return HealthResponse(status="healthy", version=get_settings().app_version)


@router.get("/ready", response_model=ReadinessResponse)
async def readiness_check(
    courses: ICourseService = Depends(get_course_service),
) -> ReadinessResponse:
    """
    Readiness check endpoint.

    Runs a one-row catalog query to confirm the database is reachable.
    """
    try:
        await courses.list_courses(limit=1)
    except Exception:
        logger.exception("Readiness check failed")
        return ReadinessResponse(status="not_ready", database="unavailable")

    return ReadinessResponse(status="ready", database="connected")
