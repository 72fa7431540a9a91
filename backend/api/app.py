"""
FastAPI application factory.

Creates and configures the FastAPI application instance.
"""

import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from shared.config import get_settings
from modules.auth.routes import router as auth_router
from modules.bookmarks.routes import router as bookmarks_router
from modules.courses.routes import router as courses_router

from .dependencies import get_container
from .errors import ApiError, api_error_handler
from .models.errors import ValidationErrorResponse
from .routes import health

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Runs startup and shutdown logic.
    """
    # Startup
    settings = get_settings()
    Path(settings.upload_dir).mkdir(parents=True, exist_ok=True)
    if settings.seed_courses:
        await get_container().courses.seed_courses()
    logger.info("Starting %s on %s:%s", settings.app_name, settings.host, settings.port)
    yield
    # Shutdown
    logger.info("Shutting down %s", settings.app_name)


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report malformed or missing request input as 400."""
    body = ValidationErrorResponse(detail=jsonable_encoder(exc.errors()))
    return JSONResponse(status_code=400, content=body.model_dump())


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI instance
    """
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="GATE exam preparation course catalog API",
        version=settings.app_version,
        lifespan=lifespan,
        docs_url="/api/docs" if settings.debug else None,
        redoc_url="/api/redoc" if settings.debug else None,
    )

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(ApiError, api_error_handler)

    # Register routes
    app.include_router(health.router, prefix="/api", tags=["health"])
    app.include_router(auth_router, prefix="/api/users", tags=["users"])
    app.include_router(bookmarks_router, prefix="/api/users", tags=["bookmarks"])
    app.include_router(courses_router, prefix="/api", tags=["courses"])

    # Uploaded syllabus documents
    app.mount(
        "/uploads",
        StaticFiles(directory=settings.upload_dir, check_dir=False),
        name="uploads",
    )

    return app


# Application instance for uvicorn
app = create_app()
