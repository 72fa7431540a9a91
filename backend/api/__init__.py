"""
GATE Prep API package.

Provides the FastAPI application for the GATE exam preparation catalog.
"""

from .app import app, create_app

__all__ = ["app", "create_app"]
