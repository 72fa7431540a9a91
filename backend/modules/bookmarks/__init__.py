"""
Bookmarks module.

Keeps each user's set of saved course IDs and resolves them against
the course catalog.
"""

from .interfaces import IBookmarkService

__all__ = ["IBookmarkService"]
