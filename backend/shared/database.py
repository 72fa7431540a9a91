"""
Supabase client for the repositories.

The backend signs its own session tokens and keeps its own users table,
so every query runs through a single service-role client.
"""

from functools import lru_cache

from supabase import create_client, Client

from .config import get_settings
from .exceptions import ExternalServiceError


@lru_cache
def get_supabase_client() -> Client:
    """
    Get the shared service-role client, creating it on first use.

    Raises:
        ExternalServiceError: If SUPABASE_URL or SUPABASE_SERVICE_ROLE_KEY is unset
    """
    settings = get_settings()
    if not settings.supabase_url or not settings.supabase_service_role_key:
        raise ExternalServiceError(
            "Supabase configuration missing: set SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY",
            service="supabase",
            code="DATABASE_NOT_CONFIGURED",
        )
    return create_client(settings.supabase_url, settings.supabase_service_role_key)


def reset_client_cache() -> None:
    """Drop the cached client so the next call reads settings again."""
    get_supabase_client.cache_clear()
