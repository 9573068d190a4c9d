"""Supabase client initialization."""

from functools import lru_cache

from supabase import Client, create_client

from crafter.core.config import get_settings
from crafter.core.errors import ServiceError


@lru_cache(maxsize=1)
def get_supabase() -> Client:
    """
    Get Supabase client instance (cached singleton).

    Returns:
        Supabase client configured with service role key

    Raises:
        ServiceError: If the store is not configured or client initialization fails
    """
    settings = get_settings()
    if not settings.SUPABASE_URL or not settings.SUPABASE_SERVICE_ROLE_KEY:
        raise ServiceError(
            "SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY must be set for the supabase store",
            user_message="Storage is not configured.",
            service="supabase",
        )
    try:
        return create_client(settings.SUPABASE_URL, settings.SUPABASE_SERVICE_ROLE_KEY)
    except Exception as e:
        raise ServiceError(
            f"Failed to initialize Supabase client: {e}",
            user_message="Storage is unavailable. Please try again.",
            service="supabase",
        ) from e
