from __future__ import annotations

from functools import lru_cache

from supabase import Client, create_client
from supabase.lib.client_options import ClientOptions

from organizer.config import settings
from organizer.utils.logging import get_logger

logger = get_logger(__name__)


def create_supabase_client(key: str | None = None) -> Client:
    """Create a Supabase client for read-only PostgREST access.

    Defaults to the anon key; sessions are neither refreshed nor persisted because
    every request only reads.
    """
    logger.debug("Creating Supabase client")
    key = key or settings.supabase_anon_key
    if not key:
        raise RuntimeError("supabase_anon_key is required for the Supabase client")
    return create_client(
        settings.supabase_url,
        key,
        options=ClientOptions(auto_refresh_token=False, persist_session=False),
    )


@lru_cache(maxsize=1)
def get_supabase_client() -> Client:
    """Return the process-wide cached Supabase client."""
    return create_supabase_client()
