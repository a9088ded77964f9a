"""
Store factory.

Builds the single store instance the application shares across requests.
The Supabase backend connects with the service role key: the sync protocol
does its own authentication, so row level security never applies to it.
"""

import logging

from supabase import Client, create_client

from shared.config import Settings
from shared.exceptions import StorageUnavailableError

from .interfaces import ISyncStore
from .memory import MemoryStore
from .supabase_store import SupabaseStore

logger = logging.getLogger(__name__)


def create_supabase_client(settings: Settings) -> Client:
    """
    Connect to the Supabase project named in the settings.

    Raises:
        StorageUnavailableError: URL or service role key not configured
    """
    missing = [
        name
        for name, value in (
            ("KOSYNC_SUPABASE_URL", settings.supabase_url),
            ("KOSYNC_SUPABASE_SERVICE_ROLE_KEY", settings.supabase_service_role_key),
        )
        if not value
    ]
    if missing:
        raise StorageUnavailableError("supabase", f"missing {', '.join(missing)}")
    return create_client(settings.supabase_url, settings.supabase_service_role_key)


def create_store(settings: Settings) -> ISyncStore:
    """
    Create the store selected by ``settings.store_backend``.

    Raises:
        StorageUnavailableError: Unknown backend or missing configuration
    """
    backend = settings.store_backend.strip().lower()

    if backend == "memory":
        logger.warning("Using in-memory store, data is lost on restart")
        return MemoryStore()

    if backend == "supabase":
        client = create_supabase_client(settings)
        logger.info(
            "Using Supabase store at %s (tables %s, %s)",
            settings.supabase_url, settings.supabase_users_table, settings.supabase_progress_table,
        )
        return SupabaseStore(
            client,
            users_table=settings.supabase_users_table,
            progress_table=settings.supabase_progress_table,
        )

    raise StorageUnavailableError(backend, f"unknown store backend '{settings.store_backend}'")
