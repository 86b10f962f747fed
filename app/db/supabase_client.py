"""Supabase client for the project store that assessments are synced into."""

import logging
from functools import lru_cache

from supabase import Client, create_client

from app.core.config import get_settings
from app.core.logging import get_logger, log_with_context

logger = get_logger(__name__)


@lru_cache(maxsize=1)
def get_supabase() -> Client:
    """
    Service-role client shared by every data access module.

    Built on first use so the engine and its tests never need Supabase
    credentials. A failed build is not cached.

    Raises:
        RuntimeError: If settings are missing or the client cannot be created
    """
    try:
        settings = get_settings()
        client = create_client(settings.SUPABASE_URL, settings.SUPABASE_SERVICE_ROLE_KEY)
    except Exception as e:
        logger.error(f"Supabase client unavailable: {e}")
        raise RuntimeError(f"Failed to initialize Supabase client: {e}") from e

    log_with_context(
        logger,
        logging.INFO,
        "Supabase client ready",
        supabase_url=settings.SUPABASE_URL,
        env=settings.PATH_ENGINE_ENV,
    )
    return client
