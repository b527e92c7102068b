"""
Database Module - Supabase client

Provides a lazily created async Supabase client shared by the repositories.
"""

from typing import Optional

from supabase._async.client import AsyncClient, create_client as acreate_client

from warung_pos.config import SUPABASE_URL, SUPABASE_SERVICE_ROLE_KEY


_async_supabase_client: Optional[AsyncClient] = None


async def get_supabase() -> AsyncClient:
    """
    Get async Supabase client (singleton).

    Raises:
        ValueError: if SUPABASE_URL or SUPABASE_SERVICE_ROLE_KEY is missing
    """
    global _async_supabase_client

    if _async_supabase_client is None:
        if not SUPABASE_URL or not SUPABASE_SERVICE_ROLE_KEY:
            raise ValueError("SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY must be set")
        _async_supabase_client = await acreate_client(SUPABASE_URL, SUPABASE_SERVICE_ROLE_KEY)

    return _async_supabase_client
