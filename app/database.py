"""Database connection and utilities"""
from functools import lru_cache
from typing import Optional

from supabase import create_client, Client
from app.config import get_settings


@lru_cache()
def get_supabase_admin() -> Optional[Client]:
    """
    Get the service role Supabase client (bypasses RLS - use carefully)

    Returns:
        Client, or None when Supabase credentials are not configured
    """
    settings = get_settings()
    if not settings.supabase_url or not settings.supabase_service_role_key:
        return None
    return create_client(
        settings.supabase_url,
        settings.supabase_service_role_key
    )
