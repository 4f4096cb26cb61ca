"""Supabase client utilities."""

from supabase import Client, create_client

from src.config.api_config import ConfigError, read_secret


def get_supabase_client() -> Client:
    """Get a Supabase client for the planner board.

    The planner table is open to the anon role, so the anon key is enough.
    """
    url = read_secret("SUPABASE_URL")
    key = read_secret("SUPABASE_ANON_KEY")
    if not url or not key:
        raise ConfigError("Missing Supabase credentials")

    # Accept a bare project ref or host as well as a full URL
    if not url.startswith('http'):
        if not url.endswith('.supabase.co'):
            url = f"{url}.supabase.co"
        url = f"https://{url}"
    return create_client(url.rstrip('/'), key)
