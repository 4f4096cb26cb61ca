"""API configuration."""
import os
from dataclasses import dataclass
from typing import Optional


class ConfigError(ValueError):
    """Raised when a required credential is missing."""
    pass


def read_secret(name: str) -> Optional[str]:
    """Read a setting from the environment, falling back to Streamlit secrets."""
    value = os.getenv(name)
    if value and value.strip():
        return value.strip()
    try:
        import streamlit as st
        from streamlit.errors import StreamlitAPIException
    except ImportError:
        return None
    try:
        value = st.secrets[name]
    except (FileNotFoundError, KeyError, StreamlitAPIException):
        # No secrets.toml, or the key is not in it
        return None
    return str(value).strip() or None


@dataclass
class APIConfig:
    """API configuration settings."""
    google_sheets_api_key: str
    google_sheet_id: str
    supabase_url: Optional[str] = None
    supabase_anon_key: Optional[str] = None

    @classmethod
    def from_env(cls) -> 'APIConfig':
        """Create config from Streamlit secrets or environment variables."""
        api_key = read_secret('GOOGLE_SHEETS_API_KEY')
        if not api_key:
            raise ConfigError("GOOGLE_SHEETS_API_KEY environment variable not set")
        sheet_id = read_secret('GOOGLE_SHEET_ID')
        if not sheet_id:
            raise ConfigError("GOOGLE_SHEET_ID environment variable not set")
        return cls(
            google_sheets_api_key=api_key,
            google_sheet_id=sheet_id,
            supabase_url=read_secret('SUPABASE_URL'),
            supabase_anon_key=read_secret('SUPABASE_ANON_KEY'),
        )

    @staticmethod
    def access_code() -> Optional[str]:
        """Access code for the password gate."""
        return read_secret('DASHBOARD_ACCESS_CODE')
