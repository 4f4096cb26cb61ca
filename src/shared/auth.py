"""Shared authentication module for the dashboard pages.

The dashboard is protected by a single access code. An unlock lives in this
browser session's ``st.session_state`` only and is never written to the
preference file, so each new session starts locked.
"""

import hmac
import logging
from typing import Optional

import streamlit as st

from src.config.api_config import APIConfig

logger = logging.getLogger(__name__)


def check_access_code(candidate: Optional[str], expected: Optional[str]) -> bool:
    """Compare an entered code with the configured one, ignoring case.

    Args:
        candidate: Code typed by the user
        expected: Configured access code

    Returns:
        bool: True when the codes match. Always False when no code is configured.
    """
    if not expected or candidate is None:
        return False
    return hmac.compare_digest(candidate.strip().lower().encode(), expected.strip().lower().encode())


def init_auth_state():
    """Initialize authentication state variables."""
    if 'authenticated' not in st.session_state:
        st.session_state.authenticated = False


def is_authenticated() -> bool:
    init_auth_state()
    return bool(st.session_state.authenticated)


def login(code: str) -> bool:
    """Handle an unlock attempt.

    Args:
        code: Access code entered by the user

    Returns:
        bool: True if unlock successful, False otherwise
    """
    init_auth_state()
    if not check_access_code(code, APIConfig.access_code()):
        logger.warning("Rejected dashboard access code")
        return False

    st.session_state.authenticated = True
    return True


def logout() -> None:
    """Lock the dashboard again."""
    st.session_state.authenticated = False
