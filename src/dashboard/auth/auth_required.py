"""Authentication decorator for dashboard pages."""

import streamlit as st
from functools import wraps

from src.shared.auth import is_authenticated


def auth_required():
    """Decorator to require an unlocked dashboard for a page or function."""
    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            if not is_authenticated():
                st.warning("Enter the access code to view this page")
                st.stop()
            return func(*args, **kwargs)

        return wrapper
    return decorator
