"""
Session state management for the dashboard.

Dashboard-wide settings (theme, hide-revenue, outlier threshold, month) live
in one DashboardState. It is loaded from the preference file once per
browser session and written through on every change. The access unlock is
not part of it and stays in the browser session (see src/shared/auth.py).
Page-scoped grid state is kept separately under ``state_<page>`` keys.
"""

__all__ = [
    'DashboardState', 'PreferenceStore', 'GridState',
    'get_dashboard_state', 'update_dashboard_state',
    'get_page_state', 'update_page_state', 'get_grid_state', 'update_grid_state'
]

import json
import logging
import os
from dataclasses import dataclass, field, asdict, fields
from datetime import date
from pathlib import Path
from typing import Any, Dict, List, Optional

import streamlit as st

from src.config.dashboard_config import DashboardConfig

logger = logging.getLogger(__name__)

DEFAULT_PREFS_PATH = Path(__file__).parent.parent.parent.parent / '.dashboard_prefs.json'


@dataclass
class DashboardState:
    """Dashboard-wide settings persisted between sessions."""
    hide_revenue: bool = False
    theme: str = 'dark'
    outlier_threshold: float = DashboardConfig.DEFAULT_THRESHOLD
    month: str = 'last'

    def __post_init__(self):
        if self.theme not in ('dark', 'light'):
            self.theme = 'dark'
        if self.month not in DashboardConfig.MONTHS:
            self.month = 'last'
        self.outlier_threshold = DashboardConfig.clamp_threshold(self.outlier_threshold)


class PreferenceStore:
    """JSON file holding the persisted DashboardState."""

    def __init__(self, path: Optional[Path] = None):
        env_path = os.getenv('DASHBOARD_PREFS_PATH')
        self.path = Path(path or env_path or DEFAULT_PREFS_PATH)

    def load(self) -> DashboardState:
        """Load saved state, or defaults when the file is missing or unreadable."""
        if not self.path.exists():
            return DashboardState()
        try:
            data = json.loads(self.path.read_text(encoding='utf-8'))
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Ignoring unreadable preferences at {self.path}: {str(e)}")
            return DashboardState()
        if not isinstance(data, dict):
            return DashboardState()

        known = {f.name for f in fields(DashboardState)}
        try:
            return DashboardState(**{k: v for k, v in data.items() if k in known})
        except (TypeError, ValueError) as e:
            logger.warning(f"Ignoring invalid preferences at {self.path}: {str(e)}")
            return DashboardState()

    def save(self, state: DashboardState) -> None:
        """Write state to disk."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(asdict(state), indent=2), encoding='utf-8')


def _store() -> PreferenceStore:
    if 'preference_store' not in st.session_state:
        st.session_state.preference_store = PreferenceStore()
    return st.session_state.preference_store


def get_dashboard_state() -> DashboardState:
    """Get dashboard state, loading it from the preference file on first use.

    Returns:
        DashboardState instance
    """
    if 'dashboard' not in st.session_state:
        st.session_state.dashboard = asdict(_store().load())
    return DashboardState(**st.session_state.dashboard)


def update_dashboard_state(state: DashboardState) -> None:
    """Update dashboard state in the session and write it through to disk.

    This is the ONLY way dashboard state should be updated.
    Do not modify st.session_state directly.

    Args:
        state: New dashboard state
    """
    st.session_state.dashboard = asdict(state)
    try:
        _store().save(state)
    except OSError as e:
        # The session copy is still current; only persistence is lost
        logger.error(f"Failed to save preferences: {str(e)}")


@dataclass
class GridState:
    """Filter and paging state for a content grid page."""
    query: str = ''
    sort_by: str = 'newest'
    creators: List[str] = field(default_factory=list)
    date_from: Optional[date] = None
    date_to: Optional[date] = None
    show_outliers: bool = False
    display_count: int = DashboardConfig.PAGE_SIZE


def get_page_state(page_name: str) -> Dict[str, Any]:
    """Get state for a specific page.

    Args:
        page_name: Name of the page to get state for

    Returns:
        Dictionary containing the page's state
    """
    key = f"state_{page_name}"
    if key not in st.session_state:
        st.session_state[key] = {}
    return st.session_state[key]


def update_page_state(page_name: str, state: Any) -> None:
    """Update state for a specific page.

    Args:
        page_name: Name of the page to update state for
        state: New state to set
    """
    key = f"state_{page_name}"
    st.session_state[key] = state


def get_grid_state(page_name: str) -> GridState:
    """Get grid state for a specific page.

    Args:
        page_name: Name of the page to get grid state for

    Returns:
        GridState instance for the page
    """
    state = get_page_state(page_name)
    if "grid" not in state:
        state["grid"] = asdict(GridState())
    return GridState(**state["grid"])


def update_grid_state(page_name: str, grid: GridState) -> None:
    """Update grid state for a specific page.

    Args:
        page_name: Name of the page to update grid state for
        grid: New grid state
    """
    state = get_page_state(page_name)
    state["grid"] = asdict(grid)
