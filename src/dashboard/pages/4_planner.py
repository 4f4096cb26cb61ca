"""Planner Page

Idea, Tomorrow and Special columns for each board.
"""

import logging
import os
import sys

import streamlit as st

# Add src to path
src_path = os.path.abspath(os.path.join(os.path.dirname(__file__), '..', '..', '..'))
if src_path not in sys.path:
    sys.path.append(src_path)

from src.config.api_config import ConfigError
from src.config.dashboard_config import DashboardConfig
from src.dashboard.auth.auth_required import auth_required
from src.dashboard.components.planner_view import render_planner
from src.dashboard.services.planner_service import PlannerError, PlannerService
from src.dashboard.utils.style_config import render_section_header

logger = logging.getLogger('src.dashboard.pages')


@auth_required()
def show():
    render_section_header("Planner")
    board = st.radio(
        "Board",
        options=list(DashboardConfig.PLANNER_BOARDS),
        format_func=DashboardConfig.PLANNER_BOARDS.get,
        horizontal=True,
        key="planner_board",
    )

    try:
        render_planner(PlannerService(), board)
    except (PlannerError, ConfigError) as e:
        logger.error(f"Planner error: {str(e)}")
        st.error(f"Planner error: {str(e)}")
        st.stop()


if __name__ == "__main__":
    show()
