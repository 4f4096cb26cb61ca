"""Learn Page

Guess which video did better.
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
from src.dashboard.auth.auth_required import auth_required
from src.dashboard.components.data_cache import fetch_videos
from src.dashboard.components.learn_view import render_learn
from src.dashboard.services.sheets_client import SheetsError
from src.dashboard.state.session import get_dashboard_state
from src.dashboard.utils.style_config import render_section_header

logger = logging.getLogger('src.dashboard.pages')


@auth_required()
def show():
    render_section_header("Learn")
    dashboard = get_dashboard_state()
    try:
        with st.spinner('Loading videos...'):
            batch = fetch_videos(dashboard.month)
    except (SheetsError, ConfigError) as e:
        logger.error(f"Error loading videos: {str(e)}")
        st.error(f"Error loading videos: {str(e)}")
        st.stop()

    render_learn(batch.items, dashboard.theme)


if __name__ == "__main__":
    show()
