"""Reels Page

Instagram reels with creator filter and outlier scoring.
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
from src.dashboard.components.content_grid import render_content_grid
from src.dashboard.components.data_cache import fetch_reels
from src.dashboard.services.sheets_client import SheetsError
from src.dashboard.utils.style_config import render_section_header

logger = logging.getLogger('src.dashboard.pages')


@auth_required()
def show():
    render_section_header("Reels")
    try:
        with st.spinner('Loading reels...'):
            reels = fetch_reels()
    except (SheetsError, ConfigError) as e:
        logger.error(f"Error loading reels: {str(e)}")
        st.error(f"Error loading reels: {str(e)}")
        st.stop()

    render_content_grid(reels, page_name="reels", is_reels=True, show_creator_filter=True)


if __name__ == "__main__":
    show()
