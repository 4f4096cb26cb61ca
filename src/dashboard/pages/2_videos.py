"""Videos Page

YouTube videos from both channels with outlier scoring.
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
from src.dashboard.components.content_grid import render_content_grid, render_month_selector
from src.dashboard.components.data_cache import fetch_videos
from src.dashboard.services.sheets_client import SheetsError
from src.dashboard.utils.style_config import render_section_header

logger = logging.getLogger('src.dashboard.pages')

CHANNELS = {
    'all': 'Both channels',
    'senbo': 'Senne & Bo',
    'senne': 'Senne',
}


@auth_required()
def show():
    render_section_header("Videos")
    col1, col2 = st.columns(2)
    with col1:
        month = render_month_selector("videos_month")
    with col2:
        channel = st.radio("Channel", list(CHANNELS), format_func=CHANNELS.get, horizontal=True,
                           key="videos_channel")

    try:
        with st.spinner('Loading videos...'):
            batch = fetch_videos(month)
    except (SheetsError, ConfigError) as e:
        logger.error(f"Error loading videos: {str(e)}")
        st.error(f"Error loading videos: {str(e)}")
        st.stop()

    items = batch.items
    if channel != 'all':
        items = [item for item in items if item.source == channel]

    # Each channel/month combination keeps its own grid state
    render_content_grid(items, page_name=f"videos_{month}_{channel}")


if __name__ == "__main__":
    show()
