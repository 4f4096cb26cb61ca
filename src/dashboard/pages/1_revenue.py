"""Revenue Page

Subscriber count, channel totals, revenue split, daily revenue, the best day
to post and the audience breakdowns.
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
from src.dashboard.components.content_grid import render_month_selector
from src.dashboard.components.audience_view import render_audience
from src.dashboard.components.data_cache import (
    fetch_audience, fetch_daily_revenue, fetch_revenue_split, fetch_split_timeline,
    fetch_subscriber_count, fetch_videos
)
from src.dashboard.components.revenue_view import (
    render_best_day, render_daily_revenue, render_revenue_split, render_split_timeline,
    render_subscriber_count, render_totals
)
from src.dashboard.services.sheets_client import SheetsError
from src.dashboard.state.session import get_dashboard_state
from src.dashboard.utils.style_config import render_section_header

# Pages run as __main__; log under the package so the handlers apply
logger = logging.getLogger('src.dashboard.pages')


@auth_required()
def show():
    render_section_header("Revenue")
    dashboard = get_dashboard_state()
    month = render_month_selector("revenue_month")

    try:
        with st.spinner('Loading revenue...'):
            batch = fetch_videos(month)
            split = fetch_revenue_split()
            daily_df = fetch_daily_revenue()
            timeline_df = fetch_split_timeline()
            audience = fetch_audience()
            snapshot = fetch_subscriber_count()
    except (SheetsError, ConfigError) as e:
        logger.error(f"Error loading revenue data: {str(e)}")
        st.error(f"Error loading revenue data: {str(e)}")
        st.stop()

    render_subscriber_count(snapshot, dashboard.theme)
    if batch.totals is not None:
        render_totals(batch.totals, dashboard.hide_revenue, dashboard.theme)
    render_revenue_split(split, dashboard.hide_revenue, dashboard.theme)
    render_split_timeline(timeline_df, dashboard.hide_revenue, dashboard.theme)
    render_daily_revenue(daily_df, dashboard.hide_revenue, dashboard.theme)
    render_best_day(batch.items, dashboard.theme)
    render_audience(audience, dashboard.hide_revenue, dashboard.theme)


if __name__ == "__main__":
    show()
