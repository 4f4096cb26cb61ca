"""
SenBo Dashboard
Main application file for the Streamlit dashboard.
"""

import streamlit as st
import sys
import os
from pathlib import Path

# Set page config must be first Streamlit command
st.set_page_config(
    page_title="SenBo Dashboard",
    page_icon="🎬",
    layout="wide"
)

# Add src to path
src_path = os.path.abspath(os.path.join(os.path.dirname(__file__), '..', '..'))
if src_path not in sys.path:
    sys.path.append(src_path)

from dotenv import load_dotenv

from src.config.dashboard_config import DashboardConfig
from src.config.logging_config import setup_logging
from src.shared.auth import is_authenticated, login, logout
from src.dashboard.components.data_cache import clear_cache
from src.dashboard.state.session import get_dashboard_state, update_dashboard_state
from src.dashboard.utils.style_config import apply_theme

# Load environment variables
load_dotenv(Path(__file__).parents[2] / '.env')

logger = setup_logging(__name__)

PAGES_DIR = Path(__file__).parent / 'pages'


def show_login():
    """Show the access code form."""
    st.markdown("### SenBo Dashboard")
    code = st.text_input("Access code", type="password", key="access_code")
    if st.button("Unlock", key="unlock_button"):
        if login(code):
            st.rerun()
        else:
            st.error("Incorrect access code")


def show_sidebar():
    """Theme, revenue visibility, refresh and logout controls."""
    dashboard = get_dashboard_state()
    with st.sidebar:
        dark = st.toggle("Dark mode", value=dashboard.theme == 'dark', key="theme_toggle")
        hide_revenue = st.toggle("Hide revenue", value=dashboard.hide_revenue, key="hide_revenue_toggle")

        theme = 'dark' if dark else 'light'
        if theme != dashboard.theme or hide_revenue != dashboard.hide_revenue:
            dashboard.theme = theme
            dashboard.hide_revenue = hide_revenue
            update_dashboard_state(dashboard)

        if st.button("Refresh data"):
            clear_cache()
            st.rerun()

        if st.button('Logout'):
            logout()
            st.rerun()

        st.caption(f"v{DashboardConfig.VERSION}")
    apply_theme(dashboard.theme)


def main():
    """Main application entry point."""
    if not is_authenticated():
        show_login()
        return

    show_sidebar()

    try:
        # Set up navigation
        pages = {
            "Channels": [
                st.Page(str(PAGES_DIR / "1_revenue.py"), title="Revenue", icon="💰"),
                st.Page(str(PAGES_DIR / "2_videos.py"), title="Videos", icon="▶️"),
                st.Page(str(PAGES_DIR / "3_reels.py"), title="Reels", icon="📸"),
            ],
            "Tools": [
                st.Page(str(PAGES_DIR / "4_planner.py"), title="Planner", icon="🗂️"),
                st.Page(str(PAGES_DIR / "5_learn.py"), title="Learn", icon="🎓"),
            ],
        }

        # Run navigation
        pg = st.navigation(pages)
        pg.run()
    except Exception as e:
        logger.error(f"Error loading page: {str(e)}")
        st.error("An error occurred loading the page. Please try again.")
        st.error(str(e))

if __name__ == "__main__":
    main()
