"""Cached sheet fetches shared by the dashboard pages.

Streamlit reruns every page on each interaction, so sheet reads go through
st.cache_data. Scoring and filtering run on the cached results.
"""

import logging

import streamlit as st

from src.config.dashboard_config import DashboardConfig
from src.dashboard.services.content_service import ContentService

logger = logging.getLogger(__name__)


@st.cache_data(ttl=DashboardConfig.CACHE_TTL_SECONDS)
def fetch_videos(month):
    """Videos and channel totals for ``last`` or ``current`` month."""
    logger.info(f"Fetching videos for month={month}")
    return ContentService().get_all_videos(month)


@st.cache_data(ttl=DashboardConfig.CACHE_TTL_SECONDS)
def fetch_reels():
    logger.info("Fetching reels")
    return ContentService().get_reels()


@st.cache_data(ttl=DashboardConfig.CACHE_TTL_SECONDS)
def fetch_revenue_split():
    return ContentService().get_revenue_split()


@st.cache_data(ttl=DashboardConfig.CACHE_TTL_SECONDS)
def fetch_daily_revenue():
    return ContentService().get_daily_revenue()


@st.cache_data(ttl=DashboardConfig.CACHE_TTL_SECONDS)
def fetch_split_timeline():
    return ContentService().get_revenue_split_timeline()


@st.cache_data(ttl=DashboardConfig.CACHE_TTL_SECONDS)
def fetch_audience():
    """Country, device, traffic source and subscriber status breakdowns."""
    logger.info("Fetching audience sheets")
    service = ContentService()
    return {
        'countries': service.get_country_revenue(),
        'devices': service.get_device_views(),
        'traffic': service.get_traffic_sources(),
        'subscriber_status': service.get_subscriber_status(),
    }


# The tracker updates often; refresh it faster than the other sheets
@st.cache_data(ttl=DashboardConfig.SUBSCRIBER_TTL_SECONDS)
def fetch_subscriber_count():
    return ContentService().get_subscriber_count()


def clear_cache():
    """Drop cached sheet data so the next render refetches."""
    for fetch in (fetch_videos, fetch_reels, fetch_revenue_split, fetch_daily_revenue,
                  fetch_split_timeline, fetch_audience, fetch_subscriber_count):
        fetch.clear()
