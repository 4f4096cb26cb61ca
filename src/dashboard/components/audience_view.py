"""Audience View Component.

Channel-wide audience breakdowns for the revenue page:
- Revenue by country
- Views by traffic source and by device
- Subscriber vs non-subscriber views
"""

import logging
from typing import Optional

import pandas as pd
import plotly.graph_objects as go
import streamlit as st

from src.config.dashboard_config import DashboardConfig
from src.data_processing.revenue import SubscriberStatus
from src.dashboard.templates.defaults import create_bar_defaults
from src.dashboard.utils.formatting import format_revenue, format_views
from src.dashboard.utils.style_config import render_metric_card, render_section_header

logger = logging.getLogger(__name__)


def render_country_revenue(countries: pd.DataFrame, hide_revenue: bool):
    """Render the top countries table with a "Show all" switch."""
    render_section_header("Revenue by Country")
    if countries.empty:
        st.info("No country revenue recorded.")
        return

    show_all = st.toggle(f"Show all {len(countries)}", value=False, key="countries_show_all")
    shown = countries if show_all else countries.head(DashboardConfig.COUNTRY_PREVIEW)

    table = pd.DataFrame({
        'Country': shown['country'],
        'Revenue': [format_revenue(value, hidden=hide_revenue) for value in shown['revenue']],
        'Views': [format_views(value) for value in shown['views']],
        'RPM': [format_revenue(value, hidden=hide_revenue) for value in shown['rpm']],
    })
    st.dataframe(table, hide_index=True, use_container_width=True)


def _render_views_breakdown(df: pd.DataFrame, title: str, empty_message: str, theme: str):
    render_section_header(title)
    if df.empty:
        st.info(empty_message)
        return

    fig = go.Figure(template=create_bar_defaults(theme, value_format='.1f', horizontal=True))
    fig.add_bar(
        x=df['share'],
        y=df['label'],
        orientation='h',
        customdata=df[['views', 'minutes_watched']].to_numpy(),
        hovertemplate="%{y}: %{x:.1f}%<br>Views: %{customdata[0]:,}<br>"
                      "Minutes watched: %{customdata[1]:,}<extra></extra>",
    )
    fig.update_layout(
        height=max(180, 32 * len(df)),
        xaxis_title="Share of views (%)",
        yaxis=dict(autorange='reversed'),
    )
    st.plotly_chart(fig, use_container_width=True)


def render_traffic_sources(traffic: pd.DataFrame, theme: str):
    _render_views_breakdown(traffic, "Traffic Sources", "No traffic source data available.", theme)


def render_device_views(devices: pd.DataFrame, theme: str):
    _render_views_breakdown(devices, "Views by Device", "No device data available.", theme)


def render_subscriber_status(status: Optional[SubscriberStatus], theme: str):
    """Render subscriber vs non-subscriber view shares."""
    if status is None:
        return
    render_section_header("Subscriber vs Non-Subscriber")
    col1, col2 = st.columns(2)
    with col1:
        render_metric_card(
            "Subscribers",
            f"{status.share(subscribed=True):.1f}%",
            subtitle=f"{format_views(status.subscribed_views)} views · "
                     f"{format_views(status.subscribed_minutes)} minutes",
            theme=theme,
        )
    with col2:
        render_metric_card(
            "Non-Subscribers",
            f"{status.share(subscribed=False):.1f}%",
            subtitle=f"{format_views(status.unsubscribed_views)} views · "
                     f"{format_views(status.unsubscribed_minutes)} minutes",
            theme=theme,
        )


def render_audience(audience: dict, hide_revenue: bool, theme: str):
    """Render every audience section from a ``fetch_audience`` result."""
    render_country_revenue(audience['countries'], hide_revenue)
    col1, col2 = st.columns(2)
    with col1:
        render_traffic_sources(audience['traffic'], theme)
    with col2:
        render_device_views(audience['devices'], theme)
    render_subscriber_status(audience['subscriber_status'], theme)
