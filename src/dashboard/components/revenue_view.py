"""Revenue View Component.

Shows:
- Channel totals for the selected month
- Live subscriber count
- Revenue split between Bowie and Senne, overall and per day
- Daily revenue timeline
- Best day to post
"""

import logging

import pandas as pd
import plotly.graph_objects as go
import streamlit as st

from src.data_processing.content.day_analysis import best_day, day_of_week_stats
from src.data_processing.revenue import RevenueSplit, SubscriberSnapshot, VideoTotals, summarize_daily_revenue
from src.dashboard.templates.defaults import create_bar_defaults, create_scatter_defaults
from src.dashboard.utils.formatting import format_revenue, format_views
from src.dashboard.utils.style_config import COLORS, render_metric_card, render_section_header

logger = logging.getLogger(__name__)


def render_subscriber_count(snapshot: SubscriberSnapshot, theme: str):
    """Render the latest subscriber tracker numbers."""
    col1, col2, col3 = st.columns(3)
    with col1:
        render_metric_card("Subscribers", format_views(snapshot.subscribers),
                           subtitle=f"Updated {snapshot.last_updated}" if snapshot.last_updated else None,
                           theme=theme)
    with col2:
        render_metric_card("Channel Views", format_views(snapshot.total_views), theme=theme)
    with col3:
        render_metric_card("Videos", f"{snapshot.total_videos:,}", theme=theme)


def render_totals(totals: VideoTotals, hide_revenue: bool, theme: str):
    """Render per-channel and combined totals as metric cards."""
    render_section_header("Channel Totals")
    combined = totals.combined
    col1, col2, col3 = st.columns(3)
    for column, title, channel in (
        (col1, "Senne & Bo", totals.senbo),
        (col2, "Senne", totals.senne),
        (col3, "Combined", combined),
    ):
        with column:
            render_metric_card(
                title,
                format_revenue(channel.revenue, hidden=hide_revenue),
                subtitle=f"{format_views(channel.views)} views",
                theme=theme,
            )


def render_revenue_split(split: RevenueSplit, hide_revenue: bool, theme: str):
    """Render last month's split between Bowie and Senne."""
    render_section_header("Revenue Split")
    if split.total <= 0:
        st.info("No revenue split recorded for last month.")
        return

    col1, col2 = st.columns(2)
    for column, name, amount in ((col1, 'bowie', split.bowie), (col2, 'senne', split.senne)):
        with column:
            render_metric_card(
                name.title(),
                format_revenue(amount, hidden=hide_revenue),
                subtitle=f"{split.share(name):.0f}% of total",
                theme=theme,
            )

    fig = go.Figure(template=create_bar_defaults(theme, value_format='.1f', horizontal=True))
    fig.add_bar(
        x=[split.share('bowie'), split.share('senne')],
        y=['Bowie', 'Senne'],
        orientation='h',
        marker_color=[COLORS['creators']['bowie'], COLORS['creators']['senne']],
    )
    fig.update_layout(height=180, xaxis_title="Share of revenue (%)")
    st.plotly_chart(fig, use_container_width=True)


def render_split_timeline(timeline_df: pd.DataFrame, hide_revenue: bool, theme: str):
    """Render each day's revenue stacked by creator."""
    render_section_header("Split Over Time")
    if timeline_df.empty:
        st.info("No daily revenue to split yet.")
        return
    if hide_revenue:
        st.caption("Revenue is hidden.")
        return

    fig = go.Figure(template=create_bar_defaults(theme))
    for column, name, color in (
        ('bowie_revenue', 'Bowie', COLORS['creators']['bowie']),
        ('senne_revenue', 'Senne', COLORS['creators']['senne']),
    ):
        fig.add_bar(x=timeline_df['date'], y=timeline_df[column], name=name, marker_color=color, showlegend=True)
    fig.update_layout(barmode='stack', yaxis_title="Revenue ($)", legend=dict(orientation='h', y=1.1))
    st.plotly_chart(fig, use_container_width=True)


def render_daily_revenue(daily_df: pd.DataFrame, hide_revenue: bool, theme: str):
    """Render the daily revenue line chart with headline numbers."""
    render_section_header("Daily Revenue")
    if daily_df.empty:
        st.info("No daily revenue data available.")
        return

    summary = summarize_daily_revenue(daily_df)
    col1, col2, col3 = st.columns(3)
    with col1:
        render_metric_card("Total", format_revenue(summary['total_revenue'], hidden=hide_revenue), theme=theme)
    with col2:
        render_metric_card("Daily Average", format_revenue(summary['avg_revenue'], hidden=hide_revenue), theme=theme)
    with col3:
        render_metric_card("Best Day", format_revenue(summary['best_day_revenue'], hidden=hide_revenue), theme=theme)

    if hide_revenue:
        return

    fig = go.Figure(template=create_scatter_defaults(theme))
    fig.add_scatter(x=daily_df['date'], y=daily_df['revenue'], name='Revenue')
    fig.update_layout(yaxis_title="Revenue ($)")
    st.plotly_chart(fig, use_container_width=True)


def render_best_day(items, theme: str):
    """Render average views per weekday and call out the best day."""
    render_section_header("Best Day to Post")
    stats = day_of_week_stats(items)
    day = best_day(stats)
    if day is None:
        st.info("Not enough dated videos to compare weekdays.")
        return

    st.markdown(f"**{day}** has the highest average views this month.")
    fig = go.Figure(template=create_bar_defaults(theme, value_format=',.0f'))
    fig.add_bar(
        x=stats['day'],
        y=stats['avg_views'],
        customdata=stats[['video_count', 'avg_engagement']].to_numpy(),
        hovertemplate="%{x}<br>Avg views: %{y:,.0f}<br>Videos: %{customdata[0]}<br>"
                      "Engagement: %{customdata[1]:.1f}%<extra></extra>",
    )
    fig.update_layout(yaxis_title="Average views")
    st.plotly_chart(fig, use_container_width=True)
