"""Content Grid Component.

Card grid for videos and reels with:
- Search, creator, publish date and sort controls
- Outlier threshold input and "Best Outliers" toggle
- Outlier badges on cards that beat their neighbours
- Views vs neighbour ratio chart
- Per-item stats dialog
- Load more paging
"""

import html
import logging
from typing import List, Optional, Sequence

import pandas as pd
import plotly.graph_objects as go
import streamlit as st

from src.config.dashboard_config import DashboardConfig
from src.data_processing.content.filters import (
    ContentFilter, SortOption, apply_filters, date_range_bounds, paginate, sort_items, unique_creators
)
from src.data_processing.content.models import ContentItem
from src.data_processing.outlier_analysis import OutlierAnalyzer, OutlierResult, filter_outliers
from src.dashboard.state.session import (
    get_dashboard_state, update_dashboard_state, get_grid_state, update_grid_state
)
from src.dashboard.templates.defaults import create_scatter_defaults
from src.dashboard.utils.formatting import (
    format_duration, format_ratio, format_revenue, format_short_date, format_views, video_stat_rows
)
from src.dashboard.utils.style_config import COLORS, SOURCE_LABELS, render_metric_card, theme_colors

logger = logging.getLogger(__name__)

VIDEO_SORTS = [
    SortOption.NEWEST, SortOption.OLDEST, SortOption.VIEWS, SortOption.REVENUE,
    SortOption.LIKES, SortOption.SHARES, SortOption.SUBS_GAINED, SortOption.WATCH_TIME,
    SortOption.DURATION, SortOption.BEST_OUTLIERS,
]
REEL_SORTS = [
    SortOption.NEWEST, SortOption.OLDEST, SortOption.VIEWS, SortOption.LIKES,
    SortOption.COMMENTS, SortOption.SHARES, SortOption.BEST_OUTLIERS,
]

GRID_COLUMNS = 3


def render_threshold_input(key: str) -> float:
    """Render the outlier threshold input and persist changes.

    Returns:
        The clamped threshold now in effect
    """
    dashboard = get_dashboard_state()
    value = st.number_input(
        "Outlier threshold (x neighbours)",
        min_value=DashboardConfig.THRESHOLD_MIN,
        max_value=DashboardConfig.THRESHOLD_MAX,
        value=dashboard.outlier_threshold,
        step=DashboardConfig.THRESHOLD_STEP,
        key=key,
    )
    threshold = DashboardConfig.clamp_threshold(value)
    if threshold != dashboard.outlier_threshold:
        dashboard.outlier_threshold = threshold
        update_dashboard_state(dashboard)
    return threshold


def render_month_selector(key: str) -> str:
    """Render the last/current month switch and persist changes."""
    dashboard = get_dashboard_state()
    labels = {'last': 'Last Month', 'current': 'Current Month'}
    month = st.radio(
        "Month",
        options=list(DashboardConfig.MONTHS),
        index=list(DashboardConfig.MONTHS).index(dashboard.month),
        format_func=labels.get,
        horizontal=True,
        key=key,
    )
    if month != dashboard.month:
        dashboard.month = month
        update_dashboard_state(dashboard)
    return month


def _thumbnail(item: ContentItem) -> str:
    if item.thumbnail_url:
        return item.thumbnail_url
    return f"https://img.youtube.com/vi/{item.video_id}/hqdefault.jpg" if item.video_id else ''


def card_html(item: ContentItem, result: OutlierResult, hide_revenue: bool, theme: str) -> str:
    """HTML for one grid card. Sheet text is escaped."""
    colors = theme_colors(theme)
    badge = ''
    if result.is_outlier(item.identity):
        badge = (
            f'<span style="background-color: {COLORS["outlier"]}; color: #000; border-radius: 4px; '
            f'padding: 2px 6px; font-size: 12px; font-weight: 600;">'
            f'{format_ratio(result.ratio_for(item.identity, default=None))}</span>'
        )

    title = html.escape(item.title)
    url = html.escape(item.url, quote=True)
    thumb = html.escape(_thumbnail(item), quote=True)
    image = f'<img src="{thumb}" alt="{title}" style="width: 100%; border-radius: 6px;"/>' if thumb else ''

    if item.source == 'reel':
        stats = f"{format_views(item.views)} views · {format_views(item.likes)} likes · {format_views(item.comments)} comments"
    else:
        stats = f"{format_views(item.views)} views · {format_revenue(item.revenue, hidden=hide_revenue)}"

    meta = html.escape(' · '.join(part for part in (
        SOURCE_LABELS.get(item.source, item.source),
        item.creator,
        format_short_date(item.published_at),
        format_duration(item.duration),
    ) if part))

    return f"""
        <div style="padding: 8px; border: 1px solid {colors['border']}; border-radius: 8px; background-color: {colors['card']}; margin-bottom: 4px;">
            <a href="{url}" target="_blank">{image}</a>
            <div style="margin-top: 6px; font-weight: 600; color: {colors['text']['primary']};">{title}</div>
            <div style="font-size: 12px; color: {colors['text']['secondary']};">{meta}</div>
            <div style="font-size: 13px; color: {colors['text']['primary']};">{stats} {badge}</div>
        </div>
        """


@st.dialog("Stats")
def show_item_stats(item: ContentItem, ratio: Optional[float], hide_revenue: bool, theme: str):
    """Dialog with every metric of one video or reel."""
    st.subheader(item.title)
    thumb = _thumbnail(item)
    if thumb:
        st.image(thumb, use_container_width=True)
    platform = "Instagram" if item.source == 'reel' else "YouTube"
    st.link_button(f"Watch on {platform}", item.url, use_container_width=True)

    stats = video_stat_rows(item, hide_revenue=hide_revenue, ratio=ratio)
    for start in range(0, len(stats), 2):
        for column, (label, value) in zip(st.columns(2), stats[start:start + 2]):
            with column:
                render_metric_card(label, value, theme=theme)


def render_outlier_chart(frame: pd.DataFrame, threshold: float, theme: str):
    """Scatter of views against the neighbour ratio, outliers highlighted."""
    scored = frame.dropna(subset=['outlier_ratio'])
    if scored.empty:
        st.info("Not enough content to compare against neighbours.")
        return

    fig = go.Figure(template=create_scatter_defaults(theme))
    for flagged, name, color in ((False, 'Regular', COLORS['accent']), (True, 'Outlier', COLORS['outlier'])):
        part = scored[scored['is_outlier'] == flagged]
        fig.add_scatter(
            x=part['primary_metric'],
            y=part['outlier_ratio'],
            mode='markers',
            name=name,
            marker=dict(color=color, size=8),
            text=part['title'],
            hovertemplate="%{text}<br>%{x:,.0f} views<br>%{y:.1f}x neighbours<extra></extra>",
        )
    fig.add_hline(y=threshold, line_dash='dash', line_color=COLORS['outlier'])
    fig.update_layout(
        showlegend=True,
        xaxis_title="Views",
        yaxis_title="Ratio to neighbours",
    )
    st.plotly_chart(fig, use_container_width=True)


def render_content_grid(items: Sequence[ContentItem], page_name: str, is_reels: bool = False,
                        show_creator_filter: bool = False):
    """Render filters, outlier controls and the card grid.

    Args:
        items: Content to display
        page_name: Key for page-scoped grid state
        is_reels: Use reel sort options and stats
        show_creator_filter: Offer a creator multiselect
    """
    dashboard = get_dashboard_state()
    grid = get_grid_state(page_name)
    sort_options = REEL_SORTS if is_reels else VIDEO_SORTS

    col1, col2, col3, col4 = st.columns([3, 2, 2, 1])
    with col1:
        grid.query = st.text_input("Search titles", value=grid.query, key=f"{page_name}_query")
    with col2:
        current = SortOption(grid.sort_by)
        sort_by = st.selectbox(
            "Sort by",
            options=sort_options,
            index=sort_options.index(current) if current in sort_options else 0,
            format_func=lambda option: option.label,
            key=f"{page_name}_sort",
        )
        grid.sort_by = sort_by.value
    with col3:
        threshold = render_threshold_input(f"{page_name}_threshold")
    with col4:
        grid.show_outliers = st.toggle("Outliers only", value=grid.show_outliers, key=f"{page_name}_outliers")

    with st.expander("Advanced filters", expanded=bool(grid.date_from or grid.date_to)):
        creators: List[str] = []
        if show_creator_filter:
            options = unique_creators(items)
            creators = st.multiselect(
                "Creators", options=options,
                default=[c for c in grid.creators if c in options],
                key=f"{page_name}_creators",
            )
        picked = st.date_input(
            "Published between",
            value=tuple(day for day in (grid.date_from, grid.date_to) if day),
            format="DD/MM/YYYY",
            key=f"{page_name}_dates",
        )
    grid.creators = creators
    grid.date_from, grid.date_to = date_range_bounds(picked)

    filtered = apply_filters(items, ContentFilter(
        query=grid.query,
        date_from=grid.date_from,
        date_to=grid.date_to,
        creators=creators,
    ))

    # Ratios depend on the batch, so score what the filters kept
    analyzer = OutlierAnalyzer(threshold=threshold)
    frame = analyzer.score_frame(filtered)
    result = analyzer.last_result

    if grid.show_outliers:
        filtered = filter_outliers(filtered, result)
    ordered = sort_items(filtered, SortOption(grid.sort_by), result)

    st.caption(f"{len(ordered)} items · {len(result.outliers)} outliers at {threshold:g}x")

    if not ordered:
        st.info("No content matches the current filters.")
        update_grid_state(page_name, grid)
        return

    with st.expander("Views vs neighbours"):
        render_outlier_chart(frame, threshold, dashboard.theme)

    visible = paginate(ordered, grid.display_count)
    for start in range(0, len(visible), GRID_COLUMNS):
        columns = st.columns(GRID_COLUMNS)
        for column, item in zip(columns, visible[start:start + GRID_COLUMNS]):
            with column:
                st.markdown(card_html(item, result, dashboard.hide_revenue, dashboard.theme),
                            unsafe_allow_html=True)
                if st.button("Stats", key=f"{page_name}_stats_{item.identity}", use_container_width=True):
                    show_item_stats(item, result.ratio_for(item.identity, default=None),
                                    dashboard.hide_revenue, dashboard.theme)

    if len(visible) < len(ordered):
        if st.button("Load more", key=f"{page_name}_load_more"):
            grid.display_count += DashboardConfig.PAGE_SIZE
            update_grid_state(page_name, grid)
            st.rerun()

    update_grid_state(page_name, grid)
