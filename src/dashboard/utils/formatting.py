"""Display formatting for cards, badges and tables."""

from datetime import datetime
from typing import List, Optional, Tuple

from src.data_processing.content.parsing import EPOCH

MONTH_ABBR = ['Jan', 'Feb', 'Mar', 'Apr', 'May', 'Jun', 'Jul', 'Aug', 'Sep', 'Oct', 'Nov', 'Dec']

HIDDEN_REVENUE = '$•••'


def format_views(views: float) -> str:
    """Compact view count: 1.2M, 12.3K, 999."""
    if views >= 1_000_000:
        return f"{views / 1_000_000:.1f}M"
    if views >= 1_000:
        return f"{views / 1_000:.1f}K"
    return str(int(views))


def format_revenue(revenue: float, hidden: bool = False) -> str:
    """Dollar amount with two decimals, or a mask when revenue is hidden."""
    if hidden:
        return HIDDEN_REVENUE
    return f"${revenue:,.2f}"


def format_short_date(published_at: Optional[datetime]) -> str:
    """Day and month, e.g. ``27 Dec``. Empty for undated items."""
    if published_at is None or published_at == EPOCH:
        return ''
    return f"{published_at.day} {MONTH_ABBR[published_at.month - 1]}"


def format_duration(duration: str) -> str:
    """Round ``m:ss.fff`` to whole seconds: ``45s`` or ``1:23``."""
    if not duration:
        return ''
    parts = duration.split(':')
    if len(parts) != 2:
        return duration
    try:
        total = round(int(parts[0]) * 60 + float(parts[1]))
    except ValueError:
        return duration
    minutes, seconds = divmod(total, 60)
    if minutes == 0:
        return f"{seconds}s"
    return f"{minutes}:{seconds:02d}"


def format_ratio(ratio: Optional[float]) -> str:
    """Outlier badge text, e.g. ``2.3x``."""
    if ratio is None:
        return ''
    return f"{ratio:.1f}x"


def format_publish_datetime(published_at: Optional[datetime]) -> str:
    """Full publish date, e.g. ``20 Nov 2025, 19:59``."""
    if published_at is None or published_at == EPOCH:
        return 'Unknown'
    return f"{format_short_date(published_at)} {published_at.year}, {published_at:%H:%M}"


def video_stat_rows(item, hide_revenue: bool = False, ratio: Optional[float] = None) -> List[Tuple[str, str]]:
    """Label/value pairs for the stats dialog of a video or reel.

    Args:
        item: ContentItem to describe
        hide_revenue: Mask the revenue value
        ratio: Outlier ratio against the neighbours, when one was recorded

    Returns:
        (label, value) pairs in display order
    """
    if item.source == 'reel':
        rows = [
            ('Views', f"{format_views(item.views)} ({int(item.views):,})"),
            ('Likes', f"{item.likes:,}"),
            ('Comments', f"{item.comments:,}"),
            ('Duration', format_duration(item.duration) or '-'),
        ]
    else:
        rows = [
            ('Revenue', format_revenue(item.revenue, hidden=hide_revenue)),
            ('Views', f"{format_views(item.views)} ({int(item.views):,})"),
            ('Watch Time', f"{format_views(item.minutes_watched)} min"),
            ('Avg Duration', format_duration(item.duration) or '0:00'),
            ('Likes', f"{item.likes:,}"),
            ('Shares', f"{item.shares:,}"),
            ('Subs Gained', f"{item.subs_gained:,}"),
        ]
    rows.append(('Published', format_publish_datetime(item.published_at)))
    if ratio is not None:
        rows.append(('Vs Neighbours', format_ratio(ratio)))
    return rows
