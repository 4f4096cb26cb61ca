"""Best day to post.

Averages views, revenue and engagement by the weekday a video was published.
"""
from typing import Optional, Sequence

import pandas as pd

from .models import ContentItem
from .parsing import EPOCH

DAYS = ['Sun', 'Mon', 'Tue', 'Wed', 'Thu', 'Fri', 'Sat']


def day_of_week_stats(items: Sequence[ContentItem]) -> pd.DataFrame:
    """Aggregate stats per weekday.

    Args:
        items: Videos to aggregate; undated items are skipped

    Returns:
        DataFrame with one row per day (Sun..Sat) and columns ``day``,
        ``day_index``, ``avg_views``, ``avg_revenue``, ``avg_engagement``
        and ``video_count``. Days without videos have zeros.
    """
    rows = []
    for item in items:
        if item.published_at == EPOCH:
            continue
        engagement = (item.likes / item.primary_metric) * 100 if item.primary_metric > 0 else 0.0
        rows.append({
            # Python weeks start on Monday; shift so Sunday is 0
            'day_index': (item.published_at.weekday() + 1) % 7,
            'views': item.primary_metric,
            'revenue': item.revenue,
            'engagement': engagement,
        })

    df = pd.DataFrame(rows, columns=['day_index', 'views', 'revenue', 'engagement']).astype(
        {'day_index': int, 'views': float, 'revenue': float, 'engagement': float}
    )
    grouped = df.groupby('day_index').agg(
        avg_views=('views', 'mean'),
        avg_revenue=('revenue', 'mean'),
        avg_engagement=('engagement', 'mean'),
        video_count=('views', 'size'),
    )
    stats = grouped.reindex(pd.Index(range(7), name='day_index')).fillna(0)
    stats['video_count'] = stats['video_count'].astype(int)
    stats = stats.reset_index()
    stats.insert(0, 'day', DAYS)
    return stats


def best_day(stats: pd.DataFrame) -> Optional[str]:
    """Day with the highest average views among days that have videos."""
    active = stats[stats['video_count'] > 0]
    if active.empty:
        return None
    return active.loc[active['avg_views'].idxmax(), 'day']
