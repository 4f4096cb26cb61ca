"""Revenue and audience analysis package."""

from .audience_analyzer import (
    SubscriberSnapshot,
    SubscriberStatus,
    parse_country_revenue,
    parse_device_views,
    parse_traffic_sources,
)
from .revenue_analyzer import (
    ChannelTotals,
    RevenueSplit,
    VideoTotals,
    build_split_timeline,
    calculate_video_totals,
    parse_daily_revenue,
    summarize_daily_revenue,
)

__all__ = [
    'ChannelTotals', 'RevenueSplit', 'VideoTotals', 'build_split_timeline', 'calculate_video_totals',
    'parse_daily_revenue', 'summarize_daily_revenue',
    'SubscriberSnapshot', 'SubscriberStatus', 'parse_country_revenue', 'parse_device_views',
    'parse_traffic_sources',
]
