"""Metric accessor table.

Views and quizzes pick a metric by enum, never by attribute name, so every
metric a caller can ask for is listed here with its accessor and label.
"""
from enum import Enum
from typing import Callable, Dict

from .models import ContentItem


class Metric(str, Enum):
    VIEWS = 'views'
    REVENUE = 'revenue'
    LIKES = 'likes'
    SHARES = 'shares'
    COMMENTS = 'comments'
    SUBS_GAINED = 'subs_gained'
    MINUTES_WATCHED = 'minutes_watched'


METRIC_ACCESSORS: Dict[Metric, Callable[[ContentItem], float]] = {
    Metric.VIEWS: lambda item: item.primary_metric,
    Metric.REVENUE: lambda item: item.revenue,
    Metric.LIKES: lambda item: item.likes,
    Metric.SHARES: lambda item: item.shares,
    Metric.COMMENTS: lambda item: item.comments,
    Metric.SUBS_GAINED: lambda item: item.subs_gained,
    Metric.MINUTES_WATCHED: lambda item: item.minutes_watched,
}

METRIC_LABELS: Dict[Metric, str] = {
    Metric.VIEWS: 'Views',
    Metric.REVENUE: 'Revenue',
    Metric.LIKES: 'Likes',
    Metric.SHARES: 'Shares',
    Metric.COMMENTS: 'Comments',
    Metric.SUBS_GAINED: 'Subs Gained',
    Metric.MINUTES_WATCHED: 'Watch Time',
}


def metric_value(item: ContentItem, metric: Metric) -> float:
    """Value of ``metric`` for ``item``."""
    return float(METRIC_ACCESSORS[Metric(metric)](item))


def format_metric_value(value: float, metric: Metric) -> str:
    """Format a metric for display: ``$1,234.50``, ``12K min``, ``1.2M``."""
    metric = Metric(metric)
    if metric == Metric.REVENUE:
        return f"${value:,.2f}"
    suffix = ' min' if metric == Metric.MINUTES_WATCHED else ''
    if value >= 1_000_000:
        return f"{value / 1_000_000:.1f}M{suffix}"
    if value >= 1_000:
        return f"{value / 1_000:.0f}K{suffix}"
    return f"{value:.0f}{suffix}"
