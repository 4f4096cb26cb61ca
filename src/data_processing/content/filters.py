"""Sorting and filtering for the content grids.

Single-key, stable sorts and simple predicate filters. Outlier ranking is
delegated to the outlier scorer so "Best Outliers" uses the same neutral
default everywhere.
"""
from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple

from src.data_processing.outlier_analysis.outlier_scorer import OutlierResult, rank_by_outlier
from .models import ContentItem
from .parsing import EPOCH, parse_duration


class SortOption(str, Enum):
    """Sort orders offered by the grid controls."""
    NEWEST = 'newest'
    OLDEST = 'oldest'
    VIEWS = 'views'
    REVENUE = 'revenue'
    LIKES = 'likes'
    COMMENTS = 'comments'
    SHARES = 'shares'
    SUBS_GAINED = 'subs_gained'
    WATCH_TIME = 'watch_time'
    DURATION = 'duration'
    BEST_OUTLIERS = 'best_outliers'

    @property
    def label(self) -> str:
        return SORT_LABELS[self]


SORT_LABELS: Dict[SortOption, str] = {
    SortOption.NEWEST: 'Newest',
    SortOption.OLDEST: 'Oldest',
    SortOption.VIEWS: 'Most Views',
    SortOption.REVENUE: 'Most Revenue',
    SortOption.LIKES: 'Most Likes',
    SortOption.COMMENTS: 'Most Comments',
    SortOption.SHARES: 'Most Shares',
    SortOption.SUBS_GAINED: 'Most Subs Gained',
    SortOption.WATCH_TIME: 'Most Watch Time',
    SortOption.DURATION: 'Longest',
    SortOption.BEST_OUTLIERS: 'Best Outliers',
}

# Descending sort keys; OLDEST and BEST_OUTLIERS are handled separately
_SORT_KEYS: Dict[SortOption, Callable[[ContentItem], Any]] = {
    SortOption.NEWEST: lambda item: item.published_at,
    SortOption.VIEWS: lambda item: item.primary_metric,
    SortOption.REVENUE: lambda item: item.revenue,
    SortOption.LIKES: lambda item: item.likes,
    SortOption.COMMENTS: lambda item: item.comments,
    SortOption.SHARES: lambda item: item.shares,
    SortOption.SUBS_GAINED: lambda item: item.subs_gained,
    SortOption.WATCH_TIME: lambda item: item.minutes_watched,
    SortOption.DURATION: lambda item: parse_duration(item.duration),
}


def sort_items(items: Sequence[ContentItem], option: SortOption,
               outlier_result: Optional[OutlierResult] = None) -> List[ContentItem]:
    """Return a new list sorted by ``option``.

    Args:
        items: Items to sort
        option: Sort order
        outlier_result: Required for BEST_OUTLIERS; ignored otherwise

    Returns:
        Sorted copy of items. Ties keep their original order.
    """
    option = SortOption(option)
    if option == SortOption.BEST_OUTLIERS:
        # An empty outlier set still carries ratios to rank by
        result = outlier_result if outlier_result is not None else OutlierResult()
        return rank_by_outlier(items, result)
    if option == SortOption.OLDEST:
        return sorted(items, key=lambda item: item.published_at)
    return sorted(items, key=_SORT_KEYS[option], reverse=True)


@dataclass
class ContentFilter:
    """Grid filter criteria. Empty criteria match everything."""
    query: str = ''
    date_from: Optional[date] = None
    date_to: Optional[date] = None
    sources: List[str] = field(default_factory=list)
    creators: List[str] = field(default_factory=list)

    def matches(self, item: ContentItem) -> bool:
        if self.query.strip() and self.query.strip().lower() not in item.title.lower():
            return False
        if self.sources and item.source not in self.sources:
            return False
        if self.creators and item.creator not in self.creators:
            return False
        if self.date_from or self.date_to:
            # Undated items are kept; the range cannot judge them
            if item.published_at != EPOCH:
                published = item.published_at.date()
                if self.date_from and published < _as_date(self.date_from):
                    return False
                if self.date_to and published > _as_date(self.date_to):
                    return False
        return True


def _as_date(value) -> date:
    return value.date() if isinstance(value, datetime) else value


def date_range_bounds(value) -> Tuple[Optional[date], Optional[date]]:
    """Split a date-range picker value into ``(date_from, date_to)``.

    The picker returns a single date, or a tuple of zero to two dates while
    a range is being chosen. A missing end leaves the range open.
    """
    if value is None:
        return None, None
    if isinstance(value, (list, tuple)):
        bounds = list(value[:2]) + [None, None]
        return bounds[0], bounds[1]
    return value, None


def apply_filters(items: Sequence[ContentItem], content_filter: ContentFilter) -> List[ContentItem]:
    """Keep the items matching ``content_filter``, in their original order."""
    return [item for item in items if content_filter.matches(item)]


def unique_creators(items: Sequence[ContentItem]) -> List[str]:
    """Sorted, de-duplicated list of non-empty creators."""
    return sorted({item.creator for item in items if item.creator})


def paginate(items: Sequence[ContentItem], count: int) -> List[ContentItem]:
    """First ``count`` items, for the "load more" grid."""
    return list(items[:max(0, count)])
