"""
Audience Analyzer.

Shapes the channel-wide audience sheets for the revenue page:
- Country revenue table (top countries by revenue)
- Views by device and by traffic source, with their share of all views
- Subscriber vs non-subscriber views
- Latest subscriber tracker snapshot

Every sheet starts with a header row, which is dropped. Rows without a name
or without views/revenue are left out.
"""
from dataclasses import dataclass
from typing import Dict, List, Optional

import pandas as pd

from src.config.dashboard_config import DashboardConfig
from src.data_processing.content.parsing import cell, parse_amount, parse_count

DEVICE_LABELS: Dict[str, str] = {
    'MOBILE': 'Mobile',
    'DESKTOP': 'Desktop',
    'TV': 'TV',
    'TABLET': 'Tablet',
    'GAME_CONSOLE': 'Console',
}

TRAFFIC_SOURCE_LABELS: Dict[str, str] = {
    'SUGGESTED': 'Suggested Videos',
    'BROWSE': 'Browse Features',
    'EXT_URL': 'External URLs',
    'YT_SEARCH': 'YouTube Search',
    'YT_OTHER_PAGE': 'Other YT Pages',
    'NOTIFICATION': 'Notifications',
    'PLAYLIST': 'Playlists',
    'END_SCREEN': 'End Screens',
    'SHORTS': 'Shorts Feed',
    'CHANNEL': 'Channel Page',
    'SUBSCRIBER': 'Subscription Feed',
    'NO_LINK_OTHER': 'Other',
    'HASHTAGS': 'Hashtags',
    'VIDEO_REMIXES': 'Remixes',
    'LIVE_REDIRECT': 'Live Redirect',
    'PRODUCT_PAGES': 'Product Pages',
}


def label_for(key: str, labels: Dict[str, str]) -> str:
    """Display label for a YouTube Analytics enum such as ``YT_SEARCH``."""
    return labels.get(key.strip().upper(), key.replace('_', ' ').title())


def parse_country_revenue(rows: List[List[str]], limit: int = DashboardConfig.COUNTRY_LIMIT) -> pd.DataFrame:
    """Parse Country Revenue rows (country, revenue, views, RPM).

    Args:
        rows: Sheet rows including the header
        limit: Number of countries to keep

    Returns:
        DataFrame sorted by revenue, highest first
    """
    records = []
    for row in rows[1:]:
        country = cell(row, 0).strip()
        revenue = parse_amount(cell(row, 1))
        if not country or revenue <= 0:
            continue
        records.append({
            'country': country,
            'revenue': revenue,
            'views': parse_count(cell(row, 2)),
            'rpm': parse_amount(cell(row, 3)),
        })

    df = pd.DataFrame(records, columns=['country', 'revenue', 'views', 'rpm'])
    df = df.sort_values('revenue', ascending=False, kind='stable')
    return df.head(limit).reset_index(drop=True)


def _views_breakdown(rows: List[List[str]], key: str, labels: Dict[str, str]) -> pd.DataFrame:
    records = []
    for row in rows[1:]:
        name = cell(row, 0).strip()
        views = parse_count(cell(row, 1))
        if not name or views <= 0:
            continue
        records.append({
            key: name,
            'label': label_for(name, labels),
            'views': views,
            'minutes_watched': parse_count(cell(row, 2)),
        })

    df = pd.DataFrame(records, columns=[key, 'label', 'views', 'minutes_watched'])
    df = df.sort_values('views', ascending=False, kind='stable').reset_index(drop=True)
    total = df['views'].sum()
    df['share'] = df['views'] / total * 100 if total else 0.0
    return df


def parse_device_views(rows: List[List[str]]) -> pd.DataFrame:
    """Views and watch time per device type, most views first."""
    return _views_breakdown(rows, 'device', DEVICE_LABELS)


def parse_traffic_sources(rows: List[List[str]]) -> pd.DataFrame:
    """Views and watch time per traffic source, most views first."""
    return _views_breakdown(rows, 'source', TRAFFIC_SOURCE_LABELS)


@dataclass(frozen=True)
class SubscriberSnapshot:
    """Latest row of the Subscriber Tracker sheet."""
    subscribers: int = 0
    total_views: int = 0
    total_videos: int = 0
    last_updated: Optional[str] = None

    @classmethod
    def from_rows(cls, rows: List[List[str]]) -> 'SubscriberSnapshot':
        """Build from tracker rows (timestamp, subscribers, views, videos).

        The last row is the most recent. A sheet with only a header gives
        an empty snapshot.
        """
        if len(rows) < 2:
            return cls()
        latest = rows[-1]
        return cls(
            subscribers=parse_count(cell(latest, 1)),
            total_views=parse_count(cell(latest, 2)),
            total_videos=parse_count(cell(latest, 3)),
            last_updated=cell(latest, 0).strip() or None,
        )


@dataclass(frozen=True)
class SubscriberStatus:
    """Views and watch time from subscribers vs non-subscribers."""
    subscribed_views: int
    unsubscribed_views: int
    subscribed_minutes: int = 0
    unsubscribed_minutes: int = 0

    @property
    def total_views(self) -> int:
        return self.subscribed_views + self.unsubscribed_views

    def share(self, subscribed: bool) -> float:
        """Percentage (0-100) of views from subscribers or non-subscribers."""
        if self.total_views == 0:
            return 0.0
        views = self.subscribed_views if subscribed else self.unsubscribed_views
        return views / self.total_views * 100

    @classmethod
    def from_rows(cls, rows: List[List[str]]) -> Optional['SubscriberStatus']:
        """Build from status rows (SUBSCRIBED / UNSUBSCRIBED, views, minutes).

        Returns:
            SubscriberStatus, or None unless both statuses are present
        """
        found = {}
        for row in rows[1:]:
            status = cell(row, 0).strip().upper()
            if status in ('SUBSCRIBED', 'UNSUBSCRIBED'):
                found[status] = (parse_count(cell(row, 1)), parse_count(cell(row, 2)))

        if len(found) < 2:
            return None
        return cls(
            subscribed_views=found['SUBSCRIBED'][0],
            unsubscribed_views=found['UNSUBSCRIBED'][0],
            subscribed_minutes=found['SUBSCRIBED'][1],
            unsubscribed_minutes=found['UNSUBSCRIBED'][1],
        )
