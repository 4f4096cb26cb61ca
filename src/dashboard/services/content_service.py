"""Service for loading content, revenue and audience data from Google Sheets.

Every sheet row goes through its source record model and is normalised into
a ContentItem here, so nothing downstream depends on sheet layouts.
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, List, Optional

import pandas as pd
from pydantic import ValidationError

from src.config.dashboard_config import DashboardConfig
from src.data_processing.content.models import (
    ContentItem,
    ReelRecord,
    SenboVideoRecord,
    SenneVideoRecord,
    is_complete_row,
    normalize_records,
)
from src.data_processing.revenue.audience_analyzer import (
    SubscriberSnapshot,
    SubscriberStatus,
    parse_country_revenue,
    parse_device_views,
    parse_traffic_sources,
)
from src.data_processing.revenue.revenue_analyzer import (
    RevenueSplit,
    VideoTotals,
    build_split_timeline,
    calculate_video_totals,
    parse_daily_revenue,
)
from .sheets_client import SheetsClient, SheetsError

logger = logging.getLogger(__name__)


@dataclass
class VideoBatch:
    """Videos and totals for one month."""
    items: List[ContentItem] = field(default_factory=list)
    totals: Optional[VideoTotals] = None


def _parse_rows(rows: List[List[str]], from_row: Callable, sheet: str) -> list:
    """Build records from complete rows, skipping rows that fail validation."""
    records = []
    for row in rows:
        if not is_complete_row(row):
            continue
        try:
            records.append(from_row(row))
        except ValidationError as e:
            logger.warning(f"Skipping invalid row in {sheet}: {e}")
    return records


class ContentService:
    """Loads videos, reels and revenue through a SheetsClient."""

    def __init__(self, client: Optional[SheetsClient] = None):
        self.client = client or SheetsClient()

    def get_all_videos(self, month: str = 'last') -> VideoBatch:
        """Fetch both channels' videos and the month's totals.

        Args:
            month: ``last`` or ``current``

        Returns:
            VideoBatch with SenBo videos followed by Senne videos
        """
        if month not in DashboardConfig.MONTHS:
            raise ValueError(f"month must be one of {DashboardConfig.MONTHS}, got {month!r}")

        senbo_sheet = DashboardConfig.SENBO_VIDEO_SHEETS[month]
        senne_sheet = DashboardConfig.SENNE_VIDEO_SHEETS[month]
        senbo_rows = self.client.get_values(DashboardConfig.sheet_range(senbo_sheet, DashboardConfig.SENBO_VIDEO_COLUMNS))
        senne_rows = self.client.get_values(DashboardConfig.sheet_range(senne_sheet, DashboardConfig.SENNE_VIDEO_COLUMNS))

        # Totals are optional; videos still render without them
        try:
            summary_rows = self.client.get_values(
                DashboardConfig.sheet_range(DashboardConfig.SUMMARY_SHEETS[month], DashboardConfig.SUMMARY_COLUMNS)
            )
        except SheetsError as e:
            logger.warning(f"Summary sheet unavailable for {month} month: {str(e)}")
            summary_rows = []

        records = (
            _parse_rows(senbo_rows, SenboVideoRecord.from_row, senbo_sheet)
            + _parse_rows(senne_rows, SenneVideoRecord.from_row, senne_sheet)
        )
        items = normalize_records(records)
        totals = calculate_video_totals(summary_rows[0] if summary_rows else None, items)

        logger.info(f"Loaded {len(items)} videos for {month} month")
        return VideoBatch(items=items, totals=totals)

    def get_reels(self) -> List[ContentItem]:
        """Fetch the IG Reels sheet."""
        rows = self.client.get_values(DashboardConfig.REELS_RANGE)
        items = normalize_records(_parse_rows(rows, ReelRecord.from_row, 'IG Reels'))
        logger.info(f"Loaded {len(items)} reels")
        return items

    def get_revenue_split(self) -> RevenueSplit:
        """Fetch last month's Bowie / Senne earnings."""
        rows = self.client.get_values(DashboardConfig.REVENUE_SPLIT_RANGE)
        return RevenueSplit.from_row(rows[0] if rows else [])

    def get_daily_revenue(self) -> pd.DataFrame:
        """Fetch the Daily Revenue sheet as a date-sorted DataFrame."""
        rows = self.client.get_values(DashboardConfig.DAILY_REVENUE_RANGE)
        return parse_daily_revenue(rows)

    def get_revenue_split_timeline(self) -> pd.DataFrame:
        """Per-day Bowie / Senne revenue built from daily revenue and both months' SenBo splits."""
        daily_df = self.get_daily_revenue()
        split_rows = []
        for month in DashboardConfig.MONTHS:
            split_rows += self.client.get_values(DashboardConfig.sheet_range(
                DashboardConfig.SENBO_VIDEO_SHEETS[month], DashboardConfig.SPLIT_TIMELINE_COLUMNS
            ))
        timeline = build_split_timeline(daily_df, split_rows)
        logger.info(f"Built revenue split timeline with {len(timeline)} days")
        return timeline

    def get_country_revenue(self) -> pd.DataFrame:
        """Top countries by revenue."""
        return parse_country_revenue(self.client.get_values(DashboardConfig.COUNTRY_REVENUE_RANGE))

    def get_device_views(self) -> pd.DataFrame:
        return parse_device_views(self.client.get_values(DashboardConfig.DEVICE_VIEWS_RANGE))

    def get_traffic_sources(self) -> pd.DataFrame:
        return parse_traffic_sources(self.client.get_values(DashboardConfig.TRAFFIC_SOURCE_RANGE))

    def get_subscriber_count(self) -> SubscriberSnapshot:
        """Latest subscriber, view and video counts from the tracker sheet."""
        return SubscriberSnapshot.from_rows(self.client.get_values(DashboardConfig.SUBSCRIBER_TRACKER_RANGE))

    def get_subscriber_status(self) -> Optional[SubscriberStatus]:
        """Subscriber vs non-subscriber views, or None when the sheet lacks either row."""
        return SubscriberStatus.from_rows(self.client.get_values(DashboardConfig.SUBSCRIBER_STATUS_RANGE))
