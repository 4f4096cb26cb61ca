"""Configuration for the SenBo dashboard.

This module centralises every tunable constant used across the views,
so the reels grid and the combined videos grid score outliers the same way.

Key configuration categories:

1. Outlier Detection:
   - Neighbourhood window radius
   - Default threshold and the UI clamp range

2. Data Sources:
   - Google Sheets tab names and ranges per month
   - Audience and subscriber sheets

3. Planner Board:
   - Stages, boards and priority bounds

4. Performance Settings:
   - Query cache TTL and grid page size
"""

from typing import Dict


class DashboardConfig:
    """Configuration for dashboard scoring, data sources and UI defaults."""

    # Version information
    VERSION = "1.0.0"

    # Outlier detection
    WINDOW_RADIUS = 5          # Items before and after used as the baseline
    DEFAULT_THRESHOLD = 2.0    # ratio >= threshold marks an outlier
    THRESHOLD_MIN = 1.0
    THRESHOLD_MAX = 100.0
    THRESHOLD_STEP = 0.5
    NEUTRAL_RATIO = 1.0        # Ratio used when an item has none recorded

    # Grid and caching
    PAGE_SIZE = 30
    CACHE_TTL_SECONDS = 300

    # Months exposed in the UI
    MONTHS = ('last', 'current')

    # Sheet ranges, keyed by month
    SENBO_VIDEO_SHEETS: Dict[str, str] = {
        'current': 'Senne & Bo Videos (Current Month)',
        'last': 'Senne & Bo Videos (Last Month)',
    }
    SENNE_VIDEO_SHEETS: Dict[str, str] = {
        'current': 'Senne Only Videos (Current Month)',
        'last': 'Senne Only Videos (Last Month)',
    }
    SUMMARY_SHEETS: Dict[str, str] = {
        'current': 'Summary (Current Month)',
        'last': 'Summary (Last Month)',
    }
    SENBO_VIDEO_COLUMNS = 'A2:O'
    SENNE_VIDEO_COLUMNS = 'A2:N'
    SUMMARY_COLUMNS = 'C2:I2'   # C = SenBo views, H = SenBo revenue, I = Senne revenue
    REELS_RANGE = 'IG Reels!A2:I'
    REVENUE_SPLIT_RANGE = 'Summary (Last Month)!H3:I3'
    DAILY_REVENUE_RANGE = 'Daily Revenue!A:C'
    SPLIT_TIMELINE_COLUMNS = 'G2:I'   # G = Bowie's 50% split, I = publish date

    # Audience sheets (first row is a header)
    COUNTRY_REVENUE_RANGE = 'Country Revenue!A:D'
    DEVICE_VIEWS_RANGE = 'Device Revenue!A:C'
    TRAFFIC_SOURCE_RANGE = 'Traffic Source!A:C'
    SUBSCRIBER_STATUS_RANGE = 'Subscriber Status!A:C'
    SUBSCRIBER_TRACKER_RANGE = 'Subscriber Tracker!A:D'
    COUNTRY_LIMIT = 25          # Countries kept, highest revenue first
    COUNTRY_PREVIEW = 10        # Rows shown before "Show all"
    SUBSCRIBER_TTL_SECONDS = 60 # Live subscriber count refresh

    # Planner board
    PLANNER_TABLE = 'planner_items'
    PLANNER_STAGES: Dict[str, str] = {
        'idea': 'Idea',
        'tomorrow': 'Tomorrow',
        'special': 'Special',
    }
    PLANNER_BOARDS: Dict[str, str] = {
        'senbo': 'Senne & Bo',
        'senne': 'Senne',
    }
    PRIORITY_MIN = 1
    PRIORITY_MAX = 10

    @staticmethod
    def clamp_threshold(value: float) -> float:
        """Clamp a user-entered threshold to the range the UI allows.

        The scorer itself accepts any positive threshold; only the input
        control is restricted.
        """
        return max(DashboardConfig.THRESHOLD_MIN, min(DashboardConfig.THRESHOLD_MAX, float(value)))

    @staticmethod
    def sheet_range(sheet_name: str, columns: str) -> str:
        """Build an A1 range such as ``IG Reels!A2:I``."""
        return f"{sheet_name}!{columns}"
