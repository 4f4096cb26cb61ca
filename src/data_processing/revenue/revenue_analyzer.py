"""
Revenue Analyzer.

Turns the revenue cells of the Summary and Daily Revenue sheets into the
structures the revenue page charts:
- RevenueSplit: Bowie / Senne share of last month's earnings
- VideoTotals: revenue and views per channel for a month
- Daily revenue DataFrame for the timeline chart
- Per-day Bowie / Senne split timeline
"""
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

import pandas as pd

from src.data_processing.content.models import ContentItem
from src.data_processing.content.parsing import cell, parse_amount, parse_count, parse_date


@dataclass(frozen=True)
class RevenueSplit:
    """Earnings split between the two creators."""
    bowie: float = 0.0
    senne: float = 0.0

    @property
    def total(self) -> float:
        return self.bowie + self.senne

    def share(self, name: str) -> float:
        """Percentage (0-100) of the total earned by ``name``."""
        if self.total == 0:
            return 0.0
        value = {'bowie': self.bowie, 'senne': self.senne}[name]
        return value / self.total * 100

    @classmethod
    def from_row(cls, row: List[str]) -> 'RevenueSplit':
        """Build from the summary range H3:I3 (Bowie, Senne)."""
        return cls(bowie=parse_amount(cell(row, 0)), senne=parse_amount(cell(row, 1)))


@dataclass(frozen=True)
class ChannelTotals:
    revenue: float = 0.0
    views: int = 0


@dataclass(frozen=True)
class VideoTotals:
    """Per-channel and combined totals for one month."""
    senbo: ChannelTotals
    senne: ChannelTotals

    @property
    def combined(self) -> ChannelTotals:
        return ChannelTotals(
            revenue=self.senbo.revenue + self.senne.revenue,
            views=self.senbo.views + self.senne.views,
        )

    def to_dict(self) -> Dict[str, Dict[str, float]]:
        return {
            'senbo': {'revenue': self.senbo.revenue, 'views': self.senbo.views},
            'senne': {'revenue': self.senne.revenue, 'views': self.senne.views},
            'combined': {'revenue': self.combined.revenue, 'views': self.combined.views},
        }


def calculate_video_totals(summary_row: Optional[List[str]], items: Sequence[ContentItem]) -> VideoTotals:
    """Combine the Summary row with the video rows.

    SenBo totals come from the Summary sheet (C2 views, H2 revenue). Senne
    revenue prefers the Summary cell I2 so it matches the revenue split and
    falls back to the sum of Senne video rows; Senne views are always summed.

    Args:
        summary_row: Cells C2:I2 of the month's Summary sheet, or None
        items: Normalised videos for the month

    Returns:
        VideoTotals for the month
    """
    senne_items = [item for item in items if item.source == 'senne']
    senne_views = int(sum(item.primary_metric for item in senne_items))

    if summary_row:
        senbo = ChannelTotals(revenue=parse_amount(cell(summary_row, 5)), views=parse_count(cell(summary_row, 0)))
        senne_cell = cell(summary_row, 6)
    else:
        senbo = ChannelTotals()
        senne_cell = ''

    if senne_cell.strip():
        senne_revenue = parse_amount(senne_cell)
    else:
        senne_revenue = sum(item.revenue for item in senne_items)

    return VideoTotals(senbo=senbo, senne=ChannelTotals(revenue=senne_revenue, views=senne_views))


def parse_daily_revenue(rows: List[List[str]]) -> pd.DataFrame:
    """Parse Daily Revenue rows (date, revenue, views) into a sorted DataFrame.

    The header row and rows with unparseable dates are dropped.
    """
    records = []
    for row in rows:
        day = parse_date(cell(row, 0))
        if day is None:
            continue
        records.append({
            'date': pd.Timestamp(day.date()),
            'revenue': parse_amount(cell(row, 1)),
            'views': parse_count(cell(row, 2)),
        })

    df = pd.DataFrame(records, columns=['date', 'revenue', 'views'])
    return df.sort_values('date', kind='stable').reset_index(drop=True)


def summarize_daily_revenue(daily_df: pd.DataFrame) -> Dict[str, float]:
    """Headline numbers for the daily revenue chart."""
    if daily_df.empty:
        return {'total_revenue': 0.0, 'avg_revenue': 0.0, 'best_day_revenue': 0.0, 'total_views': 0}
    return {
        'total_revenue': float(daily_df['revenue'].sum()),
        'avg_revenue': float(daily_df['revenue'].mean()),
        'best_day_revenue': float(daily_df['revenue'].max()),
        'total_views': int(daily_df['views'].sum()),
    }


def build_split_timeline(daily_df: pd.DataFrame, split_rows: List[List[str]]) -> pd.DataFrame:
    """Split each day's revenue between Bowie and Senne.

    Bowie's part of a day is the sum of the 50% split column of the SenBo
    videos published that day. Senne gets the rest of that day's revenue,
    floored at zero. Only days present in the daily revenue sheet appear.

    Args:
        daily_df: Output of :func:`parse_daily_revenue`
        split_rows: SenBo video cells G:I (split, unused, publish date)

    Returns:
        DataFrame with date, senne_revenue and bowie_revenue, oldest first
    """
    columns = ['date', 'senne_revenue', 'bowie_revenue']
    if daily_df.empty:
        return pd.DataFrame(columns=columns)

    bowie_by_day: Dict[pd.Timestamp, float] = {}
    for row in split_rows:
        split = parse_amount(cell(row, 0))
        published = parse_date(cell(row, 2))
        if published is None or split <= 0:
            continue
        day = pd.Timestamp(published.date())
        bowie_by_day[day] = bowie_by_day.get(day, 0.0) + split

    # A repeated date in the sheet overrides the earlier row
    timeline = daily_df.drop_duplicates('date', keep='last')[['date', 'revenue']].copy()
    timeline['bowie_revenue'] = timeline['date'].map(bowie_by_day).fillna(0.0).astype(float)
    timeline['senne_revenue'] = (timeline['revenue'] - timeline['bowie_revenue']).clip(lower=0.0)
    return timeline[columns].reset_index(drop=True)
