"""
Outlier Scorer.

Flags content that outperforms its chronological neighbourhood.

Each item is compared against the mean views of up to ``window_radius``
items published before it and ``window_radius`` items published after it.
The item itself is never part of its own baseline. Items whose views reach
``threshold`` times that baseline are outliers.

Ratios are relative to whatever batch is passed in. Filtering the batch
(for example to one creator) changes the neighbours and therefore every
ratio, so callers score the batch after filtering.
"""
from dataclasses import dataclass, field
from typing import Dict, FrozenSet, List, Optional, Sequence

import numpy as np
import pandas as pd

from src.config.dashboard_config import DashboardConfig
from src.data_processing.content.models import ContentItem


@dataclass(frozen=True)
class OutlierResult:
    """Ratios and outlier flags for one scored batch.

    Only items with a defined ratio appear in ``ratios``. Single-item
    batches and items whose neighbours average zero have none.
    """
    ratios: Dict[str, float] = field(default_factory=dict)
    outliers: FrozenSet[str] = frozenset()
    threshold: float = DashboardConfig.DEFAULT_THRESHOLD
    window_radius: int = DashboardConfig.WINDOW_RADIUS

    def ratio_for(self, identity: str, default: Optional[float] = DashboardConfig.NEUTRAL_RATIO) -> Optional[float]:
        """Ratio for an item, or ``default`` when none was recorded."""
        return self.ratios.get(identity, default)

    def is_outlier(self, identity: str) -> bool:
        return identity in self.outliers


def chronological(items: Sequence[ContentItem]) -> List[ContentItem]:
    """Stable copy of ``items`` sorted oldest first."""
    return sorted(items, key=lambda item: item.published_at)


def neighbor_window(index: int, length: int, window_radius: int) -> range:
    """Sorted positions used as the baseline for ``index``, excluding itself."""
    start = max(0, index - window_radius)
    end = min(length, index + window_radius + 1)
    return range(start, end)


def score(items: Sequence[ContentItem],
          threshold: float = DashboardConfig.DEFAULT_THRESHOLD,
          window_radius: int = DashboardConfig.WINDOW_RADIUS) -> OutlierResult:
    """Score a batch of content items against their chronological neighbours.

    Args:
        items: Content items in any order. The sequence is not modified.
        threshold: Multiple of the neighbour average that marks an outlier.
            Not validated; values below 1 are honoured.
        window_radius: Number of neighbours considered on each side.

    Returns:
        OutlierResult with a ratio for every item that has neighbours with
        non-zero average views, and the identities at or above threshold.
    """
    ordered = chronological(items)
    metrics = np.array([item.primary_metric for item in ordered], dtype=float)
    length = len(ordered)

    ratios: Dict[str, float] = {}
    outliers = set()

    for i, item in enumerate(ordered):
        positions = [j for j in neighbor_window(i, length, window_radius) if j != i]
        if not positions:
            continue

        neighbor_avg = float(metrics[positions].mean())
        if neighbor_avg == 0:
            continue

        ratio = item.primary_metric / neighbor_avg
        ratios[item.identity] = ratio
        if ratio >= threshold:
            outliers.add(item.identity)

    return OutlierResult(
        ratios=ratios,
        outliers=frozenset(outliers),
        threshold=threshold,
        window_radius=window_radius,
    )


def rank_by_outlier(items: Sequence[ContentItem], result: OutlierResult) -> List[ContentItem]:
    """Best outliers first. Items without a ratio rank as neutral (1.0)."""
    return sorted(
        items,
        key=lambda item: result.ratio_for(item.identity),
        reverse=True,
    )


def filter_outliers(items: Sequence[ContentItem], result: OutlierResult) -> List[ContentItem]:
    """Keep only flagged items, preserving the caller's order."""
    return [item for item in items if result.is_outlier(item.identity)]


class OutlierAnalyzer:
    """
    Scores content DataFrames for the grid and chart components.

    Wraps :func:`score` so pandas-based views get ``outlier_ratio`` and
    ``is_outlier`` columns without re-implementing the window logic.
    """
    def __init__(self, threshold: float = DashboardConfig.DEFAULT_THRESHOLD,
                 window_radius: int = DashboardConfig.WINDOW_RADIUS):
        """Initialize the analyzer.

        Args:
            threshold: Outlier threshold
            window_radius: Neighbours considered on each side
        """
        self.threshold = threshold
        self.window_radius = window_radius
        self._last_result: Optional[OutlierResult] = None

    @property
    def last_result(self) -> Optional[OutlierResult]:
        """Result of the most recent scoring call."""
        return self._last_result

    def score_items(self, items: Sequence[ContentItem]) -> OutlierResult:
        self._last_result = score(items, self.threshold, self.window_radius)
        return self._last_result

    def score_frame(self, items: Sequence[ContentItem]) -> pd.DataFrame:
        """Build a DataFrame of ``items`` with outlier columns added.

        Args:
            items: Content items to score

        Returns:
            DataFrame in the caller's order with ``outlier_ratio`` (NaN when
            undefined) and ``is_outlier`` columns
        """
        result = self.score_items(items)
        df = pd.DataFrame([item.to_dict() for item in items])
        if df.empty:
            return pd.DataFrame(columns=['identity', 'outlier_ratio', 'is_outlier'])

        df['outlier_ratio'] = df['identity'].map(lambda key: result.ratio_for(key, default=np.nan))
        df['is_outlier'] = df['identity'].isin(result.outliers)
        return df
