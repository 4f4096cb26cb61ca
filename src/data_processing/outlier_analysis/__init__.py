"""Outlier analysis package for flagging content that beats its neighbours."""

from .outlier_scorer import (
    OutlierAnalyzer,
    OutlierResult,
    filter_outliers,
    rank_by_outlier,
    score,
)

__all__ = ['OutlierAnalyzer', 'OutlierResult', 'filter_outliers', 'rank_by_outlier', 'score']
