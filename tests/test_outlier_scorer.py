"""Tests for the outlier scorer."""
import math
import random

import numpy as np
import pytest

from src.config.dashboard_config import DashboardConfig
from src.data_processing.outlier_analysis import (
    OutlierAnalyzer, OutlierResult, filter_outliers, rank_by_outlier, score
)
from src.data_processing.content.parsing import EPOCH
from src.data_processing.outlier_analysis.outlier_scorer import chronological, neighbor_window


@pytest.fixture
def spike_items(daily_items):
    """Eleven daily items with a single 500-view spike in the middle."""
    return daily_items([10, 10, 10, 10, 10, 500, 10, 10, 10, 10, 10])


def test_spike_is_outlier(spike_items):
    """The spike is compared against all ten other items."""
    result = score(spike_items, threshold=2.0, window_radius=5)

    assert result.ratios['v5'] == pytest.approx(50.0)
    assert result.is_outlier('v5')
    assert result.outliers == frozenset({'v5'})


def test_neighbours_of_spike(spike_items):
    """Items next to the spike have nine neighbours, one of them the spike."""
    result = score(spike_items, threshold=2.0, window_radius=5)

    expected = 10 / ((8 * 10 + 500) / 9)
    assert result.ratios['v4'] == pytest.approx(expected)
    assert result.ratios['v6'] == pytest.approx(expected)
    assert result.ratios['v4'] == pytest.approx(0.155, abs=1e-3)
    assert not result.is_outlier('v4')


def test_determinism(daily_items):
    """Scoring the same input twice gives the same result."""
    items = daily_items([5, 80, 12, 0, 40, 33, 7, 120, 9])
    first = score(items, threshold=1.5)
    second = score(items, threshold=1.5)

    assert first.ratios == second.ratios
    assert first.outliers == second.outliers


def test_input_order_does_not_matter(daily_items):
    """Items are sorted by publish date before scoring."""
    items = daily_items([5, 80, 12, 40, 33, 7, 120, 9])
    shuffled = list(items)
    random.Random(7).shuffle(shuffled)

    assert score(shuffled).ratios == pytest.approx(score(items).ratios)


def test_input_is_not_mutated(daily_items):
    """The caller's list keeps its order."""
    items = list(reversed(daily_items([1, 2, 3, 4])))
    before = list(items)
    score(items)
    assert items == before


def test_no_self_comparison(daily_items):
    """An item's own views never enter its baseline."""
    views = [3, 9, 27, 81, 243, 729]
    items = daily_items(views)
    result = score(items, window_radius=2)

    for i, item in enumerate(items):
        window = [j for j in neighbor_window(i, len(items), 2) if j != i]
        assert i not in window
        expected = views[i] / np.mean([views[j] for j in window])
        assert result.ratios[item.identity] == pytest.approx(expected)


@pytest.mark.parametrize('length', [2, 3, 6, 10])
def test_boundary_neighbour_counts(length):
    """Edge items use only the neighbours that exist."""
    radius = 5
    first = [j for j in neighbor_window(0, length, radius) if j != 0]
    last = [j for j in neighbor_window(length - 1, length, radius) if j != length - 1]

    assert len(first) == min(length - 1, radius)
    assert len(last) == min(length - 1, radius)
    for i in range(length):
        neighbours = [j for j in neighbor_window(i, length, radius) if j != i]
        assert 0 < len(neighbours) <= length - 1


@pytest.mark.parametrize('length', [2, 3, 6, 10])
def test_boundary_ratios(daily_items, length):
    """First and last items average only the min(n - 1, r) neighbours on one side."""
    radius = 5
    views = [float(v) for v in range(1, length + 1)]
    items = daily_items(views)
    result = score(items, window_radius=radius)
    count = min(length - 1, radius)

    assert result.ratios['v0'] == pytest.approx(views[0] / np.mean(views[1:1 + count]))
    last = f"v{length - 1}"
    assert result.ratios[last] == pytest.approx(views[-1] / np.mean(views[-1 - count:-1]))


def test_all_zero_views(daily_items):
    """Zero baselines record no ratio and flag nothing."""
    result = score(daily_items([0, 0, 0, 0, 0]))

    assert result.outliers == frozenset()
    assert result.ratios == {}


def test_zero_item_with_nonzero_neighbours(daily_items):
    """A zero-view item still gets a finite ratio of 0."""
    result = score(daily_items([0, 10, 10]))

    assert result.ratios['v0'] == 0.0
    assert all(math.isfinite(r) for r in result.ratios.values())


def test_single_item(make_item):
    result = score([make_item('only', views=1000)])

    assert result.ratios == {}
    assert result.outliers == frozenset()


def test_empty_batch():
    result = score([])

    assert result.ratios == {}
    assert result.outliers == frozenset()


def test_threshold_monotonicity(daily_items):
    """Raising the threshold never adds outliers."""
    items = daily_items([5, 80, 12, 3, 40, 33, 7, 120, 9, 60, 1, 2])
    thresholds = [0.5, 1.0, 1.5, 2.0, 3.0, 5.0, 10.0]
    sizes = [len(score(items, threshold=t).outliers) for t in thresholds]

    assert sizes == sorted(sizes, reverse=True)


def test_threshold_is_inclusive(daily_items):
    """A ratio exactly at the threshold counts as an outlier."""
    result = score(daily_items([10, 20, 10]), threshold=2.0, window_radius=1)
    assert result.ratios['v1'] == pytest.approx(2.0)
    assert result.is_outlier('v1')


def test_equal_dates_keep_input_order(make_item):
    """Ties on publish date keep their input order."""
    items = [make_item('a', views=1, day=0), make_item('b', views=2, day=0), make_item('c', views=3, day=0)]
    assert [item.identity for item in chronological(items)] == ['a', 'b', 'c']


def test_ranking_scenario(make_item):
    """Undefined ratios rank as neutral 1.0."""
    items = [make_item(name) for name in ('half', 'triple', 'undefined', 'one', 'five')]
    result = OutlierResult(ratios={'half': 0.5, 'triple': 3.0, 'one': 1.0, 'five': 5.0})

    ranked = rank_by_outlier(items, result)

    assert [item.identity for item in ranked] == ['five', 'triple', 'undefined', 'one', 'half']
    assert [result.ratio_for(item.identity) for item in ranked] == [5.0, 3.0, 1.0, 1.0, 0.5]


def test_filter_outliers_keeps_order(spike_items):
    result = score(spike_items)
    assert [item.identity for item in filter_outliers(spike_items, result)] == ['v5']


def test_defaults_come_from_config(spike_items):
    result = score(spike_items)
    assert result.threshold == DashboardConfig.DEFAULT_THRESHOLD
    assert result.window_radius == DashboardConfig.WINDOW_RADIUS


def test_analyzer_score_frame(spike_items):
    """DataFrame view adds ratio and flag columns in the caller's order."""
    analyzer = OutlierAnalyzer(threshold=2.0)
    df = analyzer.score_frame(list(reversed(spike_items)))

    assert list(df['identity'])[0] == 'v10'
    spike = df[df['identity'] == 'v5'].iloc[0]
    assert spike['outlier_ratio'] == pytest.approx(50.0)
    assert bool(spike['is_outlier'])
    assert df['is_outlier'].sum() == 1
    assert analyzer.last_result is not None


def test_analyzer_score_frame_undefined_ratio_is_nan(make_item):
    df = OutlierAnalyzer().score_frame([make_item('solo', views=5)])
    assert math.isnan(df.iloc[0]['outlier_ratio'])
    assert not bool(df.iloc[0]['is_outlier'])


def test_analyzer_score_frame_empty():
    df = OutlierAnalyzer().score_frame([])
    assert df.empty
    assert {'identity', 'outlier_ratio', 'is_outlier'} <= set(df.columns)


def test_filtering_changes_kept_ratios(make_item):
    """Scoring one creator's items alone gives them new neighbours and new ratios."""
    items = [
        make_item('a0', views=10, day=0, creator='A'),
        make_item('b1', views=100, day=1, creator='B'),
        make_item('a2', views=10, day=2, creator='A'),
        make_item('b3', views=100, day=3, creator='B'),
        make_item('a4', views=40, day=4, creator='A'),
    ]
    full = score(items)
    only_a = score([item for item in items if item.creator == 'A'])

    for identity in ('a0', 'a2', 'a4'):
        assert only_a.ratios[identity] != pytest.approx(full.ratios[identity])
    assert full.ratios['a4'] == pytest.approx(40 / 55)
    assert only_a.ratios['a4'] == pytest.approx(4.0)
    assert not full.is_outlier('a4')
    assert only_a.is_outlier('a4')


def test_undated_item_sorts_first(daily_items, make_item):
    """An epoch-dated item leads the timeline and joins the earliest baselines."""
    undated = make_item('undated', views=1000, published_at=EPOCH)
    items = daily_items([10, 10, 10, 10, 10, 10]) + [undated]

    assert chronological(items)[0].identity == 'undated'

    result = score(items, window_radius=2)
    assert result.ratios['v0'] == pytest.approx(10 / ((1000 + 10 + 10) / 3))
    assert result.ratios['v1'] == pytest.approx(10 / ((1000 + 10 + 10 + 10) / 4))
    assert result.ratios['v2'] == pytest.approx(1.0)
    assert result.ratios['undated'] == pytest.approx(100.0)
    assert result.is_outlier('undated')
