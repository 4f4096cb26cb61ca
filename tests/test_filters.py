"""Tests for grid sorting, filtering and paging."""
from datetime import date, datetime

import pytest

from src.data_processing.content.filters import (
    ContentFilter, SortOption, apply_filters, date_range_bounds, paginate, sort_items, unique_creators
)
from src.data_processing.content.parsing import EPOCH
from src.data_processing.outlier_analysis import OutlierResult, score


@pytest.fixture
def items(make_item):
    """A small mixed batch of videos and reels."""
    return [
        make_item('a', views=100, day=0, revenue=5.0, likes=10, title='Morning Routine', duration='0:30'),
        make_item('b', views=300, day=2, revenue=1.0, likes=30, title='Beach Prank', duration='1:10'),
        make_item('c', views=200, day=1, revenue=9.0, likes=20, source='reel', creator='Senne',
                  title='Beach Walk', duration='0:45'),
        make_item('d', views=200, day=3, source='reel', creator='Bowie', title='Cooking'),
    ]


def ids(items):
    return [item.identity for item in items]


def test_sort_newest_and_oldest(items):
    assert ids(sort_items(items, SortOption.NEWEST)) == ['d', 'b', 'c', 'a']
    assert ids(sort_items(items, SortOption.OLDEST)) == ['a', 'c', 'b', 'd']


def test_sort_by_views_is_stable(items):
    """Equal view counts keep their input order."""
    assert ids(sort_items(items, SortOption.VIEWS)) == ['b', 'c', 'd', 'a']


def test_sort_by_revenue_and_duration(items):
    assert ids(sort_items(items, SortOption.REVENUE)) == ['c', 'a', 'b', 'd']
    assert ids(sort_items(items, SortOption.DURATION)) == ['b', 'c', 'a', 'd']


def test_sort_accepts_string_values(items):
    assert ids(sort_items(items, 'likes')) == ['b', 'c', 'a', 'd']


def test_sort_best_outliers(items):
    result = OutlierResult(ratios={'a': 0.5, 'b': 3.0, 'd': 1.2})
    assert ids(sort_items(items, SortOption.BEST_OUTLIERS, result)) == ['b', 'd', 'c', 'a']


def test_sort_best_outliers_without_any_outlier(daily_items):
    """Ratios still order the batch when nothing reaches the threshold."""
    batch = daily_items([10, 30, 10, 20])
    result = score(batch, threshold=100.0)

    assert result.outliers == frozenset()
    ranked = sort_items(batch, SortOption.BEST_OUTLIERS, result)
    assert ids(ranked) == sorted(ids(batch), key=lambda key: result.ratios[key], reverse=True)
    assert ids(ranked)[0] == 'v1'


def test_sort_best_outliers_without_result(items):
    assert ids(sort_items(items, SortOption.BEST_OUTLIERS)) == ids(items)


def test_sort_does_not_mutate(items):
    before = list(items)
    sort_items(items, SortOption.VIEWS)
    assert items == before


def test_labels_cover_every_option():
    for option in SortOption:
        assert option.label
    assert SortOption.BEST_OUTLIERS.label == 'Best Outliers'


def test_query_is_case_insensitive(items):
    assert ids(apply_filters(items, ContentFilter(query='beach'))) == ['b', 'c']
    assert ids(apply_filters(items, ContentFilter(query='  BEACH '))) == ['b', 'c']


def test_empty_filter_matches_everything(items):
    assert ids(apply_filters(items, ContentFilter())) == ids(items)


def test_source_and_creator_filters(items):
    assert ids(apply_filters(items, ContentFilter(sources=['reel']))) == ['c', 'd']
    assert ids(apply_filters(items, ContentFilter(creators=['Bowie']))) == ['d']


def test_date_range_is_inclusive(items):
    content_filter = ContentFilter(date_from=date(2024, 1, 2), date_to=datetime(2024, 1, 3))
    assert ids(apply_filters(items, content_filter)) == ['b', 'c']


def test_date_range_keeps_undated_items(make_item):
    undated = make_item('u', published_at=EPOCH)
    content_filter = ContentFilter(date_from=date(2024, 6, 1))
    assert ids(apply_filters([undated], content_filter)) == ['u']


def test_unique_creators(items, make_item):
    items.append(make_item('e', source='reel', creator='Senne'))
    assert unique_creators(items) == ['Bowie', 'Senne']


def test_paginate(items):
    assert ids(paginate(items, 2)) == ['a', 'b']
    assert len(paginate(items, 30)) == 4
    assert paginate(items, -1) == []


@pytest.mark.parametrize('value, expected', [
    (None, (None, None)),
    ((), (None, None)),
    ((date(2024, 1, 2),), (date(2024, 1, 2), None)),
    ((date(2024, 1, 2), date(2024, 1, 9)), (date(2024, 1, 2), date(2024, 1, 9))),
    (date(2024, 1, 2), (date(2024, 1, 2), None)),
])
def test_date_range_bounds(value, expected):
    assert date_range_bounds(value) == expected
