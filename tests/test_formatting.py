"""Tests for display formatting helpers."""
from datetime import datetime

import pytest

from src.data_processing.content.parsing import EPOCH
from src.dashboard.utils.formatting import (
    HIDDEN_REVENUE, format_duration, format_publish_datetime, format_ratio, format_revenue, format_short_date,
    format_views, video_stat_rows,
)


@pytest.mark.parametrize('views, expected', [
    (1_234_567, '1.2M'),
    (12_345, '12.3K'),
    (999, '999'),
    (0, '0'),
])
def test_format_views(views, expected):
    assert format_views(views) == expected


def test_format_revenue():
    assert format_revenue(1234.5) == '$1,234.50'
    assert format_revenue(1234.5, hidden=True) == HIDDEN_REVENUE


def test_format_short_date():
    assert format_short_date(datetime(2024, 12, 27, 18, 30)) == '27 Dec'
    assert format_short_date(EPOCH) == ''
    assert format_short_date(None) == ''


@pytest.mark.parametrize('duration, expected', [
    ('0:45.3', '45s'),
    ('1:05', '1:05'),
    ('2:59.6', '3:00'),
    ('', ''),
    ('1:02:03', '1:02:03'),
])
def test_format_duration(duration, expected):
    assert format_duration(duration) == expected


def test_format_ratio():
    assert format_ratio(2.345) == '2.3x'
    assert format_ratio(None) == ''


def test_format_publish_datetime():
    assert format_publish_datetime(datetime(2025, 11, 20, 19, 59)) == '20 Nov 2025, 19:59'
    assert format_publish_datetime(EPOCH) == 'Unknown'


def test_video_stat_rows(make_item):
    item = make_item(
        'v1', views=12_345, revenue=3.5, minutes_watched=2_500, duration='0:45.3',
        likes=1_200, shares=30, subs_gained=4, published_at=datetime(2025, 11, 20, 19, 59),
    )
    rows = dict(video_stat_rows(item, ratio=2.34))

    assert rows['Revenue'] == '$3.50'
    assert rows['Views'] == '12.3K (12,345)'
    assert rows['Watch Time'] == '2.5K min'
    assert rows['Avg Duration'] == '45s'
    assert rows['Likes'] == '1,200'
    assert rows['Subs Gained'] == '4'
    assert rows['Published'] == '20 Nov 2025, 19:59'
    assert rows['Vs Neighbours'] == '2.3x'


def test_video_stat_rows_hidden_revenue_and_no_ratio(make_item):
    rows = dict(video_stat_rows(make_item('v1', views=10, revenue=3.5), hide_revenue=True))

    assert rows['Revenue'] == HIDDEN_REVENUE
    assert 'Vs Neighbours' not in rows


def test_reel_stat_rows(make_item):
    reel = make_item('r1', views=500, source='reel', likes=40, comments=3, duration='0:20')
    labels = [label for label, _ in video_stat_rows(reel)]

    assert labels == ['Views', 'Likes', 'Comments', 'Duration', 'Published']
