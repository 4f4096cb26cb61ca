"""Tests for tagged source records and normalisation."""
from datetime import datetime

import pytest
from pydantic import ValidationError

from src.data_processing.content.models import (
    ContentItem, ReelRecord, SenboVideoRecord, SenneVideoRecord,
    is_complete_row, normalize_records, parse_record
)
from src.data_processing.content.parsing import EPOCH


@pytest.fixture
def senbo_row():
    """A row from the Senne & Bo videos sheet (A:O)."""
    return [
        'Funny Short', 'https://youtube.com/shorts/abc123', '12.345', '', '',
        '7.186,20', '', '', '27/12/2024, 18:30', '1,500', '0:45.3',
        '900', '120', '15', 'https://img.example/abc.jpg',
    ]


@pytest.fixture
def senne_row():
    """A row from the Senne-only videos sheet (A:N)."""
    return [
        'Senne Solo', 'https://youtube.com/watch?v=urlid', '2,000', '', '',
        '$45.50', 'explicitid', '2024-12-01 09:00', '300', '1:05',
        '80', '4', '2', '',
    ]


@pytest.fixture
def reel_row():
    """A row from the IG Reels sheet (A:I)."""
    return [
        'Beach Day', 'https://instagram.com/reel/xyz', '50,000', '4,000', '120',
        '0:30', 'Bowie', '15/11/2024', 'https://img.example/reel.jpg',
    ]


def test_senbo_record_from_row(senbo_row):
    item = SenboVideoRecord.from_row(senbo_row).to_content_item()

    assert item.identity == 'senbo_abc123'
    assert item.source == 'senbo'
    assert item.video_id == 'abc123'
    assert item.primary_metric == 12345.0
    assert item.views == 12345.0
    assert item.revenue == pytest.approx(7186.20)
    assert item.published_at == datetime(2024, 12, 27, 18, 30)
    assert item.minutes_watched == 1500
    assert item.duration == '0:45.3'
    assert (item.likes, item.shares, item.subs_gained) == (900, 120, 15)
    assert item.thumbnail_url == 'https://img.example/abc.jpg'


def test_senne_record_prefers_id_column(senne_row):
    item = SenneVideoRecord.from_row(senne_row).to_content_item()

    assert item.identity == 'senne_explicitid'
    assert item.video_id == 'explicitid'
    assert item.revenue == pytest.approx(45.50)
    assert item.published_at == datetime(2024, 12, 1, 9, 0)
    assert item.likes == 80


def test_reel_record(reel_row):
    item = ReelRecord.from_row(reel_row).to_content_item()

    assert item.identity == 'https://instagram.com/reel/xyz_Beach Day'
    assert item.source == 'reel'
    assert item.creator == 'Bowie'
    assert item.primary_metric == 50000.0
    assert (item.likes, item.comments) == (4000, 120)
    assert item.video_id is None


def test_bad_cells_become_zero(senbo_row):
    """Unparseable numbers and dates never raise."""
    senbo_row[2] = 'lots'
    senbo_row[5] = '??'
    senbo_row[8] = 'yesterday'
    item = SenboVideoRecord.from_row(senbo_row).to_content_item()

    assert item.primary_metric == 0.0
    assert item.revenue == 0.0
    assert item.published_at == EPOCH


def test_negative_views_are_clamped():
    record = parse_record({'source': 'reel', 'title': 't', 'url': 'u', 'views': '-5'})
    assert record.views == 0


def test_parse_record_dispatches_on_source():
    assert isinstance(parse_record({'source': 'senbo', 'title': 't', 'url': 'u'}), SenboVideoRecord)
    assert isinstance(parse_record({'source': 'senne', 'title': 't', 'url': 'u'}), SenneVideoRecord)
    assert isinstance(parse_record({'source': 'reel', 'title': 't', 'url': 'u'}), ReelRecord)


def test_parse_record_rejects_unknown_source():
    with pytest.raises(ValidationError):
        parse_record({'source': 'tiktok', 'title': 't', 'url': 'u'})


def test_is_complete_row():
    assert is_complete_row(['Title', 'https://x'])
    assert not is_complete_row(['Title', ''])
    assert not is_complete_row(['  ', 'https://x'])
    assert not is_complete_row(['Title'])


def test_normalize_records_dedupes_last_wins(senbo_row):
    """A later duplicate replaces the earlier one in its original position."""
    first = SenboVideoRecord.from_row(senbo_row)
    other = SenboVideoRecord.from_row(['Other', 'https://youtu.be/other1', '5'])
    updated_row = list(senbo_row)
    updated_row[2] = '99'
    updated = SenboVideoRecord.from_row(updated_row)

    items = normalize_records([first, other, updated])

    assert [item.identity for item in items] == ['senbo_abc123', 'senbo_other1']
    assert items[0].primary_metric == 99.0


def test_content_item_to_dict():
    item = ContentItem(identity='x', title='t', url='u', source='senbo',
                       published_at=EPOCH, primary_metric=1.0)
    data = item.to_dict()
    assert data['identity'] == 'x'
    assert data['primary_metric'] == 1.0
