"""Tests for ContentService using a fake sheets client."""
import pytest

from src.config.dashboard_config import DashboardConfig
from src.dashboard.services.content_service import ContentService
from src.dashboard.services.sheets_client import SheetsError


class FakeSheetsClient:
    """Returns canned rows per A1 range and records the calls."""

    def __init__(self, ranges, failing=()):
        self.ranges = ranges
        self.failing = set(failing)
        self.calls = []

    def get_values(self, range_a1):
        self.calls.append(range_a1)
        if range_a1 in self.failing:
            raise SheetsError(f"boom: {range_a1}")
        return self.ranges.get(range_a1, [])


def senbo_range(month):
    return DashboardConfig.sheet_range(DashboardConfig.SENBO_VIDEO_SHEETS[month], DashboardConfig.SENBO_VIDEO_COLUMNS)


def senne_range(month):
    return DashboardConfig.sheet_range(DashboardConfig.SENNE_VIDEO_SHEETS[month], DashboardConfig.SENNE_VIDEO_COLUMNS)


def summary_range(month):
    return DashboardConfig.sheet_range(DashboardConfig.SUMMARY_SHEETS[month], DashboardConfig.SUMMARY_COLUMNS)


@pytest.fixture
def sheet_data():
    """Rows for last month's sheets."""
    return {
        senbo_range('last'): [
            ['First', 'https://youtube.com/shorts/aaa', '1.000', '', '', '10,00', '', '', '01/12/2024, 10:00'],
            ['', 'https://youtube.com/shorts/blank'],
            ['Second', 'https://youtube.com/shorts/bbb', '2.000', '', '', '20,00', '', '', '02/12/2024, 10:00'],
            ['First again', 'https://youtube.com/shorts/aaa', '1.500', '', '', '12,00', '', '', '01/12/2024, 10:00'],
        ],
        senne_range('last'): [
            ['Solo', 'https://youtu.be/ccc', '300', '', '', '3,00', 'ccc', '2024-12-03 10:00'],
        ],
        summary_range('last'): [
            ['50.000', '', '', '', '', '900,00', '45,00'],
        ],
    }


def test_get_all_videos(sheet_data):
    client = FakeSheetsClient(sheet_data)
    batch = ContentService(client).get_all_videos('last')

    assert [item.identity for item in batch.items] == ['senbo_aaa', 'senbo_bbb', 'senne_ccc']
    # The later duplicate row wins
    assert batch.items[0].title == 'First again'
    assert batch.items[0].primary_metric == 1500.0
    assert batch.totals.senbo.views == 50000
    assert batch.totals.senne.revenue == pytest.approx(45.0)
    assert client.calls == [senbo_range('last'), senne_range('last'), summary_range('last')]


def test_missing_summary_is_tolerated(sheet_data):
    client = FakeSheetsClient(sheet_data, failing=[summary_range('last')])
    batch = ContentService(client).get_all_videos('last')

    assert len(batch.items) == 3
    assert batch.totals.senbo.revenue == 0
    assert batch.totals.senne.revenue == pytest.approx(3.0)


def test_video_errors_propagate(sheet_data):
    client = FakeSheetsClient(sheet_data, failing=[senbo_range('last')])
    with pytest.raises(SheetsError):
        ContentService(client).get_all_videos('last')


def test_current_month_uses_current_sheets():
    client = FakeSheetsClient({})
    batch = ContentService(client).get_all_videos('current')

    assert batch.items == []
    assert client.calls[0] == senbo_range('current')


def test_invalid_month():
    with pytest.raises(ValueError):
        ContentService(FakeSheetsClient({})).get_all_videos('next')


def test_get_reels():
    client = FakeSheetsClient({
        DashboardConfig.REELS_RANGE: [
            ['Reel', 'https://instagram.com/reel/r1', '5,000', '100', '4', '0:20', 'Senne', '10/12/2024'],
            ['No url'],
        ]
    })
    reels = ContentService(client).get_reels()

    assert len(reels) == 1
    assert reels[0].creator == 'Senne'
    assert reels[0].primary_metric == 5000.0


def test_get_revenue_split():
    client = FakeSheetsClient({DashboardConfig.REVENUE_SPLIT_RANGE: [['600,00', '400,00']]})
    split = ContentService(client).get_revenue_split()
    assert split.share('bowie') == pytest.approx(60.0)


def test_get_revenue_split_empty():
    split = ContentService(FakeSheetsClient({})).get_revenue_split()
    assert split.total == 0


def test_get_daily_revenue():
    client = FakeSheetsClient({
        DashboardConfig.DAILY_REVENUE_RANGE: [['Date', 'Revenue', 'Views'], ['05/01/2025', '3,50', '70']]
    })
    df = ContentService(client).get_daily_revenue()
    assert len(df) == 1
    assert df.iloc[0]['revenue'] == pytest.approx(3.5)


def split_range(month):
    return DashboardConfig.sheet_range(DashboardConfig.SENBO_VIDEO_SHEETS[month], DashboardConfig.SPLIT_TIMELINE_COLUMNS)


def test_get_revenue_split_timeline():
    """Splits from both months count toward the day they were published."""
    client = FakeSheetsClient({
        DashboardConfig.DAILY_REVENUE_RANGE: [['Date', 'Revenue'], ['01/12/2025', '40,00'], ['02/01/2026', '20,00']],
        split_range('last'): [['10,00', '', '01/12/2025, 10:00']],
        split_range('current'): [['5,00', '', '02/01/2026, 10:00']],
    })
    timeline = ContentService(client).get_revenue_split_timeline()

    assert list(timeline['bowie_revenue']) == pytest.approx([10.0, 5.0])
    assert list(timeline['senne_revenue']) == pytest.approx([30.0, 15.0])
    assert set(client.calls) == {DashboardConfig.DAILY_REVENUE_RANGE, split_range('last'), split_range('current')}


def test_get_country_revenue():
    client = FakeSheetsClient({
        DashboardConfig.COUNTRY_REVENUE_RANGE: [['Country', 'Revenue', 'Views', 'RPM'], ['NL', '5,00', '100', '50,00']]
    })
    df = ContentService(client).get_country_revenue()
    assert list(df['country']) == ['NL']


def test_get_device_views_and_traffic_sources():
    client = FakeSheetsClient({
        DashboardConfig.DEVICE_VIEWS_RANGE: [['Device', 'Views', 'Minutes'], ['MOBILE', '10', '5']],
        DashboardConfig.TRAFFIC_SOURCE_RANGE: [['Source', 'Views', 'Minutes'], ['SHORTS', '10', '5']],
    })
    service = ContentService(client)

    assert list(service.get_device_views()['label']) == ['Mobile']
    assert list(service.get_traffic_sources()['label']) == ['Shorts Feed']


def test_get_subscriber_count_and_status():
    client = FakeSheetsClient({
        DashboardConfig.SUBSCRIBER_TRACKER_RANGE: [['Timestamp', 'Subs', 'Views', 'Videos'], ['now', '1.500', '20.000', '12']],
        DashboardConfig.SUBSCRIBER_STATUS_RANGE: [['Status', 'Views', 'Minutes'], ['SUBSCRIBED', '1', '1'],
                                                  ['UNSUBSCRIBED', '3', '1']],
    })
    service = ContentService(client)

    assert service.get_subscriber_count().subscribers == 1500
    assert service.get_subscriber_status().share(subscribed=True) == pytest.approx(25.0)


def test_audience_sheet_errors_propagate():
    client = FakeSheetsClient({}, failing=[DashboardConfig.COUNTRY_REVENUE_RANGE])
    with pytest.raises(SheetsError):
        ContentService(client).get_country_revenue()
