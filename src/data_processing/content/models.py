"""Content data models.

Each sheet has its own column layout, so every source gets its own record
model tagged by ``source``. Records are normalised into one canonical
:class:`ContentItem` before any analyzer sees them.
"""
from dataclasses import dataclass, asdict
from datetime import datetime
from typing import Annotated, Iterable, List, Literal, Optional, Union

from pydantic import BaseModel, Field, TypeAdapter, field_validator

from .parsing import (
    cell,
    extract_video_id,
    parse_amount,
    parse_count,
    parse_publish_date,
)


@dataclass(frozen=True)
class ContentItem:
    """Canonical content item consumed by the analyzers and views.

    ``primary_metric`` is the view count; everything else is carried
    along for display, sorting and the quiz.
    """
    identity: str
    title: str
    url: str
    source: str
    published_at: datetime
    primary_metric: float
    video_id: Optional[str] = None
    creator: str = ''
    revenue: float = 0.0
    likes: int = 0
    shares: int = 0
    comments: int = 0
    minutes_watched: int = 0
    subs_gained: int = 0
    duration: str = ''
    thumbnail_url: str = ''

    @property
    def views(self) -> float:
        return self.primary_metric

    def to_dict(self) -> dict:
        return asdict(self)


class _RecordBase(BaseModel):
    """Fields shared by every sheet row."""
    title: str
    url: str
    views: int = 0
    publish_date: str = ''
    thumbnail_url: str = ''

    @field_validator('views', mode='before')
    @classmethod
    def validate_views(cls, v) -> int:
        """Counts are never negative."""
        return max(0, parse_count(v))


class _VideoRecordBase(_RecordBase):
    """Fields shared by both YouTube video sheets."""
    video_id: Optional[str] = None
    revenue: float = 0.0
    minutes_watched: int = 0
    avg_duration: str = ''
    likes: int = 0
    shares: int = 0
    subs_gained: int = 0

    @field_validator('revenue', mode='before')
    @classmethod
    def validate_revenue(cls, v) -> float:
        return parse_amount(v)

    @field_validator('minutes_watched', 'likes', 'shares', 'subs_gained', mode='before')
    @classmethod
    def validate_counts(cls, v) -> int:
        return parse_count(v)

    def to_content_item(self) -> ContentItem:
        return ContentItem(
            identity=f"{self.source}_{self.video_id or self.url}",
            title=self.title,
            url=self.url,
            source=self.source,
            published_at=parse_publish_date(self.publish_date),
            primary_metric=float(self.views),
            video_id=self.video_id,
            revenue=self.revenue,
            likes=self.likes,
            shares=self.shares,
            minutes_watched=self.minutes_watched,
            subs_gained=self.subs_gained,
            duration=self.avg_duration,
            thumbnail_url=self.thumbnail_url,
        )


class SenboVideoRecord(_VideoRecordBase):
    """Row from a "Senne & Bo Videos" sheet (columns A:O)."""
    source: Literal['senbo'] = 'senbo'

    @classmethod
    def from_row(cls, row: List[str]) -> 'SenboVideoRecord':
        return cls(
            title=cell(row, 0),
            url=cell(row, 1),
            video_id=extract_video_id(cell(row, 1)),
            views=cell(row, 2),
            revenue=cell(row, 5),
            publish_date=cell(row, 8),
            minutes_watched=cell(row, 9),
            avg_duration=cell(row, 10),
            likes=cell(row, 11),
            shares=cell(row, 12),
            subs_gained=cell(row, 13),
            thumbnail_url=cell(row, 14),
        )


class SenneVideoRecord(_VideoRecordBase):
    """Row from a "Senne Only Videos" sheet (columns A:N).

    This sheet has an explicit video id column (G) that wins over the URL.
    Revenue is the after-tax column (F).
    """
    source: Literal['senne'] = 'senne'

    @classmethod
    def from_row(cls, row: List[str]) -> 'SenneVideoRecord':
        return cls(
            title=cell(row, 0),
            url=cell(row, 1),
            video_id=extract_video_id(cell(row, 1), cell(row, 6)),
            views=cell(row, 2),
            revenue=cell(row, 5),
            publish_date=cell(row, 7),
            minutes_watched=cell(row, 8),
            avg_duration=cell(row, 9),
            likes=cell(row, 10),
            shares=cell(row, 11),
            subs_gained=cell(row, 12),
            thumbnail_url=cell(row, 13),
        )


class ReelRecord(_RecordBase):
    """Row from the "IG Reels" sheet (columns A:I)."""
    source: Literal['reel'] = 'reel'
    likes: int = 0
    comments: int = 0
    duration: str = ''
    creator: str = ''

    @field_validator('likes', 'comments', mode='before')
    @classmethod
    def validate_counts(cls, v) -> int:
        return parse_count(v)

    @classmethod
    def from_row(cls, row: List[str]) -> 'ReelRecord':
        return cls(
            title=cell(row, 0),
            url=cell(row, 1),
            views=cell(row, 2),
            likes=cell(row, 3),
            comments=cell(row, 4),
            duration=cell(row, 5),
            creator=cell(row, 6),
            publish_date=cell(row, 7),
            thumbnail_url=cell(row, 8),
        )

    def to_content_item(self) -> ContentItem:
        # Reels have no platform id; url + title is the stable key
        return ContentItem(
            identity=f"{self.url}_{self.title}",
            title=self.title,
            url=self.url,
            source=self.source,
            published_at=parse_publish_date(self.publish_date),
            primary_metric=float(self.views),
            creator=self.creator,
            likes=self.likes,
            comments=self.comments,
            duration=self.duration,
            thumbnail_url=self.thumbnail_url,
        )


SourceRecord = Annotated[
    Union[SenboVideoRecord, SenneVideoRecord, ReelRecord],
    Field(discriminator='source'),
]

_source_record_adapter = TypeAdapter(SourceRecord)


def parse_record(data: dict) -> Union[SenboVideoRecord, SenneVideoRecord, ReelRecord]:
    """Validate a plain dict into the record type named by its ``source`` key."""
    return _source_record_adapter.validate_python(data)


def is_complete_row(row: List[str]) -> bool:
    """Rows need at least a title and a URL to be usable."""
    return bool(cell(row, 0).strip()) and bool(cell(row, 1).strip())


def normalize_records(records: Iterable[Union[SenboVideoRecord, SenneVideoRecord, ReelRecord]]) -> List[ContentItem]:
    """Normalise tagged records into content items, deduplicating by identity.

    A later record with the same identity replaces the earlier one but keeps
    the earlier position.
    """
    by_identity = {}
    for record in records:
        item = record.to_content_item()
        by_identity[item.identity] = item
    return list(by_identity.values())
