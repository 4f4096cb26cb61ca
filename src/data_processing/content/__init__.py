"""Content package: sheet parsing, source records and the canonical item."""

from .models import (
    ContentItem,
    ReelRecord,
    SenboVideoRecord,
    SenneVideoRecord,
    normalize_records,
    parse_record,
)

__all__ = [
    'ContentItem', 'ReelRecord', 'SenboVideoRecord', 'SenneVideoRecord',
    'normalize_records', 'parse_record'
]
