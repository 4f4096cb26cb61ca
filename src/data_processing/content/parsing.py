"""
Sheet cell parsing.

Google Sheets returns every cell as a display string formatted with the
sheet's locale. These helpers turn those strings into numbers and datetimes
before any record reaches the analyzers. None of them raise: bad input
becomes 0 or the epoch.
"""
import re
from datetime import datetime
from typing import Optional

EPOCH = datetime(1970, 1, 1)

# Observed publish-date formats, most specific first
DATE_FORMATS = (
    '%d/%m/%Y, %H:%M',
    '%d/%m/%Y %H:%M',
    '%Y-%m-%d %H:%M',
    '%Y-%m-%d %H:%M:%S',
    '%d/%m/%Y',
    '%Y-%m-%d',
)

_CURRENCY_RE = re.compile(r'[€$£\s]')
_COUNT_SEPARATORS_RE = re.compile(r'[,.\s]')
_LEADING_NUMBER_RE = re.compile(r'^-?\d+')
_LEADING_FLOAT_RE = re.compile(r'^-?\d+(?:\.\d+)?')
_SHORTS_RE = re.compile(r'shorts/([a-zA-Z0-9_-]+)')
_WATCH_RE = re.compile(r'(?:v=|/embed/|/watch\?v=|youtu\.be/)([a-zA-Z0-9_-]+)')


def parse_amount(value) -> float:
    """Parse a money cell in either European or US notation.

    ``7.186,20`` and ``7,186.20`` both become ``7186.2``. When only a comma
    is present it is a decimal separator if exactly two digits follow it,
    otherwise a thousands separator.
    """
    if value is None or value == '':
        return 0.0
    if isinstance(value, (int, float)):
        return float(value)
    cleaned = _CURRENCY_RE.sub('', str(value))

    if ',' in cleaned and '.' in cleaned:
        if cleaned.rfind(',') > cleaned.rfind('.'):
            cleaned = cleaned.replace('.', '').replace(',', '.', 1)
        else:
            cleaned = cleaned.replace(',', '')
    elif ',' in cleaned:
        parts = cleaned.split(',')
        if len(parts[1]) == 2:
            cleaned = cleaned.replace(',', '.', 1)
        else:
            cleaned = cleaned.replace(',', '')

    match = _LEADING_FLOAT_RE.match(cleaned)
    return float(match.group()) if match else 0.0


def parse_count(value) -> int:
    """Parse a view/like style count, ignoring thousands separators."""
    if value is None or value == '':
        return 0
    if isinstance(value, (int, float)):
        return int(value)
    cleaned = _COUNT_SEPARATORS_RE.sub('', str(value))
    match = _LEADING_NUMBER_RE.match(cleaned)
    return int(match.group()) if match else 0


def parse_publish_date(value: Optional[str]) -> datetime:
    """Parse a publish date cell.

    Accepts ``DD/MM/YYYY, HH:MM`` and ``YYYY-MM-DD HH:MM`` (plus their
    date-only forms). Anything else falls back to the epoch so the item
    sorts first.
    """
    if not value:
        return EPOCH
    text = str(value).strip()
    for fmt in DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue
    return EPOCH


def parse_date(value: Optional[str]) -> Optional[datetime]:
    """Like :func:`parse_publish_date` but returns None instead of the epoch."""
    parsed = parse_publish_date(value)
    return None if parsed == EPOCH else parsed


def parse_duration(value: Optional[str]) -> float:
    """Convert ``m:ss``, ``m:ss.fff`` or ``h:mm:ss`` into seconds."""
    if not value:
        return 0.0
    parts = str(value).strip().split(':')
    try:
        numbers = [float(p) for p in parts]
    except ValueError:
        return 0.0
    if len(numbers) == 2:
        return numbers[0] * 60 + numbers[1]
    if len(numbers) == 3:
        return numbers[0] * 3600 + numbers[1] * 60 + numbers[2]
    return 0.0


def extract_video_id(url: Optional[str], provided_id: Optional[str] = None) -> Optional[str]:
    """Extract a YouTube id from a shorts, watch, embed or youtu.be URL."""
    if provided_id:
        return provided_id.strip() or None
    if not url:
        return None
    match = _SHORTS_RE.search(url) or _WATCH_RE.search(url)
    return match.group(1) if match else None


def cell(row, index: int) -> str:
    """Return a row cell or an empty string when the row is short."""
    if index < len(row) and row[index] is not None:
        return str(row[index])
    return ''
