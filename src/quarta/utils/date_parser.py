"""Date normalization utilities."""

import re
from datetime import UTC, date, datetime
from typing import Iterator, Optional

from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta

from quarta.domain.entities import CalendarMonth
from quarta.domain.errors import DateParseError

# "January 2, 2024" / "Jan 2, 2024"
MONTH_DAY_YEAR_FORMATS = ("%B %d, %Y", "%b %d, %Y")

# "Tuesday, January 2, 2024" / "Tue, Jan 2, 2024"
WEEKDAY_MONTH_DAY_YEAR_FORMATS = (
    "%A, %B %d, %Y",
    "%a, %B %d, %Y",
    "%A, %b %d, %Y",
    "%a, %b %d, %Y",
)

RFC3339_PATTERN = re.compile(
    r"^\d{4}-\d{2}-\d{2}[Tt ]\d{2}:\d{2}:\d{2}(\.\d+)?([Zz]|[+-]\d{2}:\d{2})$"
)


def _strptime_any(date_str: str, formats: tuple[str, ...]) -> Optional[date]:
    for fmt in formats:
        try:
            return datetime.strptime(date_str, fmt).date()
        except ValueError:
            continue
    return None


def _to_utc_date(dt: datetime) -> date:
    """Return the UTC calendar date of a timestamp; naive values are taken as UTC."""
    if dt.tzinfo is not None:
        dt = dt.astimezone(UTC)
    return dt.date()


def _parse_rfc3339(date_str: str) -> Optional[date]:
    if not RFC3339_PATTERN.match(date_str):
        return None
    try:
        return _to_utc_date(date_parser.isoparse(date_str.upper()))
    except ValueError:
        return None


def _parse_iso8601(date_str: str) -> Optional[date]:
    try:
        return _to_utc_date(date_parser.isoparse(date_str))
    except (ValueError, OverflowError):
        return None


def normalize_date(date_str: str) -> date:
    """Normalize a textual transaction date into a calendar date.

    Formats are tried in a fixed order and the first match wins:

    1. "Month Day, Year" (e.g. "January 2, 2024")
    2. "Weekday, Month Day, Year" (e.g. "Tuesday, January 2, 2024")
    3. RFC 3339 timestamps (e.g. "2024-01-02T10:00:00Z")
    4. Generic ISO 8601 dates and timestamps (e.g. "2024-01-02")

    Timestamps carrying an offset are converted to UTC before the date is
    taken.

    Args:
        date_str: Raw date text from a transaction record

    Returns:
        Date object

    Raises:
        DateParseError: If no supported format matches
    """
    if date_str is None:
        raise DateParseError("Could not parse date: no value")

    text = date_str.strip()
    if not text:
        raise DateParseError("Could not parse date: empty value")

    parsers = (
        lambda s: _strptime_any(s, MONTH_DAY_YEAR_FORMATS),
        lambda s: _strptime_any(s, WEEKDAY_MONTH_DAY_YEAR_FORMATS),
        _parse_rfc3339,
        _parse_iso8601,
    )
    for parse in parsers:
        parsed = parse(text)
        if parsed is not None:
            return parsed

    raise DateParseError(f"Could not parse date '{date_str}'")


def month_range(start: CalendarMonth, end: CalendarMonth) -> Iterator[CalendarMonth]:
    """Yield every calendar month from start to end, both inclusive.

    Yields nothing when start is after end.
    """
    current = date(start.year, start.month, 1)
    last = date(end.year, end.month, 1)
    while current <= last:
        yield CalendarMonth.from_date(current)
        current += relativedelta(months=1)
