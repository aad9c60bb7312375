"""
Rendering and parsing of instants.

Two external formats are supported: decimal seconds since the epoch and the
fixed ISO-8601 layout ``YYYY-MM-DDTHH:MM:SSZ``. Parsing accepts only the ISO
layout, always in UTC, with no offset or fractional seconds.
"""

import re
from datetime import MAXYEAR, MINYEAR, datetime, timezone
from typing import Any

from ..errors import MalformedDateError, RangeOverflowError
from ..utils.time import normalize_instant, to_epoch_seconds
from .models import DateFormat

_ISO8601_PATTERN = re.compile(
    r"(?P<year>[0-9]{4})-(?P<month>[0-9]{2})-(?P<day>[0-9]{2})"
    r"T(?P<hour>[0-9]{2}):(?P<minute>[0-9]{2}):(?P<second>[0-9]{2})Z"
)


def format_instant(instant: datetime, date_format: DateFormat) -> str:
    """
    Render an instant in the requested format.

    Naive datetimes are taken to already be UTC.

    Args:
        instant: UTC instant with whole-second resolution
        date_format: TIMESTAMP for epoch seconds, ISO8601 for the fixed layout

    Returns:
        Rendered string
    """
    utc = normalize_instant(instant)
    if DateFormat(date_format) == DateFormat.TIMESTAMP:
        return str(to_epoch_seconds(utc))

    return (
        f"{utc.year:04d}-{utc.month:02d}-{utc.day:02d}"
        f"T{utc.hour:02d}:{utc.minute:02d}:{utc.second:02d}Z"
    )


def parse_instant(text: Any) -> datetime:
    """
    Parse the fixed ISO-8601 layout into a UTC instant.

    Raises:
        MalformedDateError: If text does not match the layout exactly or
            names an impossible calendar date (month 13, Feb 30, hour 24)
    """
    if not isinstance(text, str):
        raise MalformedDateError(
            f"Expected an ISO-8601 string, got {type(text).__name__}",
            raw_value=text,
        )

    match = _ISO8601_PATTERN.fullmatch(text)
    if match is None:
        raise MalformedDateError(f"Date {text!r} does not match the ISO-8601 layout", raw_value=text)

    fields = {name: int(value) for name, value in match.groupdict().items()}
    try:
        return instant_from_calendar(**fields)
    except RangeOverflowError as e:
        raise MalformedDateError(f"Date {text!r} is outside the supported years", raw_value=text) from e


def instant_from_calendar(year: int, month: int, day: int,
                          hour: int = 0, minute: int = 0, second: int = 0) -> datetime:
    """
    Construct a UTC instant from calendar fields.

    Raises:
        RangeOverflowError: If year is outside 0001-9999
        MalformedDateError: If the remaining fields do not form a real date
    """
    if year < MINYEAR or year > MAXYEAR:
        raise RangeOverflowError(f"Year {year} is outside {MINYEAR:04d}-{MAXYEAR}", value=year)

    try:
        return datetime(year, month, day, hour, minute, second, tzinfo=timezone.utc)
    except ValueError as e:
        raise MalformedDateError(
            f"Impossible calendar date {year:04d}-{month:02d}-{day:02d} {hour:02d}:{minute:02d}:{second:02d}",
            raw_value=(year, month, day, hour, minute, second),
        ) from e
