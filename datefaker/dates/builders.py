"""
Constraint-to-interval builders.

Each builder turns a high-level constraint into a half-open interval of
instants, samples one instant from it and renders the result. "Now" is read
once per call (or passed in by the caller) so both bounds come from the same
snapshot.

Year offsets use a flat 365-day year (``RangeParams.days_per_year``). This is
an approximation suited to ages and horizons, not an astronomical year.
"""

from datetime import datetime
from typing import Any, Optional

from ..config.defaults import RangeParams
from ..errors import InvalidIntervalError
from ..logging.config import get_generation_logger, log_generation
from ..rng.source import RandomSource
from ..utils.time import EPOCH, from_epoch_seconds, normalize_instant, shift_hours, utc_now
from .models import DateFormat, Interval
from .sampler import sample_interval
from .serializer import format_instant, instant_from_calendar, parse_instant

logger = get_generation_logger(__name__)

DEFAULT_RANGES = RangeParams()


def _require_int(name: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        logger.warning("Rejected non-integer argument", argument=name, value=repr(value))
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    return value


def _generate(builder: str, start: datetime, end: datetime, source: RandomSource,
              date_format: DateFormat, context: Optional[dict[str, Any]] = None) -> str:
    """Validate the interval, sample it and render the result."""
    try:
        interval = Interval(start, end)
    except InvalidIntervalError:
        logger.warning(
            "Rejected empty interval",
            builder=builder,
            interval_start=start.isoformat(),
            interval_end=end.isoformat(),
            context=context,
        )
        raise

    result = format_instant(sample_interval(interval, source), date_format)
    log_generation(logger, builder, start, end, result, context)
    return result


def _snapshot(now: Optional[datetime]) -> datetime:
    return normalize_instant(now) if now is not None else utc_now()


def _year_hours(years: int, ranges: RangeParams) -> int:
    return ranges.hours_per_day * ranges.days_per_year * years


def between(source: RandomSource, from_date: str, to_date: str,
            date_format: DateFormat = DateFormat.ISO8601) -> str:
    """
    Random instant between two ISO-8601 bounds, upper bound excluded.

    Raises:
        MalformedDateError: If either bound does not parse
        InvalidIntervalError: If to_date is not after from_date
    """
    start = parse_instant(from_date)
    end = parse_instant(to_date)
    return _generate("between", start, end, source, date_format,
                     {"from": from_date, "to": to_date})


def between_timestamps(source: RandomSource, from_timestamp: int, to_timestamp: int,
                       date_format: DateFormat = DateFormat.ISO8601) -> str:
    """
    Random instant between two epoch-second bounds, upper bound excluded.

    Raises:
        RangeOverflowError: If a bound is outside signed 64-bit or the
            supported year range
        InvalidIntervalError: If to_timestamp <= from_timestamp
    """
    start = from_epoch_seconds(_require_int("from_timestamp", from_timestamp))
    end = from_epoch_seconds(_require_int("to_timestamp", to_timestamp))
    return _generate("between_timestamps", start, end, source, date_format,
                     {"from": from_timestamp, "to": to_timestamp})


def anytime(source: RandomSource, date_format: DateFormat = DateFormat.ISO8601,
            now: Optional[datetime] = None, ranges: RangeParams = DEFAULT_RANGES) -> str:
    """Random instant from the epoch up to ``anytime_years`` past now."""
    now = _snapshot(now)
    end = shift_hours(now, _year_hours(ranges.anytime_years, ranges))
    return _generate("anytime", EPOCH, end, source, date_format)


def future(source: RandomSource, years: int = 1,
           date_format: DateFormat = DateFormat.ISO8601, now: Optional[datetime] = None,
           ranges: RangeParams = DEFAULT_RANGES) -> str:
    """Random instant within ``years`` after one boundary offset past now."""
    years = _require_int("years", years)
    now = _snapshot(now)
    start = shift_hours(now, ranges.boundary_offset_hours)
    end = shift_hours(start, _year_hours(years, ranges))
    return _generate("future", start, end, source, date_format, {"years": years})


def past(source: RandomSource, years: int = 1,
         date_format: DateFormat = DateFormat.ISO8601, now: Optional[datetime] = None,
         ranges: RangeParams = DEFAULT_RANGES) -> str:
    """Random instant within the last ``years``, ending one boundary offset before now."""
    years = _require_int("years", years)
    now = _snapshot(now)
    start = shift_hours(now, -_year_hours(years, ranges))
    end = shift_hours(now, -ranges.boundary_offset_hours)
    return _generate("past", start, end, source, date_format, {"years": years})


def soon(source: RandomSource, days: int = 3,
         date_format: DateFormat = DateFormat.ISO8601, now: Optional[datetime] = None,
         ranges: RangeParams = DEFAULT_RANGES) -> str:
    """Random instant within ``days`` after one boundary offset past now."""
    days = _require_int("days", days)
    now = _snapshot(now)
    start = shift_hours(now, ranges.boundary_offset_hours)
    end = shift_hours(start, ranges.hours_per_day * days)
    return _generate("soon", start, end, source, date_format, {"days": days})


def recent(source: RandomSource, days: int = 3,
           date_format: DateFormat = DateFormat.ISO8601, now: Optional[datetime] = None,
           ranges: RangeParams = DEFAULT_RANGES) -> str:
    """Random instant within the last ``days``, ending one boundary offset before now."""
    days = _require_int("days", days)
    now = _snapshot(now)
    start = shift_hours(now, -ranges.hours_per_day * days)
    end = shift_hours(now, -ranges.boundary_offset_hours)
    return _generate("recent", start, end, source, date_format, {"days": days})


def birthdate_by_age(source: RandomSource, min_age: int = 18, max_age: int = 80,
                     date_format: DateFormat = DateFormat.ISO8601, now: Optional[datetime] = None,
                     ranges: RangeParams = DEFAULT_RANGES) -> str:
    """
    Random birthdate of someone aged between min_age and max_age.

    Raises:
        InvalidIntervalError: If min_age >= max_age
    """
    min_age = _require_int("min_age", min_age)
    max_age = _require_int("max_age", max_age)
    now = _snapshot(now)
    start = shift_hours(now, -_year_hours(max_age, ranges))
    end = shift_hours(now, -_year_hours(min_age, ranges))
    return _generate("birthdate_by_age", start, end, source, date_format,
                     {"min_age": min_age, "max_age": max_age})


def birthdate_by_year(source: RandomSource, min_year: int = 1920, max_year: int = 2000,
                      date_format: DateFormat = DateFormat.ISO8601) -> str:
    """
    Random birthdate from Jan 1 of min_year to Dec 31 23:59:59 of max_year.

    Raises:
        RangeOverflowError: If a year is outside 0001-9999
        InvalidIntervalError: If min_year > max_year
    """
    min_year = _require_int("min_year", min_year)
    max_year = _require_int("max_year", max_year)
    start = instant_from_calendar(min_year, 1, 1)
    end = instant_from_calendar(max_year, 12, 31, 23, 59, 59)
    return _generate("birthdate_by_year", start, end, source, date_format,
                     {"min_year": min_year, "max_year": max_year})
