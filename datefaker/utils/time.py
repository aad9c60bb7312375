"""
Instant arithmetic utilities.

This module provides centralized time handling for generation requests.
Every instant is a timezone-aware UTC datetime truncated to whole seconds,
and every offset that would leave the representable range surfaces as a
RangeOverflowError instead of an OverflowError from the datetime module.
"""

from datetime import datetime, timedelta, timezone
from typing import Callable, Optional

from ..errors import RangeOverflowError

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

SECONDS_PER_HOUR = 3600

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1

Clock = Callable[[], datetime]


def utc_now(clock: Optional[Clock] = None) -> datetime:
    """
    Take one snapshot of the current instant.

    Args:
        clock: Optional zero-argument callable returning an aware datetime,
            defaults to the system wall clock

    Returns:
        Current instant as UTC datetime without sub-second part
    """
    current = clock() if clock is not None else datetime.now(timezone.utc)
    return normalize_instant(current)


def normalize_instant(instant: datetime) -> datetime:
    """
    Coerce a datetime into the canonical instant form.

    Naive datetimes are taken to already be UTC.
    """
    if instant.tzinfo is None:
        instant = instant.replace(tzinfo=timezone.utc)
    else:
        instant = instant.astimezone(timezone.utc)

    return instant.replace(microsecond=0)


def shift_seconds(instant: datetime, seconds: int) -> datetime:
    """
    Offset an instant by a signed number of seconds.

    Args:
        instant: Base instant
        seconds: Signed offset, negative moves into the past

    Returns:
        Shifted instant

    Raises:
        RangeOverflowError: If the result falls outside years 0001-9999
    """
    try:
        return instant + timedelta(seconds=seconds)
    except OverflowError as e:
        raise RangeOverflowError(
            f"Shifting {instant.isoformat()} by {seconds}s leaves the representable range",
            value=seconds,
        ) from e


def shift_hours(instant: datetime, hours: int) -> datetime:
    """Offset an instant by a signed number of hours."""
    return shift_seconds(instant, hours * SECONDS_PER_HOUR)


def interval_seconds(start: datetime, end: datetime) -> int:
    """
    Calculate the whole-second length of the span from start to end.

    Returns:
        Length in seconds (negative when end precedes start)
    """
    return (end - start) // timedelta(seconds=1)


def to_epoch_seconds(instant: datetime) -> int:
    """Seconds elapsed since 1970-01-01T00:00:00Z, negative before it."""
    return interval_seconds(EPOCH, instant)


def from_epoch_seconds(seconds: int) -> datetime:
    """
    Build an instant from seconds since the epoch.

    Raises:
        RangeOverflowError: If seconds is outside signed 64-bit range or the
            instant is outside years 0001-9999
    """
    if seconds < INT64_MIN or seconds > INT64_MAX:
        raise RangeOverflowError(
            f"Timestamp {seconds} is outside the signed 64-bit range",
            value=seconds,
        )

    return shift_seconds(EPOCH, seconds)
