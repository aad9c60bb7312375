"""
Data models for date generation.

Intervals are immutable and validated on construction, so an interval that
exists is always sampleable.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from ..errors import InvalidIntervalError
from ..utils.time import interval_seconds


class DateFormat(str, Enum):
    """Output rendering of a generated instant."""
    TIMESTAMP = "timestamp"
    ISO8601 = "iso8601"


@dataclass(frozen=True)
class Interval:
    """Half-open span [start, end) of UTC instants."""

    start: datetime
    end: datetime

    def __post_init__(self) -> None:
        if interval_seconds(self.start, self.end) < 1:
            raise InvalidIntervalError(
                f"Interval end {self.end.isoformat()} is not after start {self.start.isoformat()}",
                start=self.start,
                end=self.end,
            )

    @property
    def length_seconds(self) -> int:
        return interval_seconds(self.start, self.end)
