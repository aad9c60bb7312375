"""
Error classification for date generation.

Every failure is a typed precondition check surfaced to the caller; no
request is ever mapped to a default or garbage date.
"""

from .date_errors import (
    DateGenerationError,
    MalformedDateError,
    InvalidIntervalError,
    RangeOverflowError,
)

__all__ = [
    "DateGenerationError",
    "MalformedDateError",
    "InvalidIntervalError",
    "RangeOverflowError",
]
