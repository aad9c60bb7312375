"""
Date generation error classifications.

These exceptions describe the ways a generation request can be rejected
before any random draw is made. They are raised at the builder and sampler
boundary and always propagate to the caller.
"""

from datetime import datetime
from typing import Any, Optional, Dict

ISO8601_LAYOUT = "YYYY-MM-DDTHH:MM:SSZ"


class DateGenerationError(Exception):
    """Base class for rejected date generation requests."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = False


class MalformedDateError(DateGenerationError, ValueError):
    """Input string does not match the layout or names an impossible date."""

    def __init__(self, message: str, raw_value: Optional[Any] = None,
                 expected_format: str = ISO8601_LAYOUT, **kwargs):
        super().__init__(message, **kwargs)
        self.raw_value = raw_value
        self.expected_format = expected_format


class InvalidIntervalError(DateGenerationError, ValueError):
    """Computed interval end is not strictly after its start."""

    def __init__(self, message: str, start: Optional[datetime] = None,
                 end: Optional[datetime] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.start = start
        self.end = end


class RangeOverflowError(DateGenerationError, ValueError):
    """Arithmetic left the representable instant range."""

    def __init__(self, message: str, value: Optional[Any] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.value = value
