"""
Date generation core: models, sampling, serialization, builders and
calendar vocabulary.
"""
from .models import DateFormat, Interval
from .sampler import sample, sample_interval
from .serializer import format_instant, instant_from_calendar, parse_instant

__all__ = [
    "DateFormat",
    "Interval",
    "sample",
    "sample_interval",
    "format_instant",
    "instant_from_calendar",
    "parse_instant",
]
