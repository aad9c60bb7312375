"""
datefaker - Random date and time generation

Produces pseudo-random instants inside intervals built from high-level
constraints (explicit bounds, future/past horizons, age and year windows)
and renders them as ISO-8601 UTC strings or Unix timestamps. Also exposes
random calendar vocabulary (weekday, month and timezone names).
"""

__version__ = "0.1.0"
__author__ = "datefaker Team"

from .dates.models import DateFormat
from .errors import (
    DateGenerationError,
    InvalidIntervalError,
    MalformedDateError,
    RangeOverflowError,
)
from .generator import (
    DateGenerator,
    default_generator,
    seed,
    between,
    between_timestamps,
    anytime,
    future,
    past,
    soon,
    recent,
    birthdate_by_age,
    birthdate_by_year,
    weekday_name,
    weekday_abbreviated_name,
    month_name,
    month_abbreviated_name,
    timezone_abbreviation,
    year,
    month,
    hour,
    minute,
    second,
    day_of_month,
    day_of_week,
    time,
)

__all__ = [
    "DateFormat",
    "DateGenerationError",
    "InvalidIntervalError",
    "MalformedDateError",
    "RangeOverflowError",
    "DateGenerator",
    "default_generator",
    "seed",
    "between",
    "between_timestamps",
    "anytime",
    "future",
    "past",
    "soon",
    "recent",
    "birthdate_by_age",
    "birthdate_by_year",
    "weekday_name",
    "weekday_abbreviated_name",
    "month_name",
    "month_abbreviated_name",
    "timezone_abbreviation",
    "year",
    "month",
    "hour",
    "minute",
    "second",
    "day_of_month",
    "day_of_week",
    "time",
]
