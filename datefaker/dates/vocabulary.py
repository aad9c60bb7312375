"""
Calendar vocabulary and loose calendar field generators.

The name tables are fixed English display strings. Field generators draw
each field independently, so ``day_of_month`` is not checked against any
month and may describe dates such as February 31.
"""

from ..config.defaults import VocabularyParams
from ..rng.source import RandomSource, random_element

WEEKDAY_NAMES = (
    "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday",
)

WEEKDAY_ABBREVIATED_NAMES = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")

MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)

MONTH_ABBREVIATED_NAMES = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)

TIMEZONE_ABBREVIATIONS = (
    "ACDT", "ACST", "ADT", "AEDT", "AEST", "AKDT", "AKST", "AST", "AWST",
    "BST", "CAT", "CDT", "CEST", "CET", "CST", "EAT", "EDT", "EEST", "EET",
    "EST", "GMT", "HKT", "HST", "IDT", "IST", "JST", "KST", "MDT", "MSK",
    "MST", "NZDT", "NZST", "PDT", "PHT", "PKT", "PST", "SAST", "SGT", "UTC",
    "WAT", "WEST", "WET", "WIB",
)

DEFAULT_VOCABULARY = VocabularyParams()


def weekday_name(source: RandomSource) -> str:
    return random_element(source, WEEKDAY_NAMES)


def weekday_abbreviated_name(source: RandomSource) -> str:
    return random_element(source, WEEKDAY_ABBREVIATED_NAMES)


def month_name(source: RandomSource) -> str:
    return random_element(source, MONTH_NAMES)


def month_abbreviated_name(source: RandomSource) -> str:
    return random_element(source, MONTH_ABBREVIATED_NAMES)


def timezone_abbreviation(source: RandomSource) -> str:
    return random_element(source, TIMEZONE_ABBREVIATIONS)


def year(source: RandomSource, params: VocabularyParams = DEFAULT_VOCABULARY) -> int:
    """Random year between the configured bounds (1950-2050 by default)."""
    return source.integer(params.min_year, params.max_year)


def month(source: RandomSource) -> int:
    return source.integer(1, 12)


def hour(source: RandomSource) -> int:
    return source.integer(0, 23)


def minute(source: RandomSource) -> int:
    return source.integer(0, 59)


def second(source: RandomSource) -> int:
    return source.integer(0, 59)


def day_of_month(source: RandomSource) -> int:
    """Random day 1-31, independent of any month."""
    return source.integer(1, 31)


def day_of_week(source: RandomSource) -> int:
    """Random ISO weekday number, 1 (Monday) to 7 (Sunday)."""
    return source.integer(1, 7)


def time(source: RandomSource) -> str:
    """Random wall-clock time as zero-padded ``HH:MM``."""
    return f"{hour(source):02d}:{minute(source):02d}"
