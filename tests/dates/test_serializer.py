"""
Tests for instant rendering and ISO-8601 parsing.
"""

import os
import time
import pytest
from datetime import datetime, timezone, timedelta
from unittest.mock import patch

from datefaker.dates.models import DateFormat
from datefaker.dates.serializer import format_instant, parse_instant, instant_from_calendar
from datefaker.errors import MalformedDateError, RangeOverflowError


class TestFormatInstant:
    """Test format_instant function."""

    def test_iso8601_layout(self):
        instant = datetime(2024, 3, 5, 7, 8, 9, tzinfo=timezone.utc)
        assert format_instant(instant, DateFormat.ISO8601) == "2024-03-05T07:08:09Z"

    def test_iso8601_pads_small_years(self):
        instant = datetime(42, 1, 1, tzinfo=timezone.utc)
        assert format_instant(instant, DateFormat.ISO8601) == "0042-01-01T00:00:00Z"

    def test_iso8601_converts_to_utc(self):
        instant = datetime(2024, 1, 1, 2, 0, 0, tzinfo=timezone(timedelta(hours=2)))
        assert format_instant(instant, DateFormat.ISO8601) == "2024-01-01T00:00:00Z"

    def test_timestamp(self):
        instant = datetime(2024, 1, 1, tzinfo=timezone.utc)
        assert format_instant(instant, DateFormat.TIMESTAMP) == "1704067200"

    def test_timestamp_before_epoch_is_negative(self):
        instant = datetime(1969, 12, 31, 23, 0, 0, tzinfo=timezone.utc)
        assert format_instant(instant, DateFormat.TIMESTAMP) == "-3600"

    def test_accepts_format_value_strings(self):
        instant = datetime(2024, 1, 1, tzinfo=timezone.utc)
        assert format_instant(instant, "timestamp") == "1704067200"

    @pytest.mark.parametrize("date_format, expected", [
        (DateFormat.ISO8601, "2024-01-01T00:00:00Z"),
        (DateFormat.TIMESTAMP, "1704067200"),
    ])
    def test_naive_instant_is_utc(self, date_format, expected):
        assert format_instant(datetime(2024, 1, 1, 0, 0, 0), date_format) == expected

    @pytest.mark.skipif(not hasattr(time, "tzset"), reason="requires time.tzset")
    def test_naive_instant_ignores_host_timezone(self):
        """Rendering must not depend on the TZ of the running process."""
        try:
            with patch.dict(os.environ, {"TZ": "America/New_York"}):
                time.tzset()
                iso = format_instant(datetime(2024, 1, 1), DateFormat.ISO8601)
                stamp = format_instant(datetime(2024, 1, 1), DateFormat.TIMESTAMP)
        finally:
            time.tzset()

        assert iso == "2024-01-01T00:00:00Z"
        assert stamp == "1704067200"


class TestParseInstant:
    """Test parse_instant function."""

    def test_parses_layout(self):
        result = parse_instant("2024-02-29T23:59:59Z")
        assert result == datetime(2024, 2, 29, 23, 59, 59, tzinfo=timezone.utc)
        assert result.tzinfo == timezone.utc

    @pytest.mark.parametrize("text", [
        "2024-13-01T00:00:00Z",
        "2023-02-29T00:00:00Z",
        "2024-04-31T00:00:00Z",
        "2024-01-01T24:00:00Z",
        "2024-01-01T00:60:00Z",
        "0000-01-01T00:00:00Z",
    ])
    def test_rejects_impossible_dates(self, text):
        with pytest.raises(MalformedDateError) as exc_info:
            parse_instant(text)
        assert exc_info.value.raw_value == text

    @pytest.mark.parametrize("text", [
        "",
        "2024-01-01",
        "2024-01-01T00:00:00",
        "2024-01-01 00:00:00Z",
        "2024-01-01T00:00:00+00:00",
        "2024-01-01T00:00:00.5Z",
        "2024-1-01T00:00:00Z",
        " 2024-01-01T00:00:00Z",
        "2024-01-01T00:00:00Z\n",
    ])
    def test_rejects_other_layouts(self, text):
        with pytest.raises(MalformedDateError):
            parse_instant(text)

    def test_rejects_non_string(self):
        with pytest.raises(MalformedDateError):
            parse_instant(1704067200)

    def test_malformed_date_is_value_error(self):
        """Callers catching ValueError should also see malformed dates."""
        with pytest.raises(ValueError):
            parse_instant("garbage")

    @pytest.mark.parametrize("instant", [
        datetime(1, 1, 1, tzinfo=timezone.utc),
        datetime(1970, 1, 1, tzinfo=timezone.utc),
        datetime(2000, 2, 29, 12, 34, 56, tzinfo=timezone.utc),
        datetime(9999, 12, 31, 23, 59, 59, tzinfo=timezone.utc),
    ])
    def test_round_trip(self, instant):
        assert parse_instant(format_instant(instant, DateFormat.ISO8601)) == instant


class TestInstantFromCalendar:
    """Test instant_from_calendar function."""

    def test_defaults_to_midnight(self):
        assert instant_from_calendar(2000, 1, 1) == datetime(2000, 1, 1, tzinfo=timezone.utc)

    def test_year_outside_range_overflows(self):
        with pytest.raises(RangeOverflowError):
            instant_from_calendar(10000, 1, 1)
        with pytest.raises(RangeOverflowError):
            instant_from_calendar(0, 1, 1)

    def test_impossible_day_is_malformed(self):
        with pytest.raises(MalformedDateError):
            instant_from_calendar(2023, 2, 29)
