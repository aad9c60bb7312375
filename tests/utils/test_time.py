"""
Tests for instant arithmetic utilities.

Verifies the "now" snapshot, signed offsets, interval lengths and the
epoch-second conversions including their overflow handling.
"""

import pytest
from datetime import datetime, timezone, timedelta
from unittest.mock import patch

from datefaker.errors import RangeOverflowError
from datefaker.utils.time import (
    EPOCH, INT64_MAX, INT64_MIN, utc_now, normalize_instant, shift_seconds,
    shift_hours, interval_seconds, to_epoch_seconds, from_epoch_seconds
)


class TestUtcNow:
    """Test utc_now function."""

    def test_uses_injected_clock(self):
        """Should read the injected clock instead of the wall clock."""
        clock_value = datetime(2023, 1, 1, 12, 0, 0, tzinfo=timezone.utc)
        assert utc_now(lambda: clock_value) == clock_value

    def test_truncates_sub_second_part(self):
        """Should drop microseconds from the snapshot."""
        clock_value = datetime(2023, 1, 1, 12, 0, 0, 999999, tzinfo=timezone.utc)
        result = utc_now(lambda: clock_value)
        assert result.microsecond == 0
        assert result.second == 0

    def test_falls_back_to_wall_clock_time(self):
        """Should use the system clock when no clock is injected."""
        with patch('datefaker.utils.time.datetime') as mock_datetime:
            mock_now = datetime(2023, 1, 1, 12, 0, 0, tzinfo=timezone.utc)
            mock_datetime.now.return_value = mock_now

            result = utc_now()
            assert result == mock_now
            mock_datetime.now.assert_called_once_with(timezone.utc)


class TestNormalizeInstant:
    """Test normalize_instant function."""

    def test_naive_datetime_is_taken_as_utc(self):
        result = normalize_instant(datetime(2023, 1, 1, 12, 0, 0))
        assert result == datetime(2023, 1, 1, 12, 0, 0, tzinfo=timezone.utc)
        assert result.tzinfo == timezone.utc

    def test_offset_datetime_is_converted(self):
        """Should convert aware datetimes in other zones to UTC."""
        plus_two = timezone(timedelta(hours=2))
        result = normalize_instant(datetime(2023, 1, 1, 14, 0, 0, tzinfo=plus_two))
        assert result.hour == 12
        assert result.tzinfo == timezone.utc


class TestShifts:
    """Test shift_seconds and shift_hours."""

    def test_shift_forward_and_back(self):
        base = datetime(2023, 1, 1, 12, 0, 0, tzinfo=timezone.utc)
        assert shift_seconds(base, 30) == datetime(2023, 1, 1, 12, 0, 30, tzinfo=timezone.utc)
        assert shift_hours(base, -13) == datetime(2022, 12, 31, 23, 0, 0, tzinfo=timezone.utc)

    def test_shift_past_year_9999_overflows(self):
        """Should raise RangeOverflowError instead of OverflowError."""
        base = datetime(9999, 12, 31, 23, 0, 0, tzinfo=timezone.utc)
        with pytest.raises(RangeOverflowError) as exc_info:
            shift_hours(base, 2)
        assert exc_info.value.value == 7200

    def test_huge_offset_overflows(self):
        with pytest.raises(RangeOverflowError):
            shift_hours(EPOCH, 10 ** 15)


class TestIntervalSeconds:
    """Test interval_seconds function."""

    def test_positive_length(self):
        start = datetime(2023, 1, 1, 12, 0, 0, tzinfo=timezone.utc)
        assert interval_seconds(start, start + timedelta(days=1)) == 86400

    def test_negative_length(self):
        start = datetime(2023, 1, 1, 12, 0, 5, tzinfo=timezone.utc)
        end = datetime(2023, 1, 1, 12, 0, 0, tzinfo=timezone.utc)
        assert interval_seconds(start, end) == -5


class TestEpochConversions:
    """Test to_epoch_seconds and from_epoch_seconds."""

    def test_known_timestamp(self):
        instant = datetime(2024, 1, 1, 0, 0, 0, tzinfo=timezone.utc)
        assert to_epoch_seconds(instant) == 1704067200
        assert from_epoch_seconds(1704067200) == instant

    def test_pre_epoch_is_negative(self):
        instant = datetime(1969, 12, 31, 23, 59, 59, tzinfo=timezone.utc)
        assert to_epoch_seconds(instant) == -1

    def test_rejects_values_outside_int64(self):
        with pytest.raises(RangeOverflowError):
            from_epoch_seconds(INT64_MAX + 1)
        with pytest.raises(RangeOverflowError):
            from_epoch_seconds(INT64_MIN - 1)

    def test_rejects_int64_values_beyond_year_9999(self):
        """Should reject in-range 64-bit values that datetime cannot hold."""
        with pytest.raises(RangeOverflowError):
            from_epoch_seconds(INT64_MAX)
