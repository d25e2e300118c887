"""
Unit tests for smartspend.utils.datetime_utils
"""
from datetime import date, datetime, timedelta, timezone

import pytest
from smartspend.utils.datetime_utils import (
    end_of_day,
    ensure_utc,
    is_date_only,
    parse_datetime,
    utc_now,
)


class TestEnsureUtc:
    """Tests for ensure_utc"""

    def test_none_returns_none(self):
        assert ensure_utc(None) is None

    def test_naive_assumed_utc(self):
        dt = datetime(2025, 1, 15, 12, 0, 0)
        result = ensure_utc(dt)
        assert result.tzinfo == timezone.utc
        assert result.hour == 12

    def test_aware_converted_to_utc(self):
        # UTC+5:30
        dt = datetime(2025, 1, 15, 12, 0, 0, tzinfo=timezone(timedelta(hours=5, minutes=30)))
        result = ensure_utc(dt)
        assert result.tzinfo == timezone.utc
        assert result.hour == 6  # 12 - 5.5 = 6:30
        assert result.minute == 30


class TestParseDatetime:
    """Tests for parse_datetime"""

    def test_date_only_string_is_utc_midnight(self):
        assert parse_datetime("2025-03-01") == datetime(2025, 3, 1, tzinfo=timezone.utc)

    def test_z_suffix(self):
        assert parse_datetime("2025-03-01T10:30:00Z") == datetime(2025, 3, 1, 10, 30, tzinfo=timezone.utc)

    def test_offset_converted_to_utc(self):
        result = parse_datetime("2025-03-01T10:30:00+05:30")
        assert result == datetime(2025, 3, 1, 5, 0, tzinfo=timezone.utc)

    def test_date_object(self):
        assert parse_datetime(date(2025, 3, 1)) == datetime(2025, 3, 1, tzinfo=timezone.utc)

    def test_datetime_object_passes_through_as_utc(self):
        result = parse_datetime(datetime(2025, 3, 1, 8, 0))
        assert result.tzinfo == timezone.utc

    @pytest.mark.parametrize("value", ["", "   ", "not-a-date", "2025-13-01", 12345, None])
    def test_invalid_values_raise(self, value):
        with pytest.raises(ValueError, match="Invalid date format"):
            parse_datetime(value)


class TestIsDateOnly:
    def test_date_only_forms(self):
        assert is_date_only("2025-03-01") is True
        assert is_date_only(date(2025, 3, 1)) is True

    def test_values_with_time(self):
        assert is_date_only("2025-03-01T00:00:00Z") is False
        assert is_date_only(datetime(2025, 3, 1)) is False


def test_end_of_day():
    result = end_of_day(datetime(2025, 3, 1, 15, 0, tzinfo=timezone.utc))
    assert result == datetime(2025, 3, 1, 23, 59, 59, 999999, tzinfo=timezone.utc)


def test_utc_now_is_aware():
    assert utc_now().tzinfo == timezone.utc
