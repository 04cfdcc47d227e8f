"""
Unit tests for device_service.utils.datetime_utils
"""
from datetime import datetime, timedelta, timezone

from device_service.utils.datetime_utils import ensure_utc, utc_now


class TestEnsureUtc:
    """Tests for ensure_utc - no config needed"""

    def test_none_returns_none(self):
        assert ensure_utc(None) is None

    def test_naive_assumed_utc(self):
        dt = datetime(2025, 1, 15, 12, 0, 0)
        result = ensure_utc(dt)
        assert result.tzinfo == timezone.utc
        assert result.year == 2025
        assert result.month == 1
        assert result.day == 15
        assert result.hour == 12

    def test_aware_converted_to_utc(self):
        # UTC+5:30
        dt = datetime(2025, 1, 15, 12, 0, 0, tzinfo=timezone(timedelta(hours=5, minutes=30)))
        result = ensure_utc(dt)
        assert result.tzinfo == timezone.utc
        assert result.hour == 6  # 12 - 5.5 = 6:30
        assert result.minute == 30


class TestUtcNow:
    def test_is_aware_utc(self):
        result = utc_now()
        assert result.tzinfo == timezone.utc

    def test_close_to_system_clock(self):
        before = datetime.now(timezone.utc)
        result = utc_now()
        after = datetime.now(timezone.utc)
        assert before <= result <= after
