"""Tests for the Instant value type."""
import pytest
from datetime import datetime, timedelta, timezone
from dataclasses import FrozenInstanceError
from models import Instant


class TestInstantConstruction:
    """Test building instants."""

    def test_utc_defaults(self):
        """Time fields default to midnight."""
        instant = Instant.utc(2016, 3, 5)
        assert (instant.hour, instant.minute, instant.second, instant.millisecond) == (0, 0, 0, 0)

    def test_invalid_month_raises(self):
        """Invalid calendar fields raise ValueError from datetime."""
        with pytest.raises(ValueError):
            Instant.utc(2016, 13, 1)

    def test_invalid_day_raises(self):
        """Feb 30 is rejected."""
        with pytest.raises(ValueError):
            Instant.utc(2016, 2, 30)

    def test_invalid_millisecond_raises(self):
        """Milliseconds must be below 1000."""
        with pytest.raises(ValueError):
            Instant.utc(2016, 1, 1, 0, 0, 0, 1000)

    def test_is_immutable(self):
        """Instants are frozen."""
        instant = Instant.utc(2016, 3, 5)
        with pytest.raises(FrozenInstanceError):
            instant.hour = 3

    def test_value_equality(self):
        """Instants compare by value."""
        assert Instant.utc(2016, 3, 5, 1, 2, 3, 4) == Instant.utc(2016, 3, 5, 1, 2, 3, 4)
        assert Instant.utc(2016, 3, 5) < Instant.utc(2016, 3, 5, 0, 0, 0, 1)


class TestInstantConversion:
    """Test conversion to and from datetime and epoch milliseconds."""

    def test_from_aware_datetime_converts_to_utc(self):
        """Aware datetimes are shifted into UTC."""
        tz = timezone(timedelta(hours=1))
        instant = Instant.from_datetime(datetime(1998, 5, 17, 3, 0, 0, tzinfo=tz))
        assert instant == Instant.utc(1998, 5, 17, 2, 0, 0)

    def test_from_naive_datetime_is_utc(self):
        """Naive datetimes are taken as UTC."""
        instant = Instant.from_datetime(datetime(2016, 1, 19, 8, 7, 37))
        assert instant == Instant.utc(2016, 1, 19, 8, 7, 37)

    def test_microseconds_truncated(self):
        """Sub-millisecond precision is dropped."""
        instant = Instant.from_datetime(datetime(2016, 1, 1, 0, 0, 0, 123999))
        assert instant.millisecond == 123

    def test_epoch_ms(self):
        """Epoch millisecond conversions."""
        assert Instant.utc(1970, 1, 1).to_epoch_ms() == 0
        assert Instant.utc(1970, 1, 1, 0, 0, 1, 500).to_epoch_ms() == 1500
        assert Instant.from_epoch_ms(1453816082000) == Instant.utc(2016, 1, 26, 13, 48, 2)

    def test_epoch_ms_before_epoch(self):
        """Negative epoch milliseconds are before 1970."""
        assert Instant.from_epoch_ms(-1) == Instant.utc(1969, 12, 31, 23, 59, 59, 999)

    def test_to_datetime_is_aware(self):
        """to_datetime returns a UTC-aware datetime."""
        dt = Instant.utc(2016, 3, 5, 3, 0).to_datetime()
        assert dt.tzinfo == timezone.utc
        assert dt == datetime(2016, 3, 5, 3, 0, tzinfo=timezone.utc)

    def test_isoformat(self):
        """ISO output always carries milliseconds and Z."""
        assert Instant.utc(2000, 1, 1, 15, 20, 10, 453).isoformat() == "2000-01-01T15:20:10.453Z"
        assert Instant.utc(5, 1, 1).isoformat() == "0005-01-01T00:00:00.000Z"


class TestInstantSubtraction:
    """Test span arithmetic."""

    def test_difference_in_milliseconds(self, ten_am):
        """Subtraction yields whole milliseconds."""
        assert Instant.utc(2000, 1, 1, 11, 0, 0) - ten_am == 3_600_000
        assert Instant.utc(2000, 1, 1, 10, 0, 0, 250) - ten_am == 250

    def test_difference_across_days(self):
        """Spans across a day boundary are not wrapped."""
        assert Instant.utc(2000, 1, 2, 0, 0) - Instant.utc(2000, 1, 1, 23, 0) == 3_600_000

    def test_negative_difference(self, ten_am):
        """Earlier minus later is negative."""
        assert Instant.utc(2000, 1, 1, 9, 0) - ten_am == -3_600_000

    def test_subtracting_other_type_fails(self, ten_am):
        """Only instants can be subtracted."""
        with pytest.raises(TypeError):
            ten_am - 5
