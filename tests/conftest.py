"""Pytest configuration and shared fixtures."""
import pytest
from models import Instant


@pytest.fixture
def ten_am():
    """Fixture providing 2000-01-01 10:00:00 UTC."""
    return Instant.utc(2000, 1, 1, 10, 0, 0)


@pytest.fixture
def every_minute_of_day():
    """Fixture providing an instant for every minute of one UTC day."""
    return [
        Instant.utc(2016, 4, 5, hour, minute)
        for hour in range(24)
        for minute in range(60)
    ]
