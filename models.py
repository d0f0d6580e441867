"""Data models for date/time calculations."""
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


@dataclass(frozen=True, order=True)
class Instant:
    """An immutable point in time, stored as calendar fields in UTC.

    Fields are validated by building the equivalent datetime, so an invalid
    combination (month 13, Feb 30, ...) raises ValueError at construction.

    Subtracting two instants gives the span between them in whole
    milliseconds.
    """
    year: int
    month: int
    day: int
    hour: int = 0
    minute: int = 0
    second: int = 0
    millisecond: int = 0

    def __post_init__(self):
        self.to_datetime()

    @classmethod
    def utc(cls, year: int, month: int, day: int, hour: int = 0, minute: int = 0,
            second: int = 0, millisecond: int = 0) -> 'Instant':
        """Build an instant from UTC calendar fields."""
        return cls(year, month, day, hour, minute, second, millisecond)

    @classmethod
    def from_datetime(cls, value: datetime) -> 'Instant':
        """
        Convert a datetime to an Instant.

        Aware datetimes are converted to UTC, naive ones are taken as UTC.
        Sub-millisecond precision is truncated.

        Args:
            value: datetime to convert

        Returns:
            Instant at the same point in time
        """
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        return cls(
            value.year, value.month, value.day,
            value.hour, value.minute, value.second,
            value.microsecond // 1000,
        )

    @classmethod
    def from_epoch_ms(cls, ms: int) -> 'Instant':
        """Build an instant from milliseconds since the Unix epoch."""
        return cls.from_datetime(EPOCH + timedelta(milliseconds=ms))

    def to_datetime(self) -> datetime:
        """Return the equivalent timezone-aware UTC datetime."""
        return datetime(
            self.year, self.month, self.day,
            self.hour, self.minute, self.second,
            self.millisecond * 1000,
            tzinfo=timezone.utc,
        )

    def to_epoch_ms(self) -> int:
        """Return milliseconds since the Unix epoch."""
        return (self.to_datetime() - EPOCH) // timedelta(milliseconds=1)

    def isoformat(self) -> str:
        """Format as YYYY-MM-DDTHH:MM:SS.mmmZ."""
        return (f"{self.year:04d}-{self.month:02d}-{self.day:02d}"
                f"T{self.hour:02d}:{self.minute:02d}:{self.second:02d}"
                f".{self.millisecond:03d}Z")

    def __sub__(self, other: 'Instant') -> int:
        if not isinstance(other, Instant):
            return NotImplemented
        return self.to_epoch_ms() - other.to_epoch_ms()
