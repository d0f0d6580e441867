"""Duration formatting utilities for tTime."""
from typing import Tuple
from models import Instant

MS_PER_SECOND = 1000
MS_PER_MINUTE = 60 * MS_PER_SECOND
MS_PER_HOUR = 60 * MS_PER_MINUTE


def split_duration(delta_ms: int) -> Tuple[int, int, int, int]:
    """
    Split a non-negative span of milliseconds into clock components.

    Hours are not wrapped at 24, a long span simply yields a large hour count.

    Args:
        delta_ms: Span length in milliseconds

    Returns:
        Tuple of (hours, minutes, seconds, milliseconds)
    """
    hours = delta_ms // MS_PER_HOUR
    minutes = (delta_ms % MS_PER_HOUR) // MS_PER_MINUTE
    seconds = (delta_ms % MS_PER_MINUTE) // MS_PER_SECOND
    millis = delta_ms % MS_PER_SECOND
    return hours, minutes, seconds, millis


def format_duration(start: Instant, end: Instant) -> str:
    """
    Format the time elapsed between two instants as "HH:MM:SS.mmm".

    Hours, minutes and seconds are padded to at least two digits and
    milliseconds to three. Hours widen past 99 rather than wrapping.
    If end is before start, the absolute span is shown with a leading "-".

    Args:
        start: Start of the span
        end: End of the span

    Returns:
        Formatted duration, e.g. "05:20:10.453"
    """
    delta_ms = end - start
    sign = "-" if delta_ms < 0 else ""
    hours, minutes, seconds, millis = split_duration(abs(delta_ms))
    return f"{sign}{hours:02d}:{minutes:02d}:{seconds:02d}.{millis:03d}"
