"""Date string parsing and calendar helpers."""
import calendar
import logging
import re
from datetime import datetime, timezone
from email.utils import parsedate_to_datetime
from typing import Optional, Union
from models import Instant

logger = logging.getLogger(__name__)

# "GMT+01", "UTC-0530", "GMT+5:30" style offsets that email.utils doesn't know
_GMT_OFFSET_PATTERN = re.compile(r'\b(?:GMT|UTC)([+-])(\d{1,2}):?(\d{2})?$', re.IGNORECASE)

# Human-style dates like "December 17, 1995 03:24:00"
_LONG_FORMATS = (
    "%B %d, %Y %H:%M:%S",
    "%B %d, %Y %H:%M",
    "%B %d, %Y",
    "%b %d, %Y %H:%M:%S",
    "%b %d, %Y %H:%M",
    "%b %d, %Y",
)


def _normalize_gmt_offset(value: str) -> str:
    """Rewrite a trailing "GMT+01" style zone as a numeric "+0100" offset."""
    match = _GMT_OFFSET_PATTERN.search(value)
    if not match:
        return value
    sign, hours, minutes = match.groups()
    offset = f"{sign}{int(hours):02d}{minutes or '00'}"
    return value[:match.start()] + offset


def parse_rfc2822(value: str) -> Optional[Instant]:
    """
    Parse an RFC 2822 style date string.

    Supports:
    - RFC 2822: "Tue, 26 Jan 2016 13:48:02 GMT"
    - GMT offsets: "Sun, 17 May 1998 03:00:00 GMT+01"
    - Long month form: "December 17, 1995 03:24:00"

    Strings without a zone are read as UTC.

    Args:
        value: Date string to parse

    Returns:
        Parsed Instant, or None if parsing failed
    """
    value = value.strip()
    if not value:
        return None

    try:
        parsed = parsedate_to_datetime(_normalize_gmt_offset(value))
    except (TypeError, ValueError, IndexError):
        parsed = None

    if parsed is None:
        for fmt in _LONG_FORMATS:
            try:
                parsed = datetime.strptime(value, fmt)
                break
            except ValueError:
                continue

    if parsed is None:
        logger.debug("Could not parse %r as an RFC 2822 date", value)
        return None

    try:
        return Instant.from_datetime(parsed)
    except (ValueError, OverflowError):
        logger.debug("Date %r is outside the supported range", value)
        return None


def parse_iso8601(value: str) -> Optional[Instant]:
    """
    Parse an ISO 8601 date string.

    Supports "2016-01-19T16:07:37+00:00", "2016-01-19T08:07:37Z",
    fractional seconds and plain dates ("2016-01-19", read as midnight UTC).

    Args:
        value: Date string to parse

    Returns:
        Parsed Instant, or None if parsing failed
    """
    value = value.strip()
    if not value:
        return None

    # Older interpreters don't accept the "Z" designator
    if value[-1] in "zZ":
        value = value[:-1] + "+00:00"

    try:
        return Instant.from_datetime(datetime.fromisoformat(value))
    except (ValueError, OverflowError):
        logger.debug("Could not parse %r as an ISO 8601 date", value)
        return None


def parse_instant(value: str) -> Optional[Instant]:
    """
    Parse any supported date string.

    Tries ISO 8601, then RFC 2822, then the keyword "now" (current UTC time).

    Args:
        value: Date string to parse

    Returns:
        Parsed Instant, or None if no format matched
    """
    if value.strip().lower() == "now":
        return Instant.from_datetime(datetime.now(timezone.utc))
    return parse_iso8601(value) or parse_rfc2822(value)


def is_leap_year(value: Union[Instant, int]) -> bool:
    """
    Check whether a year is a Gregorian leap year.

    A year is a leap year if divisible by 4, except centuries, which must
    also be divisible by 400 (1900 is not, 2000 is).

    Args:
        value: An Instant or a year number

    Returns:
        True if the year is a leap year
    """
    year = value.year if isinstance(value, Instant) else value
    return calendar.isleap(year)
