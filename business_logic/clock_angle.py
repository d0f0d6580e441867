"""Angle between the hands of an analog clock."""
import math
from typing import Tuple
from models import Instant

DEGREES_PER_HOUR = 30  # hour hand
HOUR_HAND_DEGREES_PER_MINUTE = 0.5
DEGREES_PER_MINUTE = 6  # minute hand


def hand_angles_degrees(instant: Instant) -> Tuple[float, float]:
    """
    Get the positions of the hour and minute hands for an instant.

    Hours past 12 are moved onto the 12-hour face. Hour 0 stays 0, so at
    midnight the hour hand sits at 0 degrees rather than 360.

    Args:
        instant: Instant to read (UTC)

    Returns:
        Tuple of (hour_hand_degrees, minute_hand_degrees), clockwise from 12
    """
    hour = instant.hour
    if hour > 12:
        hour -= 12
    minute = instant.minute
    hour_angle = DEGREES_PER_HOUR * hour + HOUR_HAND_DEGREES_PER_MINUTE * minute
    minute_angle = DEGREES_PER_MINUTE * minute
    return hour_angle, minute_angle


def angle_between_hands(instant: Instant) -> float:
    """
    Get the smaller angle between the clock hands, in radians.

    The angle is kept in degrees until the end and converted to radians once,
    so no precision is lost on intermediate steps.

    Args:
        instant: Instant to read (UTC)

    Returns:
        Angle in radians, always within [0, pi]
    """
    hour_angle, minute_angle = hand_angles_degrees(instant)
    diff = hour_angle - minute_angle
    if diff > 180:
        diff = 360 - diff
    degrees = abs(diff)
    # Hour hand trailing the minute hand by more than half a turn (e.g. 1:59)
    if degrees > 180:
        degrees = 360 - degrees
    return degrees * math.pi / 180
