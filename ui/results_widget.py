"""Results widget showing calculations for the entered dates."""
import math
from typing import Optional
from textual.widgets import Static
from models import Instant
from business_logic.clock_angle import angle_between_hands
from business_logic.date_parser import is_leap_year
from utils.time_utils import format_duration
from config import config


def describe_instant(label: str, instant: Optional[Instant], raw: str) -> str:
    """
    Build the Rich-formatted block for one entered date.

    Shows the parsed instant, leap-year flag and clock-hand angle, or a
    red error line if the text could not be parsed.
    """
    if not raw:
        return f"[bold]{label}[/bold]\n[dim]not set[/dim]"
    if instant is None:
        return f"[bold]{label}[/bold]\n[red]Could not parse {raw!r}[/red]"

    angle = angle_between_hands(instant)
    precision = config.angle_precision
    leap = "[green]yes[/green]" if is_leap_year(instant) else "no"
    return (
        f"[bold]{label}[/bold]\n"
        f"Instant:      {instant.isoformat()}\n"
        f"Leap year:    {leap}\n"
        f"Clock angle:  {angle:.{precision}f} rad ({math.degrees(angle):g}°)"
    )


def build_report(start: Optional[Instant], end: Optional[Instant],
                 start_raw: str = "", end_raw: str = "") -> str:
    """
    Build the full report text for a start/end pair.

    Args:
        start: Parsed start instant (None if missing or invalid)
        end: Parsed end instant (None if missing or invalid)
        start_raw: Text the user typed for start
        end_raw: Text the user typed for end

    Returns:
        Rich-formatted report
    """
    sections = [
        describe_instant("Start", start, start_raw),
        describe_instant("End", end, end_raw),
    ]
    if start is not None and end is not None:
        duration = format_duration(start, end)
        if end < start:
            duration = f"[yellow]{duration}[/yellow] [dim](end is before start)[/dim]"
        sections.append(f"[bold]Elapsed[/bold]\n{duration}")
    return "\n\n".join(sections)


class ResultsWidget(Static):
    """Widget displaying calculations for the current start/end instants."""

    def __init__(self):
        super().__init__()
        self.start: Optional[Instant] = None
        self.end: Optional[Instant] = None
        self.start_raw = ""
        self.end_raw = ""

    def set_instants(self, start: Optional[Instant], end: Optional[Instant],
                     start_raw: str = "", end_raw: str = "") -> None:
        """Update the instants and re-render."""
        self.start = start
        self.end = end
        self.start_raw = start_raw
        self.end_raw = end_raw
        self.update(build_report(start, end, start_raw, end_raw))
