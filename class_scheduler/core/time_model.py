# File: class_scheduler/core/time_model.py
"""
Conversions between wall-clock "HH:MM" strings and minutes since midnight.
"""

import re

from class_scheduler.models.errors import ParseError

_HHMM = re.compile(r"([0-9]{1,2}):([0-9]{2})")


def to_minutes(hhmm: str) -> int:
    """
    Parse a 24-hour "HH:MM" string into minutes since midnight.

    Args:
        hhmm: Time string, e.g. "08:30"

    Returns:
        H * 60 + M

    Raises:
        ParseError: If the string is not HH:MM or the values are out of range
    """
    if not isinstance(hhmm, str):
        raise ParseError(hhmm, "not a string")

    match = _HHMM.fullmatch(hhmm)
    if not match:
        raise ParseError(hhmm)

    hours, minutes = int(match.group(1)), int(match.group(2))
    if hours > 23:
        raise ParseError(hhmm, "hour must be between 0 and 23")
    if minutes > 59:
        raise ParseError(hhmm, "minute must be between 0 and 59")

    return hours * 60 + minutes


def duration(start: str, end: str) -> int:
    """Minutes from start to end; negative when end is before start."""
    return to_minutes(end) - to_minutes(start)


def format_minutes(minutes: int) -> str:
    """Format minutes since midnight as "HH:MM"."""
    hours, mins = divmod(int(minutes), 60)
    return f"{hours:02d}:{mins:02d}"


def add_minutes(hhmm: str, minutes: int) -> str:
    """Shift an "HH:MM" time by minutes, wrapping around midnight."""
    return format_minutes((to_minutes(hhmm) + minutes) % (24 * 60))
