# File: class_scheduler/processors/event_filter.py
"""
Selection of classes by user filters and by calendar period.
"""

import datetime
from typing import Iterable, List, Optional, Union

from class_scheduler.models import ClassEvent, FilterState, to_calendar_day

DateLike = Union[datetime.date, datetime.datetime]


def filter_events(events: Iterable[ClassEvent], filters: Optional[FilterState] = None) -> List[ClassEvent]:
    """Apply search, instructor, course and status filters."""
    if filters is None:
        return list(events)
    return [e for e in events if filters.matches(e)]


def events_on_day(events: Iterable[ClassEvent], day: DateLike) -> List[ClassEvent]:
    """Events whose calendar day equals day (time of day ignored)."""
    target = to_calendar_day(day)
    return [e for e in events if e.date == target]


def events_in_month(events: Iterable[ClassEvent], reference: DateLike) -> List[ClassEvent]:
    """Events in the same year and month as reference."""
    target = to_calendar_day(reference)
    return [
        e for e in events
        if e.date.year == target.year and e.date.month == target.month
    ]


def events_in_year(events: Iterable[ClassEvent], year: int) -> List[ClassEvent]:
    return [e for e in events if e.date.year == year]
