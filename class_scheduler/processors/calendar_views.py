# File: class_scheduler/processors/calendar_views.py
"""
Data for the monthly and annual views, and date navigation between periods.
"""

import calendar
import datetime
from collections import defaultdict
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional

from class_scheduler.core.config_manager import Config
from class_scheduler.core.time_model import to_minutes
from class_scheduler.models import ClassEvent, ParseError, ViewMode, to_calendar_day
from class_scheduler.processors.event_filter import events_in_year


@dataclass
class MonthDay:
    """One cell of the monthly grid."""
    date: datetime.date
    events: List[ClassEvent] = field(default_factory=list)
    is_current_month: bool = True
    is_today: bool = False


@dataclass
class MonthCount:
    """Number of classes in one month of the year."""
    month: datetime.date  # first day of the month
    count: int


def _start_key(event: ClassEvent):
    # Malformed times sort last instead of breaking the cell
    try:
        return (0, to_minutes(event.start_time))
    except ParseError:
        return (1, 0)


def build_month_grid(
    reference: datetime.date,
    events: Iterable[ClassEvent],
    today: Optional[datetime.date] = None
) -> List[List[MonthDay]]:
    """
    Weeks (Sunday to Saturday) covering the month of reference.

    Each cell lists that day's classes sorted by start time.
    """
    reference = to_calendar_day(reference)
    today = today or datetime.datetime.now(Config.timezone()).date()

    month_start = reference.replace(day=1)
    last_day = calendar.monthrange(reference.year, reference.month)[1]
    month_end = reference.replace(day=last_day)

    # date.weekday(): Monday=0 ... Sunday=6
    grid_start = month_start - datetime.timedelta(days=(month_start.weekday() + 1) % 7)
    grid_end = month_end + datetime.timedelta(days=(5 - month_end.weekday()) % 7)

    by_day: Dict[datetime.date, List[ClassEvent]] = defaultdict(list)
    for event in events:
        if grid_start <= event.date <= grid_end:
            by_day[event.date].append(event)

    weeks: List[List[MonthDay]] = []
    current = grid_start
    while current <= grid_end:
        week = []
        for _ in range(7):
            week.append(MonthDay(
                date=current,
                events=sorted(by_day.get(current, []), key=_start_key),
                is_current_month=current.month == reference.month,
                is_today=current == today,
            ))
            current += datetime.timedelta(days=1)
        weeks.append(week)

    return weeks


def annual_distribution(year: int, events: Iterable[ClassEvent]) -> List[MonthCount]:
    """Class count for each of the twelve months of year."""
    counts = [0] * 12
    for event in events_in_year(events, year):
        counts[event.date.month - 1] += 1
    return [
        MonthCount(month=datetime.date(year, m + 1, 1), count=counts[m])
        for m in range(12)
    ]


def _add_months(day: datetime.date, months: int) -> datetime.date:
    month_index = day.month - 1 + months
    year = day.year + month_index // 12
    month = month_index % 12 + 1
    last_day = calendar.monthrange(year, month)[1]
    return datetime.date(year, month, min(day.day, last_day))


def shift_reference_date(current: datetime.date, view_mode: ViewMode, direction: int) -> datetime.date:
    """
    Move the displayed date one period back (-1) or forward (+1).

    Daily moves by a day, monthly and dashboard by a month, annual by a
    year. Registrations do not navigate.
    """
    if isinstance(view_mode, str):
        view_mode = ViewMode(view_mode)
    step = 1 if direction > 0 else -1

    if view_mode == ViewMode.DAILY:
        return current + datetime.timedelta(days=step)
    if view_mode in (ViewMode.MONTHLY, ViewMode.DASHBOARD):
        return _add_months(current, step)
    if view_mode == ViewMode.ANNUAL:
        return _add_months(current, 12 * step)
    return current
