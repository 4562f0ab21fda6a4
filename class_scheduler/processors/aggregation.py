# File: class_scheduler/processors/aggregation.py
"""
Aggregation helpers for the dashboard and registration progress displays.
"""

import re
from typing import Iterable, List, Optional

from class_scheduler.core.time_model import duration
from class_scheduler.models import (
    ClassEvent, ClassStatus, ParseError, ScheduleStats, WorkloadProgress,
    Course, Subject, find_by_name
)
from class_scheduler.utils.logger import setup_logger

logger = setup_logger(__name__)

_LEADING_NUMBER = re.compile(r"(\d+)")


def _countable_minutes(event: ClassEvent) -> int:
    """Duration of an event, or 0 when its times are malformed or reversed."""
    try:
        minutes = duration(event.start_time, event.end_time)
    except ParseError as e:
        logger.warning(f"Event {event.id} excluded from totals: {e}")
        return 0
    if minutes < 0:
        logger.warning(f"Event {event.id} excluded from totals: end before start")
        return 0
    return minutes


def summarize(events: Iterable[ClassEvent]) -> ScheduleStats:
    """
    Roll a set of classes up into totals.

    Negative and malformed durations are left out of total_minutes instead
    of being subtracted.
    """
    stats = ScheduleStats()
    instructors = set()

    for event in events:
        stats.count += 1
        instructors.add(event.instructor)
        stats.counts_by_status[event.status] = stats.counts_by_status.get(event.status, 0) + 1
        stats.total_minutes += _countable_minutes(event)

    stats.distinct_instructors = len(instructors)
    return stats


def parse_workload_label(label: Optional[str]) -> int:
    """Hours in a workload label such as "80h" or "10 h"; 0 if there is no number."""
    if not label:
        return 0
    match = _LEADING_NUMBER.search(str(label))
    return int(match.group(1)) if match else 0


def workload_progress(target_duration_label: Optional[str], matching_events: Iterable[ClassEvent]) -> WorkloadProgress:
    """
    Measure non-canceled class time against a target workload.

    Args:
        target_duration_label: Free-text label with the target in hours ("80h")
        matching_events: Events already filtered by subject and/or course

    Returns:
        WorkloadProgress with percent capped at 100
    """
    target_minutes = parse_workload_label(target_duration_label) * 60

    completed_minutes = 0
    for event in matching_events:
        if event.status == ClassStatus.CANCELED:
            continue
        completed_minutes += _countable_minutes(event)

    if target_minutes > 0:
        percent = min(completed_minutes / target_minutes * 100, 100)
    else:
        percent = 0

    return WorkloadProgress(
        completed_minutes=completed_minutes,
        target_minutes=target_minutes,
        percent=percent,
        is_complete=target_minutes > 0 and completed_minutes >= target_minutes,
    )


def subject_progress(
    subjects: List[Subject],
    subject_name: str,
    course_name: str,
    events: Iterable[ClassEvent]
) -> WorkloadProgress:
    """Progress of a subject within a course; unknown subjects have a 0h target."""
    subject = find_by_name(subjects, subject_name)
    label = subject.workload if subject and subject.workload else "0h"
    matching = [e for e in events if e.subject == subject_name and e.course == course_name]
    return workload_progress(label, matching)


def course_progress(
    courses: List[Course],
    course_name: str,
    events: Iterable[ClassEvent]
) -> WorkloadProgress:
    """Progress of a whole course; unknown courses have a 0h target."""
    course = find_by_name(courses, course_name)
    label = course.workload if course and course.workload else "0h"
    matching = [e for e in events if e.course == course_name]
    return workload_progress(label, matching)
