# File: class_scheduler/models/filters.py

from dataclasses import dataclass
from typing import Optional
from .enums import ClassStatus
from .event import ClassEvent

@dataclass
class FilterState:
    """User-selected filters; empty values match everything."""
    search: str = ""
    instructor: str = ""
    course: str = ""
    status: Optional[ClassStatus] = None  # None means all statuses

    def __post_init__(self):
        if isinstance(self.status, str):
            self.status = None if self.status in ('', 'todos', 'all') else ClassStatus.parse(self.status)

    def matches(self, event: ClassEvent) -> bool:
        """Check if an event passes every active filter."""
        needle = self.search.lower()
        matches_search = (
            needle in event.subject.lower()
            or needle in event.instructor.lower()
            or needle in event.course.lower()
        )
        matches_instructor = event.instructor == self.instructor if self.instructor else True
        matches_course = event.course == self.course if self.course else True
        matches_status = event.status == self.status if self.status is not None else True

        return matches_search and matches_instructor and matches_course and matches_status
