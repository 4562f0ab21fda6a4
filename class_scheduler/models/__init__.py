from .enums import ClassStatus, ViewMode
from .common import parse_iso_datetime, to_calendar_day
from .errors import ParseError, DataQualityWarning
from .event import ClassEvent, class_event_from_dict
from .placement import PlacedEvent
from .catalog import (
    Instructor, Course, Subject, Catalog, find_by_name,
    instructor_from_dict, course_from_dict, subject_from_dict
)
from .filters import FilterState
from .stats import ScheduleStats, WorkloadProgress, format_workload_minutes

__all__ = [
    "ClassStatus",
    "ViewMode",
    "parse_iso_datetime",
    "to_calendar_day",
    "ParseError",
    "DataQualityWarning",
    "ClassEvent",
    "class_event_from_dict",
    "PlacedEvent",
    "Instructor",
    "Course",
    "Subject",
    "Catalog",
    "find_by_name",
    "instructor_from_dict",
    "course_from_dict",
    "subject_from_dict",
    "FilterState",
    "ScheduleStats",
    "WorkloadProgress",
    "format_workload_minutes"
]
