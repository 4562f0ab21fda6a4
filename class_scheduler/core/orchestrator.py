# File: class_scheduler/core/orchestrator.py
"""
Main orchestrator module for the class schedule visualizer.
Coordinates the event store, filters and processors behind each view.

The orchestrator holds no derived state: every view is recomputed from the
store on each call, so callers decide when to refresh.
"""

import datetime
from typing import Any, Dict, List, Optional

from class_scheduler.core.config_manager import Config
from class_scheduler.core.time_model import add_minutes, duration
from class_scheduler.models import (
    ClassEvent, Catalog, FilterState, ScheduleStats, WorkloadProgress
)
from class_scheduler.processors.aggregation import summarize, subject_progress, course_progress
from class_scheduler.processors.calendar_views import (
    MonthCount, MonthDay, annual_distribution, build_month_grid
)
from class_scheduler.processors.event_filter import filter_events, events_in_month
from class_scheduler.processors.timeline_processor import DayTimeline, TimelineProcessor
from class_scheduler.services.data_collector import DataCollector
from class_scheduler.services.event_store import EventSink, EventSource, InMemoryEventStore
from class_scheduler.utils.logger import setup_logger

logger = setup_logger(__name__)


class ScheduleOrchestrator:
    """
    Facade used by the views.

    Reads events from an EventSource, applies the active filters and hands
    them to the processors. Edit requests go to the EventSink.
    """

    def __init__(
        self,
        source: EventSource,
        sink: Optional[EventSink] = None,
        catalog: Optional[Catalog] = None,
        timeline_processor: Optional[TimelineProcessor] = None
    ):
        """
        Initialize the orchestrator.

        Args:
            source: Where events are read from
            sink: Where edits are sent; defaults to source when it is also a sink
            catalog: Registered courses and subjects for the progress helpers
            timeline_processor: Daily grid builder (configured geometry by default)
        """
        self.source = source
        if sink is None and isinstance(source, EventSink):
            sink = source
        self.sink = sink
        self.catalog = catalog or Catalog()
        self.timeline_processor = timeline_processor or TimelineProcessor()
        self.filters = FilterState()

        logger.info("Orchestrator initialized successfully")

    def filtered_events(self) -> List[ClassEvent]:
        return filter_events(self.source.get_events(), self.filters)

    # ---------------------------- Views ----------------------------

    def day_view(self, day: datetime.date, now: Optional[datetime.datetime] = None) -> DayTimeline:
        """Timeline of the filtered classes on day."""
        timeline = self.timeline_processor.build(day, self.filtered_events(), now)
        logger.info(f"Day view {timeline.day}: {len(timeline.blocks)} classes")
        return timeline

    def month_view(self, reference: datetime.date, today: Optional[datetime.date] = None) -> List[List[MonthDay]]:
        return build_month_grid(reference, self.filtered_events(), today)

    def year_view(self, year: int) -> List[MonthCount]:
        return annual_distribution(year, self.filtered_events())

    def dashboard_stats(self, reference: Optional[datetime.date] = None) -> ScheduleStats:
        """Totals over the filtered classes, optionally limited to the month of reference."""
        events = self.filtered_events()
        if reference is not None:
            events = events_in_month(events, reference)
        return summarize(events)

    # ----------------------- Workload progress ----------------------

    def subject_progress(self, subject_name: str, course_name: str) -> WorkloadProgress:
        # Progress ignores the view filters
        return subject_progress(self.catalog.subjects, subject_name, course_name, self.source.get_events())

    def course_progress(self, course_name: str) -> WorkloadProgress:
        return course_progress(self.catalog.courses, course_name, self.source.get_events())

    # ---------------------------- Edits -----------------------------

    def draft_event(self, day: datetime.date, start_time: Optional[str] = None) -> ClassEvent:
        """
        Pre-filled class for the "new class" form.

        The end time is start plus Config.DEFAULT_CLASS_DURATION; instructor
        and course default to the first registered ones.
        """
        start_time = start_time or Config.DEFAULT_START_TIME
        course = self.catalog.courses[0] if self.catalog.courses else None
        instructor = self.catalog.instructors[0] if self.catalog.instructors else None

        return ClassEvent(
            id="",
            date=day,
            start_time=start_time,
            end_time=add_minutes(start_time, Config.DEFAULT_CLASS_DURATION),
            instructor=instructor.name if instructor else "",
            course=course.name if course else "",
            subject="",
            color=course.color if course else Config.DEFAULT_CLASS_COLOR,
        )

    @staticmethod
    def validate_times(event: ClassEvent) -> None:
        """
        Reject edits whose times are malformed or not in order.

        Raises:
            ValueError: If a time is not HH:MM or the end is not after the start
        """
        if duration(event.start_time, event.end_time) <= 0:
            raise ValueError(
                f"End time must be after start time: {event.start_time}-{event.end_time}"
            )

    def save_event(self, event: ClassEvent) -> ClassEvent:
        if self.sink is None:
            raise RuntimeError("No event sink configured; schedule is read-only")
        self.validate_times(event)
        return self.sink.save_event(event)

    def delete_event(self, event_id: str) -> bool:
        if self.sink is None:
            raise RuntimeError("No event sink configured; schedule is read-only")
        return self.sink.delete_event(event_id)


class OrchestratorFactory:
    """Factory for creating ScheduleOrchestrator instances."""

    @staticmethod
    def create(records: Optional[Dict[str, Any]] = None) -> ScheduleOrchestrator:
        """
        Create an orchestrator over an in-memory store.

        Args:
            records: Raw document as returned by load_records()

        Raises:
            ValueError: If the configuration is invalid
        """
        if not Config.validate():
            raise ValueError("Invalid configuration. Check your .env settings.")

        data = DataCollector(records).collect_all_data()
        store = InMemoryEventStore(data['events'])
        return ScheduleOrchestrator(store, catalog=data['catalog'])
