# File: class_scheduler/processors/timeline_processor.py
"""
Daily timeline processing module.
Turns a day's placements and the live indicator into positioned blocks
on a vertical hour grid.
"""

import datetime
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Union

from class_scheduler.core.config_manager import Config
from class_scheduler.core.live_indicator import current_offset
from class_scheduler.core.overlap_layout import layout_with_warnings
from class_scheduler.models import ClassEvent, PlacedEvent, DataQualityWarning, to_calendar_day
from class_scheduler.processors.event_filter import events_on_day
from class_scheduler.utils.logger import LoggerMixin


@dataclass
class TimelineBlock:
    """A class positioned on the daily grid."""
    placement: PlacedEvent
    top_rem: float
    height_rem: float
    left_percent: float
    width_percent: float
    is_short: bool
    is_very_short: bool
    is_visible: bool

    @property
    def event(self) -> ClassEvent:
        return self.placement.event


@dataclass
class DayTimeline:
    """Everything the daily view needs to draw one day."""
    day: datetime.date
    hours: List[int]
    blocks: List[TimelineBlock] = field(default_factory=list)
    now_offset_hours: Optional[float] = None
    indicator_top_rem: Optional[float] = None
    warnings: List[DataQualityWarning] = field(default_factory=list)

    @property
    def show_indicator(self) -> bool:
        return self.indicator_top_rem is not None

    @property
    def visible_blocks(self) -> List[TimelineBlock]:
        return [b for b in self.blocks if b.is_visible]

    @property
    def is_empty(self) -> bool:
        return not self.blocks


class TimelineProcessor(LoggerMixin):
    """Builds DayTimeline objects using the configured grid geometry."""

    def __init__(
        self,
        start_hour: int = Config.TIMELINE_START_HOUR,
        hour_height_rem: float = Config.HOUR_HEIGHT_REM,
        short_minutes: int = Config.SHORT_EVENT_MINUTES,
        very_short_minutes: int = Config.VERY_SHORT_EVENT_MINUTES
    ):
        """
        Initialize timeline processor.

        Args:
            start_hour: First hour shown on the grid
            hour_height_rem: Height of one hour, in rem
            short_minutes: Classes up to this length get the compact layout
            very_short_minutes: Classes up to this length get a single line
        """
        self.start_hour = start_hour
        self.hour_height_rem = hour_height_rem
        self.short_minutes = short_minutes
        self.very_short_minutes = very_short_minutes

    def _to_rem(self, hours: float) -> float:
        return (hours - self.start_hour) * self.hour_height_rem

    def _block(self, placement: PlacedEvent) -> TimelineBlock:
        start_hours = placement.start_minutes / 60
        # Zero and negative durations are drawn as zero-height markers
        visible_minutes = max(placement.duration_minutes, 0)
        duration_hours = visible_minutes / 60

        return TimelineBlock(
            placement=placement,
            top_rem=self._to_rem(start_hours),
            height_rem=duration_hours * self.hour_height_rem,
            left_percent=placement.left_percent,
            width_percent=placement.width_percent,
            is_short=placement.duration_minutes <= self.short_minutes,
            is_very_short=placement.duration_minutes <= self.very_short_minutes,
            is_visible=start_hours + duration_hours >= self.start_hour,
        )

    def build(
        self,
        day: Union[datetime.date, datetime.datetime],
        events: Iterable[ClassEvent],
        now: Optional[datetime.datetime] = None
    ) -> DayTimeline:
        """
        Build the timeline for one day.

        Args:
            day: Day to display
            events: Any events; only those on day are used
            now: Current time for the live indicator (defaults to now)

        Returns:
            DayTimeline with one block per placed event
        """
        calendar_day = to_calendar_day(day)
        placements, warnings = layout_with_warnings(events_on_day(events, calendar_day))

        for warning in warnings:
            self.logger.warning(str(warning))

        timeline = DayTimeline(
            day=calendar_day,
            hours=list(range(self.start_hour, 24)),
            blocks=[self._block(p) for p in placements],
            warnings=warnings,
        )

        offset = current_offset(calendar_day, now)
        timeline.now_offset_hours = offset
        if offset is not None and offset >= self.start_hour:
            timeline.indicator_top_rem = self._to_rem(offset)

        self.logger.debug(
            f"Timeline for {calendar_day}: {len(timeline.blocks)} blocks, "
            f"{len(warnings)} warnings"
        )
        return timeline


def build_day_timeline(
    day: Union[datetime.date, datetime.datetime],
    events: Iterable[ClassEvent],
    now: Optional[datetime.datetime] = None
) -> DayTimeline:
    """Build a day timeline with the configured geometry."""
    return TimelineProcessor().build(day, events, now)
