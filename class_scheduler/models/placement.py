# File: class_scheduler/models/placement.py

from dataclasses import dataclass
from .event import ClassEvent

@dataclass(frozen=True)
class PlacedEvent:
    """A class event together with its position in a day layout."""
    event: ClassEvent
    start_minutes: int
    end_minutes: int
    duration_minutes: int
    column_index: int
    column_count: int

    @property
    def id(self) -> str:
        return self.event.id

    @property
    def left_percent(self) -> float:
        """Horizontal offset of the column, in percent of the day width."""
        return self.column_index / self.column_count * 100

    @property
    def width_percent(self) -> float:
        """Column width, in percent of the day width."""
        return 100 / self.column_count

    def overlaps_with(self, other: 'PlacedEvent') -> bool:
        """Check if this placement overlaps with another in time."""
        return self.start_minutes < other.end_minutes and other.start_minutes < self.end_minutes

    def to_dict(self) -> dict:
        data = self.event.to_dict()
        data.update({
            'start_minutes': self.start_minutes,
            'end_minutes': self.end_minutes,
            'duration_minutes': self.duration_minutes,
            'column_index': self.column_index,
            'column_count': self.column_count,
            'left_percent': self.left_percent,
            'width_percent': self.width_percent,
        })
        return data
