# File: class_scheduler/models/stats.py
"""
Result models for the aggregation helpers.
"""

import math
from dataclasses import dataclass, field
from typing import Dict
from .enums import ClassStatus


def format_workload_minutes(total_minutes: float) -> str:
    """Format minutes as "2h 30min", "45min" or "3h"."""
    hours = int(total_minutes // 60)
    minutes = int(math.floor(total_minutes % 60 + 0.5))
    if hours == 0:
        return f"{minutes}min"
    if minutes == 0:
        return f"{hours}h"
    return f"{hours}h {minutes}min"


@dataclass
class ScheduleStats:
    """Totals for a set of classes."""
    count: int = 0
    total_minutes: int = 0
    distinct_instructors: int = 0
    counts_by_status: Dict[ClassStatus, int] = field(
        default_factory=lambda: {status: 0 for status in ClassStatus}
    )

    @property
    def total_hours(self) -> int:
        """Total hours, rounded half up."""
        return int(math.floor(self.total_minutes / 60 + 0.5))

    @property
    def completion_rate(self) -> int:
        """Percentage of classes already completed."""
        completed = self.counts_by_status.get(ClassStatus.COMPLETED, 0)
        return int(math.floor(completed / (self.count or 1) * 100 + 0.5))

    def to_dict(self) -> dict:
        return {
            'count': self.count,
            'total_minutes': self.total_minutes,
            'total_hours': self.total_hours,
            'distinct_instructors': self.distinct_instructors,
            'counts_by_status': {s.value: n for s, n in self.counts_by_status.items()},
            'completion_rate': self.completion_rate,
        }


@dataclass
class WorkloadProgress:
    """Progress of scheduled time against a target workload."""
    completed_minutes: int
    target_minutes: int
    percent: float
    is_complete: bool

    @property
    def completed_hours(self) -> float:
        return self.completed_minutes / 60

    @property
    def target_hours(self) -> int:
        return self.target_minutes // 60

    @property
    def formatted_completed(self) -> str:
        return format_workload_minutes(self.completed_minutes)

    @property
    def formatted_target(self) -> str:
        return f"{self.target_hours}h" if self.target_minutes > 0 else "0h"

    def to_dict(self) -> dict:
        return {
            'completed_minutes': self.completed_minutes,
            'target_minutes': self.target_minutes,
            'percent': self.percent,
            'is_complete': self.is_complete,
            'formatted_completed': self.formatted_completed,
            'formatted_target': self.formatted_target,
        }
