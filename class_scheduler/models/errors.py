# File: class_scheduler/models/errors.py
"""
Error types shared by the scheduling core.
"""

from dataclasses import dataclass
from typing import Optional


class ParseError(ValueError):
    """Raised when a wall-clock "HH:MM" string cannot be parsed."""

    def __init__(self, value, reason: str = "expected HH:MM"):
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid time {value!r}: {reason}")


@dataclass
class DataQualityWarning:
    """A record that was left out of a computation because its data is unusable."""
    field: str
    message: str
    event_id: Optional[str] = None

    def __str__(self) -> str:
        """String representation of the warning."""
        if self.event_id is not None:
            return f"Event {self.event_id} - {self.field}: {self.message}"
        return f"{self.field}: {self.message}"
