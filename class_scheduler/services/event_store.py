# File: class_scheduler/services/event_store.py
"""
Interfaces to the collaborators that own the class records, and an
in-memory implementation of both.
"""

import uuid
from abc import ABC, abstractmethod
from typing import Dict, Iterable, List, Optional

from class_scheduler.models import ClassEvent
from class_scheduler.utils.logger import setup_logger

logger = setup_logger(__name__)


class EventSource(ABC):
    """Supplies the class records to display."""

    @abstractmethod
    def get_events(self) -> List[ClassEvent]:
        """Return all known events."""


class EventSink(ABC):
    """Accepts edit requests for class records."""

    @abstractmethod
    def save_event(self, event: ClassEvent) -> ClassEvent:
        """Create or update an event; returns the stored version."""

    @abstractmethod
    def delete_event(self, event_id: str) -> bool:
        """Delete an event; returns False if it did not exist."""


class InMemoryEventStore(EventSource, EventSink):
    """Keeps events in a dict keyed by id, preserving insertion order."""

    def __init__(self, events: Optional[Iterable[ClassEvent]] = None):
        self._events: Dict[str, ClassEvent] = {}
        for event in events or []:
            self.save_event(event)

    def get_events(self) -> List[ClassEvent]:
        return list(self._events.values())

    def get_event(self, event_id: str) -> Optional[ClassEvent]:
        return self._events.get(event_id)

    def save_event(self, event: ClassEvent) -> ClassEvent:
        if not event.id:
            event = event.with_id(uuid.uuid4().hex)
            logger.info(f"Created class {event.id}: {event.subject} on {event.date}")
        elif event.id in self._events:
            logger.info(f"Updated class {event.id}")
        self._events[event.id] = event
        return event

    def delete_event(self, event_id: str) -> bool:
        if self._events.pop(event_id, None) is None:
            logger.warning(f"Delete requested for unknown class {event_id}")
            return False
        logger.info(f"Deleted class {event_id}")
        return True

    def __len__(self) -> int:
        return len(self._events)
