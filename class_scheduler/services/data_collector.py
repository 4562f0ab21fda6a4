# File: class_scheduler/services/data_collector.py

import json
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, TypedDict, TypeVar

from class_scheduler.models import (
    ClassEvent, Catalog, class_event_from_dict,
    instructor_from_dict, course_from_dict, subject_from_dict
)
from class_scheduler.utils.logger import setup_logger

T = TypeVar('T')


class CollectedData(TypedDict):
    events: List[ClassEvent]
    catalog: Catalog


def load_records(filepath: Path) -> Dict[str, Any]:
    """
    Read a JSON document of raw records.

    Accepts either a bare list of events or an object with "events" and
    optional "instructors", "courses" and "subjects" lists.

    Raises:
        FileNotFoundError: If filepath does not exist
        json.JSONDecodeError: If the file is not valid JSON
    """
    with open(filepath, 'r', encoding='utf-8') as f:
        data = json.load(f)

    if isinstance(data, list):
        return {'events': data}
    return data


class DataCollector:
    """Converts raw records into typed models, skipping the ones that fail."""

    def __init__(self, records: Optional[Dict[str, Any]] = None):
        """
        Initialize data collector.

        Args:
            records: Raw document as returned by load_records()
        """
        self.records = records or {}
        self.logger = setup_logger(__name__)

    def collect_events(self) -> List[ClassEvent]:
        """Convert raw event dicts to ClassEvent objects."""
        events: List[ClassEvent] = []
        for raw in self.records.get('events', []):
            if not isinstance(raw, dict):
                self.logger.error(f"Skipping class record that is not an object: {raw!r}")
                continue
            try:
                events.append(class_event_from_dict(raw))
            except (ValueError, TypeError) as e:
                self.logger.error(f"Failed to convert class {raw.get('id', 'Unknown')}: {e}")
        return events

    def _convert(self, key: str, factory: Callable[[dict], T]) -> List[T]:
        """Convert one list of registration records, skipping the ones that fail."""
        converted: List[T] = []
        for raw in self.records.get(key, []):
            if not isinstance(raw, dict):
                self.logger.error(f"Skipping {key} record that is not an object: {raw!r}")
                continue
            try:
                converted.append(factory(raw))
            except (ValueError, TypeError) as e:
                self.logger.error(f"Failed to convert {key} record {raw.get('id', 'Unknown')}: {e}")
        return converted

    def collect_catalog(self) -> Catalog:
        return Catalog(
            instructors=self._convert('instructors', instructor_from_dict),
            courses=self._convert('courses', course_from_dict),
            subjects=self._convert('subjects', subject_from_dict),
        )

    def collect_all_data(self) -> CollectedData:
        """
        Collect all data needed for the views.

        Returns:
            Dictionary containing typed events and the registration catalog
        """
        self.logger.info("Starting data collection and conversion")

        events = self.collect_events()
        catalog = self.collect_catalog()

        self.logger.info(
            f"Collection successful: {len(events)} valid classes, "
            f"{len(catalog.courses)} courses, {len(catalog.subjects)} subjects"
        )
        return {'events': events, 'catalog': catalog}
