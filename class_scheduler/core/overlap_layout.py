# File: class_scheduler/core/overlap_layout.py
"""
Overlap layout for the daily view.

Events of one day are sorted by start time (longest first on ties), split
into clusters of transitively overlapping events, and each cluster is laid
out in columns with a first-fit scan. Every event of a cluster shares the
cluster's column count, so widths line up across the cluster.
"""

from dataclasses import dataclass
from typing import Iterable, List, Tuple

from class_scheduler.core.time_model import to_minutes
from class_scheduler.models import ClassEvent, PlacedEvent, ParseError, DataQualityWarning
from class_scheduler.utils.logger import setup_logger

logger = setup_logger(__name__)


@dataclass
class _TimedEvent:
    event: ClassEvent
    start_minutes: int
    end_minutes: int

    @property
    def duration_minutes(self) -> int:
        return self.end_minutes - self.start_minutes


def _resolve_times(
    events: Iterable[ClassEvent]
) -> Tuple[List[_TimedEvent], List[DataQualityWarning]]:
    timed: List[_TimedEvent] = []
    warnings: List[DataQualityWarning] = []

    for event in events:
        try:
            start = to_minutes(event.start_time)
            end = to_minutes(event.end_time)
        except ParseError as e:
            warnings.append(DataQualityWarning(
                field='time',
                message=f"excluded from layout: {e}",
                event_id=event.id,
            ))
            continue
        timed.append(_TimedEvent(event, start, end))

    return timed, warnings


def _split_clusters(ordered: List[_TimedEvent]) -> List[List[_TimedEvent]]:
    clusters: List[List[_TimedEvent]] = []
    current: List[_TimedEvent] = []
    cluster_end = 0

    for item in ordered:
        if current and item.start_minutes < cluster_end:
            current.append(item)
            cluster_end = max(cluster_end, item.end_minutes)
        else:
            if current:
                clusters.append(current)
            current = [item]
            cluster_end = item.end_minutes

    if current:
        clusters.append(current)
    return clusters


def _place_cluster(cluster: List[_TimedEvent]) -> List[PlacedEvent]:
    # Each column remembers only the last event placed in it
    column_tails: List[_TimedEvent] = []
    indexes: List[int] = []

    for item in cluster:
        for i, tail in enumerate(column_tails):
            if tail.end_minutes <= item.start_minutes:
                column_tails[i] = item
                indexes.append(i)
                break
        else:
            column_tails.append(item)
            indexes.append(len(column_tails) - 1)

    column_count = len(column_tails)
    return [
        PlacedEvent(
            event=item.event,
            start_minutes=item.start_minutes,
            end_minutes=item.end_minutes,
            duration_minutes=item.duration_minutes,
            column_index=index,
            column_count=column_count,
        )
        for item, index in zip(cluster, indexes)
    ]


def layout_with_warnings(
    events: Iterable[ClassEvent]
) -> Tuple[List[PlacedEvent], List[DataQualityWarning]]:
    """
    Lay out a day's events and report the ones that could not be placed.

    Args:
        events: Events of a single day, in any order

    Returns:
        Tuple of (placed events in display order, warnings for events
        excluded because of malformed times)
    """
    timed, warnings = _resolve_times(events)

    # sorted() is stable, so input order is the last tie-break
    ordered = sorted(timed, key=lambda t: (t.start_minutes, -t.duration_minutes))

    placed: List[PlacedEvent] = []
    for cluster in _split_clusters(ordered):
        placed.extend(_place_cluster(cluster))

    return placed, warnings


def layout(events: Iterable[ClassEvent]) -> List[PlacedEvent]:
    """
    Lay out a day's events into non-overlapping columns.

    Events with malformed times are left out and logged as warnings;
    use layout_with_warnings() to receive them.
    """
    placed, warnings = layout_with_warnings(events)
    for warning in warnings:
        logger.warning(str(warning))
    return placed
