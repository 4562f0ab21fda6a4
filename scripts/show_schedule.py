"""
Daily schedule viewer entry point.
Prints the class layout and statistics for one day of a JSON events file.

Usage:
    python scripts/show_schedule.py [YYYY-MM-DD]

The events file is taken from EVENTS_FILE (see .env).
"""

import datetime
import sys
import time
from pathlib import Path

# Add project root to Python path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from class_scheduler.core.config_manager import Config
from class_scheduler.core.orchestrator import OrchestratorFactory
from class_scheduler.core.time_model import format_minutes
from class_scheduler.processors.timeline_processor import DayTimeline
from class_scheduler.services.data_collector import load_records
from class_scheduler.models import ScheduleStats, parse_iso_datetime
from class_scheduler.utils.logger import setup_logger

logger = setup_logger(__name__)


def pretty_print_day(timeline: DayTimeline, stats: ScheduleStats) -> None:
    """Print a readable version of a day timeline."""
    print(f"\n{timeline.day.strftime('%A, %d %B %Y')} - {len(timeline.blocks)} classes")
    print("-" * 60)

    if timeline.is_empty:
        print("No classes for this day.")

    for block in timeline.blocks:
        placement = block.placement
        event = block.event
        lane = f"[{placement.column_index + 1}/{placement.column_count}]"
        status = Config.STATUS_LABELS.get(event.status.value, event.status.value)
        print(
            f"{format_minutes(placement.start_minutes)}-{format_minutes(placement.end_minutes)} "
            f"{lane:>7} {event.subject} | {event.instructor} | {event.room or 'N/A'} | {status}"
        )

    if timeline.show_indicator:
        print(f"\nNow: {timeline.now_offset_hours:.2f}h")

    for warning in timeline.warnings:
        print(f"! {warning}")

    print("-" * 60)
    print(
        f"Month totals: {stats.count} classes, {stats.total_hours}h, "
        f"{stats.distinct_instructors} instructors, {stats.completion_rate}% completed"
    )


def main() -> int:
    """
    Main execution function.

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    start_time = time.time()

    try:
        if len(sys.argv) > 1:
            parsed = parse_iso_datetime(sys.argv[1])
            if parsed is None:
                logger.error(f"Invalid date: {sys.argv[1]} (expected YYYY-MM-DD)")
                return 1
            day = parsed.date()
        else:
            day = datetime.datetime.now(Config.timezone()).date()

        logger.info(f"Loading classes from {Config.EVENTS_FILE}")
        records = load_records(Config.EVENTS_FILE)

        orchestrator = OrchestratorFactory.create(records)
        timeline = orchestrator.day_view(day)
        stats = orchestrator.dashboard_stats(day)

        pretty_print_day(timeline, stats)
        return 0

    except FileNotFoundError as e:
        logger.error("Missing required file", exc_info=True)
        logger.error(f"Could not find: {e.filename}")
        return 1

    except ValueError as e:
        logger.error(f"Invalid input: {e}", exc_info=True)
        return 1

    except Exception as e:
        logger.error("Unexpected fatal error", exc_info=True)
        logger.error(f"Error: {e}")
        return 1

    finally:
        elapsed = time.time() - start_time
        logger.info(f"Total execution time: {elapsed:.2f} seconds")


if __name__ == "__main__":
    sys.exit(main())
