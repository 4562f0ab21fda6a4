# File: class_scheduler/core/config_manager.py
"""
Centralized configuration management for the class schedule visualizer.
Loads settings from environment variables (optionally via a .env file).
"""

import os
from pathlib import Path
from typing import Dict

import pytz
from dotenv import load_dotenv

from class_scheduler.models.enums import ClassStatus

# Load environment variables
load_dotenv()


def _env_int(key: str, default: int) -> int:
    raw = os.getenv(key)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_float(key: str, default: float) -> float:
    raw = os.getenv(key)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        return default


class Config:
    """Application configuration singleton."""

    # Base directories
    BASE_DIR = Path(__file__).parent.parent.parent  # Go up 3 levels from class_scheduler/core/

    LOGS_DIR = Path(os.getenv("LOGS_DIR", "logs"))
    EVENTS_FILE = Path(os.getenv("EVENTS_FILE", str(BASE_DIR / "data" / "events.json")))
    ENV_FILE = BASE_DIR / ".env"

    # Application Settings
    TARGET_TIMEZONE = os.getenv("TIMEZONE", "America/Sao_Paulo")

    # Daily timeline geometry
    TIMELINE_START_HOUR = _env_int("TIMELINE_START_HOUR", 5)
    HOUR_HEIGHT_REM = _env_float("HOUR_HEIGHT_REM", 5.0)
    SHORT_EVENT_MINUTES = _env_int("SHORT_EVENT_MINUTES", 45)
    VERY_SHORT_EVENT_MINUTES = _env_int("VERY_SHORT_EVENT_MINUTES", 30)

    # Defaults used when creating new classes
    DEFAULT_CLASS_DURATION = _env_int("DEFAULT_CLASS_DURATION", 120)  # minutes
    DEFAULT_START_TIME = os.getenv("DEFAULT_START_TIME", "08:00")
    DEFAULT_CLASS_COLOR = "#3b82f6"

    # Display labels keyed by stored status value
    STATUS_LABELS: Dict[str, str] = {
        ClassStatus.SCHEDULED.value: "Scheduled",
        ClassStatus.IN_PROGRESS.value: "In progress",
        ClassStatus.COMPLETED.value: "Completed",
        ClassStatus.CANCELED.value: "Canceled",
    }

    @classmethod
    def timezone(cls):
        """Return the configured pytz timezone."""
        return pytz.timezone(cls.TARGET_TIMEZONE)

    @classmethod
    def validate(cls) -> bool:
        """Validate that the configuration values are usable."""
        errors = []

        if cls.TARGET_TIMEZONE not in pytz.all_timezones_set:
            errors.append(f"Unknown timezone: {cls.TARGET_TIMEZONE}")

        if not 0 <= cls.TIMELINE_START_HOUR <= 23:
            errors.append(f"TIMELINE_START_HOUR out of range: {cls.TIMELINE_START_HOUR}")

        if cls.HOUR_HEIGHT_REM <= 0:
            errors.append(f"HOUR_HEIGHT_REM must be positive: {cls.HOUR_HEIGHT_REM}")

        if cls.VERY_SHORT_EVENT_MINUTES > cls.SHORT_EVENT_MINUTES:
            errors.append("VERY_SHORT_EVENT_MINUTES cannot exceed SHORT_EVENT_MINUTES")

        if cls.DEFAULT_CLASS_DURATION <= 0:
            errors.append(f"DEFAULT_CLASS_DURATION must be positive: {cls.DEFAULT_CLASS_DURATION}")

        if errors:
            for error in errors:
                print(f"Configuration Error: {error}")
            return False

        return True
