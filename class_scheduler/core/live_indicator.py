# File: class_scheduler/core/live_indicator.py
"""
Position of the "current time" marker in the daily view.
"""

import datetime
from typing import Optional, Union

from class_scheduler.core.config_manager import Config


def current_offset(
    reference_date: Union[datetime.date, datetime.datetime],
    now: Optional[datetime.datetime] = None
) -> Optional[float]:
    """
    Hours elapsed since midnight when reference_date is today.

    Args:
        reference_date: Day being displayed (date or datetime)
        now: Current time; defaults to now in Config.TARGET_TIMEZONE

    Returns:
        now.hour + now.minute / 60 on the same calendar day, otherwise None
    """
    if now is None:
        now = datetime.datetime.now(Config.timezone())

    if isinstance(reference_date, datetime.datetime):
        if reference_date.tzinfo is not None and now.tzinfo is not None:
            reference_date = reference_date.astimezone(now.tzinfo)
        reference_day = reference_date.date()
    else:
        reference_day = reference_date

    if reference_day != now.date():
        return None

    return now.hour + now.minute / 60
