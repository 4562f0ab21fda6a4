# File: class_scheduler/models/common.py

from datetime import date, datetime
from typing import Optional, Union

def parse_iso_datetime(date_str: Optional[str]) -> Optional[datetime]:
    """Robustly parse ISO date strings with 'Z' or offsets."""
    if not date_str:
        return None
    try:
        clean_str = date_str.replace('Z', '+00:00')
        return datetime.fromisoformat(clean_str)
    except ValueError:
        # Fallback for simple date strings without time
        try:
            return datetime.strptime(date_str, "%Y-%m-%d")
        except ValueError:
            return None


def to_calendar_day(value: Union[date, datetime, str, None]) -> Optional[date]:
    """Reduce a date, datetime or ISO string to its calendar day."""
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    parsed = parse_iso_datetime(str(value))
    return parsed.date() if parsed else None


def pick(data: dict, *keys: str, default=None):
    """Return the first non-empty value among keys (snake_case, camelCase or pt names)."""
    for key in keys:
        if data.get(key) not in (None, ''):
            return data[key]
    return default
