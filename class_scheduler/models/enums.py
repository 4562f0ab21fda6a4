# File: class_scheduler/models/enums.py

from enum import Enum
from typing import Optional

class ClassStatus(Enum):
    """Lifecycle status of a scheduled class."""
    SCHEDULED = "agendada"
    IN_PROGRESS = "em-andamento"
    COMPLETED = "concluida"
    CANCELED = "cancelada"

    @classmethod
    def parse(cls, raw: Optional[str]) -> "ClassStatus":
        """
        Accept the stored value, the English name or the enum name.

        A missing status means SCHEDULED.

        Raises:
            ValueError: If raw is a status nobody recognizes
        """
        if isinstance(raw, cls):
            return raw
        if not raw:
            return cls.SCHEDULED
        clean = str(raw).split('.')[-1].strip().lower()
        for status in cls:
            if clean == status.value:
                return status
        try:
            return _STATUS_ALIASES[clean.replace('_', '-')]
        except KeyError:
            raise ValueError(f"Unknown class status: {raw!r}") from None


_STATUS_ALIASES = {
    "scheduled": ClassStatus.SCHEDULED,
    "in-progress": ClassStatus.IN_PROGRESS,
    "completed": ClassStatus.COMPLETED,
    "canceled": ClassStatus.CANCELED,
    "cancelled": ClassStatus.CANCELED,
}


class ViewMode(Enum):
    """Screens the schedule can be rendered in."""
    DASHBOARD = "dashboard"
    DAILY = "daily"
    MONTHLY = "monthly"
    ANNUAL = "annual"
    REGISTRATIONS = "registrations"
