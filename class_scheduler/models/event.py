# File: class_scheduler/models/event.py

from dataclasses import dataclass, replace
from datetime import date
from typing import Optional
from .enums import ClassStatus
from .common import pick, to_calendar_day

@dataclass(frozen=True)
class ClassEvent:
    """Represents a single scheduled class session."""
    id: str
    date: date
    start_time: str  # "HH:MM" format
    end_time: str    # "HH:MM" format
    instructor: str
    course: str
    subject: str
    room: Optional[str] = None
    status: ClassStatus = ClassStatus.SCHEDULED
    color: Optional[str] = None
    notes: Optional[str] = None

    def __post_init__(self):
        """Normalize date and status; times are left as given."""
        day = to_calendar_day(self.date)
        if day is None:
            raise ValueError(f"Invalid class date {self.date!r}: {self.subject}")
        object.__setattr__(self, 'date', day)

        if not isinstance(self.status, ClassStatus):
            object.__setattr__(self, 'status', ClassStatus.parse(self.status))

    @property
    def is_canceled(self) -> bool:
        return self.status == ClassStatus.CANCELED

    def with_id(self, event_id: str) -> 'ClassEvent':
        """Return a copy carrying a new identity."""
        return replace(self, id=event_id)

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            'id': self.id,
            'date': self.date.isoformat(),
            'start_time': self.start_time,
            'end_time': self.end_time,
            'instructor': self.instructor,
            'course': self.course,
            'subject': self.subject,
            'room': self.room,
            'status': self.status.value,
            'color': self.color,
            'notes': self.notes,
        }


def class_event_from_dict(data: dict) -> ClassEvent:
    """Create ClassEvent from dictionary (snake_case or camelCase/pt keys)."""
    return ClassEvent(
        id=str(pick(data, 'id', default='')),
        date=pick(data, 'date', 'data'),
        start_time=str(pick(data, 'start_time', 'startTime', 'horarioInicio', 'horario_inicio', default='')).strip(),
        end_time=str(pick(data, 'end_time', 'endTime', 'horarioFim', 'horario_fim', default='')).strip(),
        instructor=str(pick(data, 'instructor', 'instrutor', 'instrutor_nome', default='')),
        course=str(pick(data, 'course', 'curso', 'curso_nome', default='')),
        subject=str(pick(data, 'subject', 'materia', 'materia_nome', default='')),
        room=pick(data, 'room', 'sala'),
        status=ClassStatus.parse(pick(data, 'status')),
        color=pick(data, 'color', 'cor'),
        notes=pick(data, 'notes', 'observacoes'),
    )
