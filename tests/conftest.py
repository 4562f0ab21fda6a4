# File: tests/conftest.py
"""
Pytest configuration and shared fixtures.
Provides reusable test data for all tests.
"""

import pytest
from datetime import date, datetime
from pathlib import Path
import sys

# Add project root to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from class_scheduler.models import (
    ClassEvent, ClassStatus, Catalog, Course, Subject, Instructor
)


REFERENCE_DAY = date(2025, 3, 12)  # a Wednesday


def make_event(start, end, event_id=None, day=REFERENCE_DAY,
               status=ClassStatus.SCHEDULED, instructor="Prof. Carlos Silva",
               course="Software Engineering", subject="Advanced Algorithms",
               room="Lab 03", color="#3b82f6"):
    """Build a ClassEvent with sensible defaults."""
    return ClassEvent(
        id=f"{start}-{end}" if event_id is None else event_id,
        date=day,
        start_time=start,
        end_time=end,
        instructor=instructor,
        course=course,
        subject=subject,
        room=room,
        status=status,
        color=color,
    )


@pytest.fixture
def reference_day():
    return REFERENCE_DAY


# ==================== Event Fixtures ====================

@pytest.fixture
def overlapping_events():
    """Scenario with a three-way transitive overlap."""
    return [
        make_event("08:00", "10:00", "a"),
        make_event("09:00", "09:30", "b"),
        make_event("09:15", "11:00", "c"),
    ]


@pytest.fixture
def week_events():
    """Classes spread over a few days around the reference day."""
    return [
        make_event("08:00", "10:00", "1", status=ClassStatus.IN_PROGRESS),
        make_event("10:30", "12:30", "2", instructor="Dra. Ana Costa",
                   course="Digital Design", subject="UX/UI Fundamentals"),
        make_event("14:00", "16:00", "3", instructor="Prof. Roberto Santos",
                   course="Business", subject="Project Management"),
        make_event("09:00", "11:00", "4", day=date(2025, 3, 13),
                   subject="Data Structures"),
        make_event("08:00", "10:00", "5", day=date(2025, 3, 11),
                   instructor="Prof. Fernanda Lima", course="Law",
                   subject="Constitutional Law", status=ClassStatus.COMPLETED),
        make_event("19:00", "21:00", "6", day=date(2025, 3, 14),
                   instructor="Dra. Ana Costa", course="Digital Design",
                   subject="Prototyping", status=ClassStatus.CANCELED),
        make_event("08:00", "12:00", "7", day=date(2025, 3, 1),
                   instructor="Prof. Roberto Santos", course="Business",
                   subject="Leadership Workshop", status=ClassStatus.COMPLETED),
    ]


# ==================== Catalog Fixtures ====================

@pytest.fixture
def sample_catalog():
    """Registered instructors, courses and subjects."""
    return Catalog(
        instructors=[
            Instructor(id="1", name="Prof. Carlos Silva", email="carlos.silva@school.example"),
            Instructor(id="2", name="Dra. Ana Costa"),
        ],
        courses=[
            Course(id="1", name="Software Engineering", color="#3b82f6", workload="3600h"),
            Course(id="2", name="Digital Design", color="#8b5cf6", workload="2h"),
            Course(id="3", name="Business", color="#f97316"),
        ],
        subjects=[
            Subject(id="1", name="Advanced Algorithms", course_id="1", workload="80h"),
            Subject(id="3", name="UX/UI Fundamentals", course_id="2", workload="60h"),
        ],
    )


@pytest.fixture
def raw_records():
    """Raw JSON-style records, including one that cannot be converted."""
    return {
        'events': [
            {
                'id': '1',
                'date': '2025-03-12',
                'start_time': '08:00',
                'end_time': '10:00',
                'instructor': 'Prof. Carlos Silva',
                'course': 'Software Engineering',
                'subject': 'Advanced Algorithms',
                'room': 'Lab 03',
                'status': 'em-andamento',
                'color': '#3b82f6',
            },
            {
                'id': '2',
                'data': '2025-03-12T00:00:00Z',
                'horario_inicio': '09:00',
                'horario_fim': '09:30',
                'instrutor_nome': 'Dra. Ana Costa',
                'curso_nome': 'Digital Design',
                'materia_nome': 'UX/UI Fundamentals',
                'status': 'completed',
            },
            {
                'id': 'broken',
                'date': 'not a date',
                'start_time': '10:00',
                'end_time': '11:00',
            },
        ],
        'courses': [
            {'id': '1', 'name': 'Software Engineering', 'color': '#3b82f6', 'workload': '3600h'},
        ],
        'subjects': [
            {'id': '1', 'name': 'Advanced Algorithms', 'course_id': '1', 'workload': '80h'},
        ],
    }


@pytest.fixture
def morning_now():
    """A naive 'now' at 09:30 on the reference day."""
    return datetime(2025, 3, 12, 9, 30)
