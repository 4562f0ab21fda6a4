# File: class_scheduler/models/catalog.py
"""
Registration records (instructors, courses and subjects).
"""

from dataclasses import dataclass, field
from typing import List, Optional, Iterable, TypeVar
from .common import pick

@dataclass
class Instructor:
    """A person who teaches classes."""
    id: str
    name: str
    email: Optional[str] = None
    phone: Optional[str] = None


@dataclass
class Course:
    """A course with its total workload label (e.g. "3600h")."""
    id: str
    name: str
    color: str
    workload: Optional[str] = None


@dataclass
class Subject:
    """A subject taught inside a course, with its own workload label."""
    id: str
    name: str
    course_id: str
    workload: Optional[str] = None


def _required(data: dict, label: str, *keys: str) -> str:
    value = pick(data, *keys)
    if value is None:
        raise ValueError(f"{label} record without {keys[0]}: {data!r}")
    return str(value)


def instructor_from_dict(data: dict) -> Instructor:
    """Create Instructor from dictionary (snake_case or pt keys)."""
    return Instructor(
        id=_required(data, "Instructor", 'id'),
        name=_required(data, "Instructor", 'name', 'nome'),
        email=pick(data, 'email'),
        phone=pick(data, 'phone', 'telefone'),
    )


def course_from_dict(data: dict) -> Course:
    """Create Course from dictionary (snake_case, camelCase or pt keys)."""
    return Course(
        id=_required(data, "Course", 'id'),
        name=_required(data, "Course", 'name', 'nome'),
        color=str(pick(data, 'color', 'cor', default='')),
        workload=pick(data, 'workload', 'cargaHoraria', 'carga_horaria'),
    )


def subject_from_dict(data: dict) -> Subject:
    """Create Subject from dictionary (snake_case, camelCase or pt keys)."""
    return Subject(
        id=_required(data, "Subject", 'id'),
        name=_required(data, "Subject", 'name', 'nome'),
        course_id=_required(data, "Subject", 'course_id', 'cursoId', 'curso_id'),
        workload=pick(data, 'workload', 'cargaHoraria', 'carga_horaria'),
    )


@dataclass
class Catalog:
    """All registrations known to the application."""
    instructors: List[Instructor] = field(default_factory=list)
    courses: List[Course] = field(default_factory=list)
    subjects: List[Subject] = field(default_factory=list)

    def subjects_for_course(self, course_id: str) -> List[Subject]:
        return [s for s in self.subjects if s.course_id == course_id]

    @classmethod
    def from_dict(cls, data: dict) -> 'Catalog':
        """
        Create Catalog from dictionary (e.g., loaded from JSON).

        Strict: the first bad record raises. DataCollector converts records
        one at a time instead.
        """
        return cls(
            instructors=[instructor_from_dict(i) for i in data.get('instructors', [])],
            courses=[course_from_dict(c) for c in data.get('courses', [])],
            subjects=[subject_from_dict(s) for s in data.get('subjects', [])],
        )


T = TypeVar('T', Instructor, Course, Subject)

def find_by_name(records: Iterable[T], name: str) -> Optional[T]:
    """Return the first record whose name matches exactly."""
    for record in records:
        if record.name == name:
            return record
    return None
