"""Demonstration data: two professors, two classrooms, two courses, two lessons."""

from typing import List, Optional

from .models import Classroom, Course, CourseType, DayOfWeek, Lesson, Professor, TimeSlot
from .store import TimetableStore

PROFESSORS = [
    Professor(id=1, name="John Doe", department="Computer Science"),
    Professor(id=2, name="Jane Smith", department="Mathematics"),
]

CLASSROOMS = [
    Classroom(number="101", capacity=30, has_projector=True),
    Classroom(number="102", capacity=20, has_projector=False),
]

COURSES = [
    Course(id=1, name="Introduction to Programming", type=CourseType.LECTURE),
    Course(id=2, name="Calculus I", type=CourseType.SEMINAR),
]


def sample_lessons() -> List[Lesson]:
    # fresh objects each call, lessons are mutated once scheduled
    return [
        Lesson(course_id=1, professor_id=1, classroom_number="101",
               day=DayOfWeek.MONDAY, slot=TimeSlot.SLOT_2),
        Lesson(course_id=2, professor_id=2, classroom_number="102",
               day=DayOfWeek.MONDAY, slot=TimeSlot.SLOT_3),
    ]


def seed_store(store: Optional[TimetableStore] = None) -> TimetableStore:
    """Add the sample professors, classrooms and courses (no lessons)."""
    store = store if store is not None else TimetableStore()
    for p in PROFESSORS:
        store.add_professor(p)
    for c in CLASSROOMS:
        store.add_classroom(c)
    for c in COURSES:
        store.add_course(c)
    return store
