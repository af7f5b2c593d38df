"""Pytest fixtures shared by the lessontime tests."""

import logging

import pytest

from lessontime.config import LOG_FORMAT
from lessontime.models import DayOfWeek, Lesson, TimeSlot
from lessontime.sample_data import sample_lessons, seed_store
from lessontime.scheduling.mutations import add_lesson
from lessontime.store import TimetableStore

logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)


@pytest.fixture
def store():
    """An empty store."""
    return TimetableStore()


@pytest.fixture
def seeded_store():
    """Sample professors, classrooms and courses, no lessons yet."""
    return seed_store()


@pytest.fixture
def scheduled_store(seeded_store):
    """Sample data with both sample lessons scheduled."""
    for lesson in sample_lessons():
        assert add_lesson(seeded_store, lesson)
    return seeded_store


@pytest.fixture
def make_lesson():
    """Factory for lessons with sensible defaults."""

    def _make(course_id=1, professor_id=1, classroom_number="101",
              day=DayOfWeek.MONDAY, slot=TimeSlot.SLOT_1, lesson_id=None):
        return Lesson(course_id=course_id, professor_id=professor_id, classroom_number=classroom_number,
                      day=day, slot=slot, lesson_id=lesson_id)

    return _make
