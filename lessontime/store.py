import itertools
import threading
from typing import List, Optional

from .models import Classroom, Course, Lesson, Professor


class TimetableStore:
    """In-memory holder for professors, classrooms, courses and lessons.

    Collections keep insertion order. Nothing here checks conflicts; lessons
    are meant to go in and out through ``lessontime.scheduling.mutations``,
    which hold ``lock`` across validation and commit.
    """

    def __init__(self):
        self.professors: List[Professor] = []
        self.classrooms: List[Classroom] = []
        self.courses: List[Course] = []
        self.schedule: List[Lesson] = []
        self.lock = threading.RLock()
        self._lesson_ids = itertools.count(1)

    def add_professor(self, professor: Professor) -> None:
        self.professors.append(professor)

    def add_classroom(self, classroom: Classroom) -> None:
        self.classrooms.append(classroom)

    def add_course(self, course: Course) -> None:
        self.courses.append(course)

    def find_course(self, course_id: int) -> Optional[Course]:
        return next((c for c in self.courses if c.id == course_id), None)

    def find_lesson(self, lesson_id: int) -> Optional[Lesson]:
        return next((l for l in self.schedule if l.lesson_id == lesson_id), None)

    def find_lesson_by_course(self, course_id: int) -> Optional[Lesson]:
        """First lesson of the course in schedule order."""
        return next((l for l in self.schedule if l.course_id == course_id), None)

    def next_lesson_id(self) -> int:
        # skip ids already taken by caller-supplied lessons
        taken = {l.lesson_id for l in self.schedule}
        lesson_id = next(self._lesson_ids)
        while lesson_id in taken:
            lesson_id = next(self._lesson_ids)
        return lesson_id

    def __repr__(self) -> str:
        return (
            f"TimetableStore(professors={len(self.professors)}, classrooms={len(self.classrooms)}, "
            f"courses={len(self.courses)}, lessons={len(self.schedule)})"
        )
