from collections import Counter
from typing import List

from ..models import TOTAL_WEEKLY_SLOTS, CourseType, DayOfWeek, Lesson, TimeSlot
from ..store import TimetableStore


def find_available_classrooms(store: TimetableStore, day: DayOfWeek, slot: TimeSlot) -> List[str]:
    occupied = {l.classroom_number for l in store.schedule if l.day == day and l.slot == slot}
    return [c.number for c in store.classrooms if c.number not in occupied]


def get_professor_schedule(store: TimetableStore, professor_id: int) -> List[Lesson]:
    return [l for l in store.schedule if l.professor_id == professor_id]


def get_classroom_utilization(store: TimetableStore, classroom_number: str) -> float:
    """Percent of the 25-cell week taken by lessons in this classroom."""
    occupied = sum(1 for l in store.schedule if l.classroom_number == classroom_number)
    return occupied / TOTAL_WEEKLY_SLOTS * 100


def get_most_popular_course_type(store: TimetableStore) -> CourseType:
    """Course type with the most lessons; ties and empty tallies go to the earliest type."""
    counts: Counter = Counter()
    for lesson in store.schedule:
        course = store.find_course(lesson.course_id)
        if course is not None:
            counts[course.type] += 1
    best, best_count = CourseType.LECTURE, 0
    for course_type in CourseType:
        if counts[course_type] > best_count:
            best, best_count = course_type, counts[course_type]
    return best
