from typing import Sequence

import pandas as pd

from ..models import DayOfWeek, Lesson, TimeSlot, TOTAL_WEEKLY_SLOTS
from ..store import TimetableStore
from .queries import get_classroom_utilization, get_most_popular_course_type
from .validation import conflicts_ok


def lesson_label(lesson: Lesson) -> str:
    return f"C{lesson.course_id}/P{lesson.professor_id}@{lesson.classroom_number}"


def timetable_frame(lessons: Sequence[Lesson]) -> pd.DataFrame:
    """Week grid: one row per day, one column per slot, lesson labels in the cells."""
    grid = pd.DataFrame(
        "",
        index=pd.Index([d.value for d in DayOfWeek], name="day"),
        columns=[s.value for s in TimeSlot],
    )
    for lesson in lessons:
        cell = grid.at[lesson.day.value, lesson.slot.value]
        label = lesson_label(lesson)
        grid.at[lesson.day.value, lesson.slot.value] = f"{cell}; {label}" if cell else label
    return grid


def utilization_frame(store: TimetableStore) -> pd.DataFrame:
    rows = [
        {
            "classroom": c.number,
            "lessons": sum(1 for l in store.schedule if l.classroom_number == c.number),
            "utilization_pct": get_classroom_utilization(store, c.number),
        }
        for c in store.classrooms
    ]
    return pd.DataFrame(rows, columns=["classroom", "lessons", "utilization_pct"])


def summary(store: TimetableStore) -> str:
    cells_used = len({l.cell for l in store.schedule})
    ok_conf = conflicts_ok(store.schedule)
    lines = [
        f"Professors: {len(store.professors)}  Classrooms: {len(store.classrooms)}  "
        f"Courses: {len(store.courses)}  Lessons: {len(store.schedule)}",
        f"Cells available: {TOTAL_WEEKLY_SLOTS}  Used: {cells_used}",
        f"Valid (conflicts): {ok_conf}",
    ]
    for row in utilization_frame(store).itertuples(index=False):
        lines.append(f"Utilization {row.classroom}: {row.utilization_pct:.1f}%")
    lines.append(f"Most popular course type: {get_most_popular_course_type(store).value}")
    return "\n".join(lines) + "\n"
