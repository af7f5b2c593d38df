import csv
import io
import logging
import os
from typing import Dict, IO, Iterator, List, Optional, Sequence, Union

from .exceptions import ParseError
from .models import Classroom, Course, CourseType, DayOfWeek, Lesson, Professor, TimeSlot
from .scheduling.mutations import try_add_lesson
from .store import TimetableStore

logger = logging.getLogger(__name__)

TextOrPath = Union[str, os.PathLike, IO]

_TRUE = {"true", "1", "yes", "y"}
_FALSE = {"false", "0", "no", "n", ""}

LESSON_FIELDS = ["lesson_id", "course_id", "professor_id", "classroom_number", "day", "slot"]


def _open_text(src: TextOrPath):
    """Return a text-mode file handle and a flag indicating whether to close it.

    Accepts a filesystem path, a text IO object, or a BytesIO buffer.
    """
    if isinstance(src, (str, os.PathLike)):
        f = open(src, 'r', newline='')
        return f, True
    if isinstance(src, io.BytesIO):
        src.seek(0)
        f = io.TextIOWrapper(src, encoding='utf-8', newline='')
        return f, True
    if hasattr(src, 'read'):
        try:
            src.seek(0)
        except io.UnsupportedOperation:
            pass
        return src, False
    raise TypeError("Unsupported input type; expected path or file-like object")


def _rows(src: TextOrPath) -> Iterator[Dict[str, str]]:
    f, should_close = _open_text(src)
    try:
        for row in csv.DictReader(f):
            yield row
    finally:
        if should_close:
            f.close()


def _int(row: Dict[str, str], key: str, line: int) -> int:
    try:
        return int(str(row[key]).strip())
    except (KeyError, TypeError, ValueError) as e:
        raise ParseError(f"row {line}: bad or missing integer column {key!r}") from e


def _text(row: Dict[str, str], key: str, line: int) -> str:
    value = row.get(key)
    if value is None:
        raise ParseError(f"row {line}: missing column {key!r}")
    return value.strip()


def _bool(value: Optional[str], line: int) -> bool:
    key = (value or "").strip().lower()
    if key in _TRUE:
        return True
    if key in _FALSE:
        return False
    raise ParseError(f"row {line}: not a boolean: {value!r}")


def load_professors(src: TextOrPath) -> List[Professor]:
    return [
        Professor(id=_int(row, 'id', n), name=_text(row, 'name', n), department=(row.get('department') or '').strip())
        for n, row in enumerate(_rows(src), start=2)
    ]


def load_classrooms(src: TextOrPath) -> List[Classroom]:
    classrooms: List[Classroom] = []
    for n, row in enumerate(_rows(src), start=2):
        classrooms.append(Classroom(
            number=_text(row, 'number', n),
            capacity=_int(row, 'capacity', n),
            has_projector=_bool(row.get('has_projector'), n),
        ))
    return classrooms


def load_courses(src: TextOrPath) -> List[Course]:
    return [
        Course(id=_int(row, 'id', n), name=_text(row, 'name', n), type=CourseType.from_name(_text(row, 'type', n)))
        for n, row in enumerate(_rows(src), start=2)
    ]


def load_lessons(src: TextOrPath) -> List[Lesson]:
    """Lessons from CSV course_id,professor_id,classroom_number,day,slot[,lesson_id]."""
    lessons: List[Lesson] = []
    for n, row in enumerate(_rows(src), start=2):
        raw_id = (row.get('lesson_id') or '').strip()
        lessons.append(Lesson(
            course_id=_int(row, 'course_id', n),
            professor_id=_int(row, 'professor_id', n),
            classroom_number=_text(row, 'classroom_number', n),
            day=DayOfWeek.from_name(_text(row, 'day', n)),
            slot=TimeSlot.from_name(_text(row, 'slot', n)),
            lesson_id=_int(row, 'lesson_id', n) if raw_id else None,
        ))
    return lessons


def load_store(professors: Optional[TextOrPath] = None, classrooms: Optional[TextOrPath] = None,
               courses: Optional[TextOrPath] = None, lessons: Optional[TextOrPath] = None,
               store: Optional[TimetableStore] = None) -> TimetableStore:
    """Fill a store from CSV sources; clashing lessons are logged and skipped."""
    store = store if store is not None else TimetableStore()
    for p in load_professors(professors) if professors is not None else []:
        store.add_professor(p)
    for c in load_classrooms(classrooms) if classrooms is not None else []:
        store.add_classroom(c)
    for c in load_courses(courses) if courses is not None else []:
        store.add_course(c)
    for lesson in load_lessons(lessons) if lessons is not None else []:
        conflict = try_add_lesson(store, lesson)
        if conflict is not None:
            logger.warning(
                f"Skipping course {lesson.course_id} on {lesson.day} {lesson.slot}: "
                f"{conflict.type.value} with course {conflict.lesson_details.course_id}"
            )
    return store


def write_schedule_csv(f: IO, lessons: Sequence[Lesson]) -> None:
    w = csv.writer(f)
    w.writerow(LESSON_FIELDS)
    for l in lessons:
        w.writerow([l.lesson_id, l.course_id, l.professor_id, l.classroom_number, l.day.value, l.slot.value])


def save_schedule_csv(path: str, lessons: Sequence[Lesson]):
    with open(path, 'w', newline='') as f:
        write_schedule_csv(f, lessons)
