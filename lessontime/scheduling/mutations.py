import logging
from typing import Optional

from ..exceptions import DuplicateLessonError
from ..models import Lesson, Outcome, ScheduleConflict
from ..store import TimetableStore
from .validation import validate_lesson

logger = logging.getLogger(__name__)


def try_add_lesson(store: TimetableStore, lesson: Lesson) -> Optional[ScheduleConflict]:
    """Insert ``lesson`` unless it clashes; return the clash, if any.

    Raises:
        DuplicateLessonError: If ``lesson.lesson_id`` is already scheduled.
    """
    with store.lock:
        if lesson.lesson_id is not None and store.find_lesson(lesson.lesson_id) is not None:
            raise DuplicateLessonError(f"Lesson id {lesson.lesson_id} is already scheduled")
        conflict = validate_lesson(store.schedule, lesson)
        if conflict is not None:
            logger.debug(f"Rejected course {lesson.course_id} on {lesson.day} {lesson.slot}: {conflict.type.value}")
            return conflict
        if lesson.lesson_id is None:
            lesson.lesson_id = store.next_lesson_id()
        store.schedule.append(lesson)
    logger.info(f"Scheduled lesson {lesson.lesson_id} (course {lesson.course_id}) "
                f"in {lesson.classroom_number} on {lesson.day} {lesson.slot}")
    return None


def add_lesson(store: TimetableStore, lesson: Lesson) -> bool:
    return try_add_lesson(store, lesson) is None


def _reassign(store: TimetableStore, lesson: Optional[Lesson], new_classroom_number: str) -> Outcome:
    if lesson is None:
        return Outcome.NOT_FOUND
    conflict = validate_lesson(store.schedule, lesson.with_classroom(new_classroom_number), ignore=lesson)
    if conflict is not None:
        logger.debug(f"Cannot move lesson {lesson.lesson_id} to {new_classroom_number}: {conflict.type.value}")
        return Outcome.CONFLICT
    logger.info(f"Moved lesson {lesson.lesson_id} from {lesson.classroom_number} to {new_classroom_number}")
    lesson.classroom_number = new_classroom_number
    return Outcome.OK


def reassign_classroom(store: TimetableStore, lesson_id: int, new_classroom_number: str) -> Outcome:
    with store.lock:
        return _reassign(store, store.find_lesson(lesson_id), new_classroom_number)


def reassign_course_classroom(store: TimetableStore, course_id: int, new_classroom_number: str) -> Outcome:
    """Move the first lesson of ``course_id`` to another classroom."""
    with store.lock:
        return _reassign(store, store.find_lesson_by_course(course_id), new_classroom_number)


def _cancel(store: TimetableStore, lesson: Optional[Lesson]) -> Outcome:
    if lesson is None:
        return Outcome.NOT_FOUND
    for i, existing in enumerate(store.schedule):
        if existing is lesson:
            del store.schedule[i]
            break
    logger.info(f"Cancelled lesson {lesson.lesson_id} (course {lesson.course_id})")
    return Outcome.OK


def cancel_lesson(store: TimetableStore, lesson_id: int) -> Outcome:
    with store.lock:
        return _cancel(store, store.find_lesson(lesson_id))


def cancel_course_lesson(store: TimetableStore, course_id: int) -> Outcome:
    """Remove the first lesson of ``course_id``; NOT_FOUND if it has none."""
    with store.lock:
        return _cancel(store, store.find_lesson_by_course(course_id))
