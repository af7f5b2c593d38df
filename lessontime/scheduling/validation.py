import logging
from typing import Iterable, List, Optional, Sequence, Tuple

from ..graph_build import build_conflict_graph
from ..models import ConflictType, Lesson, ScheduleConflict

logger = logging.getLogger(__name__)


def validate_lesson(schedule: Iterable[Lesson], lesson: Lesson,
                    ignore: Optional[Lesson] = None) -> Optional[ScheduleConflict]:
    """Return the first clash of ``lesson`` with the schedule, or None.

    Lessons are scanned in order and the first one sharing the (day, slot)
    cell with a matching professor, or failing that a matching classroom,
    is reported. ``ignore`` (compared by identity) is skipped.
    """
    for existing in schedule:
        if existing is ignore:
            continue
        if existing.day == lesson.day and existing.slot == lesson.slot:
            if existing.professor_id == lesson.professor_id:
                logger.debug(f"Professor {lesson.professor_id} busy on {lesson.day} {lesson.slot}")
                return ScheduleConflict(ConflictType.PROFESSOR, existing)
            if existing.classroom_number == lesson.classroom_number:
                logger.debug(f"Classroom {lesson.classroom_number} busy on {lesson.day} {lesson.slot}")
                return ScheduleConflict(ConflictType.CLASSROOM, existing)
    return None


def find_conflicts(schedule: Sequence[Lesson]) -> List[Tuple[Lesson, Lesson, ConflictType]]:
    G = build_conflict_graph(schedule)
    return [(schedule[u], schedule[v], data["type"]) for u, v, data in G.edges(data=True)]


def conflicts_ok(schedule: Sequence[Lesson]) -> bool:
    return build_conflict_graph(schedule).number_of_edges() == 0
