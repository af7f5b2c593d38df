from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Optional, Tuple

from .exceptions import InvalidCourseTypeError, InvalidDayError, InvalidTimeSlotError


class _Named(str, Enum):
    """String enum that can be looked up by value or member name."""

    @classmethod
    def from_name(cls, text):
        if isinstance(text, cls):
            return text
        key = str(text).strip()
        for member in cls:
            if key.lower() in (member.value.lower(), member.name.lower()):
                return member
        raise _LOOKUP_ERRORS.get(cls, ValueError)(f"Unknown {cls.__name__}: {text!r}")

    def __str__(self) -> str:
        return self.value


class DayOfWeek(_Named):
    MONDAY = "Monday"
    TUESDAY = "Tuesday"
    WEDNESDAY = "Wednesday"
    THURSDAY = "Thursday"
    FRIDAY = "Friday"


class TimeSlot(_Named):
    """The five fixed daily teaching windows, in order."""

    SLOT_1 = "8:30-10:00"
    SLOT_2 = "10:15-11:45"
    SLOT_3 = "12:15-13:45"
    SLOT_4 = "14:00-15:30"
    SLOT_5 = "15:45-17:15"

    @property
    def start(self) -> str:
        return self.value.split("-")[0].zfill(5)

    @property
    def end(self) -> str:
        return self.value.split("-")[1].zfill(5)


class CourseType(_Named):
    # declaration order breaks popularity ties
    LECTURE = "Lecture"
    SEMINAR = "Seminar"
    LAB = "Lab"
    PRACTICE = "Practice"


_LOOKUP_ERRORS = {
    DayOfWeek: InvalidDayError,
    TimeSlot: InvalidTimeSlotError,
    CourseType: InvalidCourseTypeError,
}

TOTAL_WEEKLY_SLOTS = len(DayOfWeek) * len(TimeSlot)


@dataclass(frozen=True)
class Professor:
    id: int
    name: str
    department: str = ""


@dataclass(frozen=True)
class Classroom:
    number: str
    capacity: int = 0
    has_projector: bool = False


@dataclass(frozen=True)
class Course:
    id: int
    name: str
    type: CourseType = CourseType.LECTURE


@dataclass
class Lesson:
    course_id: int
    professor_id: int
    classroom_number: str
    day: DayOfWeek
    slot: TimeSlot
    # assigned by the store on insertion when left empty
    lesson_id: Optional[int] = None

    @property
    def cell(self) -> Tuple[DayOfWeek, TimeSlot]:
        return (self.day, self.slot)

    def with_classroom(self, classroom_number: str) -> "Lesson":
        return replace(self, classroom_number=classroom_number)


class ConflictType(str, Enum):
    PROFESSOR = "ProfessorConflict"
    CLASSROOM = "ClassroomConflict"


@dataclass(frozen=True)
class ScheduleConflict:
    type: ConflictType
    # the existing lesson that was collided with
    lesson_details: Lesson = field(compare=False)


class Outcome(Enum):
    """Result of a reassignment or cancellation.

    Only OK is truthy, so the result can stand in for the plain success flag
    while still telling a conflict apart from a missing target.
    """

    OK = "ok"
    CONFLICT = "conflict"
    NOT_FOUND = "not_found"

    def __bool__(self) -> bool:
        return self is Outcome.OK
