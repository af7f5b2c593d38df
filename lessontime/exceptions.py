"""Exceptions raised for malformed timetable input."""


class LessonTimeError(Exception):
    """Base exception for all lessontime errors."""

    pass


class ParseError(LessonTimeError):
    """Raised when an input row or value cannot be parsed."""

    pass


class InvalidDayError(ParseError):
    """Raised when a day of week is not one of Monday..Friday."""

    pass


class InvalidTimeSlotError(ParseError):
    """Raised when a time slot is not one of the five daily slots."""

    pass


class InvalidCourseTypeError(ParseError):
    """Raised when a course type is not Lecture, Seminar, Lab or Practice."""

    pass


class ConfigError(LessonTimeError):
    """Raised when a setting has an unusable value."""

    pass


class DuplicateLessonError(LessonTimeError):
    """Raised when a lesson is added with a lesson_id already in the schedule."""

    pass
