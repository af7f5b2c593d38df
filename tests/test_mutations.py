"""Tests for adding, reassigning and cancelling lessons."""

import threading

import pytest

from lessontime.exceptions import DuplicateLessonError
from lessontime.models import ConflictType, DayOfWeek, Outcome, TimeSlot
from lessontime.scheduling.mutations import (
    add_lesson, cancel_course_lesson, cancel_lesson, reassign_classroom, reassign_course_classroom,
    try_add_lesson
)
from lessontime.scheduling.validation import conflicts_ok


def test_add_assigns_sequential_ids(store, make_lesson):
    first, second = make_lesson(course_id=1), make_lesson(course_id=2, professor_id=2, classroom_number="102")

    assert add_lesson(store, first) is True
    assert add_lesson(store, second) is True
    assert [l.lesson_id for l in store.schedule] == [1, 2]


def test_add_keeps_supplied_id_and_skips_it(store, make_lesson):
    assert add_lesson(store, make_lesson(lesson_id=1))
    assert add_lesson(store, make_lesson(course_id=2, professor_id=2, classroom_number="102"))
    assert [l.lesson_id for l in store.schedule] == [1, 2]


def test_add_professor_clash_leaves_schedule_unchanged(store, make_lesson):
    add_lesson(store, make_lesson(course_id=1, professor_id=1, classroom_number="101"))
    before = list(store.schedule)

    assert add_lesson(store, make_lesson(course_id=2, professor_id=1, classroom_number="102")) is False
    assert store.schedule == before


def test_add_classroom_clash_leaves_schedule_unchanged(store, make_lesson):
    add_lesson(store, make_lesson(course_id=1, professor_id=1, classroom_number="101"))
    before = list(store.schedule)

    assert add_lesson(store, make_lesson(course_id=2, professor_id=2, classroom_number="101")) is False
    assert store.schedule == before


def test_rejected_lesson_gets_no_id(store, make_lesson):
    add_lesson(store, make_lesson())
    rejected = make_lesson(course_id=2)
    add_lesson(store, rejected)
    assert rejected.lesson_id is None


def test_try_add_returns_conflict(store, make_lesson):
    existing = make_lesson()
    assert try_add_lesson(store, existing) is None

    conflict = try_add_lesson(store, make_lesson(course_id=2, professor_id=2))
    assert conflict.type == ConflictType.CLASSROOM
    assert conflict.lesson_details is existing


def test_course_may_have_several_lessons(store, make_lesson):
    assert add_lesson(store, make_lesson(course_id=1, day=DayOfWeek.MONDAY))
    assert add_lesson(store, make_lesson(course_id=1, day=DayOfWeek.WEDNESDAY))
    assert len(store.schedule) == 2
    assert store.find_lesson_by_course(1) is store.schedule[0]


def test_reassign_missing_lesson(scheduled_store):
    before = [(l.lesson_id, l.classroom_number) for l in scheduled_store.schedule]

    assert reassign_classroom(scheduled_store, 99, "102") is Outcome.NOT_FOUND
    assert reassign_course_classroom(scheduled_store, 99, "102") is Outcome.NOT_FOUND
    assert [(l.lesson_id, l.classroom_number) for l in scheduled_store.schedule] == before


def test_reassign_into_clash_fails(store, make_lesson):
    add_lesson(store, make_lesson(course_id=1, professor_id=1, classroom_number="101"))
    add_lesson(store, make_lesson(course_id=2, professor_id=2, classroom_number="102"))

    outcome = reassign_classroom(store, 1, "102")
    assert outcome is Outcome.CONFLICT
    assert not outcome
    assert store.find_lesson(1).classroom_number == "101"


def test_reassign_to_free_room_mutates_in_place(store, make_lesson):
    lesson = make_lesson(course_id=1, classroom_number="101")
    add_lesson(store, lesson)

    assert reassign_classroom(store, lesson.lesson_id, "205") is Outcome.OK
    assert lesson.classroom_number == "205"
    assert store.schedule[0] is lesson


def test_reassign_to_current_room_is_ok(store, make_lesson):
    # a lesson never clashes with itself
    add_lesson(store, make_lesson(course_id=1, professor_id=1, classroom_number="101"))
    assert reassign_course_classroom(store, 1, "101") is Outcome.OK
    assert store.find_lesson_by_course(1).classroom_number == "101"


def test_reassign_to_room_used_in_another_cell(store, make_lesson):
    add_lesson(store, make_lesson(course_id=1, professor_id=1, classroom_number="101", slot=TimeSlot.SLOT_1))
    add_lesson(store, make_lesson(course_id=2, professor_id=2, classroom_number="102", slot=TimeSlot.SLOT_3))

    assert reassign_classroom(store, 1, "102") is Outcome.OK
    assert store.find_lesson(1).classroom_number == "102"
    assert conflicts_ok(store.schedule)


def test_reassign_with_same_professor_elsewhere_in_week(store, make_lesson):
    add_lesson(store, make_lesson(course_id=1, professor_id=1, classroom_number="101", day=DayOfWeek.MONDAY))
    add_lesson(store, make_lesson(course_id=2, professor_id=1, classroom_number="102", day=DayOfWeek.TUESDAY))

    assert reassign_classroom(store, 1, "102") is Outcome.OK
    assert conflicts_ok(store.schedule)


def test_duplicate_lesson_id_is_rejected(store, make_lesson):
    assert add_lesson(store, make_lesson(course_id=1, lesson_id=7))
    with pytest.raises(DuplicateLessonError):
        add_lesson(store, make_lesson(course_id=2, professor_id=2, classroom_number="102",
                                      day=DayOfWeek.FRIDAY, lesson_id=7))

    assert [l.course_id for l in store.schedule] == [1]
    assert cancel_lesson(store, 7) is Outcome.OK
    assert store.schedule == []


def test_cancelled_lesson_id_can_be_reused(store, make_lesson):
    add_lesson(store, make_lesson(course_id=1, lesson_id=7))
    assert cancel_lesson(store, 7) is Outcome.OK
    assert add_lesson(store, make_lesson(course_id=2, lesson_id=7))
    assert store.find_lesson(7).course_id == 2


def test_cancel_is_idempotent(scheduled_store):
    assert cancel_course_lesson(scheduled_store, 1) is Outcome.OK
    after_first = list(scheduled_store.schedule)

    assert cancel_course_lesson(scheduled_store, 1) is Outcome.NOT_FOUND
    assert scheduled_store.schedule == after_first
    assert [l.course_id for l in scheduled_store.schedule] == [2]


def test_cancel_by_lesson_id_removes_only_that_lesson(store, make_lesson):
    monday = make_lesson(course_id=1, day=DayOfWeek.MONDAY)
    friday = make_lesson(course_id=1, day=DayOfWeek.FRIDAY)
    add_lesson(store, monday)
    add_lesson(store, friday)

    assert cancel_lesson(store, friday.lesson_id) is Outcome.OK
    assert store.schedule == [monday]
    assert cancel_lesson(store, friday.lesson_id) is Outcome.NOT_FOUND


def test_invariant_holds_after_mutation_sequence(store, make_lesson):
    rooms = ["101", "102", "103"]
    for i, day in enumerate(DayOfWeek):
        for j, slot in enumerate(TimeSlot):
            for prof in (1, 2):
                add_lesson(store, make_lesson(course_id=i * 10 + j, professor_id=prof,
                                              classroom_number=rooms[(i + j + prof) % 3], day=day, slot=slot))
                assert conflicts_ok(store.schedule)
    for lesson in list(store.schedule)[::3]:
        for room in rooms:
            reassign_classroom(store, lesson.lesson_id, room)
            assert conflicts_ok(store.schedule)
    for lesson in list(store.schedule)[::2]:
        cancel_lesson(store, lesson.lesson_id)
        assert conflicts_ok(store.schedule)


def test_concurrent_adds_do_not_double_book(store, make_lesson):
    barrier = threading.Barrier(8)
    results = []

    def worker(course_id):
        barrier.wait()
        results.append(add_lesson(store, make_lesson(course_id=course_id, professor_id=1)))

    threads = [threading.Thread(target=worker, args=(i,)) for i in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert results.count(True) == 1
    assert len(store.schedule) == 1
