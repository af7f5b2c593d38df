import argparse

from lessontime.config import configure_logging, load_settings
from lessontime.exceptions import LessonTimeError
from lessontime.io_utils import load_lessons, load_store, save_schedule_csv
from lessontime.models import DayOfWeek, TimeSlot
from lessontime.sample_data import sample_lessons, seed_store
from lessontime.scheduling.evaluation import summary, timetable_frame
from lessontime.scheduling.mutations import add_lesson, cancel_course_lesson, reassign_course_classroom
from lessontime.scheduling.queries import (
    find_available_classrooms, get_classroom_utilization, get_most_popular_course_type,
    get_professor_schedule
)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="LessonTime – University Timetable Manager")
    # Inputs (sample data when omitted)
    p.add_argument('--professors', type=str, help='professors.csv with id,name,department')
    p.add_argument('--classrooms', type=str, help='classrooms.csv with number,capacity,has_projector')
    p.add_argument('--courses', type=str, help='courses.csv with id,name,type')
    p.add_argument('--lessons', type=str, help='lessons.csv with course_id,professor_id,classroom_number,day,slot')

    # Demo parameters
    p.add_argument('--professor', type=int, default=1, help='Professor whose schedule is printed')
    p.add_argument('--classroom', type=str, default='101', help='Classroom for the utilization figure')
    p.add_argument('--day', type=str, default=DayOfWeek.MONDAY.value)
    p.add_argument('--slot', type=str, default=TimeSlot.SLOT_2.value)
    p.add_argument('--course', type=int, default=1, help='Course to reassign and cancel')
    p.add_argument('--move_to', type=str, nargs='*', default=['102', '103'],
                   help='Classrooms to reassign the course to, in order')

    # Output
    p.add_argument('--out_schedule', type=str, default=None, help='Write the final schedule to this CSV')
    p.add_argument('--log-level', dest='log_level', type=str, default=None)
    return p


def run(args) -> None:
    if args.professors or args.classrooms or args.courses:
        store = load_store(args.professors, args.classrooms, args.courses)
    else:
        store = seed_store()
    lessons = load_lessons(args.lessons) if args.lessons else sample_lessons()
    day = DayOfWeek.from_name(args.day)
    slot = TimeSlot.from_name(args.slot)

    for i, lesson in enumerate(lessons, start=1):
        print(f"Adding lesson {i}: {add_lesson(store, lesson)}")

    print(f"Schedule for Professor {args.professor}: {get_professor_schedule(store, args.professor)}")
    print(f"Available classrooms on {day}, {slot}: {find_available_classrooms(store, day, slot)}")
    print(f"Classroom utilization for {args.classroom}: {get_classroom_utilization(store, args.classroom)}")
    print(f"Most popular course type: {get_most_popular_course_type(store).value}")

    for room in args.move_to:
        outcome = reassign_course_classroom(store, args.course, room)
        print(f"Reassigning course {args.course} to classroom {room}: {bool(outcome)} ({outcome.value})")

    outcome = cancel_course_lesson(store, args.course)
    print(f"Cancelling course {args.course}: {outcome.value}")
    print(f"Schedule after cancelling course {args.course}: {store.schedule}")

    print(summary(store))
    print(timetable_frame(store.schedule).to_string())

    if args.out_schedule:
        save_schedule_csv(args.out_schedule, store.schedule)
        print(f"Saved: {args.out_schedule}")


def main(argv=None):
    args = build_parser().parse_args(argv)
    try:
        settings = load_settings()
        configure_logging(args.log_level or settings.log_level)
        run(args)
    except LessonTimeError as e:
        raise SystemExit(str(e))


if __name__ == '__main__':
    main()
