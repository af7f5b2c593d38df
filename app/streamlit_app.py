import sys, os
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import io
import time

import streamlit as st

from lessontime.config import load_settings
from lessontime.exceptions import LessonTimeError
from lessontime.io_utils import load_store, save_schedule_csv, write_schedule_csv
from lessontime.models import DayOfWeek, Lesson, TimeSlot
from lessontime.sample_data import sample_lessons, seed_store
from lessontime.scheduling.evaluation import summary, timetable_frame, utilization_frame
from lessontime.scheduling.mutations import add_lesson, cancel_lesson, reassign_classroom, try_add_lesson
from lessontime.scheduling.queries import (
    find_available_classrooms, get_most_popular_course_type, get_professor_schedule
)

# ---------------------------------------------------------------------
# Page config
# ---------------------------------------------------------------------
st.set_page_config(page_title="LessonTime – Timetable", layout="wide")
st.title("LessonTime – University Timetable")

settings = load_settings()

# ---------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------
def _bytes_of(upload):
    if upload is None:
        return None
    return io.BytesIO(upload.getvalue())


def _sample_store():
    store = seed_store()
    for lesson in sample_lessons():
        add_lesson(store, lesson)
    return store


# The store lives in the session so edits survive reruns
if "store" not in st.session_state:
    st.session_state.store = _sample_store()
store = st.session_state.store

# ---------------------------------------------------------------------
# Inputs
# ---------------------------------------------------------------------
with st.expander("Load data from CSV"):
    with st.form("load"):
        c1, c2, c3, c4 = st.columns(4)
        prof_file = c1.file_uploader("Professors (id,name,department)", type=["csv"])
        room_file = c2.file_uploader("Classrooms (number,capacity,has_projector)", type=["csv"])
        course_file = c3.file_uploader("Courses (id,name,type)", type=["csv"])
        lesson_file = c4.file_uploader("Lessons (course_id,professor_id,classroom_number,day,slot)", type=["csv"])
        loaded = st.form_submit_button("Replace timetable")
    if loaded:
        try:
            st.session_state.store = load_store(
                _bytes_of(prof_file), _bytes_of(room_file), _bytes_of(course_file), _bytes_of(lesson_file)
            )
        except LessonTimeError as e:
            st.error(str(e))
            st.stop()
        st.rerun()

if st.button("Reset to sample data"):
    st.session_state.store = _sample_store()
    st.rerun()

st.subheader("Add a lesson")
with st.form("add"):
    c1, c2, c3, c4, c5 = st.columns(5)
    course_id = c1.selectbox("Course", [c.id for c in store.courses] or [1])
    professor_id = c2.selectbox("Professor", [p.id for p in store.professors] or [1])
    room = c3.text_input("Classroom", value=store.classrooms[0].number if store.classrooms else "")
    day = c4.selectbox("Day", [d.value for d in DayOfWeek])
    slot = c5.selectbox("Slot", [s.value for s in TimeSlot])
    submitted = st.form_submit_button("Add")

if submitted and not room.strip():
    st.error("Please enter a classroom.")
elif submitted:
    conflict = try_add_lesson(store, Lesson(
        course_id=int(course_id), professor_id=int(professor_id), classroom_number=room.strip(),
        day=DayOfWeek.from_name(day), slot=TimeSlot.from_name(slot),
    ))
    if conflict is None:
        st.success("Lesson added.")
    else:
        other = conflict.lesson_details
        st.error(f"{conflict.type.value}: clashes with lesson {other.lesson_id} "
                 f"(course {other.course_id}, {other.classroom_number}).")

st.subheader("Reassign or cancel")
lesson_ids = [l.lesson_id for l in store.schedule]
c1, c2, c3 = st.columns(3)
target = c1.selectbox("Lesson", lesson_ids) if lesson_ids else None
new_room = c2.text_input("New classroom")
if target is not None:
    if c2.button("Reassign", disabled=not new_room.strip()):
        outcome = reassign_classroom(store, target, new_room.strip())
        (st.success if outcome else st.error)(f"Reassign: {outcome.value}")
    if c3.button("Cancel lesson"):
        st.info(f"Cancel: {cancel_lesson(store, target).value}")

# ---------------------------------------------------------------------
# Output
# ---------------------------------------------------------------------
st.subheader("Timetable")
prof_filter = st.selectbox("Professor", ["All"] + [p.id for p in store.professors])
shown = store.schedule if prof_filter == "All" else get_professor_schedule(store, prof_filter)
st.dataframe(timetable_frame(shown), use_container_width=True)

c1, c2 = st.columns(2)
q_day = c1.selectbox("Free rooms on", [d.value for d in DayOfWeek], key="q_day")
q_slot = c2.selectbox("at", [s.value for s in TimeSlot], key="q_slot")
st.write(find_available_classrooms(store, DayOfWeek.from_name(q_day), TimeSlot.from_name(q_slot)))

st.subheader("Summary")
st.text(summary(store))
st.dataframe(utilization_frame(store), use_container_width=True)
st.caption(f"Most popular course type: {get_most_popular_course_type(store).value}")

buf = io.StringIO()
write_schedule_csv(buf, store.schedule)
st.download_button("Download schedule.csv", buf.getvalue(), file_name="schedule.csv", mime="text/csv")

if st.button("Save to output folder"):
    output_dir = os.path.join(os.getcwd(), settings.output_dir, f"timetable_{time.strftime('%Y%m%d-%H%M%S')}")
    os.makedirs(output_dir, exist_ok=True)
    save_schedule_csv(os.path.join(output_dir, "schedule.csv"), store.schedule)
    with open(os.path.join(output_dir, "summary.txt"), "w") as f:
        f.write(summary(store))
    st.info(f"Results saved locally to: {output_dir}")
