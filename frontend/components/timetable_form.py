"""Add / edit class form"""

import streamlit as st

from backend.models import ScheduleEntry
from backend.utils.validation import validate_schedule_entry


def _index_of(options: list, value: str) -> int:
    return options.index(value) if value in options else 0


def render_timetable_form(repository, time_slots: list, days: list) -> bool:
    """
    Render the class form

    Returns:
        True when a class was saved
    """
    editing = st.session_state.editing_entry
    st.subheader("✏️ Edit Class Schedule" if editing else "➕ Add Class to Timetable")

    defaults = editing or ScheduleEntry("", "", "", "", "")

    with st.form("timetable_form", clear_on_submit=False):
        col1, col2 = st.columns(2)
        with col1:
            course_code = st.text_input("Course Code", value=defaults.course_code,
                                        placeholder="e.g. LAW101")
            day = st.selectbox("Day", days, index=_index_of(days, defaults.day))
            start_time = st.selectbox("Start Time", time_slots,
                                      index=_index_of(time_slots, defaults.start_time))
            location = st.text_input("Location", value=defaults.location,
                                     placeholder="e.g. Law Theatre 1")
        with col2:
            course_title = st.text_input("Course Title", value=defaults.course_title,
                                         placeholder="e.g. Constitutional Law 1")
            lecturer = st.text_input("Lecturer", value=defaults.lecturer,
                                     placeholder="e.g. Prof. Adebayo")
            end_time = st.selectbox("End Time", time_slots,
                                    index=_index_of(time_slots, defaults.end_time or time_slots[-1]))

        col_save, col_cancel = st.columns(2)
        with col_save:
            submitted = st.form_submit_button("✅ Update Class" if editing else "✅ Add Class",
                                              type="primary", use_container_width=True)
        with col_cancel:
            cancelled = st.form_submit_button("Cancel", use_container_width=True)

    if cancelled:
        reset_form()
        st.rerun()

    if not submitted:
        return False

    entry = ScheduleEntry(
        course_code=course_code.strip(),
        course_title=course_title.strip(),
        day=day,
        start_time=start_time,
        end_time=end_time,
        location=location.strip(),
        lecturer=lecturer.strip(),
    )

    is_valid, errors = validate_schedule_entry(entry, time_slots, days)
    if not is_valid:
        for error in errors:
            st.error(error)
        return False

    if editing and editing.id is not None:
        saved = repository.update_entry(editing.id, entry)
    else:
        saved = repository.add_entry(entry)

    if saved is None:
        return False

    reset_form()
    return True


def reset_form():
    st.session_state.editing_entry = None
    st.session_state.show_add_form = False
