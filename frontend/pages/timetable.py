"""
Class timetable page
"""
import streamlit as st

from backend.data import SEMESTERS
from backend.utils.validation import find_slot_conflicts
from frontend.components.export_buttons import render_export_buttons
from frontend.components.pull_to_refresh import render_refresh_control
from frontend.components.timetable_form import render_timetable_form
from frontend.components.timetable_grid import render_timetable_grid, render_admin_entry_list
from frontend.utils.session_manager import SessionManager


def render():
    """Render the timetable page"""
    st.header("📅 Class Timetable")

    SessionManager.load_entries()
    repository = SessionManager.get_repository()
    entries = SessionManager.entries()
    time_slots = SessionManager.time_slots()
    days = SessionManager.days()
    is_admin = SessionManager.is_admin()

    # Toolbar
    col_refresh, col_exports = st.columns([1, 4])
    with col_refresh:
        render_refresh_control()
    with col_exports:
        render_export_buttons(entries, time_slots, days)

    if is_admin:
        render_admin_tools(repository)

    if is_admin and (st.session_state.show_add_form or st.session_state.editing_entry):
        if render_timetable_form(repository, time_slots, days):
            SessionManager.load_entries(force=True)
            st.rerun()

    # Overlapping classes: only the first is shown in the grid and exports
    conflicts = find_slot_conflicts(entries, time_slots)
    if conflicts:
        with st.expander(f"⚠️ {len(conflicts)} overlapping class(es)", expanded=False):
            for first, second, day in conflicts:
                st.write(f"{day}: **{first.course_code}** hides **{second.course_code}**")

    render_timetable_grid(entries, time_slots, days)

    if is_admin:
        render_admin_entry_list(
            entries,
            on_edit=lambda entry: _start_edit(entry),
            on_delete=lambda entry: _delete(repository, entry)
        )


def render_admin_tools(repository):
    """Add class and semester seeding"""
    cols = st.columns(len(SEMESTERS) + 1)
    with cols[0]:
        if st.button("➕ Add Class", use_container_width=True):
            st.session_state.editing_entry = None
            st.session_state.show_add_form = True
            st.rerun()

    for col, (label, courses) in zip(cols[1:], SEMESTERS.items()):
        with col:
            if st.button(f"Add {label}", use_container_width=True):
                if repository.load_semester(courses, label):
                    SessionManager.load_entries(force=True)
                    st.rerun()


def _start_edit(entry):
    st.session_state.editing_entry = entry
    st.session_state.show_add_form = True
    st.rerun()


def _delete(repository, entry):
    if repository.delete_entry(entry.id):
        SessionManager.load_entries(force=True)
        st.rerun()
