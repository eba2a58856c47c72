"""Timetable grid component"""

import html

import streamlit as st

from backend.exporters.timetable_grid import build_cell_matrix, course_color, CORNER_LABEL


def render_timetable_grid(entries: list, time_slots: list, days: list):
    """Render the day x slot table"""
    matrix = build_cell_matrix(entries, time_slots, days)

    header = "".join(f"<th>{html.escape(slot)}</th>" for slot in time_slots)
    body = []
    for day, cells in zip(days, matrix):
        row = [f"<td class='tt-day'>{html.escape(day)}</td>"]
        for entry in cells:
            if entry is None:
                row.append("<td></td>")
                continue
            fill, border = course_color(entry.course_code)
            row.append(
                f"<td><div class='tt-class' style='background:{fill};border-color:{border}'>"
                f"<b>{html.escape(entry.course_code)}</b><br>"
                f"<span>{html.escape(entry.course_title)}</span><br>"
                f"<small>📍 {html.escape(entry.location)}</small><br>"
                f"<small><b>Lecturer:</b> {html.escape(entry.lecturer)}</small>"
                f"</div></td>"
            )
        body.append(f"<tr>{''.join(row)}</tr>")

    st.markdown(
        f"""
        <style>
        .tt-table {{ border: 4px solid black; border-collapse: collapse; width: 100%; }}
        .tt-table th {{ background: #f3f4f6; padding: 6px; text-align: center; }}
        .tt-table td {{ vertical-align: top; padding: 4px; height: 80px; min-width: 120px; }}
        .tt-day {{ background: #f3f4f6; font-weight: 600; }}
        .tt-class {{ border: 1px solid; border-radius: 4px; padding: 6px; font-size: 0.85em; }}
        </style>
        <table class='tt-table'>
          <thead><tr><th>{CORNER_LABEL}</th>{header}</tr></thead>
          <tbody>{''.join(body)}</tbody>
        </table>
        """,
        unsafe_allow_html=True
    )
    st.caption("Your weekly class schedule")

    if not entries:
        st.info("📭 No classes scheduled yet. Get started by adding classes to your timetable.")


def render_admin_entry_list(entries: list, on_edit, on_delete):
    """Edit / delete buttons per class (admins only)"""
    with st.expander("🛠️ Manage classes", expanded=False):
        if not entries:
            st.caption("Nothing to manage yet")
            return

        for entry in entries:
            col1, col2, col3 = st.columns([6, 1, 1])
            with col1:
                st.write(f"**{entry.course_code}** · {entry.course_title} · "
                         f"{entry.day} {entry.start_time}-{entry.end_time}")
            with col2:
                if st.button("✏️", key=f"edit_{entry.id}_{entry.course_code}"):
                    on_edit(entry)
            with col3:
                if st.button("🗑️", key=f"delete_{entry.id}_{entry.course_code}",
                             disabled=entry.id is None):
                    on_delete(entry)
