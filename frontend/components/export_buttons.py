"""Timetable export buttons"""

import asyncio

import streamlit as st

from backend.exporters import TimetableExportService, TimetableGridRenderer
from backend.utils.supabase_client import get_supabase_manager
from frontend.utils.toast import StreamlitNotifier


def render_export_buttons(entries: list, time_slots: list, days: list):
    """PDF / Excel / CSV / image exports plus download and publish"""
    service = TimetableExportService(StreamlitNotifier())

    # The grid the user is looking at, captured for PDF / PNG
    grid = TimetableGridRenderer(entries, time_slots, days) if days and time_slots else None

    col1, col2, col3, col4 = st.columns(4)
    with col1:
        if st.button("📄 PDF", use_container_width=True):
            st.session_state.last_export = asyncio.run(service.export_pdf(grid))
    with col2:
        if st.button("📊 Excel", use_container_width=True):
            st.session_state.last_export = service.export_excel(entries, time_slots, days)
    with col3:
        if st.button("🧾 CSV", use_container_width=True):
            st.session_state.last_export = service.export_csv(entries, time_slots, days)
    with col4:
        if st.button("🖼️ Image", use_container_width=True):
            st.session_state.last_export = asyncio.run(service.export_png(grid))

    result = st.session_state.last_export
    if result is None or not result.success:
        return

    col_dl, col_pub = st.columns(2)
    with col_dl:
        st.download_button(
            f"⬇️ Download {result.file_name}",
            data=result.content,
            file_name=result.file_name,
            mime=result.mime_type,
            use_container_width=True
        )
    with col_pub:
        if st.button("☁️ Publish to storage", use_container_width=True):
            url = get_supabase_manager(StreamlitNotifier()).upload_export(result)
            if url:
                st.success("Published! Link valid for 30 days")
                st.code(url)
