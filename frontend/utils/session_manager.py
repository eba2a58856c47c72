"""
Session state manager
"""
import json
import os

import streamlit as st

from backend.config import get_settings
from backend.gestures import PullToRefreshController, ScrollContainer
from backend.models import ScheduleEntry
from backend.utils.supabase_client import TimetableRepository, get_supabase_manager
from backend.utils.time_slots import DEFAULT_DAYS, generate_time_slots
from frontend.utils.toast import StreamlitNotifier

SETTINGS_FILE = 'data/configs/timetable_settings.json'
ALL_DAYS = DEFAULT_DAYS + ["Saturday", "Sunday"]


class SessionManager:
    """Manages Streamlit session state"""

    @staticmethod
    def initialize():
        """Initialize session state"""
        if 'entries' not in st.session_state:
            st.session_state.entries = []

        if 'entries_loaded' not in st.session_state:
            st.session_state.entries_loaded = False

        if 'editing_entry' not in st.session_state:
            st.session_state.editing_entry = None

        if 'show_add_form' not in st.session_state:
            st.session_state.show_add_form = False

        if 'user_email' not in st.session_state:
            st.session_state.user_email = ''

        if 'start_hour' not in st.session_state:
            st.session_state.start_hour = 8

        if 'end_hour' not in st.session_state:
            st.session_state.end_hour = 17

        if 'days' not in st.session_state:
            st.session_state.days = list(DEFAULT_DAYS)

        if 'last_export' not in st.session_state:
            st.session_state.last_export = None

    @staticmethod
    def get_repository() -> TimetableRepository:
        notifier = StreamlitNotifier()
        return TimetableRepository(get_supabase_manager(notifier), notifier)

    @staticmethod
    def time_slots() -> list:
        return generate_time_slots(st.session_state.start_hour, st.session_state.end_hour)

    @staticmethod
    def days() -> list:
        return list(st.session_state.days)

    @staticmethod
    def is_admin() -> bool:
        return get_settings().is_admin(st.session_state.user_email)

    @staticmethod
    def load_entries(force: bool = False):
        """Fetch the timetable once per session, or again when forced"""
        if st.session_state.entries_loaded and not force:
            return
        st.session_state.entries = SessionManager.get_repository().list_entries()
        st.session_state.entries_loaded = True

    @staticmethod
    def entries() -> list:
        return list(st.session_state.entries)

    @staticmethod
    def get_refresh_controller() -> PullToRefreshController:
        """Pull-to-refresh controller for this session, mounted on the page container"""
        if 'refresh_controller' not in st.session_state:
            async def reload_entries():
                SessionManager.load_entries(force=True)

            controller = PullToRefreshController.from_settings(reload_entries)
            controller.mount(ScrollContainer(scroll_top=0))
            st.session_state.refresh_controller = controller
        return st.session_state.refresh_controller

    @staticmethod
    def render_sidebar_settings():
        """Render the sidebar settings"""
        st.subheader("👤 Account")
        st.session_state.user_email = st.text_input(
            "Signed-in e-mail",
            value=st.session_state.user_email,
            help="Admin accounts can add, edit and seed classes"
        )
        if SessionManager.is_admin():
            st.caption("🔑 Admin mode")

        st.divider()

        # Grid layout
        st.subheader("🕗 Timetable hours")
        col1, col2 = st.columns(2)
        with col1:
            st.session_state.start_hour = st.number_input(
                "First slot", min_value=0, max_value=22, value=st.session_state.start_hour)
        with col2:
            st.session_state.end_hour = st.number_input(
                "Last slot", min_value=st.session_state.start_hour + 1, max_value=23,
                value=max(st.session_state.end_hour, st.session_state.start_hour + 1))

        st.session_state.days = st.multiselect(
            "Days", ALL_DAYS,
            default=[d for d in st.session_state.days if d in ALL_DAYS]
        ) or list(DEFAULT_DAYS)

        st.divider()

        st.subheader("💾 Settings")
        if st.button("💾 Save settings", use_container_width=True):
            SessionManager.save_settings()
            st.success("Settings saved!")

        if st.button("📂 Load settings", use_container_width=True):
            if SessionManager.load_settings():
                st.success("Settings loaded!")
                st.rerun()
            else:
                st.error("No saved settings found")

        st.divider()
        status = get_supabase_manager(StreamlitNotifier()).get_status()
        if status['connected']:
            st.caption(f"✅ Supabase connected · bucket `{status['bucket']}`")
        else:
            st.caption("❌ Supabase not connected")

    @staticmethod
    def save_settings():
        """Save grid settings to a file"""
        save_data = {
            'start_hour': st.session_state.start_hour,
            'end_hour': st.session_state.end_hour,
            'days': st.session_state.days,
            'entries': [e.to_dict() for e in st.session_state.entries],
        }

        os.makedirs(os.path.dirname(SETTINGS_FILE), exist_ok=True)
        with open(SETTINGS_FILE, 'w', encoding='utf-8') as f:
            json.dump(save_data, f, ensure_ascii=False, indent=2)

    @staticmethod
    def load_settings() -> bool:
        """Load grid settings from a file"""
        if not os.path.exists(SETTINGS_FILE):
            return False

        try:
            with open(SETTINGS_FILE, 'r', encoding='utf-8') as f:
                save_data = json.load(f)

            st.session_state.start_hour = save_data.get('start_hour', 8)
            st.session_state.end_hour = save_data.get('end_hour', 17)
            st.session_state.days = save_data.get('days', list(DEFAULT_DAYS))

            # Offline copy, used until the next refresh from Supabase
            if save_data.get('entries'):
                st.session_state.entries = [
                    ScheduleEntry.from_dict(e) for e in save_data['entries']
                ]
            return True
        except (OSError, ValueError, TypeError) as e:
            st.error(f"Error while loading settings: {e}")
            return False
