"""
LLB class timetable - main entry point
"""
import streamlit as st

from backend.config import get_settings
from backend.utils.logger import setup_logging
from frontend.pages import timetable
from frontend.utils.session_manager import SessionManager


def main():
    settings = get_settings()
    setup_logging(json_output=settings.log_json, log_level=settings.log_level)

    # Page config
    st.set_page_config(
        page_title="LLB Class Timetable",
        page_icon="📅",
        layout="wide",
        initial_sidebar_state="expanded"
    )

    SessionManager.initialize()

    with st.sidebar:
        st.title("⚙️ Settings")
        SessionManager.render_sidebar_settings()

    timetable.render()


if __name__ == "__main__":
    main()
