"""Pull-to-refresh control for the timetable page"""

import asyncio

import streamlit as st

from backend.gestures import PullToRefreshController
from backend.gestures.pull_to_refresh import DRAG_RATIO
from backend.models import RefreshOutcome
from frontend.utils.session_manager import SessionManager


def _on_drag():
    controller = SessionManager.get_refresh_controller()
    travel = st.session_state.pull_travel
    if travel > 0:
        asyncio.run(controller.drag_to(travel))


def _on_release():
    controller = SessionManager.get_refresh_controller()
    st.session_state.refresh_outcome = asyncio.run(controller.release())
    st.session_state.pull_travel = 0


def _on_refresh():
    controller = SessionManager.get_refresh_controller()
    st.session_state.refresh_outcome = asyncio.run(controller.pull())


def render_indicator(controller: PullToRefreshController):
    """Refresh icon faded and turned by the current pull"""
    style = controller.indicator()
    if style.spinning:
        label = "Refreshing..."
    elif style.armed:
        label = "Release to refresh"
    else:
        label = "Pull down to refresh"

    st.markdown(
        f"<div style='text-align:center; opacity:{max(style.opacity, 0.3):.2f}'>"
        f"<span style='display:inline-block; transform:rotate({style.rotation:.0f}deg)'>🔄</span> "
        f"<small>{label}</small></div>",
        unsafe_allow_html=True
    )


def render_refresh_control():
    """
    Refresh button plus a drag-and-release pull

    Both go through the session's PullToRefreshController, so a refresh
    runs at most once per pull and failures are reported the same way.
    """
    controller = SessionManager.get_refresh_controller()

    st.button("🔄 Refresh", use_container_width=True, on_click=_on_refresh)

    with st.expander("⬇️ Pull to refresh", expanded=controller.is_pulling):
        st.slider(
            "Pull distance", min_value=0, max_value=int(controller.max_pull / DRAG_RATIO),
            step=10, key="pull_travel", on_change=_on_drag, label_visibility="collapsed"
        )
        render_indicator(controller)
        st.button("Release", use_container_width=True, on_click=_on_release,
                  disabled=not controller.is_pulling)

    outcome = st.session_state.pop('refresh_outcome', None)
    if outcome == RefreshOutcome.REFRESHED:
        st.toast("Timetable refreshed", icon="✅")
    elif outcome == RefreshOutcome.FAILED:
        st.error("Failed to refresh timetable")
    elif outcome == RefreshOutcome.NOT_ARMED:
        st.caption("Pull a little further to refresh")
