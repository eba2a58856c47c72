"""
Streamlit toast notifier
"""
import streamlit as st

from backend.utils.notifications import Notifier

_ICONS = {
    'info': "ℹ️",
    'success': "✅",
    'warning': "⚠️",
    'error': "❌",
}


class StreamlitNotifier(Notifier):
    """Shows backend notifications as toasts"""

    def notify(self, level: str, message: str) -> None:
        st.toast(message, icon=_ICONS.get(level, "ℹ️"))
