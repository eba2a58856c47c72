"""
Data models
"""
from .schedule_entry import ScheduleEntry
from .pull_state import PullState, RefreshOutcome
from .export_result import ExportResult

__all__ = [
    'ScheduleEntry',
    'PullState',
    'RefreshOutcome',
    'ExportResult'
]
