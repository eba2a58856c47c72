"""
Pull-to-refresh gesture state
"""
from dataclasses import dataclass
from enum import Enum


class RefreshOutcome(Enum):
    """What a touch-end did"""
    IGNORED = "ignored"        # no active gesture
    NOT_ARMED = "not_armed"    # released below the threshold
    REFRESHED = "refreshed"
    FAILED = "failed"          # refresh action raised


@dataclass
class PullState:
    """Mutable state owned by a single PullToRefreshController"""
    pull_distance: float = 0.0
    is_refreshing: bool = False
    can_refresh: bool = False
    start_y: float = 0.0
    current_y: float = 0.0

    def reset_pull(self):
        """Drop the visible pull; refreshing flag is left alone"""
        self.pull_distance = 0.0
        self.can_refresh = False
