from .scroll_container import ScrollContainer, TouchEvent, TouchPoint
from .pull_to_refresh import (
    PullToRefreshController,
    IndicatorStyle,
    damped_pull_distance,
    indicator_opacity,
    indicator_rotation,
    indicator_offset
)

__all__ = [
    'ScrollContainer',
    'TouchEvent',
    'TouchPoint',
    'PullToRefreshController',
    'IndicatorStyle',
    'damped_pull_distance',
    'indicator_opacity',
    'indicator_rotation',
    'indicator_offset'
]
