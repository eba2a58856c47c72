"""
Pull-to-refresh gesture controller

State machine: Idle -> Pulling -> (Refreshing) -> Idle

A pull starts only when the container is scrolled to the very top. The
visible pull is half the finger travel, capped at max_pull; releasing past
the threshold runs the refresh action once.
"""
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Awaitable, Callable, Optional

from backend.config import AppSettings, get_settings
from backend.gestures.scroll_container import (
    ScrollContainer,
    TouchEvent,
    TouchPoint,
    TOUCH_START,
    TOUCH_MOVE,
    TOUCH_END
)
from backend.models import PullState, RefreshOutcome
from backend.utils.logger import get_logger

logger = get_logger(__name__)

DEFAULT_THRESHOLD = 80
DEFAULT_MAX_PULL = 120
DRAG_RATIO = 0.5
INDICATOR_SIZE = 40


def damped_pull_distance(delta: float, max_pull: float = DEFAULT_MAX_PULL) -> float:
    """
    Visible pull for a raw finger travel

    Args:
        delta: currentY - startY in pixels
        max_pull: cap in pixels

    Returns:
        min(max(0, delta) * 0.5, max_pull)
    """
    return min(max(0.0, delta) * DRAG_RATIO, max_pull)


def indicator_opacity(pull_distance: float, threshold: float = DEFAULT_THRESHOLD) -> float:
    return min(pull_distance / threshold, 1.0)


def indicator_rotation(pull_distance: float,
                       threshold: float = DEFAULT_THRESHOLD,
                       is_refreshing: bool = False) -> float:
    """Degrees of icon rotation; the spinner animation takes over while refreshing"""
    if is_refreshing:
        return 0.0
    return (pull_distance / threshold) * 360


def indicator_offset(pull_distance: float) -> float:
    """Vertical translation of the indicator; it hides above the content at rest"""
    return max(pull_distance - INDICATOR_SIZE, -INDICATOR_SIZE)


@dataclass(frozen=True)
class IndicatorStyle:
    """Snapshot of everything the indicator needs to draw itself"""
    opacity: float
    rotation: float
    offset: float
    content_offset: float
    armed: bool
    spinning: bool


class PullToRefreshController:
    """Turns touch events on a scroll container into refresh calls"""

    def __init__(self,
                 on_refresh: Callable[[], Awaitable[None]],
                 threshold: float = DEFAULT_THRESHOLD,
                 max_pull: float = DEFAULT_MAX_PULL):
        if threshold <= 0:
            raise ValueError(f"threshold must be positive, got {threshold}")
        if max_pull <= 0:
            raise ValueError(f"max_pull must be positive, got {max_pull}")

        self.on_refresh = on_refresh
        self.threshold = threshold
        self.max_pull = max_pull
        self.state = PullState()

        self.last_outcome: Optional[RefreshOutcome] = None

        self._container: Optional[ScrollContainer] = None
        self._active_touch: Optional[TouchPoint] = None

    @classmethod
    def from_settings(cls, on_refresh: Callable[[], Awaitable[None]],
                      settings: Optional[AppSettings] = None) -> 'PullToRefreshController':
        """Controller using PULL_THRESHOLD / PULL_MAX from the environment"""
        settings = settings or get_settings()
        return cls(on_refresh, threshold=settings.pull_threshold, max_pull=settings.pull_max)

    # ---- properties -------------------------------------------------

    @property
    def pull_distance(self) -> float:
        return self.state.pull_distance

    @property
    def is_refreshing(self) -> bool:
        return self.state.is_refreshing

    @property
    def can_refresh(self) -> bool:
        return self.state.can_refresh

    @property
    def is_pulling(self) -> bool:
        return self._active_touch is not None

    @property
    def is_mounted(self) -> bool:
        return self._container is not None

    @property
    def arming_travel(self) -> float:
        """Finger travel needed to reach the threshold"""
        return self.threshold / DRAG_RATIO

    # ---- subscription -----------------------------------------------

    def mount(self, container: ScrollContainer):
        """Register touch listeners on the container"""
        if self._container is not None:
            raise RuntimeError("Controller is already mounted")

        container.add_event_listener(TOUCH_START, self.handle_touch_start)
        container.add_event_listener(TOUCH_MOVE, self.handle_touch_move)
        container.add_event_listener(TOUCH_END, self.handle_touch_end)
        self._container = container

    def unmount(self):
        """Remove the listeners and forget any gesture in progress"""
        container = self._container
        if container is None:
            return

        container.remove_event_listener(TOUCH_START, self.handle_touch_start)
        container.remove_event_listener(TOUCH_MOVE, self.handle_touch_move)
        container.remove_event_listener(TOUCH_END, self.handle_touch_end)
        self._container = None
        self._active_touch = None
        self.state.reset_pull()

    @contextmanager
    def attach(self, container: ScrollContainer):
        """
        Listen on a container for the duration of a with-block

        Listeners are removed on exit, including when the block raises.
        """
        self.mount(container)
        try:
            yield self
        finally:
            self.unmount()

    # ---- touch handlers ---------------------------------------------

    def _at_top(self) -> bool:
        return self._container is not None and self._container.scroll_top == 0

    def handle_touch_start(self, event: TouchEvent):
        if not self._at_top() or self.state.is_refreshing:
            return

        self._active_touch = event.first_touch
        self.state.start_y = self._active_touch.client_y

    def handle_touch_move(self, event: TouchEvent):
        if self._active_touch is None or self.state.is_refreshing:
            return

        self.state.current_y = event.first_touch.client_y
        delta = self.state.current_y - self.state.start_y

        # Upward drags and drags after the content scrolled are ordinary scrolling
        if delta > 0 and self._at_top():
            event.prevent_default()
            distance = damped_pull_distance(delta, self.max_pull)
            self.state.pull_distance = distance
            self.state.can_refresh = distance >= self.threshold

    async def handle_touch_end(self, event: TouchEvent = None) -> RefreshOutcome:
        """
        Finish the gesture, refreshing if it was armed

        Returns:
            RefreshOutcome describing what happened
        """
        if self._active_touch is None:
            self.last_outcome = RefreshOutcome.IGNORED
            return self.last_outcome

        # Claim the gesture so a repeated touch-end cannot refresh again
        self._active_touch = None
        outcome = RefreshOutcome.NOT_ARMED

        if self.state.can_refresh and not self.state.is_refreshing:
            self.state.is_refreshing = True
            try:
                await self.on_refresh()
                outcome = RefreshOutcome.REFRESHED
            except Exception as e:
                logger.error("refresh_failed", error=str(e), exc_info=True)
                outcome = RefreshOutcome.FAILED
            finally:
                self.state.is_refreshing = False

        self.state.reset_pull()
        self.last_outcome = outcome
        return outcome

    # ---- driving a gesture ------------------------------------------

    def _require_container(self) -> ScrollContainer:
        if self._container is None:
            raise RuntimeError("Controller is not mounted")
        return self._container

    async def drag_to(self, travel: float):
        """
        Press at the top of the container, unless a pull is already under way,
        and drag the finger down by travel pixels
        """
        container = self._require_container()
        if not self.is_pulling:
            await container.dispatch(TOUCH_START, TouchEvent.at(0))
        await container.dispatch(TOUCH_MOVE, TouchEvent.at(travel))

    async def release(self) -> RefreshOutcome:
        """Lift the finger; returns what the touch-end did"""
        await self._require_container().dispatch(TOUCH_END, TouchEvent())
        return self.last_outcome

    async def pull(self, travel: Optional[float] = None) -> RefreshOutcome:
        """
        A whole gesture through the mounted container

        Args:
            travel: finger travel in pixels, just enough to arm when omitted

        Returns:
            RefreshOutcome of the release
        """
        await self.drag_to(self.arming_travel if travel is None else travel)
        return await self.release()

    # ---- rendering --------------------------------------------------

    def indicator(self) -> IndicatorStyle:
        pull = self.state.pull_distance
        return IndicatorStyle(
            opacity=indicator_opacity(pull, self.threshold),
            rotation=indicator_rotation(pull, self.threshold, self.state.is_refreshing),
            offset=indicator_offset(pull),
            content_offset=pull,
            armed=self.state.can_refresh,
            spinning=self.state.is_refreshing
        )
