"""
Scrollable container that dispatches touch events to listeners
"""
import inspect
from collections import defaultdict
from dataclasses import dataclass, field
from typing import Callable, Dict, List

TOUCH_START = "touchstart"
TOUCH_MOVE = "touchmove"
TOUCH_END = "touchend"


@dataclass(frozen=True)
class TouchPoint:
    client_y: float


@dataclass
class TouchEvent:
    """A touch event; only the first touch point is ever read"""
    touches: List[TouchPoint] = field(default_factory=list)
    default_prevented: bool = False

    @classmethod
    def at(cls, client_y: float) -> 'TouchEvent':
        return cls(touches=[TouchPoint(client_y)])

    @property
    def first_touch(self) -> TouchPoint:
        if not self.touches:
            raise ValueError("Touch event has no touch points")
        return self.touches[0]

    def prevent_default(self):
        """Suppress native scroll / overscroll bounce"""
        self.default_prevented = True


class ScrollContainer:
    """Minimal event target with a vertical scroll offset"""

    def __init__(self, scroll_top: float = 0):
        self.scroll_top = scroll_top
        self._listeners: Dict[str, List[Callable]] = defaultdict(list)

    def add_event_listener(self, event_type: str, handler: Callable):
        self._listeners[event_type].append(handler)

    def remove_event_listener(self, event_type: str, handler: Callable):
        handlers = self._listeners.get(event_type, [])
        if handler in handlers:
            handlers.remove(handler)

    def listener_count(self, event_type: str = None) -> int:
        if event_type is not None:
            return len(self._listeners.get(event_type, []))
        return sum(len(h) for h in self._listeners.values())

    async def dispatch(self, event_type: str, event: TouchEvent = None) -> TouchEvent:
        """
        Deliver an event to every listener in registration order

        Handlers may be plain functions or coroutines; coroutines are awaited
        before the next handler runs.

        Args:
            event_type: touchstart, touchmove or touchend
            event: the event; an empty TouchEvent when omitted

        Returns:
            the event, so callers can inspect default_prevented
        """
        if event is None:
            event = TouchEvent()

        # Copy so handlers may unsubscribe while dispatching
        for handler in list(self._listeners.get(event_type, [])):
            result = handler(event)
            if inspect.isawaitable(result):
                await result
        return event
