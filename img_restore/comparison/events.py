"""
Input events and the global event target used by the comparison slider.

Pointer and touch input are modelled after their browser counterparts:
mouse events carry a single client_x, touch events carry a list of touch
points. EventTarget plays the role of the window that move/release
listeners are attached to for the duration of a drag.
"""

from abc import ABC, abstractmethod
from collections import defaultdict
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Union

MOUSE_DOWN = "mousedown"
MOUSE_MOVE = "mousemove"
MOUSE_UP = "mouseup"
TOUCH_START = "touchstart"
TOUCH_MOVE = "touchmove"
TOUCH_END = "touchend"

PRESS_EVENTS = (MOUSE_DOWN, TOUCH_START)
MOVE_EVENTS = (MOUSE_MOVE, TOUCH_MOVE)
RELEASE_EVENTS = (MOUSE_UP, TOUCH_END)


@dataclass(frozen=True)
class MouseInput:
    client_x: float


@dataclass(frozen=True)
class TouchPoint:
    client_x: float


@dataclass(frozen=True)
class TouchInput:
    touches: List[TouchPoint] = field(default_factory=list)


InputEvent = Union[MouseInput, TouchInput]
Listener = Callable[[InputEvent], None]


@dataclass(frozen=True)
class ContainerRect:
    """Horizontal geometry of the comparison container, in client pixels."""
    left: float
    width: float


def event_client_x(event: InputEvent) -> Optional[float]:
    """
    Normalizes mouse and touch input to one horizontal coordinate.
    Returns None for a touch event without touch points.
    """
    if isinstance(event, TouchInput):
        if not event.touches:
            return None
        return event.touches[0].client_x
    return event.client_x


class EventTarget(ABC):
    """
    Something listeners can be attached to and detached from, e.g. the
    window of a browser view.
    """

    @abstractmethod
    def add_listener(self, event_type: str, listener: Listener):
        pass

    @abstractmethod
    def remove_listener(self, event_type: str, listener: Listener):
        pass


class ListenerRegistry(EventTarget):
    """
    In-process EventTarget. The HTTP binding dispatches forwarded client
    events through it; tests use it to observe attached listeners.
    """

    def __init__(self):
        self._listeners: Dict[str, List[Listener]] = defaultdict(list)

    def add_listener(self, event_type: str, listener: Listener):
        self._listeners[event_type].append(listener)

    def remove_listener(self, event_type: str, listener: Listener):
        listeners = self._listeners.get(event_type)
        if listeners and listener in listeners:
            listeners.remove(listener)

    def dispatch(self, event_type: str, event: InputEvent) -> int:
        """Calls every listener for event_type. Returns how many were called."""
        # Copy: a release listener detaches listeners while we iterate.
        listeners = list(self._listeners.get(event_type, ()))
        for listener in listeners:
            listener(event)
        return len(listeners)

    def listener_count(self, event_type: Optional[str] = None) -> int:
        if event_type is not None:
            return len(self._listeners.get(event_type, ()))
        return sum(len(listeners) for listeners in self._listeners.values())
