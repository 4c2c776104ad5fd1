"""
Comparison Slider - Before/After Split Controller

Tracks the split position (0-100) of the before/after view. A drag session
starts with a press on the handle and ends with the next release. While it
is active, move and release listeners are attached to the global event
target so that leaving the container or releasing outside it still updates
or ends the session. Listeners are attached on begin_drag() and removed on
every way out: end_drag(), reset(), close() or leaving the drag() block.

    IDLE ──begin_drag()──> DRAGGING ──end_drag()──> IDLE
"""

import logging
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Callable, Iterator, List, Optional, Tuple

from .events import (
    MOUSE_MOVE,
    MOUSE_UP,
    TOUCH_END,
    TOUCH_MOVE,
    ContainerRect,
    EventTarget,
    InputEvent,
    Listener,
    event_client_x,
)

logger = logging.getLogger(__name__)

DEFAULT_POSITION = 50.0


@dataclass(frozen=True)
class SliderSession:
    active: bool
    position: float


def compute_position(client_x: float, container_left: float, container_width: float) -> Optional[float]:
    """
    Maps a horizontal coordinate to a percentage of the container, clamped
    to [0, 100]. Returns None for a container without width.
    """
    if container_width <= 0:
        return None
    position = ((client_x - container_left) / container_width) * 100
    return min(max(position, 0.0), 100.0)


class ComparisonSliderController:
    def __init__(self, target: EventTarget, measure: Callable[[], Optional[ContainerRect]]):
        self.target = target
        self.measure = measure
        self._position = DEFAULT_POSITION
        self._attached: List[Tuple[str, Listener]] = []

    @property
    def active(self) -> bool:
        return bool(self._attached)

    @property
    def position(self) -> float:
        return self._position

    def snapshot(self) -> SliderSession:
        return SliderSession(active=self.active, position=self._position)

    # ==========================================================================
    # Drag Session
    # ==========================================================================

    def begin_drag(self):
        """Press on the handle (mousedown or touchstart)."""
        if self.active:
            return
        listeners = [
            (MOUSE_MOVE, self.handle_move),
            (TOUCH_MOVE, self.handle_move),
            (MOUSE_UP, self.handle_release),
            (TOUCH_END, self.handle_release),
        ]
        for event_type, listener in listeners:
            self.target.add_listener(event_type, listener)
            self._attached.append((event_type, listener))
        logger.debug("Comparison drag started")

    def end_drag(self):
        """Detaches every global listener. Safe to call when idle."""
        while self._attached:
            event_type, listener = self._attached.pop()
            self.target.remove_listener(event_type, listener)

    @contextmanager
    def drag(self) -> Iterator["ComparisonSliderController"]:
        self.begin_drag()
        try:
            yield self
        finally:
            self.end_drag()

    # ==========================================================================
    # Global Listeners
    # ==========================================================================

    def handle_move(self, event: InputEvent):
        if not self.active:
            return
        client_x = event_client_x(event)
        if client_x is None:
            return
        rect = self.measure()
        if rect is None:
            return
        position = compute_position(client_x, rect.left, rect.width)
        if position is not None:
            self._position = position

    def handle_release(self, event: Optional[InputEvent] = None):
        self.end_drag()

    # ==========================================================================
    # Lifecycle
    # ==========================================================================

    def reset(self):
        self.end_drag()
        self._position = DEFAULT_POSITION

    def close(self):
        """Teardown of the owning view."""
        self.end_drag()
