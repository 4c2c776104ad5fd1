"""
Comparison Layer - Before/After Slider

Unifies pointer and touch drags into one normalized split position.
"""

from img_restore.comparison.events import (
    ContainerRect,
    EventTarget,
    ListenerRegistry,
    MouseInput,
    TouchInput,
    TouchPoint,
)
from img_restore.comparison.slider import (
    ComparisonSliderController,
    SliderSession,
    compute_position,
)

__all__ = [
    "ComparisonSliderController",
    "ContainerRect",
    "EventTarget",
    "ListenerRegistry",
    "MouseInput",
    "SliderSession",
    "TouchInput",
    "TouchPoint",
    "compute_position",
]
