"""Core framework components for Fruit Rush."""

from .state import Phase, PhaseMachine
from .events import EventBus, Event, EventType
from .geometry import Rect, overlaps, is_placeable

__all__ = [
    "Phase",
    "PhaseMachine",
    "EventBus",
    "Event",
    "EventType",
    "Rect",
    "overlaps",
    "is_placeable",
]
