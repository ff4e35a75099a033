"""Click and hover payloads attached to components."""

from .click_event import ClickAction, ClickEvent
from .hover_event import HoverAction, HoverEntity, HoverEvent, HoverItem

__all__ = [
    "ClickAction",
    "ClickEvent",
    "HoverAction",
    "HoverEntity",
    "HoverEvent",
    "HoverItem",
]
