"""Formatted chat text components with style inheritance."""

from .components import (
    BaseComponent,
    KeybindComponent,
    TextComponent,
    TranslationComponent,
    component_from_map,
)
from .events import (
    ClickAction,
    ClickEvent,
    HoverAction,
    HoverEntity,
    HoverEvent,
    HoverItem,
)
from .style import LEGACY_MARKER, ChatStyle, Colour, TextFormat

__all__ = [
    "LEGACY_MARKER",
    "BaseComponent",
    "ChatStyle",
    "ClickAction",
    "ClickEvent",
    "Colour",
    "HoverAction",
    "HoverEntity",
    "HoverEvent",
    "HoverItem",
    "KeybindComponent",
    "TextComponent",
    "TextFormat",
    "TranslationComponent",
    "component_from_map",
]
