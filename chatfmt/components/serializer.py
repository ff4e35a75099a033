"""Build component trees from their map projection."""

from __future__ import annotations

import logging
from typing import Any

from chatfmt.events import ClickEvent, HoverEvent
from chatfmt.style import ChatStyle, Colour, TextFormat

from .base import BaseComponent
from .keybind import KeybindComponent
from .text import TextComponent
from .translation import TranslationComponent
from .types import ComponentMap

logger = logging.getLogger(__name__)

# Keys that select the component variant.
CONTENT_KEYS = ("text", "translate", "with", "fallback", "keybind")

# Keys handled outside the variant selection.
META_KEYS = ("color", "font", "insertion", "clickEvent", "hoverEvent", "extra")

_STYLE_KEYS = {style.key: style for style in ChatStyle}


def _expect(data: ComponentMap, key: str, kind: type) -> Any:  # noqa: ANN401
    """Return ``data[key]`` after checking its type.

    Throws:
        ValueError: If the value is not an instance of ``kind``.
    """

    value = data[key]
    if not isinstance(value, kind):
        raise ValueError(
            f"{key!r} must be {kind.__name__}, got {type(value).__name__}"
        )
    return value


def _content_from_map(data: ComponentMap) -> BaseComponent:
    """Create the bare component selected by the content keys of ``data``."""

    if "text" in data:
        return TextComponent(_expect(data, "text", str))
    if "translate" in data:
        raw_args = _expect(data, "with", list) if "with" in data else []
        args = [component_from_map(arg) for arg in raw_args]
        fallback = None
        if "fallback" in data:
            fallback = _expect(data, "fallback", str)
        return TranslationComponent(
            _expect(data, "translate", str),
            args,
            fallback,
        )
    if "keybind" in data:
        return KeybindComponent(_expect(data, "keybind", str))
    return TextComponent("")


def _format_from_map(data: ComponentMap) -> TextFormat:
    """Read the formatting keys of ``data``."""

    text_format = TextFormat()
    if "color" in data:
        text_format.colour = Colour.parse(_expect(data, "color", str))
    if "font" in data:
        text_format.font = _expect(data, "font", str)
    for key, style in _STYLE_KEYS.items():
        if key in data:
            text_format.set_style(style, _expect(data, key, bool))
    return text_format


def component_from_map(data: Any) -> BaseComponent:  # noqa: ANN401
    """Build a component tree from its structured map projection.

    Args:
        data: A string (plain text), a list (first element is the root,
            the rest are appended to it) or a component map.

    Returns:
        The reconstructed component.

    Throws:
        ValueError: If ``data`` has an unsupported structure.
    """

    if isinstance(data, str):
        return TextComponent(data)

    if isinstance(data, list):
        if not data:
            raise ValueError("Empty component list")
        root = component_from_map(data[0])
        for item in data[1:]:
            root.append(component_from_map(item))
        return root

    if not isinstance(data, dict):
        raise ValueError(f"Unsupported component data: {type(data).__name__}")

    component = _content_from_map(data)
    component.text_format = _format_from_map(data)

    if "insertion" in data:
        component.insertion = _expect(data, "insertion", str)
    if "clickEvent" in data:
        component.click_event = ClickEvent.from_map(
            _expect(data, "clickEvent", dict)
        )
    if "hoverEvent" in data:
        component.hover_event = HoverEvent.from_map(
            _expect(data, "hoverEvent", dict)
        )
    children = _expect(data, "extra", list) if "extra" in data else []
    for child in children:
        component.append(component_from_map(child))

    # Report keys that have no meaning for components.
    unknown = set(data) - set(CONTENT_KEYS) - set(META_KEYS) - set(_STYLE_KEYS)
    if unknown:
        logger.debug("Ignoring unknown component keys: %s", sorted(unknown))
    return component
