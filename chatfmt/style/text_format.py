"""Formatting attributes shared by every component."""

from __future__ import annotations

from attrs import define, field

from .chat_style import ChatStyle
from .colour import Colour
from .types import FormatMap, StyleList, StyleMap


@define(slots=True)
class TextFormat:
    """Colour, font and toggle settings of a single component.

    Every attribute is optional. A toggle missing from ``styles`` is unset,
    which is different from a toggle explicitly set to ``False``: only
    unset values are filled in by ``inherit_from``.

    Attributes:
        colour: Text colour if set.
        font: Resource name of the font if set.
        styles: Explicitly set toggles.
    """

    colour: Colour | None = None
    font: str | None = None
    styles: StyleMap = field(factory=dict)

    def get_style(self, style: ChatStyle) -> bool | None:
        """Return the value of ``style`` or ``None`` when unset."""

        return self.styles.get(style)

    def set_style(self, style: ChatStyle, value: bool | None) -> None:
        """Set ``style`` to ``value``; ``None`` clears the toggle."""

        if value is None:
            self.styles.pop(style, None)
        else:
            self.styles[style] = bool(value)

    def get_styles(self, value: bool = True) -> StyleList:
        """Return toggles explicitly set to ``value`` in enumeration order."""

        return [style for style in ChatStyle if self.styles.get(style) is value]

    def merge(self, other: TextFormat) -> None:
        """Overwrite local attributes with every attribute ``other`` sets."""

        if other.colour is not None:
            self.colour = other.colour
        if other.font is not None:
            self.font = other.font
        self.styles.update(other.styles)

    def inherit_from(self, parent: TextFormat) -> None:
        """Copy attributes from ``parent`` that are unset locally."""

        if self.colour is None:
            self.colour = parent.colour
        if self.font is None:
            self.font = parent.font
        for style, value in parent.styles.items():
            self.styles.setdefault(style, value)

    def clone(self) -> TextFormat:
        """Return an independent copy of this format."""

        return TextFormat(self.colour, self.font, dict(self.styles))

    def as_map(self) -> FormatMap:
        """Return the attributes that are set, keyed by their map names."""

        data: FormatMap = {}
        if self.colour is not None:
            data["color"] = self.colour.as_value()
        for style in ChatStyle:
            value = self.styles.get(style)
            if value is not None:
                data[style.key] = value
        if self.font is not None:
            data["font"] = self.font
        return data
