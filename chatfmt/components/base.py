"""Shared component implementation.

A component is a node of formatted text. It owns a ``TextFormat``, optional
interaction metadata and an ordered list of child components ("siblings")
that extend or override its formatting. Concrete variants only decide how
their content is rendered; the tree, inheritance and serialization logic
lives here.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable

from attrs import define, evolve, field

from chatfmt.events import ClickEvent, HoverEvent
from chatfmt.style import LEGACY_MARKER, ChatStyle, Colour, TextFormat

from .types import ComponentList, ComponentMap, ComponentSink, ComponentTuple

logger = logging.getLogger(__name__)


def _require_format(
    instance: BaseComponent, attribute: object, value: TextFormat | None
) -> None:
    """Refuse to store a missing text format."""

    if value is None:
        raise ValueError("text_format must not be None")


def _freeze(value: Any) -> Any:  # noqa: ANN401
    """Turn a map projection into a hashable structure."""

    if isinstance(value, dict):
        return frozenset((key, _freeze(item)) for key, item in value.items())
    if isinstance(value, (list, tuple)):
        return tuple(_freeze(item) for item in value)
    return value


@define(slots=True, eq=False)
class BaseComponent:
    """Node of a formatted text tree.

    Subclasses provide ``get_string`` and ``contents_map``. Two components
    are equal when their map projections are equal, whatever their classes.

    Attributes:
        text_format: Formatting owned by this component.
        insertion: Text inserted into the chat input on shift-click.
        click_event: Action performed on click.
        hover_event: Tooltip shown on hover.
    """

    text_format: TextFormat = field(
        factory=TextFormat, kw_only=True, validator=_require_format
    )
    insertion: str | None = field(default=None, kw_only=True)
    click_event: ClickEvent | None = field(default=None, kw_only=True)
    hover_event: HoverEvent | None = field(default=None, kw_only=True)
    _siblings: ComponentList = field(factory=list, init=False, repr=False)

    # Content hooks.

    def get_string(self) -> str:
        """Return the literal text this component renders as."""

        raise NotImplementedError

    def contents_map(self) -> ComponentMap:
        """Return the map entries describing this component's content."""

        raise NotImplementedError

    # Formatting accessors.

    @property
    def colour(self) -> Colour | None:
        return self.text_format.colour

    @colour.setter
    def colour(self, colour: Colour | None) -> None:
        self.text_format.colour = colour

    @property
    def font(self) -> str | None:
        return self.text_format.font

    @font.setter
    def font(self, font: str | None) -> None:
        self.text_format.font = font

    @property
    def bold(self) -> bool | None:
        return self.text_format.get_style(ChatStyle.BOLD)

    @bold.setter
    def bold(self, bold: bool | None) -> None:
        self.text_format.set_style(ChatStyle.BOLD, bold)

    @property
    def italic(self) -> bool | None:
        return self.text_format.get_style(ChatStyle.ITALIC)

    @italic.setter
    def italic(self, italic: bool | None) -> None:
        self.text_format.set_style(ChatStyle.ITALIC, italic)

    @property
    def underlined(self) -> bool | None:
        return self.text_format.get_style(ChatStyle.UNDERLINED)

    @underlined.setter
    def underlined(self, underlined: bool | None) -> None:
        self.text_format.set_style(ChatStyle.UNDERLINED, underlined)

    @property
    def strikethrough(self) -> bool | None:
        return self.text_format.get_style(ChatStyle.STRIKETHROUGH)

    @strikethrough.setter
    def strikethrough(self, strikethrough: bool | None) -> None:
        self.text_format.set_style(ChatStyle.STRIKETHROUGH, strikethrough)

    @property
    def obfuscated(self) -> bool | None:
        return self.text_format.get_style(ChatStyle.OBFUSCATED)

    @obfuscated.setter
    def obfuscated(self, obfuscated: bool | None) -> None:
        self.text_format.set_style(ChatStyle.OBFUSCATED, obfuscated)

    # Tree operations.

    @property
    def siblings(self) -> ComponentTuple:
        """Children of this component in document order (read-only)."""

        return tuple(self._siblings)

    def has_siblings(self) -> bool:
        return bool(self._siblings)

    def append(
        self,
        item: BaseComponent | str,
        text_format: TextFormat | None = None,
    ) -> BaseComponent:
        """Append a child and return ``self`` for chaining.

        Args:
            item: Component to append as a deep copy, or literal text that
                becomes a new text component.
            text_format: Format of the new text component when ``item`` is a
                string. The format is copied.

        Returns:
            This component.

        Throws:
            TypeError: If ``item`` is neither a component nor a string, or
                if a format is given together with a component.
        """

        if isinstance(item, BaseComponent):
            if text_format is not None:
                raise TypeError("text_format only applies to literal text")
            self._siblings.append(item.clone())
        elif isinstance(item, str):
            from .text import TextComponent

            if text_format is None:
                text_format = TextFormat()
            self._siblings.append(
                TextComponent(item, text_format=text_format.clone())
            )
        else:
            raise TypeError(f"Cannot append {type(item).__name__}")
        return self

    def extend(self, items: Iterable[BaseComponent | str]) -> BaseComponent:
        """Append every item of ``items`` in order."""

        for item in items:
            self.append(item)
        return self

    def clear_siblings(self) -> None:
        self._siblings.clear()

    def inherit_from(self, parent: BaseComponent) -> None:
        """Fill unset attributes of this component from ``parent``.

        Attributes already set locally are kept. ``parent`` is not modified.
        """

        self.text_format.inherit_from(parent.text_format)
        if self.insertion is None:
            self.insertion = parent.insertion
        if self.click_event is None:
            self.click_event = parent.click_event
        if self.hover_event is None:
            self.hover_event = parent.hover_event

    def merge(self, other: BaseComponent) -> None:
        """Absorb every attribute ``other`` sets.

        When ``other`` has children they replace the children of this
        component as deep copies.
        """

        if other.has_siblings():
            children = list(other._siblings)
            self.clear_siblings()
            for sibling in children:
                self.append(sibling)

        self.text_format.merge(other.text_format)

        if other.insertion is not None:
            self.insertion = other.insertion
        if other.click_event is not None:
            self.click_event = other.click_event
        if other.hover_event is not None:
            self.hover_event = other.hover_event

    def clone(self) -> BaseComponent:
        """Return a deep copy of this component and its children.

        Event payloads are immutable and shared with the copy.
        """

        copy = evolve(self, text_format=self.text_format.clone())
        for sibling in self._siblings:
            copy._siblings.append(sibling.clone())
        return copy

    # Derived views.

    def to_flat_list(self) -> ComponentList:
        """Return the tree as a list of childless, fully resolved components.

        The list follows a pre-order walk. Each element carries the closest
        value set on itself or its ancestors for every attribute. The tree
        is copied first and left untouched.
        """

        components: ComponentList = []
        _add_separated_components(self.clone(), components.append)
        logger.debug("Flattened component into %d parts", len(components))
        return components

    def to_legacy_string(self, marker: str = LEGACY_MARKER) -> str:
        """Encode the flattened tree with inline legacy formatting codes.

        Insertion, events and font are not representable and are dropped.

        Args:
            marker: Character introducing each formatting code.

        Returns:
            The legacy encoded text.
        """

        parts: list[str] = []
        for component in self.to_flat_list():
            fmt = component.text_format
            if fmt.colour is not None:
                parts.append(fmt.colour.legacy_token(marker))
            for style in fmt.get_styles(True):
                parts.append(style.legacy_token(marker))
            parts.append(component.get_string())
        return "".join(parts)

    def to_plain_string(self) -> str:
        """Return the text of the whole tree without any formatting."""

        return "".join(part.get_string() for part in self.to_flat_list())

    def as_map(self) -> ComponentMap:
        """Return the structured projection of this component.

        Children are mapped as they are under ``extra``; the tree is not
        flattened.
        """

        data = self.contents_map()
        data.update(self.text_format.as_map())
        if self.insertion is not None:
            data["insertion"] = self.insertion
        if self.click_event is not None:
            data["clickEvent"] = self.click_event.as_map()
        if self.hover_event is not None:
            data["hoverEvent"] = self.hover_event.as_map()
        if self._siblings:
            data["extra"] = [sibling.as_map() for sibling in self._siblings]
        return data

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, BaseComponent):
            return NotImplemented
        return self.as_map() == other.as_map()

    def __hash__(self) -> int:
        return hash(_freeze(self.as_map()))


def _add_separated_components(
    parent: BaseComponent, sink: ComponentSink
) -> None:
    """Emit ``parent`` and its resolved descendants, detaching children."""

    sink(parent)
    for child in parent._siblings:
        child.inherit_from(parent)
        _add_separated_components(child, sink)
    parent.clear_siblings()
