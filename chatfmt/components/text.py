"""Component holding literal text."""

from __future__ import annotations

from attrs import define

from .base import BaseComponent
from .types import ComponentMap


@define(slots=True, eq=False)
class TextComponent(BaseComponent):
    """Component rendering a literal string.

    Attributes:
        text: Text shown as is.
    """

    text: str = ""

    def get_string(self) -> str:
        return self.text

    def contents_map(self) -> ComponentMap:
        return {"text": self.text}
