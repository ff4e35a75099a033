"""Component referring to a client key binding."""

from __future__ import annotations

from attrs import define

from .base import BaseComponent
from .types import ComponentMap


@define(slots=True, eq=False)
class KeybindComponent(BaseComponent):
    """Component showing the key bound to a client action.

    The binding is resolved by the client; here the identifier itself is the
    rendered text.

    Attributes:
        keybind: Key binding identifier such as ``"key.jump"``.
    """

    keybind: str

    def get_string(self) -> str:
        return self.keybind

    def contents_map(self) -> ComponentMap:
        return {"keybind": self.keybind}
