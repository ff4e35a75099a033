"""Boolean style toggles understood by chat components."""

from __future__ import annotations

from enum import Enum

# Character that introduces a legacy formatting code.
LEGACY_MARKER = "&"


class ChatStyle(Enum):
    """Named boolean toggle of a text format.

    Member order is the order toggles are written in legacy strings and
    map projections.

    Attributes:
        key: Name of the toggle in the map projection.
        code: Legacy formatting code character.
    """

    BOLD = ("bold", "l")
    ITALIC = ("italic", "o")
    UNDERLINED = ("underlined", "n")
    STRIKETHROUGH = ("strikethrough", "m")
    OBFUSCATED = ("obfuscated", "k")

    def __init__(self, key: str, code: str) -> None:
        self.key = key
        self.code = code

    def legacy_token(self, marker: str = LEGACY_MARKER) -> str:
        """Return the legacy code for this toggle prefixed by ``marker``."""

        return f"{marker}{self.code}"

    @classmethod
    def from_key(cls, key: str) -> ChatStyle:
        """Look up a toggle by its map key.

        Args:
            key: Map key such as ``"bold"``.

        Returns:
            The matching toggle.

        Throws:
            ValueError: If no toggle uses ``key``.
        """

        for style in cls:
            if style.key == key:
                return style
        raise ValueError(f"Unknown chat style {key!r}")

    def __str__(self) -> str:
        return self.legacy_token()
