"""Colour values used by text formats."""

from __future__ import annotations

import re

from attrs import field, frozen

from .chat_style import LEGACY_MARKER

# Legacy palette: name -> (code character, canonical RGB value).
PALETTE: dict[str, tuple[str, int]] = {
    "black": ("0", 0x000000),
    "dark_blue": ("1", 0x0000AA),
    "dark_green": ("2", 0x00AA00),
    "dark_aqua": ("3", 0x00AAAA),
    "dark_red": ("4", 0xAA0000),
    "dark_purple": ("5", 0xAA00AA),
    "gold": ("6", 0xFFAA00),
    "gray": ("7", 0xAAAAAA),
    "dark_gray": ("8", 0x555555),
    "blue": ("9", 0x5555FF),
    "green": ("a", 0x55FF55),
    "aqua": ("b", 0x55FFFF),
    "red": ("c", 0xFF5555),
    "light_purple": ("d", 0xFF55FF),
    "yellow": ("e", 0xFFFF55),
    "white": ("f", 0xFFFFFF),
}

# Legacy code that starts an RGB escape sequence.
HEX_CODE = "x"

_HEX_RE = re.compile(r"#([0-9a-fA-F]{6})")


def _check_rgb(instance: Colour, attribute: object, value: int) -> None:
    """Reject RGB values outside the 24-bit range."""

    if not 0 <= value <= 0xFFFFFF:
        raise ValueError(f"RGB value out of range: {value!r}")


def _check_name(
    instance: Colour, attribute: object, value: str | None
) -> None:
    """Only accept palette names, paired with their canonical RGB value."""

    if value is None:
        return
    if value not in PALETTE:
        raise ValueError(f"Unknown palette colour {value!r}")
    if PALETTE[value][1] != instance.rgb:
        raise ValueError(
            f"Palette colour {value!r} is {PALETTE[value][1]:06x}, "
            f"not {instance.rgb:06x}"
        )


@frozen
class Colour:
    """Immutable text colour.

    A colour is either one of the named legacy palette entries or an
    arbitrary RGB value. Palette colours keep their name so they can be
    written back as a single legacy code.

    Attributes:
        rgb: 24-bit RGB value.
        name: Palette name, ``None`` for arbitrary RGB colours.
    """

    rgb: int = field(validator=_check_rgb)
    name: str | None = field(default=None, validator=_check_name)

    @classmethod
    def named(cls, name: str) -> Colour:
        """Return the palette colour called ``name`` (case-insensitive)."""

        key = name.lower()
        if key not in PALETTE:
            raise ValueError(f"Unknown palette colour {name!r}")
        return cls(PALETTE[key][1], key)

    @classmethod
    def of_rgb(cls, red: int, green: int, blue: int) -> Colour:
        """Build an RGB colour from its three channels."""

        for channel in (red, green, blue):
            if not 0 <= channel <= 0xFF:
                raise ValueError(f"Colour channel out of range: {channel!r}")
        return cls((red << 16) | (green << 8) | blue)

    @classmethod
    def of_hex(cls, value: str) -> Colour:
        """Build an RGB colour from a ``#rrggbb`` string."""

        match = _HEX_RE.fullmatch(value)
        if match is None:
            raise ValueError(f"Invalid hex colour {value!r}")
        return cls(int(match.group(1), 16))

    @classmethod
    def parse(cls, value: str) -> Colour:
        """Parse a map projection value back into a colour.

        Args:
            value: Palette name such as ``"red"`` or hex string such as
                ``"#1a2b3c"``.

        Returns:
            The parsed colour.

        Throws:
            ValueError: If ``value`` is neither form.
        """

        if value.startswith("#"):
            return cls.of_hex(value)
        return cls.named(value)

    def is_default_colour(self) -> bool:
        """Return whether this is a named palette colour."""

        return self.name is not None

    def hex_string(self) -> str:
        """Return the colour as six lowercase hex digits."""

        return f"{self.rgb:06x}"

    def as_value(self) -> str:
        """Return the value used for this colour in map projections."""

        if self.name is not None:
            return self.name
        return f"#{self.hex_string()}"

    def legacy_token(self, marker: str = LEGACY_MARKER) -> str:
        """Return the legacy code sequence for this colour.

        Palette colours map to a single code. RGB colours use the ``x``
        escape followed by each hex digit behind its own marker.
        """

        if self.name is not None:
            return f"{marker}{PALETTE[self.name][0]}"
        digits = "".join(f"{marker}{digit}" for digit in self.hex_string())
        return f"{marker}{HEX_CODE}{digits}"

    def __str__(self) -> str:
        return self.legacy_token()
