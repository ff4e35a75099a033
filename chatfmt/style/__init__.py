"""Style layer: toggles, colours and text formats."""

from .chat_style import LEGACY_MARKER, ChatStyle
from .colour import Colour
from .text_format import TextFormat

__all__ = ["LEGACY_MARKER", "ChatStyle", "Colour", "TextFormat"]
