"""Component tree: shared behaviour, concrete variants and map parsing."""

from .base import BaseComponent
from .keybind import KeybindComponent
from .serializer import component_from_map
from .text import TextComponent
from .translation import TranslationComponent

__all__ = [
    "BaseComponent",
    "KeybindComponent",
    "TextComponent",
    "TranslationComponent",
    "component_from_map",
]
