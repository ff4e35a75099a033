"""Common type aliases for component structures."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable

if TYPE_CHECKING:
    from .base import BaseComponent  # noqa: F401


ComponentList = list["BaseComponent"]
ComponentTuple = tuple["BaseComponent", ...]
ComponentSink = Callable[["BaseComponent"], None]
ComponentMap = dict[str, Any]
