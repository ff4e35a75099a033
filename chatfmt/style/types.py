"""Common type aliases for style structures."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .chat_style import ChatStyle  # noqa: F401


StyleMap = dict["ChatStyle", bool]
StyleList = list["ChatStyle"]
FormatMap = dict[str, Any]
