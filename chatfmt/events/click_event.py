"""Action performed when a component is clicked."""

from __future__ import annotations

from enum import Enum
from typing import Any

from attrs import field, frozen


class ClickAction(Enum):
    """Kinds of click actions."""

    OPEN_URL = "open_url"
    OPEN_FILE = "open_file"
    RUN_COMMAND = "run_command"
    SUGGEST_COMMAND = "suggest_command"
    CHANGE_PAGE = "change_page"
    COPY_TO_CLIPBOARD = "copy_to_clipboard"


@frozen
class ClickEvent:
    """Action performed when a component is clicked.

    Attributes:
        action: What the client does on click.
        value: Action argument such as the URL or the command line.
    """

    action: ClickAction = field(converter=ClickAction)
    value: str

    def as_map(self) -> dict[str, Any]:
        """Return the map projection of the event."""

        return {"action": self.action.value, "value": self.value}

    @classmethod
    def from_map(cls, data: dict[str, Any]) -> ClickEvent:
        """Build an event from its map projection.

        Throws:
            ValueError: If the action is unknown or the value is missing.
        """

        if "action" not in data or "value" not in data:
            raise ValueError(f"Click event needs action and value: {data!r}")
        return cls(data["action"], str(data["value"]))
