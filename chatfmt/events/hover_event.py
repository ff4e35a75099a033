"""Tooltip shown when the cursor rests on a component."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any, Union

from attrs import field, frozen

if TYPE_CHECKING:
    from chatfmt.components.base import BaseComponent


class HoverAction(Enum):
    """Kinds of hover tooltips."""

    SHOW_TEXT = "show_text"
    SHOW_ITEM = "show_item"
    SHOW_ENTITY = "show_entity"


def _clone_optional(component: BaseComponent | None) -> BaseComponent | None:
    """Return a private copy of ``component`` so the payload stays fixed."""

    return component.clone() if component is not None else None


@frozen
class HoverItem:
    """Item shown by a ``show_item`` tooltip.

    Attributes:
        id: Namespaced item identifier.
        count: Stack size.
        tag: Serialized item data, if any.
    """

    id: str
    count: int = 1
    tag: str | None = None

    def as_map(self) -> dict[str, Any]:
        data: dict[str, Any] = {"id": self.id, "count": self.count}
        if self.tag is not None:
            data["tag"] = self.tag
        return data

    @classmethod
    def from_map(cls, data: dict[str, Any]) -> HoverItem:
        if "id" not in data:
            raise ValueError(f"Hover item without id: {data!r}")
        try:
            count = int(data.get("count", 1))
        except (TypeError, ValueError) as exc:
            raise ValueError(f"Invalid hover item count: {data!r}") from exc
        return cls(str(data["id"]), count, data.get("tag"))


@frozen
class HoverEntity:
    """Entity shown by a ``show_entity`` tooltip.

    Attributes:
        type: Namespaced entity type.
        id: Entity UUID as a string.
        name: Display name of the entity, if any.
    """

    type: str
    id: str
    name: BaseComponent | None = field(default=None, converter=_clone_optional)

    def as_map(self) -> dict[str, Any]:
        data: dict[str, Any] = {"type": self.type, "id": self.id}
        if self.name is not None:
            data["name"] = self.name.as_map()
        return data

    @classmethod
    def from_map(cls, data: dict[str, Any]) -> HoverEntity:
        from chatfmt.components.serializer import component_from_map

        if "type" not in data or "id" not in data:
            raise ValueError(f"Hover entity needs type and id: {data!r}")
        name = data.get("name")
        return cls(
            str(data["type"]),
            str(data["id"]),
            component_from_map(name) if name is not None else None,
        )


HoverContents = Union["BaseComponent", HoverItem, HoverEntity]


def _freeze_contents(contents: HoverContents) -> HoverContents:
    """Clone component contents; items and entities are already frozen."""

    if isinstance(contents, (HoverItem, HoverEntity)):
        return contents
    clone = getattr(contents, "clone", None)
    return clone() if clone is not None else contents


def _check_contents(
    instance: HoverEvent, attribute: object, value: HoverContents
) -> None:
    """Ensure the contents match the tooltip action."""

    from chatfmt.components.base import BaseComponent

    expected = {
        HoverAction.SHOW_TEXT: BaseComponent,
        HoverAction.SHOW_ITEM: HoverItem,
        HoverAction.SHOW_ENTITY: HoverEntity,
    }[instance.action]
    if not isinstance(value, expected):
        raise ValueError(
            f"{instance.action.value} expects {expected.__name__}, "
            f"got {type(value).__name__}"
        )


@frozen
class HoverEvent:
    """Tooltip shown when the cursor rests on a component.

    Attributes:
        action: Kind of tooltip.
        contents: Component, item or entity displayed by the tooltip.
    """

    action: HoverAction = field(converter=HoverAction)
    contents: HoverContents = field(
        converter=_freeze_contents, validator=_check_contents
    )

    @classmethod
    def show_text(cls, component: BaseComponent) -> HoverEvent:
        """Return a tooltip displaying ``component``."""

        return cls(HoverAction.SHOW_TEXT, component)

    def as_map(self) -> dict[str, Any]:
        """Return the map projection of the event."""

        return {"action": self.action.value, "contents": self.contents.as_map()}

    @classmethod
    def from_map(cls, data: dict[str, Any]) -> HoverEvent:
        """Build an event from its map projection.

        The older ``value`` key is accepted in place of ``contents`` for
        text tooltips.

        Throws:
            ValueError: If the action is unknown or the contents are missing.
        """

        from chatfmt.components.serializer import component_from_map

        action = HoverAction(data.get("action"))
        raw = data.get("contents", data.get("value"))
        if raw is None:
            raise ValueError(f"Hover event without contents: {data!r}")

        contents: HoverContents
        if action is HoverAction.SHOW_TEXT:
            contents = component_from_map(raw)
        elif not isinstance(raw, dict):
            raise ValueError(
                f"{action.value} contents must be a map: {raw!r}"
            )
        elif action is HoverAction.SHOW_ITEM:
            contents = HoverItem.from_map(raw)
        else:
            contents = HoverEntity.from_map(raw)
        return cls(action, contents)
