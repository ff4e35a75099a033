"""Tests for click and hover payloads."""

import pytest

from chatfmt.components import TextComponent
from chatfmt.events import (
    ClickAction,
    ClickEvent,
    HoverAction,
    HoverEntity,
    HoverEvent,
    HoverItem,
)


def test_click_event_map_round_trip() -> None:
    event = ClickEvent(ClickAction.SUGGEST_COMMAND, "/msg ")
    assert event.as_map() == {"action": "suggest_command", "value": "/msg "}
    assert ClickEvent.from_map(event.as_map()) == event


def test_click_event_rejects_bad_input() -> None:
    with pytest.raises(ValueError):
        ClickEvent("teleport", "x")
    with pytest.raises(ValueError):
        ClickEvent.from_map({"action": "open_url"})


def test_hover_text_is_copied() -> None:
    """The tooltip keeps its own copy of the component."""

    tip = TextComponent("tip")
    event = HoverEvent.show_text(tip)
    tip.bold = True

    assert event.contents is not tip
    assert event.as_map() == {
        "action": "show_text",
        "contents": {"text": "tip"},
    }


def test_hover_item_and_entity_maps() -> None:
    item = HoverEvent(HoverAction.SHOW_ITEM, HoverItem("minecraft:stone", 3))
    entity = HoverEvent(
        "show_entity",
        HoverEntity("minecraft:pig", "uuid-1", TextComponent("Pig")),
    )

    assert item.as_map() == {
        "action": "show_item",
        "contents": {"id": "minecraft:stone", "count": 3},
    }
    assert entity.as_map() == {
        "action": "show_entity",
        "contents": {
            "type": "minecraft:pig",
            "id": "uuid-1",
            "name": {"text": "Pig"},
        },
    }
    assert HoverEvent.from_map(item.as_map()) == item
    assert HoverEvent.from_map(entity.as_map()) == entity


def test_hover_accepts_legacy_value_key() -> None:
    event = HoverEvent.from_map({"action": "show_text", "value": "tip"})
    assert event.contents == TextComponent("tip")


def test_hover_contents_must_match_action() -> None:
    with pytest.raises(ValueError):
        HoverEvent(HoverAction.SHOW_ITEM, TextComponent("tip"))
    with pytest.raises(ValueError):
        HoverEvent.from_map({"action": "show_text"})
    with pytest.raises(ValueError):
        HoverEvent.from_map({"action": "show_item", "contents": {"count": 1}})
    with pytest.raises(ValueError):
        HoverEvent.from_map({"action": "show_item", "contents": 5})
    with pytest.raises(ValueError):
        HoverEvent.from_map({"action": "show_entity", "contents": "pig"})
    with pytest.raises(ValueError):
        HoverEvent.from_map(
            {"action": "show_item", "contents": {"id": "a", "count": None}}
        )


def test_hover_events_are_hashable() -> None:
    first = HoverEvent.show_text(TextComponent("tip"))
    second = HoverEvent.show_text(TextComponent("tip"))
    assert first == second
    assert hash(first) == hash(second)
