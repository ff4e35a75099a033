"""Tests for flattening and the legacy string encoding."""

from chatfmt.components import KeybindComponent, TextComponent
from chatfmt.events import ClickAction, ClickEvent
from chatfmt.style import Colour, TextFormat


def test_flatten_leaf_returns_copy_of_itself(red: Colour) -> None:
    component = TextComponent("solo", insertion="i")
    component.colour = red

    flat = component.to_flat_list()
    assert flat == [component]
    assert flat[0] is not component


def test_flatten_order_is_pre_order() -> None:
    root = TextComponent("r").append("c1").append("c2")
    flat = root.to_flat_list()

    assert [part.get_string() for part in flat] == ["r", "c1", "c2"]
    assert all(not part.has_siblings() for part in flat)


def test_flatten_depth_first(nested_tree: TextComponent) -> None:
    nested_tree.append("d")
    texts = [part.get_string() for part in nested_tree.to_flat_list()]
    assert texts == ["a", "b", "c", "d"]


def test_nearest_ancestor_wins(
    nested_tree: TextComponent, red: Colour, blue: Colour
) -> None:
    root, child, grandchild = nested_tree.to_flat_list()

    assert root.colour == red
    assert root.bold is None
    assert child.colour == red
    assert child.bold is True
    assert grandchild.colour == blue
    assert grandchild.bold is True


def test_flatten_leaves_tree_untouched(nested_tree: TextComponent) -> None:
    before = nested_tree.clone()
    nested_tree.to_flat_list()

    assert nested_tree == before
    assert nested_tree.siblings[0].colour is None
    assert nested_tree.siblings[0].has_siblings()


def test_flatten_propagates_metadata() -> None:
    click = ClickEvent(ClickAction.OPEN_URL, "https://example.org")
    root = TextComponent("r", insertion="top", click_event=click)
    root.append(TextComponent("c", insertion="own"))
    root.append("d")

    _, own, inherited = root.to_flat_list()
    assert own.insertion == "own"
    assert own.click_event == click
    assert inherited.insertion == "top"


def test_explicit_false_blocks_inheritance() -> None:
    root = TextComponent("r")
    root.italic = True
    child = TextComponent("c")
    child.italic = False
    root.append(child)

    assert [part.italic for part in root.to_flat_list()] == [True, False]


def test_legacy_palette_colour_and_toggle(red: Colour) -> None:
    component = TextComponent("hi")
    component.colour = red
    component.bold = True
    assert component.to_legacy_string() == "&c&lhi"


def test_legacy_rgb_colour() -> None:
    component = TextComponent("hi")
    component.colour = Colour.of_hex("#1a2b3c")
    component.underlined = True
    assert component.to_legacy_string() == "&x&1&a&2&b&3&c&nhi"


def test_legacy_toggles_in_enumeration_order() -> None:
    component = TextComponent("x")
    component.obfuscated = True
    component.italic = True
    component.strikethrough = False
    component.bold = True
    assert component.to_legacy_string() == "&l&o&kx"


def test_legacy_string_of_tree(nested_tree: TextComponent) -> None:
    assert nested_tree.to_legacy_string() == "&ca&c&lb&9&lc"


def test_legacy_string_custom_marker(red: Colour) -> None:
    component = TextComponent("a", text_format=TextFormat(red))
    component.append(KeybindComponent("key.jump"))
    assert component.to_legacy_string("§") == "§ca§ckey.jump"


def test_legacy_drops_metadata() -> None:
    component = TextComponent("plain", insertion="i")
    component.font = "uniform"
    assert component.to_legacy_string() == "plain"


def test_plain_string(nested_tree: TextComponent) -> None:
    assert nested_tree.to_plain_string() == "abc"
