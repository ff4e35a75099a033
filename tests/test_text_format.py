"""Tests for text format merging, inheritance and projection."""

from chatfmt.style import ChatStyle, Colour, TextFormat


def test_empty_format_maps_to_nothing() -> None:
    assert TextFormat().as_map() == {}


def test_single_toggle_maps_to_single_entry() -> None:
    fmt = TextFormat()
    fmt.set_style(ChatStyle.BOLD, True)
    assert fmt.as_map() == {"bold": True}


def test_false_is_kept_and_none_clears() -> None:
    """``False`` is an explicit value; ``None`` removes the toggle."""

    fmt = TextFormat()
    fmt.set_style(ChatStyle.ITALIC, False)
    assert fmt.get_style(ChatStyle.ITALIC) is False
    assert fmt.as_map() == {"italic": False}

    fmt.set_style(ChatStyle.ITALIC, None)
    assert fmt.get_style(ChatStyle.ITALIC) is None
    assert fmt.as_map() == {}


def test_get_styles_follows_enumeration_order() -> None:
    fmt = TextFormat()
    fmt.set_style(ChatStyle.OBFUSCATED, True)
    fmt.set_style(ChatStyle.ITALIC, False)
    fmt.set_style(ChatStyle.BOLD, True)
    assert fmt.get_styles(True) == [ChatStyle.BOLD, ChatStyle.OBFUSCATED]
    assert fmt.get_styles(False) == [ChatStyle.ITALIC]


def test_merge_overrides_set_values_only() -> None:
    target = TextFormat(Colour.named("red"), "minecraft:default")
    target.set_style(ChatStyle.BOLD, True)
    target.set_style(ChatStyle.ITALIC, True)

    source = TextFormat(Colour.named("blue"))
    source.set_style(ChatStyle.BOLD, False)

    target.merge(source)
    assert target.colour == Colour.named("blue")
    assert target.font == "minecraft:default"
    assert target.get_style(ChatStyle.BOLD) is False
    assert target.get_style(ChatStyle.ITALIC) is True


def test_merge_is_idempotent() -> None:
    target = TextFormat(font="uniform")
    source = TextFormat(Colour.of_hex("#123456"))
    source.set_style(ChatStyle.UNDERLINED, True)

    target.merge(source)
    once = target.clone()
    target.merge(source)
    assert target == once


def test_inherit_fills_unset_values_only() -> None:
    child = TextFormat(Colour.named("green"))
    child.set_style(ChatStyle.BOLD, False)

    parent = TextFormat(Colour.named("red"), "alt")
    parent.set_style(ChatStyle.BOLD, True)
    parent.set_style(ChatStyle.STRIKETHROUGH, True)

    child.inherit_from(parent)
    assert child.colour == Colour.named("green")
    assert child.font == "alt"
    assert child.get_style(ChatStyle.BOLD) is False
    assert child.get_style(ChatStyle.STRIKETHROUGH) is True
    # The parent is left alone.
    assert parent.colour == Colour.named("red")


def test_clone_is_independent() -> None:
    fmt = TextFormat()
    fmt.set_style(ChatStyle.BOLD, True)
    copy = fmt.clone()
    copy.set_style(ChatStyle.BOLD, None)
    assert fmt.get_style(ChatStyle.BOLD) is True


def test_map_projection_keys() -> None:
    fmt = TextFormat(Colour.of_hex("#1a2b3c"), "uniform")
    fmt.set_style(ChatStyle.OBFUSCATED, False)
    assert fmt.as_map() == {
        "color": "#1a2b3c",
        "obfuscated": False,
        "font": "uniform",
    }
