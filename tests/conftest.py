"""Shared fixtures for component tests."""

from __future__ import annotations

import pytest

from chatfmt.components import TextComponent
from chatfmt.style import Colour


@pytest.fixture
def red() -> Colour:
    return Colour.named("red")


@pytest.fixture
def blue() -> Colour:
    return Colour.named("blue")


@pytest.fixture
def nested_tree(red: Colour, blue: Colour) -> TextComponent:
    """Root (red) -> child (bold, no colour) -> grandchild (blue)."""

    grandchild = TextComponent("c")
    grandchild.colour = blue

    child = TextComponent("b")
    child.bold = True
    child.append(grandchild)

    root = TextComponent("a")
    root.colour = red
    root.append(child)
    return root
