"""Component referring to a translation key."""

from __future__ import annotations

from typing import Iterable

from attrs import define, field

from .base import BaseComponent
from .types import ComponentMap, ComponentTuple


def _clone_args(args: Iterable[BaseComponent]) -> ComponentTuple:
    """Take private copies of the translation arguments."""

    return tuple(arg.clone() for arg in args)


@define(slots=True, eq=False)
class TranslationComponent(BaseComponent):
    """Component rendering a translatable message.

    Translations are not looked up: the rendered text is the fallback when
    one is given, otherwise the key.

    Attributes:
        key: Translation key such as ``"chat.type.text"``.
        args: Components substituted into the translated message.
        fallback: Text used when the key has no translation.
    """

    key: str
    args: ComponentTuple = field(factory=tuple, converter=_clone_args)
    fallback: str | None = None

    def get_string(self) -> str:
        return self.fallback if self.fallback is not None else self.key

    def contents_map(self) -> ComponentMap:
        data: ComponentMap = {"translate": self.key}
        if self.args:
            data["with"] = [arg.as_map() for arg in self.args]
        if self.fallback is not None:
            data["fallback"] = self.fallback
        return data
