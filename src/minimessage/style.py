from __future__ import annotations

import copy
from dataclasses import dataclass, fields
from enum import Enum
from typing import Iterable

from .color import Color
from .event import ClickEvent, HoverEvent
from .typing import Undefined, undefined


class Decoration(Enum):
    BOLD = "bold"
    ITALIC = "italic"
    UNDERLINED = "underlined"
    STRIKETHROUGH = "strikethrough"
    OBFUSCATED = "obfuscated"


@dataclass
class Style:
    """Defines the style of a text node.

    Attributes left as `undefined` are inherited from the outer context by
    whoever displays the text; they are not the same as ``False``.
    """

    color: Color | Undefined = undefined
    bold: bool | Undefined = undefined
    italic: bool | Undefined = undefined
    underlined: bool | Undefined = undefined
    strikethrough: bool | Undefined = undefined
    obfuscated: bool | Undefined = undefined
    click_event: ClickEvent | None = None
    hover_event: HoverEvent | None = None

    def copy(self) -> Style:
        return copy.deepcopy(self)

    def with_color(self, color: Color) -> Style:
        obj = self.copy()
        obj.color = color
        return obj

    def decorate(self, decoration: Decoration) -> None:
        setattr(self, decoration.value, True)

    def has(self, decoration: Decoration) -> bool:
        return getattr(self, decoration.value) is True

    def items(self) -> Iterable[tuple[str, object]]:
        for field in fields(self):
            value = getattr(self, field.name)
            if value is not undefined and value is not None:
                yield field.name, value

    def __str__(self) -> str:
        var_str = ", ".join(f"{k}={v}" for k, v in self.items())
        return f"Style({var_str})"
