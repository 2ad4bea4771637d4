from dataclasses import dataclass
from typing import Union

from .event import ClickAction, HoverAction
from .exception import MalformedTagError
from .style import Decoration


@dataclass(frozen=True, slots=True)
class CloseTag:
    # ignored, closing is positional
    name: str


@dataclass(frozen=True, slots=True)
class ColorTag:
    token: str


@dataclass(frozen=True, slots=True)
class DecorationTag:
    decoration: Decoration


@dataclass(frozen=True, slots=True)
class ClickTag:
    action: ClickAction
    value: str


@dataclass(frozen=True, slots=True)
class HoverTag:
    action: HoverAction
    value: str


@dataclass(frozen=True, slots=True)
class GradientTag:
    colors: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class UnknownTag:
    key: str


Tag = Union[CloseTag, ColorTag, DecorationTag, ClickTag, HoverTag,
            GradientTag, UnknownTag]

DECORATIONS = {
    "bold": Decoration.BOLD,
    "b": Decoration.BOLD,
    "italic": Decoration.ITALIC,
    "em": Decoration.ITALIC,
    "i": Decoration.ITALIC,
    "underlined": Decoration.UNDERLINED,
    "u": Decoration.UNDERLINED,
    "strikethrough": Decoration.STRIKETHROUGH,
    "st": Decoration.STRIKETHROUGH,
    "obfuscated": Decoration.OBFUSCATED,
    "obf": Decoration.OBFUSCATED,
}


def _arguments(key: str, count: int) -> list[str]:
    """Split `key` into its name and `count` arguments.

    The last argument keeps any further ``:``.
    """
    args = key.split(":", count)
    if len(args) <= count:
        raise MalformedTagError(
            f"Tag {args[0]!r} expects {count} argument(s): {key!r}")
    return args[1:]


def parse_tag(key: str) -> Tag:
    """Classify a tag key, first match wins:

    ``/...``, ``#rrggbb``, ``color:<name>``, decorations, ``click:...``,
    ``hover:...``, ``gradient:...``; anything else is unknown.
    """
    if key.startswith("/"):
        return CloseTag(key[1:])
    if key.startswith("#"):
        return ColorTag(key)
    if key.startswith("color"):
        name = key.split(":")[1] if ":" in key else ""
        if not name:
            raise MalformedTagError(f"Color tag requires a color: {key!r}")
        return ColorTag(name)
    if key in DECORATIONS:
        return DecorationTag(DECORATIONS[key])
    if key.startswith("click"):
        action, value = _arguments(key, 2)
        try:
            return ClickTag(ClickAction(action), value)
        except ValueError:
            raise MalformedTagError(
                f"Unknown click action: {action!r}") from None
    if key.startswith("hover"):
        action, value = _arguments(key, 2)
        try:
            return HoverTag(HoverAction(action), value)
        except ValueError:
            raise MalformedTagError(
                f"Unknown hover action: {action!r}") from None
    if key.startswith("gradient"):
        colors = tuple(key.split(":")[1:])
        if not colors or not all(colors):
            raise MalformedTagError(
                f"Gradient tag requires at least one color: {key!r}")
        return GradientTag(colors)
    return UnknownTag(key)
