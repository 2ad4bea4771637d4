import re
from dataclasses import dataclass
from types import MappingProxyType
from typing import Final, Mapping

from typing_extensions import Self

from .exception import InvalidHexError, UnknownColorNameError


@dataclass(frozen=True)
class Color:
    """An opaque RGB color, one byte per channel."""

    r: int
    g: int
    b: int

    HEX_PATTERN = re.compile(r"#([0-9a-fA-F]{6})")

    def __post_init__(self) -> None:
        for channel in (self.r, self.g, self.b):
            if not isinstance(channel, int) or not 0 <= channel <= 255:
                raise ValueError(f"Invalid color channel: {channel!r}")

    @classmethod
    def of(cls, r: int, g: int, b: int) -> Self:
        return cls(r, g, b)

    @classmethod
    def from_hex(cls, token: str) -> "Color":
        return parse_hex(token)

    @property
    def hex(self) -> str:
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return (self.r, self.g, self.b) == (other.r, other.g, other.b)

    def __hash__(self) -> int:
        return hash((self.r, self.g, self.b))

    def rgb(self) -> "Color":
        """Drop any name, keeping only the channels."""
        return Color(self.r, self.g, self.b)

    def __str__(self) -> str:
        return self.hex


# equal to any Color with the same channels
@dataclass(frozen=True, eq=False)
class NamedColor(Color):
    name: str

    def __str__(self) -> str:
        return self.name


def _named(name: str, code: str) -> NamedColor:
    rgb = parse_hex(code)
    return NamedColor(rgb.r, rgb.g, rgb.b, name)


def parse_hex(token: str) -> Color:
    match = Color.HEX_PATTERN.fullmatch(token)
    if match is None:
        raise InvalidHexError(f"Invalid hex color: {token!r}")
    value = int(match.group(1), 16)
    return Color((value >> 16) & 0xff, (value >> 8) & 0xff, value & 0xff)


_COLORS = [
    _named("black", "#000000"),
    _named("dark_blue", "#0000aa"),
    _named("dark_green", "#00aa00"),
    _named("dark_aqua", "#00aaaa"),
    _named("dark_red", "#aa0000"),
    _named("dark_purple", "#aa00aa"),
    _named("gold", "#ffaa00"),
    _named("gray", "#aaaaaa"),
    _named("dark_gray", "#555555"),
    _named("blue", "#5555ff"),
    _named("green", "#55ff55"),
    _named("aqua", "#55ffff"),
    _named("red", "#ff5555"),
    _named("light_purple", "#ff55ff"),
    _named("yellow", "#ffff55"),
    _named("white", "#ffffff"),
]

_ALIASES = {"grey": "gray", "dark_grey": "dark_gray"}


def _build_registry() -> Mapping[str, NamedColor]:
    names = {color.name: color for color in _COLORS}
    for alias, name in _ALIASES.items():
        names[alias] = names[name]
    return MappingProxyType(names)


# read-only after import
NAMED_COLORS: Final[Mapping[str, NamedColor]] = _build_registry()


class Palette:
    BLACK: Final = NAMED_COLORS["black"]
    DARK_BLUE: Final = NAMED_COLORS["dark_blue"]
    DARK_GREEN: Final = NAMED_COLORS["dark_green"]
    DARK_AQUA: Final = NAMED_COLORS["dark_aqua"]
    DARK_RED: Final = NAMED_COLORS["dark_red"]
    DARK_PURPLE: Final = NAMED_COLORS["dark_purple"]
    GOLD: Final = NAMED_COLORS["gold"]
    GRAY: Final = NAMED_COLORS["gray"]
    DARK_GRAY: Final = NAMED_COLORS["dark_gray"]
    BLUE: Final = NAMED_COLORS["blue"]
    GREEN: Final = NAMED_COLORS["green"]
    AQUA: Final = NAMED_COLORS["aqua"]
    RED: Final = NAMED_COLORS["red"]
    LIGHT_PURPLE: Final = NAMED_COLORS["light_purple"]
    YELLOW: Final = NAMED_COLORS["yellow"]
    WHITE: Final = NAMED_COLORS["white"]


def from_name(name: str) -> NamedColor:
    """Look up a registry color.

    Exact keys win; otherwise each color's display name is compared
    case-insensitively.
    """
    color = NAMED_COLORS.get(name)
    if color is not None:
        return color
    folded = name.casefold()
    for color in NAMED_COLORS.values():
        if str(color).casefold() == folded:
            return color
    raise UnknownColorNameError(f"Unknown color name: {name!r}")


def resolve_color(token: str) -> Color:
    if token.startswith("#"):
        return parse_hex(token)
    return from_name(token)
