from .color import (NAMED_COLORS, Color, NamedColor, Palette, from_name,
                    parse_hex, resolve_color)
from .config import ParserConfig
from .event import (ClickAction, ClickEvent, HoverAction, HoverEvent, Key,
                    ShowEntity, ShowItem, ShowText)
from .exception import (ColorError, InvalidHexError, MalformedTagError,
                        MiniMessageError, StackUnderflowError,
                        UnknownColorNameError, UnknownTagError)
from .gradient import apply_gradient, lerp_color
from .node import TextNode
from .parser import MiniMessageParser, parse
from .stack import StyleStack
from .style import Decoration, Style
from .typing import Undefined, undefined

__all__ = [
    "NAMED_COLORS",
    "ClickAction",
    "ClickEvent",
    "Color",
    "ColorError",
    "Decoration",
    "HoverAction",
    "HoverEvent",
    "InvalidHexError",
    "Key",
    "MalformedTagError",
    "MiniMessageError",
    "MiniMessageParser",
    "NamedColor",
    "Palette",
    "ParserConfig",
    "ShowEntity",
    "ShowItem",
    "ShowText",
    "StackUnderflowError",
    "Style",
    "StyleStack",
    "TextNode",
    "Undefined",
    "UnknownColorNameError",
    "UnknownTagError",
    "apply_gradient",
    "from_name",
    "lerp_color",
    "parse",
    "parse_hex",
    "resolve_color",
    "undefined",
]
