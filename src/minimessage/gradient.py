import math
from typing import Sequence

from .color import Color
from .node import TextNode
from .style import Style


def lerp(t: float, a: int, b: int) -> int:
    # ties round up
    return math.floor(t * b + (1 - t) * a + 0.5)


def lerp_color(t: float, stops: Sequence[Color]) -> Color:
    """Interpolate across evenly spaced stops, `t` in [0, 1]."""
    if not stops:
        raise ValueError("Gradient requires at least one color")
    t = min(t, 1.0)
    if t == 1 or len(stops) == 1:
        return stops[-1].rgb()

    scaled = t * (len(stops) - 1)
    index = math.floor(scaled)
    local = scaled - index
    start, end = stops[index], stops[index + 1]
    return Color(lerp(local, start.r, end.r), lerp(local, start.g, end.g),
                 lerp(local, start.b, end.b))


def apply_gradient(content: str,
                   style: Style,
                   stops: Sequence[Color],
                   inclusive: bool = False) -> TextNode:
    """Split `content` into one node per character, colored along `stops`.

    By default character `i` of `n` sits at ``i / n``, so for ``n > 1`` the
    last character stops short of the final color. With `inclusive` it sits
    at ``i / (n - 1)`` instead.
    """
    n = len(content)
    span = n - 1 if inclusive and n > 1 else n
    children = [
        TextNode(char, style.with_color(lerp_color(i / span, stops)))
        for i, char in enumerate(content)
    ]
    return TextNode(style=style.copy(), children=children)
