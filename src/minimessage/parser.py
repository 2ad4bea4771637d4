from typing import Iterator, NamedTuple

from .config import ParserConfig
from .exception import MalformedTagError, MiniMessageError
from .log import logger_wrapper
from .node import TextNode
from .resolver import TagResolver
from .stack import StyleStack
from .style import Style
from .tag import CloseTag, parse_tag

logger = logger_wrapper(__name__)


class Fragment(NamedTuple):
    # None for the text before the first tag
    key: str | None
    content: str
    pos: int


def split_fragments(markup: str) -> Iterator[Fragment]:
    """Split markup on ``<``, then each piece on its first ``>``.

    Content runs up to the next ``<``; a further ``>`` in it is literal.
    Text before the first ``<`` is not a tag, so it needs no ``>`` and is
    yielded with a `None` key; every later piece without ``>`` is malformed.
    """
    start = 0
    for index, part in enumerate(markup.split("<")):
        pos = start
        start += len(part) + 1
        if not part:
            continue
        if index == 0:
            yield Fragment(None, part, pos)
            continue
        key, sep, content = part.partition(">")
        if not sep:
            raise MalformedTagError("Tag is not closed by '>'", markup,
                                    pos - 1)
        yield Fragment(key, content, pos - 1)


class MiniMessageParser:

    def __init__(self,
                 markup: str,
                 config: ParserConfig | None = None) -> None:
        self.markup = markup
        self.config = config or ParserConfig()
        self.resolver = TagResolver(self.config, self.parse_nested)

    def parse_nested(self, markup: str) -> TextNode:
        return MiniMessageParser(markup, self.config).parse()

    def parse(self) -> TextNode:
        base = Style(color=self.config.color)
        stack = StyleStack(base)
        nodes: list[TextNode] = []

        for fragment in split_fragments(self.markup):
            try:
                node = self._feed(fragment, stack)
            except MiniMessageError as e:
                e.locate(self.markup, fragment.pos)
                raise
            if node is not None:
                nodes.append(node)

        logger.debug("Parsed {}: {} node(s), {} scope(s) open",
                     repr(self.markup), len(nodes), stack.depth - 1)
        return TextNode(style=base, children=nodes)

    def _feed(self, fragment: Fragment, stack: StyleStack) -> TextNode | None:
        if fragment.key is None:
            return TextNode(fragment.content, stack.top.copy())
        tag = parse_tag(fragment.key)
        if isinstance(tag, CloseTag):
            stack.pop()
        else:
            stack.push()
        return self.resolver.resolve(tag, fragment.content, stack.top)


def parse(markup: str, config: ParserConfig | None = None) -> TextNode:
    return MiniMessageParser(markup, config).parse()
