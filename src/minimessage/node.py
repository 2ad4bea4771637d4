from dataclasses import dataclass, field
from typing import Iterator

from .style import Style


@dataclass(slots=True)
class TextNode:
    # Note: a node with empty content and children only is a container,
    # used for the document root and for gradient output
    content: str = ""
    style: Style = field(default_factory=Style)
    children: list["TextNode"] = field(default_factory=list)

    def walk(self) -> Iterator["TextNode"]:
        """Yield this node and every descendant in document order."""
        yield self
        for child in self.children:
            yield from child.walk()

    def plain_text(self) -> str:
        return "".join(node.content for node in self.walk())
