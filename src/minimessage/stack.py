from .exception import StackUnderflowError
from .style import Style


class StyleStack:
    """A stack of style snapshots for nested style scopes.

    Closing is positional: `pop` ends the most recent scope whatever its tag.
    """

    def __init__(self, base: Style) -> None:
        self.stack: list[Style] = [base.copy()]

    def __len__(self) -> int:
        return len(self.stack)

    @property
    def depth(self) -> int:
        return len(self.stack)

    @property
    def top(self) -> Style:
        return self.stack[-1]

    def push(self) -> Style:
        style = self.top.copy()
        self.stack.append(style)
        return style

    def pop(self) -> Style:
        if len(self.stack) <= 1:
            raise StackUnderflowError("Closing tag without an open scope")
        return self.stack.pop()
