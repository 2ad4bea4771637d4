from typing_extensions import Self


class MiniMessageError(ValueError):

    def __init__(self,
                 message: str,
                 markup: str | None = None,
                 pos: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.markup = markup
        self.pos = pos

    def locate(self, markup: str, pos: int) -> Self:
        """Attach the source position if it is not known yet."""
        if self.markup is None:
            self.markup = markup
            self.pos = pos
        return self

    def __str__(self) -> str:
        info = f"{self.__class__.__name__}: {self.message}"
        if self.markup is None or self.pos is None:
            return info
        detail = f"{self.markup}\n{' ' * self.pos}^"
        return f"{info}\n{detail}"


class MalformedTagError(MiniMessageError):
    pass


class UnknownTagError(MalformedTagError):
    pass


class StackUnderflowError(MiniMessageError):
    pass


class ColorError(MiniMessageError):
    pass


class UnknownColorNameError(ColorError):
    pass


class InvalidHexError(ColorError):
    pass
