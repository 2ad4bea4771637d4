from __future__ import annotations


class Undefined:

    _inst = None

    def __new__(cls) -> Undefined:
        if cls._inst is None:
            cls._inst = super().__new__(cls)
        return cls._inst

    def __repr__(self) -> str:
        return "Undefined"

    def __copy__(self) -> Undefined:
        return self

    def __deepcopy__(self, memo) -> Undefined:
        return self


undefined = Undefined()
