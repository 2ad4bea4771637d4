from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, NamedTuple, Union
from uuid import UUID

if TYPE_CHECKING:
    from .node import TextNode


class Key(NamedTuple):
    """A namespaced identifier such as ``minecraft:stone``."""

    namespace: str
    value: str

    DEFAULT_NAMESPACE = "minecraft"

    @classmethod
    def parse(cls, key: str) -> Key:
        if ":" in key:
            namespace, value = key.split(":", 1)
            return cls(namespace or cls.DEFAULT_NAMESPACE, value)
        return cls(cls.DEFAULT_NAMESPACE, key)

    def __str__(self) -> str:
        return f"{self.namespace}:{self.value}"


class ClickAction(Enum):
    CHANGE_PAGE = "change_page"
    COPY_TO_CLIPBOARD = "copy_to_clipboard"
    OPEN_FILE = "open_file"
    OPEN_URL = "open_url"
    RUN_COMMAND = "run_command"
    SUGGEST_COMMAND = "suggest_command"


@dataclass(frozen=True)
class ClickEvent:
    action: ClickAction
    value: str

    @classmethod
    def change_page(cls, value: str) -> ClickEvent:
        return cls(ClickAction.CHANGE_PAGE, value)

    @classmethod
    def copy_to_clipboard(cls, value: str) -> ClickEvent:
        return cls(ClickAction.COPY_TO_CLIPBOARD, value)

    @classmethod
    def open_file(cls, value: str) -> ClickEvent:
        return cls(ClickAction.OPEN_FILE, value)

    @classmethod
    def open_url(cls, value: str) -> ClickEvent:
        return cls(ClickAction.OPEN_URL, value)

    @classmethod
    def run_command(cls, value: str) -> ClickEvent:
        return cls(ClickAction.RUN_COMMAND, value)

    @classmethod
    def suggest_command(cls, value: str) -> ClickEvent:
        return cls(ClickAction.SUGGEST_COMMAND, value)


class HoverAction(Enum):
    SHOW_TEXT = "show_text"
    SHOW_ITEM = "show_item"
    SHOW_ENTITY = "show_entity"


@dataclass(frozen=True)
class ShowText:
    text: TextNode

    action = HoverAction.SHOW_TEXT


@dataclass(frozen=True)
class ShowItem:
    """Attributes:
        item: item type.
        count: stack size, 0 if omitted.
        nbt: raw binary tag payload, empty if omitted.
    """
    item: Key
    count: int = 0
    nbt: str = ""

    action = HoverAction.SHOW_ITEM


@dataclass(frozen=True)
class ShowEntity:
    type: Key
    id: UUID
    name: TextNode | None = None

    action = HoverAction.SHOW_ENTITY


HoverEvent = Union[ShowText, ShowItem, ShowEntity]
