from typing import Callable
from uuid import UUID

from .color import resolve_color
from .config import ParserConfig
from .event import (ClickEvent, HoverAction, HoverEvent, Key, ShowEntity,
                    ShowItem, ShowText)
from .exception import MalformedTagError, UnknownTagError
from .gradient import apply_gradient
from .log import logger_wrapper
from .node import TextNode
from .style import Style
from .tag import (ClickTag, CloseTag, ColorTag, DecorationTag, GradientTag,
                  HoverTag, Tag, UnknownTag)

logger = logger_wrapper(__name__)


class TagResolver:
    """Apply a tag to the current style and build the node it emits.

    `style` is the top of the style stack and is mutated in place; emitted
    nodes hold their own copy.
    """

    def __init__(self, config: ParserConfig,
                 parse: Callable[[str], TextNode]) -> None:
        self.config = config
        self.parse = parse

    def resolve(self, tag: Tag, content: str, style: Style) -> TextNode | None:
        match tag:
            case CloseTag():
                if not (content and self.config.keep_close_content):
                    return None
            case ColorTag(token):
                style.color = resolve_color(token)
            case DecorationTag(decoration):
                style.decorate(decoration)
            case ClickTag(action, value):
                style.click_event = ClickEvent(action, value)
            case HoverTag(action, value):
                style.hover_event = self.hover(action, value)
            case GradientTag(colors):
                stops = [resolve_color(color) for color in colors]
                return apply_gradient(content,
                                      style,
                                      stops,
                                      inclusive=self.config.gradient_inclusive)
            case UnknownTag(key):
                if self.config.strict:
                    raise UnknownTagError(f"Unknown tag: {key!r}")
                logger.warning("Dropped unknown tag {}", repr(key))
                return None
        return TextNode(content, style.copy())

    def hover(self, action: HoverAction, value: str) -> HoverEvent:
        match action:
            case HoverAction.SHOW_TEXT:
                if self.config.parse_hover_text:
                    return ShowText(self.parse(value))
                return ShowText(TextNode(value))
            case HoverAction.SHOW_ITEM:
                return self.show_item(value)
            case HoverAction.SHOW_ENTITY:
                return self.show_entity(value)

    @staticmethod
    def show_item(value: str) -> ShowItem:
        # _type_[:_count_[:_nbt_]]
        item, *rest = value.split(":", 2)
        if not item:
            raise MalformedTagError("show_item requires an item type")
        count = 0
        if rest:
            try:
                count = int(rest[0])
            except ValueError:
                count = 0
        nbt = rest[1] if len(rest) == 2 else ""
        return ShowItem(Key.parse(item), count, nbt)

    def show_entity(self, value: str) -> ShowEntity:
        # _type_:_uuid_[:_name_]
        args = value.split(":", 2)
        if len(args) < 2 or not args[0]:
            raise MalformedTagError(
                f"show_entity requires a type and an id: {value!r}")
        try:
            entity_id = UUID(args[1])
        except ValueError:
            raise MalformedTagError(
                f"Invalid entity id: {args[1]!r}") from None
        name = self.parse(args[2]) if len(args) == 3 else None
        return ShowEntity(Key.parse(args[0]), entity_id, name)
