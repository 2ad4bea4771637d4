from uuid import UUID

import pytest

from minimessage import (ClickAction, ClickEvent, Color, InvalidHexError, Key,
                         MalformedTagError, MiniMessageParser, Palette,
                         ParserConfig, ShowEntity, ShowItem, ShowText,
                         StackUnderflowError, TextNode, UnknownColorNameError,
                         UnknownTagError, parse, undefined)
from minimessage.parser import Fragment, split_fragments

ENTITY_ID = "0c8c6c2e-91b1-4bd4-9e5a-4f1c2b7c9a10"


def test_split_fragments():
    testcases = [
        ("<bold>hi</>", [Fragment("bold", "hi", 0),
                         Fragment("/", "", 8)]),
        ("a<<b>c", [Fragment(None, "a", 0),
                    Fragment("b", "c", 2)]),
        ("<b>1 > 0", [Fragment("b", "1 > 0", 0)]),
        ("", []),
    ]
    for markup, expected in testcases:
        assert list(split_fragments(markup)) == expected


def test_bold():
    root = parse("<bold>hi</>")
    assert root.content == ""
    assert len(root.children) == 1
    node = root.children[0]
    assert node.content == "hi"
    assert node.style.bold is True
    for name in ("italic", "underlined", "strikethrough", "obfuscated"):
        assert getattr(node.style, name) is undefined
    assert node.style.color == Palette.WHITE
    assert node.style.click_event is None
    assert node.style.hover_event is None


def test_root_style():
    root = parse("<italic>x", ParserConfig(default_color="gold"))
    assert root.style.color == Palette.GOLD
    assert root.style.italic is undefined
    assert root.children[0].style.color == Palette.GOLD


def test_hex_color():
    root = parse("<#ff00ff>hi</>")
    assert root.children[0].style.color == Color(255, 0, 255)


def test_named_color():
    root = parse("<color:light_purple>x</>")
    assert root.children[0].style.color == Palette.LIGHT_PURPLE
    root = parse("<color:#00ff00>x</>")
    assert root.children[0].style.color == Color(0, 255, 0)


def test_nesting():
    root = parse("<bold><italic>x</></>")
    nodes = [node for node in root.children if node.content == "x"]
    assert len(nodes) == 1
    assert nodes[0].style.bold is True
    assert nodes[0].style.italic is True


def test_idempotent_decoration():
    once = parse("<bold>x</>").children[0]
    twice = parse("<bold><bold>x</></>").children[-1]
    assert twice.content == "x"
    assert twice.style == once.style


def test_positional_close():
    root = parse("<bold>a<italic>b</bold>c</italic>d",
                 ParserConfig(keep_close_content=True))
    contents = [(node.content, node.style.bold, node.style.italic)
                for node in root.children]
    # </bold> closes the italic scope, not the bold one
    assert contents == [
        ("a", True, undefined),
        ("b", True, True),
        ("c", True, undefined),
        ("d", undefined, undefined),
    ]


def test_emitted_nodes_are_snapshots():
    root = parse("<bold>a<#000000>b<u>c")
    a, b, c = root.children
    assert a.style.color == Palette.WHITE
    assert a.style.underlined is undefined
    assert b.style.color == Palette.BLACK
    assert b.style.underlined is undefined
    assert c.style.underlined is True
    assert a.style is not b.style


def test_leading_text():
    root = parse("Hello <bold>world")
    assert [node.content for node in root.children] == ["Hello ", "world"]
    assert root.children[0].style.bold is undefined
    assert root.plain_text() == "Hello world"


def test_unknown_tag_dropped():
    root = parse("<rainbow>lost<bold>kept</>")
    assert [node.content for node in root.children] == ["kept"]


def test_unknown_tag_strict(strict: ParserConfig):
    with pytest.raises(UnknownTagError):
        parse("<rainbow>x</>", strict)
    # still a malformed tag
    with pytest.raises(MalformedTagError):
        parse("<rainbow>x</>", strict)


def test_unknown_tag_still_opens_scope():
    with pytest.raises(StackUnderflowError):
        parse("<rainbow>x</></>")
    assert parse("<rainbow>x</>").children == []


def test_stack_underflow():
    with pytest.raises(StackUnderflowError):
        parse("</>")
    with pytest.raises(StackUnderflowError):
        parse("<bold>x</></>")


def test_missing_close_bracket():
    with pytest.raises(MalformedTagError) as exc_info:
        parse("<bold>x<italic")
    assert exc_info.value.pos == 7
    assert str(exc_info.value).endswith("<bold>x<italic\n       ^")


def test_errors_are_raised_with_position():
    with pytest.raises(UnknownColorNameError) as exc_info:
        parse("<bold>x<color:not_a_color>y")
    assert exc_info.value.pos == 7
    assert exc_info.value.markup == "<bold>x<color:not_a_color>y"
    with pytest.raises(InvalidHexError):
        parse("<#ff00f>x")
    with pytest.raises(MalformedTagError):
        parse("<color>x")


def test_close_tag_content_dropped():
    root = parse("<bold>a</> b")
    assert [node.content for node in root.children] == ["a"]
    root = parse("<bold>a<italic>b</>c</>d")
    assert root.plain_text() == "ab"


def test_close_tag_content_kept():
    config = ParserConfig(keep_close_content=True)
    root = parse("<bold>a</> b", config)
    assert [node.content for node in root.children] == ["a", " b"]
    assert root.children[1].style.bold is undefined
    # empty text after a close still emits nothing
    assert len(parse("<bold>a</>", config).children) == 1


def test_gradient():
    root = parse("<gradient:red:blue>ab</>")
    assert len(root.children) == 1
    container = root.children[0]
    assert container.content == ""
    first, second = container.children
    assert first.content == "a"
    assert first.style.color == Palette.RED
    # the last character sits at t = 1/2, not at the final stop
    assert second.style.color == Color(0xaa, 0x55, 0xaa)
    assert second.style.color != Palette.BLUE


def test_gradient_inclusive():
    root = parse("<gradient:red:blue>ab</>",
                 ParserConfig(gradient_inclusive=True))
    assert root.children[0].children[1].style.color == Palette.BLUE


def test_gradient_rounds_half_up():
    container = parse("<gradient:red:blue>abcd</>").children[0]
    # 212.5 and 127.5 both round up
    assert container.children[1].style.color == Color(213, 85, 128)
    assert container.children[3].style.color == Color(128, 85, 213)


def test_gradient_inherits_style():
    root = parse("<bold><click:run_command:/spawn><gradient:gold>abc")
    container = root.children[-1]
    assert len(container.children) == 3
    for child in container.children:
        assert child.style.color == Palette.GOLD
        assert child.style.bold is True
        assert child.style.click_event == ClickEvent.run_command("/spawn")


def test_gradient_bad_color():
    with pytest.raises(UnknownColorNameError):
        parse("<gradient:red:nope>ab")


def test_click():
    testcases = [
        ("change_page", "2", ClickAction.CHANGE_PAGE),
        ("copy_to_clipboard", "text", ClickAction.COPY_TO_CLIPBOARD),
        ("open_file", "a.txt", ClickAction.OPEN_FILE),
        ("open_url", "https://example.com/a", ClickAction.OPEN_URL),
        ("run_command", "/seed", ClickAction.RUN_COMMAND),
        ("suggest_command", "/msg ", ClickAction.SUGGEST_COMMAND),
    ]
    for action, value, expected in testcases:
        node = parse(f"<click:{action}:{value}>go</>").children[0]
        assert node.content == "go"
        assert node.style.click_event == ClickEvent(expected, value)


def test_hover_show_text():
    node = parse("<hover:show_text:hello>x</>").children[0]
    assert node.style.hover_event == ShowText(TextNode("hello"))


def test_hover_show_text_parsed():
    config = ParserConfig(parse_hover_text=True)
    event = parse("<hover:show_text:hello>x</>", config).children[0]
    assert isinstance(event.style.hover_event, ShowText)
    assert event.style.hover_event.text.plain_text() == "hello"


def test_hover_show_item():
    testcases = [
        ("diamond", ShowItem(Key("minecraft", "diamond"))),
        ("diamond:3", ShowItem(Key("minecraft", "diamond"), 3)),
        ("diamond:many", ShowItem(Key("minecraft", "diamond"), 0)),
        ("diamond:3:{Damage:1}",
         ShowItem(Key("minecraft", "diamond"), 3, "{Damage:1}")),
    ]
    for value, expected in testcases:
        node = parse(f"<hover:show_item:{value}>x</>").children[0]
        assert node.style.hover_event == expected


def test_hover_show_entity():
    node = parse(f"<hover:show_entity:zombie:{ENTITY_ID}>x").children[0]
    assert node.style.hover_event == ShowEntity(Key("minecraft", "zombie"),
                                                UUID(ENTITY_ID))

    node = parse(f"<hover:show_entity:zombie:{ENTITY_ID}:Steve>x").children[0]
    event = node.style.hover_event
    assert isinstance(event, ShowEntity)
    assert event.name is not None
    assert event.name.plain_text() == "Steve"


def test_hover_show_entity_bad():
    with pytest.raises(MalformedTagError):
        parse("<hover:show_entity:zombie:not-a-uuid>x")
    with pytest.raises(MalformedTagError):
        parse("<hover:show_entity:zombie>x")


def test_parser_object():
    parser = MiniMessageParser("<u>a</>")
    assert parser.parse() == parser.parse()
    assert parser.config == ParserConfig()


def test_error_locate_keeps_first_position():
    error = MalformedTagError("bad tag")
    assert error.locate("<a><b>", 3) is error
    error.locate("<b>", 0)
    assert (error.markup, error.pos) == ("<a><b>", 3)
    assert str(error) == "MalformedTagError: bad tag\n<a><b>\n   ^"
