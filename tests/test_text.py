"""Tests for lessonmark.text.extract_text."""

from lessonmark import extract_text, parse, tokenize
from lessonmark.location import SourceLocation
from lessonmark.nodes import BlankLine, Image, Link, Strong, Text, ThematicBreak


class TestInlines:
    def test_markers_dropped(self) -> None:
        assert extract_text(tokenize("a **b** *c* ~~d~~ `e`")) == "a b c d e"

    def test_link_and_image(self) -> None:
        assert extract_text(Link(text="docs", url="u")) == "docs"
        assert extract_text(Image(alt="logo", url="u")) == "logo"

    def test_empty_tuple(self) -> None:
        assert extract_text(()) == ""

    def test_list_of_spans(self) -> None:
        assert extract_text([Text("a"), Strong("b")]) == "ab"


class TestBlocks:
    def test_heading(self) -> None:
        assert extract_text(parse("# Hello **World**").children[0]) == "Hello World"

    def test_quote_lines(self) -> None:
        assert extract_text(parse("> a\n> *b*").children[0]) == "a\nb"

    def test_list_items(self) -> None:
        assert extract_text(parse("1. one\n2. two").children[0]) == "one\ntwo"

    def test_checklist(self) -> None:
        assert extract_text(parse("- [ ] a\n- [x] b").children[0]) == "a\nb"

    def test_table(self) -> None:
        table = parse("| A | B |\n|---|---|\n| 1 | 2 |").children[0]
        assert extract_text(table) == "A B\n1 2"

    def test_code(self) -> None:
        assert extract_text(parse("```\nx = 1\ny\n```").children[0]) == "x = 1\ny"

    def test_break_and_blank(self) -> None:
        loc = SourceLocation(1, 1)
        assert extract_text(ThematicBreak(location=loc)) == ""
        assert extract_text(BlankLine(location=loc)) == ""

    def test_document(self) -> None:
        assert extract_text(parse("# T\n\ntext")) == "T\n\ntext"
