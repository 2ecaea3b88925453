"""Tests for the public package surface."""

import pytest

import lessonmark
from lessonmark import Document, Parser, SourceLocation, parse, render


class TestPublicApi:
    def test_all_names_importable(self) -> None:
        for name in lessonmark.__all__:
            assert hasattr(lessonmark, name), name

    def test_version(self) -> None:
        assert lessonmark.__version__ == "0.1.0"

    def test_parse_returns_document(self) -> None:
        doc = parse("# Hi")
        assert isinstance(doc, Document)
        assert doc.location == SourceLocation(1, 1)

    def test_parse_matches_parser(self) -> None:
        source = "# T\n- [ ] a\n\n| x |\n|---|"
        assert parse(source).children == Parser(source).parse()

    def test_parse_is_value_equal_across_calls(self) -> None:
        source = "> q\n```js\nlet x;\n```\n1. a"
        assert parse(source) == parse(source)
        assert hash(parse(source)) == hash(parse(source))

    def test_nodes_are_frozen(self) -> None:
        doc = parse("# Hi")
        with pytest.raises(AttributeError):
            doc.children = ()  # type: ignore[misc]

    def test_parse_then_render(self) -> None:
        assert render(parse("Hello *there*")) == "<p>Hello <em>there</em></p>\n"
