"""Tests for the line-oriented block parser.

One class per detector, plus detector precedence, run boundaries and the
checklist key counter.
"""

import logging

import pytest

from lessonmark import Parser, parse
from lessonmark.nodes import (
    BlankLine,
    BlockQuote,
    Checklist,
    ChecklistItem,
    CodeSpan,
    Emphasis,
    FencedCode,
    Heading,
    List,
    Paragraph,
    Strong,
    Table,
    TableCell,
    TableRow,
    Text,
    ThematicBreak,
)
from lessonmark.text import extract_text


def _types(source: str) -> list[type]:
    return [type(block) for block in parse(source).children]


class TestEmptyInput:
    def test_empty_source_has_no_blocks(self) -> None:
        assert parse("").children == ()

    def test_parser_on_empty_source(self) -> None:
        assert Parser("").parse() == ()

    def test_single_newline_is_two_blank_lines(self) -> None:
        assert _types("\n") == [BlankLine, BlankLine]


class TestHeadings:
    """ATX headings, levels 1-4 only."""

    def test_level_one(self) -> None:
        (heading,) = parse("# A").children
        assert isinstance(heading, Heading)
        assert heading.level == 1
        assert extract_text(heading) == "A"

    def test_level_four(self) -> None:
        (heading,) = parse("#### A").children
        assert isinstance(heading, Heading)
        assert heading.level == 4

    def test_five_hashes_is_paragraph(self) -> None:
        (block,) = parse("##### A").children
        assert isinstance(block, Paragraph)
        assert extract_text(block) == "##### A"

    def test_no_space_is_paragraph(self) -> None:
        assert _types("#hashtag") == [Paragraph]

    def test_empty_heading(self) -> None:
        (heading,) = parse("## ").children
        assert isinstance(heading, Heading)
        assert heading.children == ()

    def test_inline_spans_in_heading(self) -> None:
        (heading,) = parse("## Use **hooks**").children
        assert heading.children == (Text(content="Use "), Strong(content="hooks"))

    def test_indented_hash_is_paragraph(self) -> None:
        assert _types(" # A") == [Paragraph]


class TestFencedCode:
    """Fenced code blocks, closed or open to the end of the document."""

    def test_basic_fence(self) -> None:
        (code,) = parse("```jsx\nconst a = 1;\nreturn a;\n```").children
        assert isinstance(code, FencedCode)
        assert code.info == "jsx"
        assert code.language == "jsx"
        assert code.lines == ("const a = 1;", "return a;")
        assert code.code == "const a = 1;\nreturn a;"

    def test_info_without_language(self) -> None:
        (code,) = parse("```\nx\n```").children
        assert code.info == ""
        assert code.language == ""

    def test_info_keeps_extra_words(self) -> None:
        (code,) = parse("```js title=app.js\n```").children
        assert code.info == "js title=app.js"
        assert code.language == "js"

    def test_lines_kept_verbatim(self) -> None:
        source = "```\n  # not a heading\n\n- not a list\n```"
        (code,) = parse(source).children
        assert code.lines == ("  # not a heading", "", "- not a list")

    def test_indented_opener(self) -> None:
        assert _types("   ```py\nx\n```") == [FencedCode]

    def test_closer_must_be_bare_marker(self) -> None:
        (code,) = parse("```\n```js\n```").children
        assert code.lines == ("```js",)

    def test_closer_may_have_surrounding_whitespace(self) -> None:
        assert _types("```\nx\n  ```  \nafter") == [FencedCode, Paragraph]

    def test_unterminated_fence_takes_rest(self) -> None:
        source = "intro\n```js\nlet a;\n---\n# Title"
        blocks = parse(source).children
        assert [type(b) for b in blocks] == [Paragraph, FencedCode]
        assert blocks[1].lines == ("let a;", "---", "# Title")
        assert blocks[1].location.end_lineno == 5

    def test_unterminated_fence_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="lessonmark"):
            parse("```\nopen")
        assert "Unterminated code fence" in caplog.text

    def test_code_lines_are_lexed(self) -> None:
        (code,) = parse("```js\nconst a = 1;\n\n```").children
        assert len(code.tokens) == len(code.lines)
        assert code.tokens[0][0].value == "const"
        assert code.tokens[1] == ()

    def test_empty_fence(self) -> None:
        (code,) = parse("```\n```").children
        assert code.lines == ()
        assert code.tokens == ()


class TestTables:
    """Pipe tables with a required delimiter row."""

    def test_header_alignments_and_row(self) -> None:
        (table,) = parse("| A | B |\n| - | :-: |\n| 1 | 2 |").children
        assert isinstance(table, Table)
        assert [extract_text(cell) for cell in table.head] == ["A", "B"]
        assert table.alignments == ("left", "center")
        assert len(table.body) == 1
        assert [extract_text(cell) for cell in table.body[0].cells] == ["1", "2"]

    def test_all_alignments(self) -> None:
        (table,) = parse("|a|b|c|\n|:--|:-:|--:|").children
        assert table.alignments == ("left", "center", "right")
        assert table.body == ()

    def test_cells_are_inline_tokenized(self) -> None:
        (table,) = parse("| `x` | *y* |\n|---|---|").children
        assert table.head == (
            TableCell(children=(CodeSpan(code="x"),)),
            TableCell(children=(Emphasis(content="y"),)),
        )

    def test_body_stops_at_non_pipe_line(self) -> None:
        source = "| A |\n|---|\n| 1 |\n| 2 |\ntext\n| 3 |"
        assert _types(source) == [Table, Paragraph, Paragraph]
        table = parse(source).children[0]
        assert table.body == (
            TableRow(cells=(TableCell(children=(Text(content="1"),)),)),
            TableRow(cells=(TableCell(children=(Text(content="2"),)),)),
        )

    def test_body_row_needs_both_outer_pipes(self) -> None:
        assert _types("| A |\n|---|\n| 1") == [Table, Paragraph]

    def test_missing_delimiter_is_paragraph(self) -> None:
        assert _types("| A | B |\n| 1 | 2 |") == [Paragraph, Paragraph]

    def test_header_at_end_of_document(self) -> None:
        assert _types("| A |") == [Paragraph]

    @pytest.mark.parametrize(
        "delimiter",
        ["| abc |", "|:|", "|| ", "| -x- |", "|-:-|", "---"],
    )
    def test_invalid_delimiters(self, delimiter: str) -> None:
        blocks = parse(f"| A |\n{delimiter}").children
        assert not any(isinstance(b, Table) for b in blocks)

    def test_ragged_rows_are_kept(self) -> None:
        (table,) = parse("| A | B |\n|---|---|\n| 1 | 2 | 3 |").children
        assert len(table.body[0].cells) == 3

    def test_location_covers_all_rows(self) -> None:
        (table,) = parse("| A |\n|---|\n| 1 |").children
        assert (table.location.lineno, table.location.end_lineno) == (1, 3)


class TestThematicBreaks:
    @pytest.mark.parametrize("line", ["---", "***", "___", "-----", "  ***  "])
    def test_breaks(self, line: str) -> None:
        assert _types(line) == [ThematicBreak]

    @pytest.mark.parametrize("line", ["--", "-*-", "- - -"])
    def test_not_breaks(self, line: str) -> None:
        assert ThematicBreak not in _types(line)

    def test_break_beats_list(self) -> None:
        assert _types("***\n* item") == [ThematicBreak, List]


class TestBlockQuotes:
    def test_run_of_quote_lines(self) -> None:
        (quote,) = parse("> one\n> **two**").children
        assert isinstance(quote, BlockQuote)
        assert quote.lines == ((Text(content="one"),), (Strong(content="two"),))

    def test_marker_without_space_is_paragraph(self) -> None:
        assert _types(">no space") == [Paragraph]

    def test_run_stops_at_other_line(self) -> None:
        assert _types("> a\nb\n> c") == [BlockQuote, Paragraph, BlockQuote]

    def test_nested_marker_is_literal(self) -> None:
        (quote,) = parse("> > inner").children
        assert quote.lines == ((Text(content="> inner"),),)


class TestChecklists:
    def test_items_and_defaults(self) -> None:
        (checklist,) = parse("- [ ] todo\n* [x] done\n- [X] also").children
        assert isinstance(checklist, Checklist)
        assert [item.checked for item in checklist.items] == [False, True, True]
        assert [extract_text(item) for item in checklist.items] == ["todo", "done", "also"]

    def test_first_item_key_is_zero(self) -> None:
        (checklist,) = parse("- [ ] a\n- [ ] b").children
        assert [item.key for item in checklist.items] == [0, 1]

    def test_keys_count_blocks_and_items(self) -> None:
        source = "# Setup\n- [ ] a\n- [x] b\nMiddle\n- [ ] c"
        blocks = parse(source).children
        assert [type(b) for b in blocks] == [Heading, Checklist, Paragraph, Checklist]
        assert [item.key for item in blocks[1].items] == [1, 2]
        assert [item.key for item in blocks[3].items] == [4]

    def test_keys_stable_across_parses(self) -> None:
        source = "Intro\n\n- [ ] one\n- [ ] two\n\n```\ncode\n```\n- [x] three"

        def keys() -> list[int]:
            return [
                item.key
                for block in parse(source).children
                if isinstance(block, Checklist)
                for item in block.items
            ]

        assert keys() == keys()
        assert keys() == sorted(set(keys()))

    def test_keys_unique_per_document(self) -> None:
        source = "- [ ] a\n\n- [ ] b\n\n- [ ] c"
        keys = [
            item.key
            for block in parse(source).children
            if isinstance(block, Checklist)
            for item in block.items
        ]
        assert len(keys) == len(set(keys)) == 3

    @pytest.mark.parametrize("line", ["- [] a", "- [y] a", "-[ ] a", "- [ ]a"])
    def test_not_checklist(self, line: str) -> None:
        assert Checklist not in _types(line)

    def test_empty_item_text(self) -> None:
        (checklist,) = parse("- [ ] ").children
        assert checklist.items == (ChecklistItem(key=0, checked=False, children=()),)


class TestLists:
    def test_unordered_run(self) -> None:
        (lst,) = parse("- a\n* b").children
        assert isinstance(lst, List)
        assert lst.ordered is False
        assert lst.items == ((Text(content="a"),), (Text(content="b"),))

    def test_ordered_run_drops_numbers(self) -> None:
        (lst,) = parse("1. first\n2. second\n10. tenth").children
        assert lst.ordered is True
        assert [extract_text(item) for item in lst.items] == ["first", "second", "tenth"]

    def test_checklist_line_inside_unordered_run(self) -> None:
        (lst,) = parse("- plain\n- [ ] task").children
        assert isinstance(lst, List)
        assert extract_text(lst.items[1]) == "[ ] task"

    def test_unordered_then_ordered_are_separate(self) -> None:
        assert _types("- a\n1. b") == [List, List]

    def test_list_stops_at_blank(self) -> None:
        assert _types("- a\n\n- b") == [List, BlankLine, List]

    def test_indented_marker_is_paragraph(self) -> None:
        assert _types("  - nested") == [Paragraph]

    def test_number_without_dot_space_is_paragraph(self) -> None:
        assert _types("2024 was a year") == [Paragraph]


class TestBlankLinesAndParagraphs:
    def test_blank_runs_not_collapsed(self) -> None:
        assert _types("a\n\n\n\nb") == [Paragraph, BlankLine, BlankLine, BlankLine, Paragraph]

    def test_whitespace_only_is_blank(self) -> None:
        assert _types("  \t ") == [BlankLine]

    def test_consecutive_lines_not_merged(self) -> None:
        blocks = parse("first line\nsecond line").children
        assert [extract_text(b) for b in blocks] == ["first line", "second line"]


class TestLocations:
    def test_block_ranges(self) -> None:
        source = "# T\n\n```\nx\n```\n- a\n- b"
        ranges = [(b.location.lineno, b.location.end_lineno) for b in parse(source).children]
        assert ranges == [(1, 1), (2, 2), (3, 5), (6, 7)]

    def test_source_file_recorded(self) -> None:
        doc = parse("# T", source_file="lessons/intro.md")
        assert doc.location.source_file == "lessons/intro.md"
        assert str(doc.children[0].location) == "lessons/intro.md:1"

    def test_document_covers_all_lines(self) -> None:
        doc = parse("a\nb\nc")
        assert (doc.location.lineno, doc.location.end_lineno) == (1, 3)

    def test_empty_document_covers_no_lines(self) -> None:
        doc = parse("")
        assert (doc.location.lineno, doc.location.end_lineno) == (1, 0)
        assert doc.location.line_count == 0

    def test_trailing_newline_adds_a_line(self) -> None:
        doc = parse("a\n")
        assert doc.location.line_count == len(doc.children) == 2


class TestPrecedence:
    """The first matching detector wins."""

    def test_fence_beats_everything(self) -> None:
        assert _types("```\n| a |\n|---|\n```") == [FencedCode]

    def test_table_beats_quote_and_list(self) -> None:
        assert _types("|- a |\n|---|") == [Table]

    def test_thematic_break_beats_unordered_list(self) -> None:
        assert _types("---") == [ThematicBreak]

    def test_checklist_beats_unordered_list(self) -> None:
        assert _types("- [ ] a\n- b") == [Checklist, List]
