"""Line-oriented block parser producing typed AST.

Walks the document one line at a time with an explicit cursor and builds
immutable (frozen) dataclass nodes.

Architecture:
The parser uses a mixin-based design for separation of concerns:
- `BlockParsingMixin`: Fenced code, headings, breaks, quotes, blanks, paragraphs
- `TableParsingMixin`: Pipe tables (one line of lookahead)
- `ListParsingMixin`: Checklists, unordered and ordered lists
- `InlineParsingMixin`: Inline spans for every prose line

Thread Safety:
- Parser produces immutable AST (frozen dataclasses)
- Configuration is read from ContextVar (thread-local)
- The checklist key counter is per-parser state, never module state

"""

from __future__ import annotations

from lessonmark.location import SourceLocation
from lessonmark.nodes import Block, Checklist
from lessonmark.parsing import (
    BlockParsingMixin,
    InlineParsingMixin,
    ListParsingMixin,
    TableParsingMixin,
)


class Parser(
    BlockParsingMixin,
    TableParsingMixin,
    ListParsingMixin,
    InlineParsingMixin,
):
    """Line-oriented parser for the lesson Markdown dialect.

    At each cursor position the block detectors are tried in a fixed
    order; the first that matches consumes one or more lines:

    1. fenced code
    2. table (header row + delimiter row lookahead)
    3. heading (1-4 #)
    4. thematic break
    5. block quote run
    6. checklist run
    7. unordered list run
    8. ordered list run
    9. blank line
    10. paragraph (fallback, one per line)

    Every round advances the cursor by at least one line, so parsing
    always terminates, and no input raises.

    Usage:
            >>> parser = Parser("# Hello\\n\\nWorld")
            >>> blocks = parser.parse()
            >>> blocks[0]
            Heading(location=..., level=1, children=(Text(content='Hello'),))

    Thread Safety:
        Parser instances are single-use and not thread-safe. Create one per
        parse operation. The resulting AST is immutable and thread-safe.

    """

    __slots__ = (
        "_source",
        "_source_file",
        "_lines",
        "_pos",
        # Next checklist key; advances once per block and once per checklist item
        "_next_key",
    )

    def __init__(
        self,
        source: str,
        source_file: str | None = None,
    ) -> None:
        """Initialize parser with source text.

        Configuration is read from ContextVar, not passed as parameters.
        Use set_parse_config() or parse_config_context() before creating
        a Parser if you need non-default configuration.

        Args:
            source: Markdown source text
            source_file: Optional source file path for locations

        """
        self._source = source
        self._source_file = source_file
        self._lines: list[str] = source.split("\n") if source else []
        self._pos = 0
        self._next_key = 0

    def parse(self) -> tuple[Block, ...]:
        """Parse source into AST blocks.

        Returns:
            Tuple of Block nodes in document order. Empty source gives ``()``.

        """
        blocks: list[Block] = []
        while self._pos < len(self._lines):
            block = self._parse_block()
            # Checklist items took their own keys; every other block takes one
            if not isinstance(block, Checklist):
                self._take_key()
            blocks.append(block)
        return tuple(blocks)

    def _parse_block(self) -> Block:
        """Parse one block at the cursor using the first matching detector."""
        line = self._lines[self._pos]

        if (block := self._try_fenced_code(line)) is not None:
            return block
        if (block := self._try_table(line)) is not None:
            return block
        if (block := self._try_heading(line)) is not None:
            return block
        if (block := self._try_thematic_break(line)) is not None:
            return block
        if (block := self._try_block_quote(line)) is not None:
            return block
        if (block := self._try_checklist(line)) is not None:
            return block
        if (block := self._try_unordered_list(line)) is not None:
            return block
        if (block := self._try_ordered_list(line)) is not None:
            return block
        if (block := self._try_blank_line(line)) is not None:
            return block
        return self._parse_paragraph(line)

    def _take_key(self) -> int:
        """Return the next checklist key and advance the counter."""
        key = self._next_key
        self._next_key += 1
        return key

    def _location(self, start: int) -> SourceLocation:
        """Location covering lines ``start`` up to the cursor (exclusive)."""
        return SourceLocation(
            lineno=start + 1,
            end_lineno=self._pos,
            source_file=self._source_file,
        )
