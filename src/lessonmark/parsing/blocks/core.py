"""Core block parsing for lessonmark.

Handles the single-line and run-based blocks: fenced code, headings,
thematic breaks, block quotes, blank lines and paragraphs.

Every ``_try_*`` detector receives the line under the cursor. It either
declines by returning None without moving the cursor, or consumes one or
more lines (advancing ``_pos``) and returns the finished block.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from lessonmark.config import get_parse_config
from lessonmark.lexer import lex
from lessonmark.nodes import (
    BlankLine,
    BlockQuote,
    FencedCode,
    Heading,
    Paragraph,
    ThematicBreak,
)
from lessonmark.parsing.charsets import (
    FENCE_MARKER,
    MAX_HEADING_LEVEL,
    QUOTE_PREFIX,
    THEMATIC_BREAK_CHARS,
    THEMATIC_BREAK_MIN,
)
from lessonmark.utils.logger import get_logger

if TYPE_CHECKING:
    from lessonmark.location import SourceLocation
    from lessonmark.nodes import Inline
    from lessonmark.tokens import Token

logger = get_logger(__name__)


class BlockParsingMixin:
    """Mixin for core block detectors.

    Required Host Attributes:
        - _lines: list[str]
        - _pos: int

    Required Host Methods:
        - _parse_inline(text) -> tuple[Inline, ...]
        - _location(start) -> SourceLocation

    """

    _lines: list[str]
    _pos: int

    if TYPE_CHECKING:

        def _parse_inline(self, text: str) -> tuple[Inline, ...]: ...

        def _location(self, start: int) -> SourceLocation: ...

    def _try_fenced_code(self, line: str) -> FencedCode | None:
        """Try to parse a fenced code block starting at line.

        The info string is whatever follows the opening marker. Lines are
        captured verbatim until a line that is only the marker; a missing
        closer means the block runs to the end of the document.
        """
        stripped = line.lstrip()
        if not stripped.startswith(FENCE_MARKER):
            return None

        start = self._pos
        info = stripped[len(FENCE_MARKER) :].strip()
        code_lines: list[str] = []
        closed = False

        self._pos += 1
        while self._pos < len(self._lines):
            current = self._lines[self._pos]
            self._pos += 1
            if current.strip() == FENCE_MARKER:
                closed = True
                break
            code_lines.append(current)

        location = self._location(start)
        if not closed:
            logger.debug("Unterminated code fence at line %s closed at end of document", location)

        tokens: tuple[tuple[Token, ...], ...] = ()
        if get_parse_config().highlight_code:
            tokens = tuple(lex(code_line) for code_line in code_lines)

        return FencedCode(
            location=location,
            info=info,
            lines=tuple(code_lines),
            tokens=tokens,
        )

    def _try_heading(self, line: str) -> Heading | None:
        """Try to parse an ATX heading (1-4 # followed by a space)."""
        level = 0
        while level < len(line) and line[level] == "#":
            level += 1

        if level == 0 or level > MAX_HEADING_LEVEL:
            return None
        if line[level : level + 1] != " ":
            return None

        start = self._pos
        self._pos += 1
        return Heading(
            location=self._location(start),
            level=level,  # type: ignore[arg-type]
            children=self._parse_inline(line[level + 1 :]),
        )

    def _try_thematic_break(self, line: str) -> ThematicBreak | None:
        """Try to parse a thematic break: 3+ of one of - * _ and nothing else."""
        stripped = line.strip()
        if len(stripped) < THEMATIC_BREAK_MIN or stripped[0] not in THEMATIC_BREAK_CHARS:
            return None
        if stripped.count(stripped[0]) != len(stripped):
            return None

        start = self._pos
        self._pos += 1
        return ThematicBreak(location=self._location(start))

    def _try_block_quote(self, line: str) -> BlockQuote | None:
        """Try to parse a run of "> " lines into one block quote."""
        if not line.startswith(QUOTE_PREFIX):
            return None

        start = self._pos
        quote_lines: list[tuple[Inline, ...]] = []
        while self._pos < len(self._lines) and self._lines[self._pos].startswith(QUOTE_PREFIX):
            quote_lines.append(self._parse_inline(self._lines[self._pos][len(QUOTE_PREFIX) :]))
            self._pos += 1

        return BlockQuote(location=self._location(start), lines=tuple(quote_lines))

    def _try_blank_line(self, line: str) -> BlankLine | None:
        """Try to parse an empty or whitespace-only line as a spacer."""
        if line.strip():
            return None

        start = self._pos
        self._pos += 1
        return BlankLine(location=self._location(start))

    def _parse_paragraph(self, line: str) -> Paragraph:
        """Parse line as a single-line paragraph (fallback, always matches)."""
        start = self._pos
        self._pos += 1
        return Paragraph(location=self._location(start), children=self._parse_inline(line))
