"""Table parsing for lessonmark parser.

Handles pipe tables. A table needs a header row followed by a delimiter
row; body rows continue while lines keep their outer pipes.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from lessonmark.nodes import Table, TableCell, TableRow
from lessonmark.parsing.charsets import TABLE_DELIMITER_CHARS, TABLE_PIPE
from lessonmark.utils.logger import get_logger

if TYPE_CHECKING:
    from lessonmark.location import SourceLocation
    from lessonmark.nodes import Alignment, Inline

logger = get_logger(__name__)

# One delimiter cell: dashes with optional alignment colons
_DELIMITER_CELL = re.compile(r"(:?)-+(:?)")


class TableParsingMixin:
    """Mixin for pipe table parsing.

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

    def _try_table(self, line: str) -> Table | None:
        """Try to parse a table whose header row is line.

        Table structure:
        | Header 1 | Header 2 |   <- header row
        |----------|:--------:|   <- delimiter row (required)
        | Cell 1   | Cell 2   |   <- body rows

        Returns Table if the next line is a delimiter row, None otherwise.
        """
        if not line.strip().startswith(TABLE_PIPE):
            return None

        if self._pos + 1 >= len(self._lines):
            return None

        alignments = self._parse_table_delimiter(self._lines[self._pos + 1])
        if alignments is None:
            logger.debug("Line %d has pipes but no delimiter row follows", self._pos + 1)
            return None

        start = self._pos
        head = tuple(self._parse_table_cell(cell) for cell in self._parse_table_row(line))
        self._pos += 2

        body_rows: list[TableRow] = []
        while self._pos < len(self._lines) and self._is_table_body_row(self._lines[self._pos]):
            cells = self._parse_table_row(self._lines[self._pos])
            body_rows.append(TableRow(cells=tuple(self._parse_table_cell(c) for c in cells)))
            self._pos += 1

        return Table(
            location=self._location(start),
            head=head,
            body=tuple(body_rows),
            alignments=alignments,
        )

    def _parse_table_cell(self, cell: str) -> TableCell:
        """Tokenize one cell's text."""
        return TableCell(children=self._parse_inline(cell))

    def _parse_table_row(self, line: str) -> list[str]:
        """Split a row into stripped cells.

        Text before the first pipe and after the last pipe is not a cell:
        "| a | b |" gives ["a", "b"] and "| a | b" gives ["a"].
        """
        return [cell.strip() for cell in line.split(TABLE_PIPE)[1:-1]]

    def _is_table_body_row(self, line: str) -> bool:
        """Body rows keep both outer pipes."""
        stripped = line.strip()
        return stripped.startswith(TABLE_PIPE) and stripped.endswith(TABLE_PIPE)

    def _parse_table_delimiter(self, line: str) -> tuple[Alignment, ...] | None:
        """Read column alignments from a delimiter row like ``|:--|:-:|--:|``.

        Returns None unless the row starts with a pipe, holds nothing but
        pipes, colons, dashes and whitespace, and every cell is ``:?-+:?``.
        """
        line = line.strip()
        if not line.startswith(TABLE_PIPE) or not set(line) <= TABLE_DELIMITER_CHARS:
            return None

        alignments: list[Alignment] = []
        for cell in self._parse_table_row(line):
            found = _DELIMITER_CELL.fullmatch(cell)
            if found is None:
                return None
            left, right = found.groups()
            if left and right:
                alignments.append("center")
            elif right:
                alignments.append("right")
            else:
                alignments.append("left")

        return tuple(alignments) or None
