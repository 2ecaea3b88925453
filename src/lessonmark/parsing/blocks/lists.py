"""List and checklist parsing for lessonmark parser.

Handles three run-based blocks, all flat (no nesting):

- Checklists: ``- [ ] task`` / ``* [x] task``
- Unordered lists: ``- item`` / ``* item``
- Ordered lists: ``1. item``

A run ends at the first line that does not match its own pattern.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from lessonmark.nodes import Checklist, ChecklistItem, List
from lessonmark.parsing.charsets import UNORDERED_LIST_PREFIXES

if TYPE_CHECKING:
    from lessonmark.location import SourceLocation
    from lessonmark.nodes import Inline

# - [ ] text, * [x] text, - [X] text
_CHECKLIST_ITEM = re.compile(r"^[-*]\s\[([ xX])\]\s(.*)$")

# 1. text (ASCII digits only)
_ORDERED_ITEM = re.compile(r"^[0-9]+\.\s")


class ListParsingMixin:
    """Mixin for list and checklist parsing.

    Required Host Attributes:
        - _lines: list[str]
        - _pos: int

    Required Host Methods:
        - _parse_inline(text) -> tuple[Inline, ...]
        - _location(start) -> SourceLocation
        - _take_key() -> int

    """

    _lines: list[str]
    _pos: int

    if TYPE_CHECKING:

        def _parse_inline(self, text: str) -> tuple[Inline, ...]: ...

        def _location(self, start: int) -> SourceLocation: ...

        def _take_key(self) -> int: ...

    def _try_checklist(self, line: str) -> Checklist | None:
        """Try to parse a run of checklist lines.

        Each item takes the next key from the parse-wide counter, so keys
        follow document order and repeat exactly on re-parse.
        """
        if _CHECKLIST_ITEM.match(line) is None:
            return None

        start = self._pos
        items: list[ChecklistItem] = []
        while self._pos < len(self._lines):
            match = _CHECKLIST_ITEM.match(self._lines[self._pos])
            if match is None:
                break
            items.append(
                ChecklistItem(
                    key=self._take_key(),
                    checked=match.group(1).lower() == "x",
                    children=self._parse_inline(match.group(2)),
                )
            )
            self._pos += 1

        return Checklist(location=self._location(start), items=tuple(items))

    def _try_unordered_list(self, line: str) -> List | None:
        """Try to parse a run of "- " / "* " lines."""
        if not line.startswith(UNORDERED_LIST_PREFIXES):
            return None

        start = self._pos
        items: list[tuple[Inline, ...]] = []
        while self._pos < len(self._lines) and self._lines[self._pos].startswith(
            UNORDERED_LIST_PREFIXES
        ):
            items.append(self._parse_inline(self._lines[self._pos][2:]))
            self._pos += 1

        return List(location=self._location(start), items=tuple(items), ordered=False)

    def _try_ordered_list(self, line: str) -> List | None:
        """Try to parse a run of "<digits>. " lines.

        The numeric prefix is dropped; the renderer numbers items itself.
        """
        if _ORDERED_ITEM.match(line) is None:
            return None

        start = self._pos
        items: list[tuple[Inline, ...]] = []
        while self._pos < len(self._lines):
            match = _ORDERED_ITEM.match(self._lines[self._pos])
            if match is None:
                break
            items.append(self._parse_inline(self._lines[self._pos][match.end() :]))
            self._pos += 1

        return List(location=self._location(start), items=tuple(items), ordered=True)
