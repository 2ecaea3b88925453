"""Block parsing subpackage for lessonmark.

Contains mixins for the block-level detectors:
- core: fenced code, headings, thematic breaks, quotes, blank lines, paragraphs
- table: pipe tables
- lists: checklists, unordered and ordered lists
"""

from lessonmark.parsing.blocks.core import BlockParsingMixin
from lessonmark.parsing.blocks.lists import ListParsingMixin
from lessonmark.parsing.blocks.table import TableParsingMixin

__all__ = [
    "BlockParsingMixin",
    "ListParsingMixin",
    "TableParsingMixin",
]
