"""Parsing package for lessonmark.

Contains mixins for the block parser and the inline tokenizer.

Modules:
blocks/: Block-level detectors (fence, table, heading, lists, ...)
inline: Inline span tokenizer (bold, italic, code, links, images)
charsets: Markers and character sets for line classification

"""

from lessonmark.parsing.blocks import (
    BlockParsingMixin,
    ListParsingMixin,
    TableParsingMixin,
)
from lessonmark.parsing.inline import InlineParsingMixin, tokenize

__all__ = [
    "BlockParsingMixin",
    "InlineParsingMixin",
    "ListParsingMixin",
    "TableParsingMixin",
    "tokenize",
]
