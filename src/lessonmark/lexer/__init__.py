"""Code lexer for syntax coloring inside fenced code blocks.

This package provides a per-line lexer that partitions source code into
classified tokens. It is independent of the Markdown parser; the parser
calls it once per fenced code line.

Architecture:
lexer/
├── __init__.py          # Re-exports Lexer, lex
├── core.py              # Lexer class (cursor + recognizers)
└── vocabulary.py        # Keyword/builtin words and character sets

Usage:
    >>> from lessonmark.lexer import lex
    >>> [t.type.name for t in lex("x = 42")]
    ['TEXT', 'TEXT', 'OPERATOR', 'TEXT', 'NUMBER']

"""

from lessonmark.lexer.core import Lexer, lex

__all__ = ["Lexer", "lex"]
