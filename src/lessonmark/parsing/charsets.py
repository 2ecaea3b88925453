"""Character sets and markers for O(1) line classification.

All sets are frozensets for:
- O(1) membership testing (vs O(n) for strings)
- Immutability (thread-safe)
- Module-level caching (no per-call allocation)

Usage:
    from lessonmark.parsing.charsets import THEMATIC_BREAK_CHARS

    if stripped[0] in THEMATIC_BREAK_CHARS:  # O(1) lookup
        ...
"""

# Opening and closing line of a fenced code block
FENCE_MARKER = "```"

# Maximum ATX heading level recognised; longer # runs are paragraph text
MAX_HEADING_LEVEL = 4

# Block quote line prefix (marker plus the mandatory space)
QUOTE_PREFIX = "> "

# Unordered list line prefixes (marker plus the mandatory space)
UNORDERED_LIST_PREFIXES: tuple[str, ...] = ("- ", "* ")

# Thematic break characters (a line of 3+ of one of these)
THEMATIC_BREAK_CHARS: frozenset[str] = frozenset("-*_")

# Minimum run length for a thematic break
THEMATIC_BREAK_MIN = 3

# Table rows and cells
TABLE_PIPE = "|"

# Only these may appear on a table delimiter row: |:---|:-:|--:|
TABLE_DELIMITER_CHARS: frozenset[str] = frozenset("|:- \t")
