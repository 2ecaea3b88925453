"""Character sets and word lists for the code lexer.

All sets are frozensets for:
- O(1) membership testing
- Immutability (thread-safe)
- Module-level caching (no per-call allocation)

The vocabulary is tuned for the JavaScript/React snippets that lessons
mostly contain; other C-family code still lexes, just with fewer words
recognised as keywords.

Usage:
    from lessonmark.lexer.vocabulary import KEYWORDS

    if word in KEYWORDS:  # O(1) lookup
        ...
"""

import string

KEYWORDS: frozenset[str] = frozenset(
    {
        "import",
        "export",
        "from",
        "default",
        "const",
        "let",
        "var",
        "function",
        "return",
        "if",
        "else",
        "for",
        "while",
        "switch",
        "case",
        "break",
        "new",
        "class",
        "extends",
        "async",
        "await",
        "try",
        "catch",
        "throw",
        "typeof",
        "instanceof",
        "of",
        "in",
    }
)

BUILTINS: frozenset[str] = frozenset(
    {
        # React hooks
        "useState",
        "useEffect",
        "useMemo",
        "useCallback",
        "useRef",
        "useContext",
        "useReducer",
        "React",
        # Runtime globals
        "console",
        "window",
        "document",
        "fetch",
        "Promise",
        "Array",
        "Object",
        "JSON",
        "Math",
        # Literals
        "null",
        "undefined",
        "true",
        "false",
    }
)

# ASCII only: non-ASCII letters fall through to single-character text tokens
ASCII_LETTERS: frozenset[str] = frozenset(string.ascii_letters)

DIGITS: frozenset[str] = frozenset(string.digits)

# Number bodies continue through dots: 3.14, 1.2.3
NUMBER_CHARS: frozenset[str] = DIGITS | frozenset(".")

# A digit right after one of these is part of a word, not a number
NUMBER_BLOCKERS: frozenset[str] = ASCII_LETTERS | frozenset("_")

WORD_START: frozenset[str] = ASCII_LETTERS | frozenset("_$")

WORD_CHARS: frozenset[str] = WORD_START | DIGITS

STRING_DELIMITERS: frozenset[str] = frozenset("\"'`")

# After "<": a letter opens a tag, "/" a closing tag
TAG_START: frozenset[str] = ASCII_LETTERS | frozenset("/")

OPERATORS: frozenset[str] = frozenset("=+-*/%!&|?:")

PUNCTUATION: frozenset[str] = frozenset("(){}[];,.")
