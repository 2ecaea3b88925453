"""Single-line code lexer for syntax coloring.

Splits one line of source code into classified tokens with a forward-only
cursor. The lexer is a total partition of its input: every character
lands in exactly one token, whitespace included, so joining the token
values reproduces the line and the renderer can keep exact columns.

No regex in the hot path. Each recognizer either consumes at least one
character or declines, and the fallback always consumes one, so the scan
is O(n) and always terminates.

Thread Safety:
Lexer instances are single-use. Create one per line.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Iterator

from lessonmark.lexer.vocabulary import (
    BUILTINS,
    DIGITS,
    KEYWORDS,
    NUMBER_BLOCKERS,
    NUMBER_CHARS,
    OPERATORS,
    PUNCTUATION,
    STRING_DELIMITERS,
    TAG_START,
    WORD_CHARS,
    WORD_START,
)
from lessonmark.tokens import Token, TokenType


class Lexer:
    """Cursor-based lexer over one line of code.

    Recognizers are tried in a fixed order at each position:

    1. ``//`` line comment
    2. string literal (``"``, ``'`` or backtick, backslash escapes)
    3. tag (``<`` followed by a letter or ``/``)
    4. number (digit not glued to a preceding letter or ``_``)
    5. word (keyword, builtin or plain identifier)
    6. operator character
    7. punctuation character
    8. any other single character as text

    State does not carry across lines: an unterminated string or tag
    simply runs to the end of the line.

    Usage:
            >>> for token in Lexer("const x = 1;").tokenize():
            ...     print(token)
            Token(KEYWORD, 'const')
            Token(TEXT, ' ')
            Token(TEXT, 'x')
            Token(TEXT, ' ')
            Token(OPERATOR, '=')
            Token(TEXT, ' ')
            Token(NUMBER, '1')
            Token(PUNCTUATION, ';')

    """

    __slots__ = ("_line", "_line_len", "_pos")

    def __init__(self, line: str) -> None:
        """Initialize lexer with one line of code.

        Args:
            line: Source line (without its trailing newline)
        """
        self._line = line
        self._line_len = len(line)
        self._pos = 0

    def tokenize(self) -> Iterator[Token]:
        """Tokenize the line into a token stream.

        Yields:
            Token objects in source order

        Complexity: O(n) where n = len(line)
        """
        while self._pos < self._line_len:
            yield self._scan_token()

    # =========================================================================
    # Dispatch
    # =========================================================================

    def _scan_token(self) -> Token:
        """Scan exactly one token at the cursor and advance past it."""
        char = self._line[self._pos]

        if char == "/" and self._peek(1) == "/":
            return self._scan_comment()
        if char in STRING_DELIMITERS:
            return self._scan_string(char)
        if char == "<" and self._peek(1) in TAG_START:
            return self._scan_tag()
        if char in DIGITS and self._peek(-1) not in NUMBER_BLOCKERS:
            return self._scan_number()
        if char in WORD_START:
            return self._scan_word()
        if char in OPERATORS:
            return self._emit(TokenType.OPERATOR, self._pos + 1)
        if char in PUNCTUATION:
            return self._emit(TokenType.PUNCTUATION, self._pos + 1)
        return self._emit(TokenType.TEXT, self._pos + 1)

    # =========================================================================
    # Recognizers
    # =========================================================================

    def _scan_comment(self) -> Token:
        """Scan ``//`` through end of line."""
        end = self._line.find("\n", self._pos)
        return self._emit(TokenType.COMMENT, end if end != -1 else self._line_len)

    def _scan_string(self, quote: str) -> Token:
        """Scan a string literal delimited by ``quote``.

        A backslash skips the following character, so an escaped delimiter
        does not close the string. Unterminated strings run to end of line.
        """
        line = self._line
        end = self._pos + 1
        while end < self._line_len and line[end] != quote:
            if line[end] == "\\":
                end += 1
            end += 1
        # Include the closing delimiter when present
        return self._emit(TokenType.STRING, end + 1)

    def _scan_tag(self) -> Token:
        """Scan ``<tag ...>`` through the next ``>`` or end of line."""
        end = self._line.find(">", self._pos)
        return self._emit(TokenType.TAG, end + 1 if end != -1 else self._line_len)

    def _scan_number(self) -> Token:
        """Scan a run of digits and dots."""
        end = self._pos
        while end < self._line_len and self._line[end] in NUMBER_CHARS:
            end += 1
        return self._emit(TokenType.NUMBER, end)

    def _scan_word(self) -> Token:
        """Scan an identifier and classify it against the vocabulary."""
        end = self._pos
        while end < self._line_len and self._line[end] in WORD_CHARS:
            end += 1
        word = self._line[self._pos : end]
        if word in KEYWORDS:
            token_type = TokenType.KEYWORD
        elif word in BUILTINS:
            token_type = TokenType.BUILTIN
        else:
            token_type = TokenType.TEXT
        return self._emit(token_type, end)

    # =========================================================================
    # Navigation helpers
    # =========================================================================

    def _peek(self, offset: int) -> str:
        """Peek at the character ``offset`` away from the cursor.

        Returns:
            The character, or empty string outside the line.
        """
        index = self._pos + offset
        if index < 0 or index >= self._line_len:
            return ""
        return self._line[index]

    def _emit(self, token_type: TokenType, end: int) -> Token:
        """Create a token from the cursor to ``end`` and commit the cursor.

        ``end`` is clamped to the line length, so recognizers may overshoot
        when a construct is cut off by the end of the line.
        """
        end = min(end, self._line_len)
        token = Token(token_type, self._line[self._pos : end])
        self._pos = end
        return token


def lex(line: str) -> tuple[Token, ...]:
    """Lex one line of code into classified tokens.

    Args:
        line: Source line

    Returns:
        Tuple of tokens whose values concatenate back to ``line``

    Example:
        >>> lex("return 'ok';")
        (Token(KEYWORD, 'return'), Token(TEXT, ' '), Token(STRING, "'ok'"), Token(PUNCTUATION, ';'))
    """
    return tuple(Lexer(line).tokenize())
