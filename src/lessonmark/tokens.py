"""Token and TokenType definitions for the code lexer.

The code lexer splits one line of source code into a stream of Token
objects. Each Token has a type and the exact source substring it covers,
so joining the values of a line's tokens gives back the line.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenType is an enum (inherently immutable).

"""

from dataclasses import dataclass
from enum import Enum


class TokenType(Enum):
    """Token types produced by the code lexer.

    Values double as the CSS suffix used by the HTML renderer
    (``tok-keyword``, ``tok-string``, ...).

    """

    KEYWORD = "keyword"  # const, return, async
    BUILTIN = "builtin"  # console, Promise, useState
    STRING = "string"  # "...", '...', `...`
    COMMENT = "comment"  # // to end of line
    TAG = "tag"  # <div>, </App>
    NUMBER = "number"  # 42, 3.14
    OPERATOR = "operator"  # = + - * / % ! & | ? :
    PUNCTUATION = "punctuation"  # ( ) { } [ ] ; , .
    TEXT = "text"  # identifiers, whitespace, anything else


@dataclass(frozen=True, slots=True)
class Token:
    """A classified slice of one source line.

    Attributes:
        type: The token type (from TokenType enum)
        value: The exact source substring

    """

    type: TokenType
    value: str

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        val = self.value
        if len(val) > 20:
            val = val[:17] + "..."
        return f"Token({self.type.name}, {val!r})"
