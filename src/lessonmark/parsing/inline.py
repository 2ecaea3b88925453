"""Inline span tokenizer.

Turns one line of prose (a heading, paragraph, quote line, list item or
table cell) into a flat tuple of inline spans.

Scanning uses one compiled alternation. At each position the alternatives
are tried in priority order and the first that matches wins:

    image  >  link  >  bold  >  strikethrough  >  inline code  >  italic

Every marker pair is closed by its nearest closing marker on the same
line. A marker with no partner stays literal text, and the interior of a
matched span is kept as plain text without being re-tokenized.

Thread Safety:
The compiled pattern is immutable module state; tokenize() is pure.

"""

from __future__ import annotations

import re

from lessonmark.config import get_parse_config
from lessonmark.nodes import (
    CodeSpan,
    Emphasis,
    Image,
    Inline,
    Link,
    Strikethrough,
    Strong,
    Text,
)

# Order of the alternatives is the precedence order.
_INLINE_PATTERN = re.compile(
    r"!\[(?P<image_alt>[^\]]*)\]\((?P<image_url>[^)]+)\)"
    r"|\[(?P<link_text>[^\]]+)\]\((?P<link_url>[^)]+)\)"
    r"|\*\*(?P<strong>[^*]+)\*\*"
    r"|~~(?P<strike>[^~]+)~~"
    r"|`(?P<code>[^`]+)`"
    r"|\*(?P<em>[^*]+)\*"
)


def tokenize(text: str) -> tuple[Inline, ...]:
    """Tokenize one line of text into inline spans.

    Args:
        text: A single line (no multi-line spans are recognised)

    Returns:
        Tuple of inline nodes in source order. Empty text gives ``()``.

    Example:
        >>> tokenize("a **b** c")
        (Text(content='a '), Strong(content='b'), Text(content=' c'))
        >>> tokenize("a *b")
        (Text(content='a *b'),)

    """
    spans: list[Inline] = []
    last_end = 0

    for match in _INLINE_PATTERN.finditer(text):
        if match.start() > last_end:
            spans.append(Text(content=text[last_end : match.start()]))
        spans.append(_span_from_match(match))
        last_end = match.end()

    if last_end < len(text):
        spans.append(Text(content=text[last_end:]))

    return tuple(spans)


def _span_from_match(found: re.Match[str]) -> Inline:
    """Build the inline node for one matched alternative.

    ``lastgroup`` names the last group that took part in the match, which
    is unique per alternative (the URL group for images and links).
    """
    match found.lastgroup:
        case "image_url":
            return Image(alt=found["image_alt"], url=found["image_url"])
        case "link_url":
            return Link(text=found["link_text"], url=found["link_url"])
        case "strong":
            return Strong(content=found["strong"])
        case "strike":
            return Strikethrough(content=found["strike"])
        case "code":
            return CodeSpan(code=found["code"])
        case _:
            return Emphasis(content=found["em"])


class InlineParsingMixin:
    """Mixin giving block parsers access to the inline tokenizer.

    Required Host Attributes: None

    Required Host Methods: None

    """

    def _parse_inline(self, text: str) -> tuple[Inline, ...]:
        """Tokenize prose text, applying the configured text transformer first."""
        transformer = get_parse_config().text_transformer
        if transformer is not None:
            text = transformer(text)
        return tokenize(text)
