"""
lessonmark: Markdown for interactive lessons

Parses the small Markdown dialect used by a course viewer into a typed,
immutable AST: headings, paragraphs, fenced code with per-line lexical
tokens, quotes, lists, checklists with stable keys, and pipe tables.
Parsing never raises; malformed markup degrades to literal text.

Quick Start:
    >>> from lessonmark import parse, render
    >>> doc = parse("# Hello, **World**!")
    >>> html = render(doc)
    >>> print(html)
    <h1>Hello, <strong>World</strong>!</h1>

Checklists:
    >>> from lessonmark import ChecklistState
    >>> doc = parse("- [ ] Install Node\\n- [ ] Create the app")
    >>> state = ChecklistState()
    >>> state.toggle(doc.children[0].items[0].key)
    True
    >>> html = render(doc, checklist_state=state)

Code Tokens:
    >>> from lessonmark import lex
    >>> [t.type.value for t in lex("const x = 1;")]
    ['keyword', 'text', 'text', 'text', 'operator', 'text', 'number', 'punctuation']

Installation:
    pip install lessonmark              # zero runtime dependencies
    pip install lessonmark[test]        # + pytest and hypothesis
"""

from lessonmark.checklist import ChecklistState
from lessonmark.config import (
    ParseConfig,
    get_parse_config,
    parse_config_context,
    reset_parse_config,
    set_parse_config,
)
from lessonmark.errors import LessonmarkError, RenderError, SerializationError
from lessonmark.lexer import Lexer, lex
from lessonmark.location import SourceLocation
from lessonmark.nodes import (
    Alignment,
    BlankLine,
    Block,
    BlockQuote,
    Checklist,
    ChecklistItem,
    CodeSpan,
    Document,
    Emphasis,
    FencedCode,
    Heading,
    Image,
    Inline,
    Link,
    List,
    Node,
    Paragraph,
    Strikethrough,
    Strong,
    Table,
    TableCell,
    TableRow,
    Text,
    ThematicBreak,
)
from lessonmark.parser import Parser
from lessonmark.parsing.inline import tokenize
from lessonmark.renderers.html import HeadingInfo, HtmlRenderer, render
from lessonmark.serialization import from_dict, from_json, to_dict, to_json
from lessonmark.text import extract_text
from lessonmark.tokens import Token, TokenType
from lessonmark.utils.logger import get_logger

__version__ = "0.1.0"

logger = get_logger(__name__)


def parse(
    source: str,
    *,
    source_file: str | None = None,
    config: ParseConfig | None = None,
) -> Document:
    """Parse lesson Markdown into a typed AST.

    Args:
        source: Markdown source text
        source_file: Optional source file path, recorded on every location
        config: Parse configuration for this call (defaults apply if None).
            The previous configuration is restored afterwards.

    Returns:
        Document AST root node

    Example:
        >>> doc = parse("# Hello **World**")
        >>> doc.children[0]
        Heading(location=..., level=1, children=(Text(content='Hello '), Strong(content='World')))
    """
    with parse_config_context(config if config is not None else get_parse_config()):
        blocks = Parser(source, source_file=source_file).parse()

    loc = SourceLocation(
        lineno=1,
        end_lineno=source.count("\n") + 1 if source else 0,
        source_file=source_file,
    )
    logger.debug("Parsed %s into %d blocks", source_file or "<string>", len(blocks))
    return Document(location=loc, children=blocks)


__all__ = [
    # Core API
    "parse",
    "render",
    "tokenize",
    "lex",
    "extract_text",
    "Parser",
    "Lexer",
    "HtmlRenderer",
    "HeadingInfo",
    "ChecklistState",
    # Configuration
    "ParseConfig",
    "get_parse_config",
    "set_parse_config",
    "reset_parse_config",
    "parse_config_context",
    # Serialization
    "to_dict",
    "from_dict",
    "to_json",
    "from_json",
    # Errors
    "LessonmarkError",
    "RenderError",
    "SerializationError",
    # Location and tokens
    "SourceLocation",
    "Token",
    "TokenType",
    # Nodes
    "Node",
    "Block",
    "Inline",
    "Alignment",
    "Document",
    "Heading",
    "Paragraph",
    "FencedCode",
    "BlockQuote",
    "List",
    "Checklist",
    "ChecklistItem",
    "Table",
    "TableRow",
    "TableCell",
    "ThematicBreak",
    "BlankLine",
    "Text",
    "Strong",
    "Emphasis",
    "Strikethrough",
    "CodeSpan",
    "Link",
    "Image",
    "__version__",
]
