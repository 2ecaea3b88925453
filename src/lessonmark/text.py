"""Extract plain text from lessonmark AST nodes.

Provides a public API for extracting text content from any node type,
used for image alt text, lesson previews and search indexing.

Example:
    >>> from lessonmark import parse, extract_text
    >>> doc = parse("# Hello **World**")
    >>> extract_text(doc.children[0])
    'Hello World'
"""

from collections.abc import Iterable

from lessonmark.nodes import (
    BlankLine,
    BlockQuote,
    Checklist,
    ChecklistItem,
    CodeSpan,
    Document,
    Emphasis,
    FencedCode,
    Heading,
    Image,
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


def extract_text(node: Node | Iterable[Node]) -> str:
    """Extract plain text from any AST node or tuple of inline spans.

    Markup markers are dropped; span contents are kept. Multi-line blocks
    (quotes, lists, tables, code) join their lines with newlines.

    Args:
        node: Any AST node (block or inline), or a sequence of inline spans.

    Returns:
        Concatenated plain text from the node and its descendants.

    """
    match node:
        case Text():
            return node.content
        case Strong() | Emphasis() | Strikethrough():
            return node.content
        case CodeSpan():
            return node.code
        case Link():
            return node.text
        case Image():
            return node.alt
        case Heading() | Paragraph() | TableCell() | ChecklistItem():
            return _join_spans(node.children)
        case BlockQuote():
            return "\n".join(_join_spans(line) for line in node.lines)
        case List():
            return "\n".join(_join_spans(item) for item in node.items)
        case Checklist():
            return "\n".join(extract_text(item) for item in node.items)
        case TableRow():
            return " ".join(extract_text(cell) for cell in node.cells)
        case Table():
            rows = [" ".join(extract_text(cell) for cell in node.head)]
            rows.extend(extract_text(row) for row in node.body)
            return "\n".join(rows)
        case FencedCode():
            return node.code
        case Document():
            return "\n".join(extract_text(child) for child in node.children)
        case ThematicBreak() | BlankLine():
            return ""
        case Node():
            return ""
        case _:
            return _join_spans(node)


def _join_spans(spans: Iterable[Node]) -> str:
    return "".join(extract_text(span) for span in spans)
