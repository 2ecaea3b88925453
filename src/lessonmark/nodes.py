"""Typed AST nodes for lessonmark.

All AST nodes are frozen dataclasses with slots for:
- Type safety: IDE autocomplete, catch errors at dev time
- Immutability: Safe sharing across threads and render passes
- Value equality: re-parsing a document gives equal trees
- Pattern matching: match statements work naturally

Node Hierarchy:
Node (base)
├── Block nodes (carry a SourceLocation)
│   ├── Document
│   ├── Heading
│   ├── Paragraph
│   ├── FencedCode
│   ├── BlockQuote
│   ├── List
│   ├── Checklist
│   ├── Table
│   ├── ThematicBreak
│   └── BlankLine
├── Block parts
│   ├── ChecklistItem
│   ├── TableRow
│   └── TableCell
└── Inline nodes
    ├── Text
    ├── Strong
    ├── Emphasis
    ├── Strikethrough
    ├── CodeSpan
    ├── Link
    └── Image

Inline styling is flat: a Strong node holds the raw text between its
markers, never nested spans.

Thread Safety:
All nodes are frozen (immutable) and safe to share across threads.

"""

from dataclasses import dataclass
from typing import Literal, TypeAlias

from lessonmark.location import SourceLocation
from lessonmark.tokens import Token

Alignment: TypeAlias = Literal["left", "center", "right"]


# =============================================================================
# Base Node
# =============================================================================


@dataclass(frozen=True, slots=True)
class Node:
    """Base class for all AST nodes."""


# =============================================================================
# Inline Nodes
# =============================================================================


@dataclass(frozen=True, slots=True)
class Text(Node):
    """Plain text content.

    The most common inline node, representing literal text. Markers
    without a closing partner on the same line end up here unchanged.

    """

    content: str


@dataclass(frozen=True, slots=True)
class Strong(Node):
    """Strong (bold) text.

    Markdown: **text**
    HTML: <strong>text</strong>

    """

    content: str


@dataclass(frozen=True, slots=True)
class Emphasis(Node):
    """Emphasized (italic) text.

    Markdown: *text*
    HTML: <em>text</em>

    """

    content: str


@dataclass(frozen=True, slots=True)
class Strikethrough(Node):
    """Strikethrough (deleted) text.

    Markdown: ~~deleted~~
    HTML: <del>deleted</del>

    """

    content: str


@dataclass(frozen=True, slots=True)
class CodeSpan(Node):
    """Inline code.

    Markdown: `code`
    HTML: <code>code</code>

    """

    code: str


@dataclass(frozen=True, slots=True)
class Link(Node):
    """Hyperlink.

    Markdown: [text](url)
    HTML: <a href="url">text</a>

    """

    text: str
    url: str


@dataclass(frozen=True, slots=True)
class Image(Node):
    """Image.

    Markdown: ![alt](url)
    HTML: <img src="url" alt="alt">

    """

    alt: str
    url: str


# Type alias for inline elements
Inline: TypeAlias = Text | Strong | Emphasis | Strikethrough | CodeSpan | Link | Image


# =============================================================================
# Block Nodes
# =============================================================================


@dataclass(frozen=True, slots=True)
class Heading(Node):
    """ATX heading, levels 1 to 4.

    Markdown: # Heading
    HTML: <h1>Heading</h1>

    """

    location: SourceLocation
    level: Literal[1, 2, 3, 4]
    children: tuple[Inline, ...]


@dataclass(frozen=True, slots=True)
class Paragraph(Node):
    """Single-line paragraph.

    Consecutive text lines are not merged: each source line is its own
    paragraph.

    """

    location: SourceLocation
    children: tuple[Inline, ...]


@dataclass(frozen=True, slots=True)
class FencedCode(Node):
    """Fenced code block.

    Markdown:
        ```js
        const x = 1;
        ```

    ``lines`` holds the captured source lines verbatim. ``tokens`` holds
    the lexed form of each line (same length as ``lines``), or is empty
    when code highlighting is disabled in the parse config.

    """

    location: SourceLocation
    info: str
    lines: tuple[str, ...]
    tokens: tuple[tuple[Token, ...], ...] = ()

    @property
    def code(self) -> str:
        """Code content joined with newlines."""
        return "\n".join(self.lines)

    @property
    def language(self) -> str:
        """Declared language (first word of the info string)."""
        return self.info.split()[0] if self.info else ""


@dataclass(frozen=True, slots=True)
class BlockQuote(Node):
    """Block quote.

    Markdown: > quoted text
    HTML: <blockquote><p>quoted text</p></blockquote>

    Each quoted source line becomes its own entry in ``lines``.

    """

    location: SourceLocation
    lines: tuple[tuple[Inline, ...], ...]


@dataclass(frozen=True, slots=True)
class List(Node):
    """Ordered or unordered list.

    Markdown: - item or 1. item
    HTML: <ul>/<ol> with <li> children

    The numeric prefix of ordered items is not kept; display numbering
    belongs to the renderer.

    """

    location: SourceLocation
    items: tuple[tuple[Inline, ...], ...]
    ordered: bool = False


@dataclass(frozen=True, slots=True)
class ChecklistItem(Node):
    """One checklist entry.

    ``key`` is stable across re-parses of the same document and is what
    caller-owned toggle state is keyed by. ``checked`` is the default
    state written in the source (``[x]``).

    """

    key: int
    checked: bool
    children: tuple[Inline, ...]


@dataclass(frozen=True, slots=True)
class Checklist(Node):
    """Run of checklist items.

    Markdown:
        - [ ] Open task
        - [x] Done task

    """

    location: SourceLocation
    items: tuple[ChecklistItem, ...]


@dataclass(frozen=True, slots=True)
class ThematicBreak(Node):
    """Thematic break (horizontal rule).

    Markdown: --- or *** or ___
    HTML: <hr />

    """

    location: SourceLocation


@dataclass(frozen=True, slots=True)
class BlankLine(Node):
    """Empty or whitespace-only source line.

    Kept as a layout spacer; runs of blank lines are not collapsed.

    """

    location: SourceLocation


# =============================================================================
# Tables
# =============================================================================


@dataclass(frozen=True, slots=True)
class TableCell(Node):
    """Table cell (th or td)."""

    children: tuple[Inline, ...]


@dataclass(frozen=True, slots=True)
class TableRow(Node):
    """Table body row."""

    cells: tuple[TableCell, ...]


@dataclass(frozen=True, slots=True)
class Table(Node):
    """Pipe table.

    Markdown:
        | A | B |
        |---|:-:|
        | 1 | 2 |

    HTML: <table>...</table>

    """

    location: SourceLocation
    head: tuple[TableCell, ...]
    body: tuple[TableRow, ...]
    alignments: tuple[Alignment, ...]


# Type alias for block elements
Block: TypeAlias = (
    Heading
    | Paragraph
    | FencedCode
    | BlockQuote
    | List
    | Checklist
    | Table
    | ThematicBreak
    | BlankLine
)


@dataclass(frozen=True, slots=True)
class Document(Node):
    """Root document node.

    Contains all top-level blocks in the document.

    """

    location: SourceLocation
    children: tuple[Block, ...]
