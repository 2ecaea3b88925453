"""Reference HTML renderer for the lesson viewer.

Renders the typed AST to HTML fragments the viewer styles with CSS
classes. Output pieces are collected in a per-render list and joined
once at the end.

Thread Safety:
All per-render state is encapsulated in RenderContext, created fresh for each
render() call. Multiple threads can safely share a single HtmlRenderer instance
and call render() concurrently, provided each passes its own ChecklistState.

Checklist State:
The toggle map is owned by the caller and handed in explicitly. The renderer
only reads it; clicks are recorded by the caller via ChecklistState.toggle().
"""

import html
import logging
from dataclasses import dataclass, field

from lessonmark.checklist import ChecklistState
from lessonmark.errors import RenderError
from lessonmark.nodes import (
    BlankLine,
    Block,
    BlockQuote,
    Checklist,
    CodeSpan,
    Document,
    Emphasis,
    FencedCode,
    Heading,
    Image,
    Inline,
    Link,
    List,
    Paragraph,
    Strikethrough,
    Strong,
    Table,
    TableCell,
    Text,
    ThematicBreak,
)
from lessonmark.text import extract_text
from lessonmark.tokens import Token

logger = logging.getLogger(__name__)


def html_escape(s: str) -> str:
    """Escape HTML special characters.

    Escapes <, >, &, " but not single quotes. This is output encoding for
    text and attribute values only, not sanitization.
    """
    return html.escape(s, quote=False).replace('"', "&quot;")


@dataclass(frozen=True, slots=True)
class HeadingInfo:
    """Heading metadata collected during rendering.

    Used by the viewer to build the "on this page" outline.
    """

    level: int
    text: str


@dataclass(slots=True)
class RenderContext:
    """Per-render mutable state.

    Created fresh for each render, ensuring thread safety when sharing
    HtmlRenderer instances across threads.
    """

    checklist_state: ChecklistState
    parts: list[str] = field(default_factory=list)
    headings: list[HeadingInfo] = field(default_factory=list)

    def append(self, s: str) -> None:
        """Append an output fragment (empty strings are skipped)."""
        if s:
            self.parts.append(s)


class HtmlRenderer:
    """Render AST to HTML.

    Usage:
        >>> from lessonmark import parse
        >>> renderer = HtmlRenderer()
        >>> renderer.render(parse("# Hello **World**"))
        '<h1>Hello <strong>World</strong></h1>\\n'

    Args (constructor):
        checklist_state: Caller-owned toggle map; items without an override
            render with their parsed default
        line_numbers: Render a line-number gutter in code blocks
    """

    __slots__ = ("_checklist_state", "_line_numbers", "_last_context")

    def __init__(
        self,
        *,
        checklist_state: ChecklistState | None = None,
        line_numbers: bool = True,
    ) -> None:
        self._checklist_state = checklist_state
        self._line_numbers = line_numbers
        self._last_context: RenderContext | None = None

    def render(self, node: Document) -> str:
        """Render document AST to HTML string.

        Args:
            node: Document AST root

        Returns:
            HTML string

        Raises:
            RenderError: If the tree contains something that is not a node
        """
        state = self._checklist_state if self._checklist_state is not None else ChecklistState()
        ctx = RenderContext(checklist_state=state)

        for child in node.children:
            self._render_block(child, ctx)

        self._last_context = ctx
        logger.debug("Rendered %d blocks into %d fragments", len(node.children), len(ctx.parts))
        return "".join(ctx.parts)

    def get_headings(self) -> list[HeadingInfo]:
        """Get heading info collected during the last render.

        Returns:
            List of HeadingInfo from the last render() call.
            Empty if render() hasn't been called.
        """
        if self._last_context is None:
            return []
        return self._last_context.headings.copy()

    # =========================================================================
    # Block rendering
    # =========================================================================

    def _render_block(self, block: Block, ctx: RenderContext) -> None:
        """Render a block node."""
        match block:
            case Heading():
                self._render_heading(block, ctx)
            case Paragraph():
                ctx.append("<p>")
                self._render_inlines(block.children, ctx)
                ctx.append("</p>\n")
            case FencedCode():
                self._render_fenced_code(block, ctx)
            case BlockQuote():
                self._render_blockquote(block, ctx)
            case List():
                self._render_list(block, ctx)
            case Checklist():
                self._render_checklist(block, ctx)
            case Table():
                self._render_table(block, ctx)
            case ThematicBreak():
                ctx.append("<hr />\n")
            case BlankLine():
                ctx.append('<div class="spacer"></div>\n')
            case _:
                raise RenderError(f"Cannot render block of type {type(block).__name__}")

    def _render_heading(self, heading: Heading, ctx: RenderContext) -> None:
        ctx.headings.append(HeadingInfo(level=heading.level, text=extract_text(heading)))
        ctx.append(f"<h{heading.level}>")
        self._render_inlines(heading.children, ctx)
        ctx.append(f"</h{heading.level}>\n")

    def _render_fenced_code(self, code: FencedCode, ctx: RenderContext) -> None:
        """Render a code block with header, gutter and token spans.

        A trailing whitespace-only line is not shown.
        """
        lines = list(code.lines)
        token_rows = list(code.tokens)
        if lines and not lines[-1].strip():
            lines.pop()
            if token_rows:
                token_rows.pop()

        lang = code.language
        lang_class = f' class="language-{html_escape(lang)}"' if lang else ""

        ctx.append('<div class="code-block">\n')
        ctx.append(f'<div class="code-header">{html_escape(lang or "code")}</div>\n')
        ctx.append(f"<pre><code{lang_class}>")
        for number, line in enumerate(lines, start=1):
            ctx.append('<span class="line">')
            if self._line_numbers:
                ctx.append(f'<span class="line-number">{number}</span>')
            ctx.append('<span class="line-content">')
            if token_rows:
                self._render_tokens(token_rows[number - 1], ctx)
            else:
                ctx.append(html_escape(line))
            ctx.append("</span></span>\n")
        ctx.append("</code></pre>\n</div>\n")

    def _render_tokens(self, tokens: tuple[Token, ...], ctx: RenderContext) -> None:
        for token in tokens:
            ctx.append(f'<span class="tok-{token.type.value}">{html_escape(token.value)}</span>')

    def _render_blockquote(self, quote: BlockQuote, ctx: RenderContext) -> None:
        ctx.append("<blockquote>\n")
        for line in quote.lines:
            ctx.append("<p>")
            self._render_inlines(line, ctx)
            ctx.append("</p>\n")
        ctx.append("</blockquote>\n")

    def _render_list(self, lst: List, ctx: RenderContext) -> None:
        tag = "ol" if lst.ordered else "ul"
        ctx.append(f"<{tag}>\n")
        for item in lst.items:
            ctx.append("<li>")
            self._render_inlines(item, ctx)
            ctx.append("</li>\n")
        ctx.append(f"</{tag}>\n")

    def _render_checklist(self, checklist: Checklist, ctx: RenderContext) -> None:
        """Render checklist items using the caller's toggle state."""
        ctx.append('<ul class="checklist">\n')
        for item in checklist.items:
            checked = ctx.checklist_state.is_checked(item)
            item_class = "checklist-item checked" if checked else "checklist-item"
            checked_attr = " checked" if checked else ""
            ctx.append(f'<li class="{item_class}">')
            ctx.append(f'<input type="checkbox" data-key="{item.key}"{checked_attr} /> <span>')
            self._render_inlines(item.children, ctx)
            ctx.append("</span></li>\n")
        ctx.append("</ul>\n")

    def _render_table(self, table: Table, ctx: RenderContext) -> None:
        ctx.append("<table>\n<thead>\n")
        self._render_table_row(table.head, table, "th", ctx)
        ctx.append("</thead>\n")
        if table.body:
            ctx.append("<tbody>\n")
            for row in table.body:
                self._render_table_row(row.cells, table, "td", ctx)
            ctx.append("</tbody>\n")
        ctx.append("</table>\n")

    def _render_table_row(
        self,
        cells: tuple[TableCell, ...],
        table: Table,
        tag: str,
        ctx: RenderContext,
    ) -> None:
        ctx.append("<tr>\n")
        for i, cell in enumerate(cells):
            # Rows may be wider than the delimiter row
            align = table.alignments[i] if i < len(table.alignments) else "left"
            ctx.append(f'<{tag} style="text-align: {align}">')
            self._render_inlines(cell.children, ctx)
            ctx.append(f"</{tag}>\n")
        ctx.append("</tr>\n")

    # =========================================================================
    # Inline rendering
    # =========================================================================

    def _render_inlines(self, inlines: tuple[Inline, ...], ctx: RenderContext) -> None:
        for inline in inlines:
            self._render_inline(inline, ctx)

    def _render_inline(self, inline: Inline, ctx: RenderContext) -> None:
        match inline:
            case Text():
                ctx.append(html_escape(inline.content))
            case Strong():
                ctx.append(f"<strong>{html_escape(inline.content)}</strong>")
            case Emphasis():
                ctx.append(f"<em>{html_escape(inline.content)}</em>")
            case Strikethrough():
                ctx.append(f"<del>{html_escape(inline.content)}</del>")
            case CodeSpan():
                ctx.append(f"<code>{html_escape(inline.code)}</code>")
            case Link():
                ctx.append(
                    f'<a href="{html_escape(inline.url)}" target="_blank" '
                    f'rel="noopener noreferrer">{html_escape(inline.text)}</a>'
                )
            case Image():
                ctx.append(f'<img src="{html_escape(inline.url)}" alt="{html_escape(inline.alt)}" />')
            case _:
                raise RenderError(f"Cannot render inline of type {type(inline).__name__}")


def render(
    doc: Document,
    *,
    checklist_state: ChecklistState | None = None,
    line_numbers: bool = True,
) -> str:
    """Render an AST Document to HTML.

    Args:
        doc: Document AST to render
        checklist_state: Caller-owned checklist toggle map
        line_numbers: Render a line-number gutter in code blocks

    Returns:
        HTML string
    """
    return HtmlRenderer(checklist_state=checklist_state, line_numbers=line_numbers).render(doc)
