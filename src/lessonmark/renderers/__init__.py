"""lessonmark renderers.

Renderers convert typed AST nodes into output formats. The parser itself
never produces markup; this package is the presentation side.

Available Renderers:
- HtmlRenderer: Renders AST to class-annotated HTML for the lesson viewer

Thread Safety:
All per-render state lives in a RenderContext local to each render() call.

"""

from lessonmark.renderers.html import HeadingInfo, HtmlRenderer, render

__all__ = ["HeadingInfo", "HtmlRenderer", "render"]
