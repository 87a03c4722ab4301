"""HTML assembly using StringBuilder pattern.

Wraps each block's already-escaped text in its structural markup and
concatenates the results in document order, with no separators. The
output is not yet sanitized; notedown.render() passes it through
notedown.sanitize before returning it.

Thread Safety:
HtmlRenderer holds no per-render state. Multiple threads can safely share a
single instance and call render() concurrently without synchronization.
"""

from collections.abc import Iterable

from notedown.errors import RenderError
from notedown.nodes import (
    BlankSeparator,
    Block,
    BlockQuote,
    CodeBlock,
    Heading,
    List,
    Paragraph,
    ThematicBreak,
)
from notedown.stringbuilder import StringBuilder
from notedown.utils.text import escape_html


class HtmlRenderer:
    """Render block nodes to an HTML fragment.

    Usage:
        >>> from notedown import parse
        >>> HtmlRenderer().render(parse("# Hi\\n- a\\n- b"))
        '<h1>Hi</h1><ul><li>a</li><li>b</li></ul>'

    """

    __slots__ = ()

    def render(self, blocks: Iterable[Block]) -> str:
        """Render blocks to HTML string.

        Args:
            blocks: Blocks in document order

        Returns:
            HTML fragment; empty string for no blocks

        Raises:
            RenderError: If an element of blocks is not a block node
        """
        sb = StringBuilder()
        for block in blocks:
            self._render_block(block, sb)
        return sb.build()

    def _render_block(self, block: Block, sb: StringBuilder) -> None:
        """Render a block node."""
        match block:
            case Heading():
                sb.append(f"<h{block.level}>").append(block.text).append(f"</h{block.level}>")
            case Paragraph():
                sb.append("<p>").append(block.text).append("</p>")
            case List():
                self._render_list(block, sb)
            case BlockQuote():
                sb.append("<blockquote>").join("<br>", block.lines).append("</blockquote>")
            case CodeBlock():
                self._render_code_block(block, sb)
            case ThematicBreak():
                sb.append("<hr>")
            case BlankSeparator():
                sb.append("<br>")
            case _:
                raise RenderError(f"Cannot render {type(block).__name__!r} as a block")

    def _render_list(self, lst: List, sb: StringBuilder) -> None:
        """Render ordered or unordered list."""
        if lst.ordered:
            start_attr = f' start="{lst.start}"' if lst.start != 1 else ""
            sb.append(f"<ol{start_attr}>")
        else:
            sb.append("<ul>")

        for item in lst.items:
            sb.append("<li>").append(item).append("</li>")

        sb.append("</ol>" if lst.ordered else "</ul>")

    def _render_code_block(self, code: CodeBlock, sb: StringBuilder) -> None:
        """Render fenced code block; lines are escaped and never formatted."""
        if code.info:
            sb.append(f'<pre><code class="language-{escape_html(code.info)}">')
        else:
            sb.append("<pre><code>")
        sb.join("\n", code.lines)
        sb.append("</code></pre>")
