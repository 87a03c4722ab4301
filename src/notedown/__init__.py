"""
Notedown: safe Markdown-subset rendering for note previews.

Renders user-authored plain text into markup that can be inserted straight
into a page: a line-oriented block scanner, an ordered inline formatting
pass over escaped text, and an independent sanitizer that strips
executable markup regardless of how it was produced.

Quick Start:
    >>> from notedown import render
    >>> render("# Hello **World**")
    '<h1>Hello <strong>World</strong></h1>'

    >>> # Inspect the blocks
    >>> from notedown import parse
    >>> parse("- a\\n- b")[0].items
    ('a', 'b')

    >>> # Or use a configured renderer
    >>> from notedown import Notedown, RenderConfig
    >>> nd = Notedown(config=RenderConfig(link_target=None))
    >>> html = nd("[docs](https://example.com)")

Every call is a pure function of its input: no I/O, no state outliving the
call. Throttling calls against a live edit stream is the caller's job.
"""

from notedown.config import (
    RenderConfig,
    get_render_config,
    render_config_context,
    reset_render_config,
    set_render_config,
)
from notedown.errors import NotedownError, RenderError, SanitizeError
from notedown.inline import format_inline
from notedown.location import SourceLocation
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
from notedown.renderers.html import HtmlRenderer
from notedown.sanitize import Policy, sanitize
from notedown.scanner import Scanner
from notedown.text import count_words, estimate_read_time
from notedown.utils.text import escape_html

__version__ = "0.1.0"

escape = escape_html

_RENDERER = HtmlRenderer()


def parse(text: str) -> tuple[Block, ...]:
    """Partition text into blocks.

    Args:
        text: Raw note text

    Returns:
        Blocks in document order; empty tuple for empty text

    Example:
        >>> parse("# Title")[0].level
        1
    """
    if not text:
        return ()
    return Scanner(text).scan()


def render(text: str) -> str:
    """Render note text to safe markup.

    Total: never raises for any input. Text that matches no construct
    becomes a paragraph; non-string input renders as an empty string.

    Args:
        text: Raw note text

    Returns:
        Sanitized HTML fragment, "" for empty input

    Example:
        >>> render("[x](javascript:alert(1))")
        '<p>[x](javascript:alert(1))</p>'
    """
    if not isinstance(text, str) or not text:
        return ""
    return sanitize(_RENDERER.render(parse(text)))


class Notedown:
    """Renderer bound to one RenderConfig.

    Usage:
        >>> nd = Notedown(config=RenderConfig(allowed_link_schemes=frozenset({"https"})))
        >>> nd("[a](http://example.com)")
        '<p>[a](http://example.com)</p>'

    Thread Safety:
        Sets config via ContextVar for the duration of each call and
        restores the previous value afterwards. Safe for concurrent use.

    """

    __slots__ = ("_config",)

    def __init__(self, *, config: RenderConfig | None = None) -> None:
        """Initialize renderer.

        Args:
            config: Render configuration (defaults to RenderConfig())
        """
        self._config = config or RenderConfig()

    @property
    def config(self) -> RenderConfig:
        return self._config

    def __call__(self, text: str) -> str:
        """Parse, assemble and sanitize in one call."""
        with render_config_context(self._config):
            return render(text)

    def parse(self, text: str) -> tuple[Block, ...]:
        """Partition text into blocks under this renderer's config."""
        with render_config_context(self._config):
            return parse(text)


__all__ = [  # noqa: RUF022 - grouped by category
    # Version
    "__version__",
    # Core API
    "parse",
    "render",
    "sanitize",
    "escape",
    "format_inline",
    "Notedown",
    # Blocks
    "Block",
    "BlankSeparator",
    "BlockQuote",
    "CodeBlock",
    "Heading",
    "List",
    "Paragraph",
    "ThematicBreak",
    "SourceLocation",
    # Pipeline components
    "Scanner",
    "HtmlRenderer",
    "Policy",
    # Note statistics
    "count_words",
    "estimate_read_time",
    # Configuration (ContextVar-based)
    "RenderConfig",
    "get_render_config",
    "set_render_config",
    "reset_render_config",
    "render_config_context",
    # Errors
    "NotedownError",
    "RenderError",
    "SanitizeError",
    "escape_html",
]
