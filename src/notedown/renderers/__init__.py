"""Notedown renderers.

Renderers assemble block nodes into an output format.

Available Renderers:
- HtmlRenderer: Concatenates each block's markup wrapper in document order

Thread Safety:
All renderers use StringBuilder local to each render() call.
Safe for concurrent use from multiple threads.

"""

from notedown.renderers.html import HtmlRenderer

__all__ = ["HtmlRenderer"]
