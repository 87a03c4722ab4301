"""Escaping primitive for Notedown.

Every raw text fragment passes through escape_html exactly once, at the
lowest layer, before it is embedded in any markup string. Higher layers
(inline formatting, block assembly, sanitizer serialization) only ever
see escaped text and must not escape it again.

Example:
    >>> from notedown.utils.text import escape_html
    >>> escape_html("<b>Tom & 'Jerry'</b>")
    '&lt;b&gt;Tom &amp; &#x27;Jerry&#x27;&lt;/b&gt;'
"""

from __future__ import annotations

import html as html_module


def escape_html(text: str) -> str:
    """Escape HTML special characters.

    Converts special characters to HTML entities:
    - & becomes &amp;
    - < becomes &lt;
    - > becomes &gt;
    - " becomes &quot;
    - ' becomes &#x27;

    Args:
        text: Raw text to escape

    Returns:
        Escaped text, safe both as element content and as a quoted
        attribute value

    Examples:
        >>> escape_html("<script>alert('xss')</script>")
        '&lt;script&gt;alert(&#x27;xss&#x27;)&lt;/script&gt;'
        >>> escape_html("")
        ''
    """
    if not text:
        return ""

    return html_module.escape(text, quote=True)
