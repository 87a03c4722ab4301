"""Output accumulator for block assembly.

Markup fragments are collected in a list and joined once when the render
finishes, so assembling a note is linear in its output size.

Each HtmlRenderer.render() call owns its builder; nothing is shared
between calls.
"""

from __future__ import annotations


class StringBuilder:
    """Collects markup fragments and joins them once.

    Usage:
            >>> sb = StringBuilder()
            >>> sb.append("<blockquote>").join("<br>", ("a", "b")).append("</blockquote>")
            >>> sb.build()
            '<blockquote>a<br>b</blockquote>'

    """

    __slots__ = ("_parts",)

    def __init__(self) -> None:
        self._parts: list[str] = []

    def append(self, fragment: str) -> StringBuilder:
        """Add one fragment; empty fragments are dropped. Returns self."""
        if fragment:
            self._parts.append(fragment)
        return self

    def join(self, separator: str, fragments: list[str] | tuple[str, ...]) -> StringBuilder:
        """Add fragments with separator between them (not after the last)."""
        for index, fragment in enumerate(fragments):
            if index:
                self.append(separator)
            self.append(fragment)
        return self

    def build(self) -> str:
        return "".join(self._parts)

    def __len__(self) -> int:
        """Number of fragments held (not characters)."""
        return len(self._parts)

    def __bool__(self) -> bool:
        return bool(self._parts)
