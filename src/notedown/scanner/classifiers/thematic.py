"""Thematic break classifier mixin."""

from __future__ import annotations


class ThematicClassifierMixin:
    """Mixin providing thematic break classification."""

    def _is_thematic_break(self, line: str) -> bool:
        """Check whether a line is a thematic break.

        A thematic break is three or more ``-`` characters and nothing else,
        ignoring surrounding whitespace.
        """
        content = line.strip()
        return len(content) >= 3 and content.count("-") == len(content)
