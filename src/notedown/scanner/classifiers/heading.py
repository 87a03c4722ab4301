"""ATX heading classifier mixin."""

from __future__ import annotations

MAX_HEADING_LEVEL = 3


class HeadingClassifierMixin:
    """Mixin providing ATX heading classification."""

    def _try_classify_heading(self, line: str) -> tuple[int, str] | None:
        """Try to classify a line as a heading.

        Headings are one to three ``#`` characters, a single space, then
        non-empty text. Deeper levels are not headings.

        Args:
            line: Raw source line

        Returns:
            (level, raw text) if valid heading, None otherwise.
        """
        level = 0
        while level < len(line) and line[level] == "#":
            level += 1

        if level == 0 or level > MAX_HEADING_LEVEL:
            return None

        if line[level : level + 1] != " ":
            return None

        text = line[level + 1 :]
        if not text:
            return None
        return level, text
