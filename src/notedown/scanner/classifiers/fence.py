"""Fenced code block classifier mixin."""

from __future__ import annotations

from notedown.scanner.modes import INFO_STRING_CHARS

FENCE = "```"


class FenceClassifierMixin:
    """Mixin providing fenced code block classification."""

    def _is_fence(self, line: str) -> bool:
        """Check whether a line opens or closes a code block."""
        return line.startswith(FENCE)

    def _fence_info(self, line: str) -> str | None:
        """Extract the language hint from an opening fence line.

        Only the first word after the backticks counts, and only when it is
        made of INFO_STRING_CHARS.

        Args:
            line: Opening fence line

        Returns:
            Info word, or None when absent or unusable.
        """
        words = line.lstrip("`").split()
        if not words:
            return None
        info = words[0]
        if all(c in INFO_STRING_CHARS for c in info):
            return info
        return None
