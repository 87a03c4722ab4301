"""Block quote classifier mixin."""

from __future__ import annotations

QUOTE_MARKER = "> "


class QuoteClassifierMixin:
    """Mixin providing block quote classification."""

    def _try_classify_quote(self, line: str) -> str | None:
        """Return the text after a ``> `` marker, or None if not quoted."""
        if line.startswith(QUOTE_MARKER):
            return line[len(QUOTE_MARKER) :]
        return None
