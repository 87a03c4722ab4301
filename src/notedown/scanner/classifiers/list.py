"""List item classifier mixin."""

from __future__ import annotations

from notedown.scanner.modes import ASCII_DIGITS

BULLET_CHARS = "-*"

# Longer numbers still mark an item but never set the start attribute
MAX_START_DIGITS = 9


class ListClassifierMixin:
    """Mixin providing list item classification."""

    def _try_classify_bullet(self, line: str) -> str | None:
        """Try to classify a line as an unordered list item.

        Args:
            line: Raw source line

        Returns:
            Item text after ``- `` or ``* ``, None if not a bullet item.
        """
        if len(line) >= 2 and line[0] in BULLET_CHARS and line[1] == " ":
            return line[2:]
        return None

    def _try_classify_ordered(self, line: str) -> tuple[int | None, str] | None:
        """Try to classify a line as an ordered list item.

        Ordered items are one or more ASCII digits, a period and a space.

        Args:
            line: Raw source line

        Returns:
            (number, item text) if valid, None otherwise. number is None
            when the digit run is too long to be a list start.
        """
        pos = 0
        while pos < len(line) and line[pos] in ASCII_DIGITS:
            pos += 1

        if pos == 0 or line[pos : pos + 2] != ". ":
            return None

        number = int(line[:pos]) if pos <= MAX_START_DIGITS else None
        return number, line[pos + 2 :]
