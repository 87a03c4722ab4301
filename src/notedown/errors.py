"""Exception classes for Notedown.

Provides standardized exceptions for error handling throughout Notedown.
None of these escape render(): the pipeline degrades to plain text or to
an empty fragment instead.
"""

from __future__ import annotations


class NotedownError(Exception):
    """Base exception for all Notedown errors.

    Subclass this for specific error categories.
    """

    pass


class SanitizeError(NotedownError):
    """Error while building or serializing the sanitizer's element tree.

    Raised internally by the sanitizer and caught by sanitize(), which
    returns an empty fragment in its place.
    """

    def __init__(self, message: str, fragment_length: int | None = None) -> None:
        """Initialize sanitize error.

        Args:
            message: Error description
            fragment_length: Length of the offending fragment (optional)
        """
        self.message = message
        self.fragment_length = fragment_length

        detail = f" ({fragment_length} chars)" if fragment_length is not None else ""
        super().__init__(f"{message}{detail}")


class RenderError(NotedownError):
    """Error during markup assembly.

    Raised when the renderer is handed an object that is not a block node.
    """

    pass
