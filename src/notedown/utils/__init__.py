"""Utility modules for Notedown.

Provides:
- text: escape_html, the single escaping primitive
- logger: get_logger for logging
"""

from notedown.utils.logger import get_logger
from notedown.utils.text import escape_html

__all__ = [
    "escape_html",
    "get_logger",
]
