"""Scanner operating modes.

This module defines the finite state machine modes for the block scanner.
"""

from __future__ import annotations

from enum import Enum, auto


class ScanMode(Enum):
    """Scanner operating modes.

    The scanner switches between modes based on the line it classifies:
    - DEFAULT: Between blocks, classifying the next line
    - CODE_BLOCK: Inside a fenced code block (ends at a closing fence or
      at end of input)
    - BLOCKQUOTE: Collecting consecutive quoted lines
    - UNORDERED_LIST: Collecting consecutive bullet items
    - ORDERED_LIST: Collecting consecutive numbered items

    """

    DEFAULT = auto()
    CODE_BLOCK = auto()
    BLOCKQUOTE = auto()
    UNORDERED_LIST = auto()
    ORDERED_LIST = auto()


# Characters allowed in a fence info string (language hint)
INFO_STRING_CHARS = frozenset(
    "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789_+.#-"
)

ASCII_DIGITS = frozenset("0123456789")
