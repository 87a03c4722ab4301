"""Plain-text statistics for note text.

Shown next to the rendered preview; computed from the raw text, not from
the rendered markup.

Example:
    >>> from notedown.text import count_words, estimate_read_time
    >>> count_words("  two words ")
    2
    >>> estimate_read_time("word " * 450)
    '3 min'
"""

import math

DEFAULT_WORDS_PER_MINUTE = 200


def count_words(text: str) -> int:
    """Count whitespace-separated words; 0 for empty or blank text."""
    if not text:
        return 0
    return len(text.split())


def estimate_read_time(text: str, words_per_minute: int = DEFAULT_WORDS_PER_MINUTE) -> str:
    """Estimate reading time as a short label.

    Args:
        text: Raw note text
        words_per_minute: Reading speed, must be positive

    Returns:
        "< 1 min" for blank text, otherwise the rounded-up minutes,
        e.g. "2 min".

    Raises:
        ValueError: If words_per_minute is not positive
    """
    if words_per_minute <= 0:
        raise ValueError(f"words_per_minute must be positive, got {words_per_minute}")

    words = count_words(text)
    if words == 0:
        return "< 1 min"
    return f"{math.ceil(words / words_per_minute)} min"
