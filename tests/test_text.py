"""Tests for note statistics."""

import pytest

from notedown import count_words, estimate_read_time
from notedown.text import DEFAULT_WORDS_PER_MINUTE


class TestCountWords:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("", 0),
            ("   \n\t", 0),
            ("one", 1),
            ("  two   words ", 2),
            ("# Title\n- item one\n- item two", 8),
        ],
    )
    def test_count(self, text: str, expected: int) -> None:
        assert count_words(text) == expected


class TestEstimateReadTime:
    def test_blank_text(self) -> None:
        assert estimate_read_time("") == "< 1 min"
        assert estimate_read_time("  \n ") == "< 1 min"

    def test_single_word_rounds_up(self) -> None:
        assert estimate_read_time("hello") == "1 min"

    def test_boundary(self) -> None:
        assert DEFAULT_WORDS_PER_MINUTE == 200
        assert estimate_read_time("w " * 200) == "1 min"
        assert estimate_read_time("w " * 201) == "2 min"

    def test_custom_speed(self) -> None:
        assert estimate_read_time("w " * 30, words_per_minute=10) == "3 min"

    @pytest.mark.parametrize("wpm", [0, -5])
    def test_invalid_speed(self, wpm: int) -> None:
        with pytest.raises(ValueError, match="must be positive"):
            estimate_read_time("text", words_per_minute=wpm)
