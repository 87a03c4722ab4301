"""Property-based tests for scanner invariants using Hypothesis."""

from hypothesis import given, settings
from hypothesis import strategies as st

from notedown.nodes import BLOCK_TYPES
from notedown.scanner import Scanner, ScanMode

MARKDOWNISH = st.text(alphabet="#->*_`=~[]()1. \n\tab", max_size=300)


def _line_total(source: str) -> int:
    normalized = source.replace("\r\n", "\n").replace("\r", "\n")
    return len(normalized.split("\n")) if normalized else 0


class TestScanInvariants:
    @given(st.text(max_size=500))
    @settings(max_examples=200)
    def test_every_line_consumed_once(self, source: str) -> None:
        blocks = Scanner(source).scan()
        assert sum(b.location.line_count for b in blocks) == _line_total(source)

    @given(MARKDOWNISH)
    @settings(max_examples=200)
    def test_locations_are_contiguous(self, source: str) -> None:
        blocks = Scanner(source).scan()
        expected = 1
        for block in blocks:
            assert block.location.lineno == expected
            expected = block.location.end_lineno + 1

    @given(MARKDOWNISH)
    @settings(max_examples=100)
    def test_deterministic(self, source: str) -> None:
        assert Scanner(source).scan() == Scanner(source).scan()

    @given(MARKDOWNISH)
    @settings(max_examples=100)
    def test_only_known_blocks_and_default_mode(self, source: str) -> None:
        scanner = Scanner(source)
        blocks = scanner.scan()
        assert all(isinstance(b, BLOCK_TYPES) for b in blocks)
        assert scanner.mode is ScanMode.DEFAULT
