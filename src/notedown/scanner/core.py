"""Line-indexed block scanner.

Walks the source one line at a time with an explicit index. Each line is
classified in priority order (thematic break, code fence, heading, block
quote, bullet list, ordered list, blank, paragraph); multi-line constructs
switch the scanner into a collecting mode that consumes lines by lookahead
until the construct ends.

Every line is consumed exactly once, so the scan is O(n) in the number of
lines and always terminates.

Thread Safety:
Scanner instances are single-use. Create one per source string.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Callable

from notedown.inline import format_inline
from notedown.location import SourceLocation
from notedown.nodes import (
    BlankSeparator,
    Block,
    BlockQuote,
    CodeBlock,
    Heading,
    List,
    Paragraph,
    ThematicBreak,
)
from notedown.scanner.classifiers import (
    FenceClassifierMixin,
    HeadingClassifierMixin,
    ListClassifierMixin,
    QuoteClassifierMixin,
    ThematicClassifierMixin,
)
from notedown.scanner.modes import ScanMode
from notedown.utils.logger import get_logger
from notedown.utils.text import escape_html

logger = get_logger(__name__)


def _inline(raw: str) -> str:
    return format_inline(escape_html(raw))


class Scanner(
    ThematicClassifierMixin,
    FenceClassifierMixin,
    HeadingClassifierMixin,
    QuoteClassifierMixin,
    ListClassifierMixin,
):
    """Block scanner producing blocks in document order.

    Usage:
            >>> blocks = Scanner("# Title\\n- a\\n- b").scan()
            >>> [type(b).__name__ for b in blocks]
            ['Heading', 'List']

    Thread Safety:
        Scanner instances are single-use. Create one per source string.

    """

    __slots__ = ("_lines", "_pos", "_mode")

    def __init__(self, source: str) -> None:
        """Initialize scanner with source text.

        Args:
            source: Raw note text; line endings are normalized to \\n
        """
        normalized = source.replace("\r\n", "\n").replace("\r", "\n")
        self._lines: list[str] = normalized.split("\n") if normalized else []
        self._pos = 0
        self._mode = ScanMode.DEFAULT

    @property
    def mode(self) -> ScanMode:
        """Current scanner mode (DEFAULT between blocks)."""
        return self._mode

    def scan(self) -> tuple[Block, ...]:
        """Scan the whole source.

        Returns:
            Blocks in document order; empty for empty source.
        """
        blocks: list[Block] = []
        while self._pos < len(self._lines):
            blocks.append(self._scan_block())

        logger.debug("Scanned %d lines into %d blocks", len(self._lines), len(blocks))
        return tuple(blocks)

    # =========================================================================
    # Dispatch
    # =========================================================================

    def _scan_block(self) -> Block:
        """Classify the line at the current position and consume its block."""
        line = self._lines[self._pos]
        start = self._pos

        if self._is_thematic_break(line):
            self._pos += 1
            return ThematicBreak(location=SourceLocation(start + 1))

        if self._is_fence(line):
            return self._scan_code_block(self._fence_info(line))

        heading = self._try_classify_heading(line)
        if heading is not None:
            level, text = heading
            self._pos += 1
            return Heading(
                location=SourceLocation(start + 1),
                level=level,  # type: ignore[arg-type]
                text=_inline(text),
            )

        if self._try_classify_quote(line) is not None:
            return self._scan_quote()

        if self._try_classify_bullet(line) is not None:
            return self._scan_list(ScanMode.UNORDERED_LIST)

        if self._try_classify_ordered(line) is not None:
            return self._scan_list(ScanMode.ORDERED_LIST)

        self._pos += 1
        if not line.strip():
            return BlankSeparator(location=SourceLocation(start + 1))
        return Paragraph(location=SourceLocation(start + 1), text=_inline(line))

    # =========================================================================
    # Multi-line constructs
    # =========================================================================

    def _scan_code_block(self, info: str | None) -> CodeBlock:
        """Collect lines after an opening fence.

        Lines are escaped but never inline-formatted. A missing closing
        fence closes the block at end of input.
        """
        self._mode = ScanMode.CODE_BLOCK
        start = self._pos
        self._pos += 1  # Opening fence

        lines: list[str] = []
        while self._pos < len(self._lines) and not self._is_fence(self._lines[self._pos]):
            lines.append(escape_html(self._lines[self._pos]))
            self._pos += 1

        if self._pos < len(self._lines):
            self._pos += 1  # Closing fence
        else:
            logger.debug("Unterminated code fence at line %d closed at end of input", start + 1)

        self._mode = ScanMode.DEFAULT
        return CodeBlock(
            location=SourceLocation(start + 1, self._pos),
            lines=tuple(lines),
            info=info,
        )

    def _scan_quote(self) -> BlockQuote:
        """Group consecutive ``> `` lines into one block quote."""
        self._mode = ScanMode.BLOCKQUOTE
        start = self._pos
        lines = [_inline(text) for text in self._collect(self._try_classify_quote)]
        self._mode = ScanMode.DEFAULT
        return BlockQuote(location=SourceLocation(start + 1, self._pos), lines=tuple(lines))

    def _scan_list(self, mode: ScanMode) -> List:
        """Group consecutive items of one list kind into one list."""
        self._mode = mode
        start = self._pos

        if mode is ScanMode.ORDERED_LIST:
            matches = self._collect(self._try_classify_ordered)
            first_number = matches[0][0]
            items = [_inline(text) for _, text in matches]
            block = List(
                location=SourceLocation(start + 1, self._pos),
                items=tuple(items),
                ordered=True,
                start=first_number if first_number is not None else 1,
            )
        else:
            items = [_inline(text) for text in self._collect(self._try_classify_bullet)]
            block = List(location=SourceLocation(start + 1, self._pos), items=tuple(items))

        self._mode = ScanMode.DEFAULT
        return block

    def _collect[T](self, classify: Callable[[str], T | None]) -> list[T]:
        """Consume lines while classify accepts them; at least one line."""
        matches: list[T] = []
        while self._pos < len(self._lines):
            match = classify(self._lines[self._pos])
            if match is None:
                break
            matches.append(match)
            self._pos += 1
        return matches
