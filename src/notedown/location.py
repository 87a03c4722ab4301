"""Source location tracking for blocks.

Provides SourceLocation dataclass recording which input lines a block
consumed.

Thread Safety:
SourceLocation is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Line span of a block in the source text.

    All positions are 1-indexed.

    Attributes:
        lineno: First line consumed by the block
        end_lineno: Last line consumed by the block (defaults to lineno)

    Examples:
        >>> SourceLocation(3)
        SourceLocation(lineno=3, end_lineno=3)
        >>> str(SourceLocation(3, 5))
        '3-5'

    """

    lineno: int
    end_lineno: int | None = None

    def __post_init__(self) -> None:
        if self.end_lineno is None:
            object.__setattr__(self, "end_lineno", self.lineno)

    @property
    def line_count(self) -> int:
        """Number of source lines spanned."""
        return (self.end_lineno or self.lineno) - self.lineno + 1

    def __str__(self) -> str:
        if self.end_lineno == self.lineno:
            return str(self.lineno)
        return f"{self.lineno}-{self.end_lineno}"
