"""Line-indexed block scanner for Notedown.

Partitions note text into block-level constructs, delegating each
fragment to the escaper and the inline formatter.

Architecture:
scanner/
├── __init__.py          # Re-exports Scanner, ScanMode
├── core.py              # Scanner class (mixin composition + index scan)
├── modes.py             # ScanMode enum, character sets
└── classifiers/         # Per-block-type line classification mixins
    ├── thematic.py      # Thematic break
    ├── fence.py         # Code fence and info string
    ├── heading.py       # ATX heading (levels 1-3)
    ├── quote.py         # Block quote
    └── list.py          # Bullet and ordered items

Usage:
    >>> from notedown.scanner import Scanner
    >>> Scanner("```\\n*not italic*\\n```").scan()[0].lines
    ('*not italic*',)

"""

from notedown.scanner.core import Scanner
from notedown.scanner.modes import ScanMode

__all__ = ["ScanMode", "Scanner"]
