"""Typed block nodes for Notedown.

All nodes are frozen dataclasses with slots for:
- Immutability: blocks are never mutated after the scanner creates them
- Memory efficiency: __slots__ reduces memory footprint
- Pattern matching: the renderer dispatches with match statements

Node Hierarchy:
Node (base)
├── Heading
├── Paragraph
├── List
├── BlockQuote
├── CodeBlock
├── ThematicBreak
└── BlankSeparator

Textual fields never hold raw input. Heading, Paragraph, List and
BlockQuote text has been escaped and inline-formatted; CodeBlock lines have
been escaped only.

Thread Safety:
All nodes are frozen (immutable) and safe to share across threads.

"""

from dataclasses import dataclass
from typing import Literal

from notedown.location import SourceLocation


@dataclass(frozen=True, slots=True)
class Node:
    """Base class for all block nodes.

    Every block records the source lines it consumed.

    """

    location: SourceLocation


@dataclass(frozen=True, slots=True)
class Heading(Node):
    """ATX heading, levels 1 to 3.

    Markdown: # Heading
    HTML: <h1>Heading</h1>

    """

    level: Literal[1, 2, 3]
    text: str


@dataclass(frozen=True, slots=True)
class Paragraph(Node):
    """Single-line paragraph.

    Markdown: any line no other construct claims
    HTML: <p>text</p>

    """

    text: str


@dataclass(frozen=True, slots=True)
class List(Node):
    """Ordered or unordered list, one item per source line.

    Markdown: - item, * item or 1. item
    HTML: <ul>/<ol> with <li> children

    """

    items: tuple[str, ...]
    ordered: bool = False
    start: int = 1  # First number of an ordered list


@dataclass(frozen=True, slots=True)
class BlockQuote(Node):
    """Block quote; consecutive quoted lines are grouped.

    Markdown: > quoted text
    HTML: <blockquote>line<br>line</blockquote>

    """

    lines: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class CodeBlock(Node):
    """Fenced code block holding escaped, unformatted lines.

    Markdown: ```lang ... ```
    HTML: <pre><code class="language-lang">...</code></pre>

    """

    lines: tuple[str, ...]
    info: str | None = None  # Language hint from the opening fence


@dataclass(frozen=True, slots=True)
class ThematicBreak(Node):
    """Thematic break (horizontal rule).

    Markdown: ---
    HTML: <hr>

    """


@dataclass(frozen=True, slots=True)
class BlankSeparator(Node):
    """Blank or whitespace-only line, kept as a visual break.

    HTML: <br>

    """


type Block = (
    Heading
    | Paragraph
    | List
    | BlockQuote
    | CodeBlock
    | ThematicBreak
    | BlankSeparator
)

BLOCK_TYPES = (Heading, Paragraph, List, BlockQuote, CodeBlock, ThematicBreak, BlankSeparator)
