"""Ordered inline formatting over escaped text.

Rules run in a fixed order: code span, bold, italic, highlight,
strikethrough, link. Each match is replaced by an opaque placeholder, so
no later rule can see the delimiters or the markup an earlier rule
produced. The inner text of a match is formatted with the rules that come
after it, which is what lets ``**a _b_**`` nest while code span content
stays literal.

Input must already be escaped (see notedown.utils.text.escape_html); this
module never escapes again. Link URLs are checked against the configured
scheme allow-list; anything else stays literal text.

Example:
    >>> from notedown.inline import format_inline
    >>> format_inline("**bold** and `**code**`")
    '<strong>bold</strong> and <code>**code**</code>'
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass
from functools import partial

from notedown.config import RenderConfig, get_render_config
from notedown.utils.text import escape_html

# Private-use characters delimiting a stashed fragment index.
_OPEN = "\ue000"
_CLOSE = "\ue001"
_PLACEHOLDER = re.compile(f"{_OPEN}(\\d+){_CLOSE}")
_SENTINELS = re.compile(f"[{_OPEN}{_CLOSE}]")

# Underscore delimiters do not open or close inside a word (snake_case, URLs)
_NOT_WORD_BEFORE = r"(?<![A-Za-z0-9])"
_NOT_WORD_AFTER = r"(?![A-Za-z0-9])"

# Label and URL runs stop at the next "[", so a failed candidate never
# rescans the rest of the line. The authority after :// is required.
_URL_CHARS = f"[^)\\[\\]\\s{_OPEN}{_CLOSE}]"
_LINK_PATTERN = re.compile(
    r"\[([^\[\]]+)\]"
    f"\\((([A-Za-z][A-Za-z0-9+.\\-]*)://(?!/){_URL_CHARS}+)\\)"
)

_REQUIRED_REL = ("noopener", "noreferrer")


class _Stash:
    """Holds formatted fragments behind placeholders for one format call."""

    __slots__ = ("_fragments",)

    def __init__(self) -> None:
        self._fragments: list[str] = []

    def put(self, fragment: str) -> str:
        self._fragments.append(fragment)
        return f"{_OPEN}{len(self._fragments) - 1}{_CLOSE}"

    def resolve(self, text: str) -> str:
        # Fragments may wrap placeholders of earlier fragments
        return _PLACEHOLDER.sub(lambda m: self.resolve(self._fragments[int(m.group(1))]), text)


@dataclass(frozen=True, slots=True)
class InlineRule:
    """One inline substitution.

    Attributes:
        name: Rule name, for introspection and tests
        pattern: Compiled pattern; group 1 is the rule's inner text
        build: Callable (match, inner, config) returning the markup for the
            match, or None to leave the match as literal text
        nests: Format the inner text with the rules after this one. False
            keeps the inner text verbatim (code spans).

    """

    name: str
    pattern: re.Pattern[str]
    build: Callable[[re.Match[str], str, RenderConfig], str | None]
    nests: bool = True


def _wrap(tag: str) -> Callable[[re.Match[str], str, RenderConfig], str]:
    def build(match: re.Match[str], inner: str, config: RenderConfig) -> str:
        return f"<{tag}>{inner}</{tag}>"

    return build


def _link_rel(config: RenderConfig) -> str:
    tokens = config.link_rel.split()
    for required in _REQUIRED_REL:
        if required not in tokens:
            tokens.append(required)
    return " ".join(tokens)


def _build_link(match: re.Match[str], inner: str, config: RenderConfig) -> str | None:
    url, scheme = match.group(2), match.group(3)
    if scheme.lower() not in config.allowed_link_schemes:
        return None

    parts = [f'<a href="{url}"']
    if config.link_target:
        parts.append(f' target="{escape_html(config.link_target)}"')
    parts.append(f' rel="{escape_html(_link_rel(config))}">')
    return f"{''.join(parts)}{inner}</a>"


INLINE_RULES: tuple[InlineRule, ...] = (
    InlineRule("code", re.compile(r"`([^`]+)`"), _wrap("code"), nests=False),
    InlineRule("strong", re.compile(r"\*\*(.+?)\*\*"), _wrap("strong")),
    InlineRule(
        "strong_underscore",
        re.compile(f"{_NOT_WORD_BEFORE}__((?:(?!__).)+)__{_NOT_WORD_AFTER}"),
        _wrap("strong"),
    ),
    InlineRule("emphasis", re.compile(r"\*([^*]+)\*"), _wrap("em")),
    InlineRule(
        "emphasis_underscore",
        re.compile(f"{_NOT_WORD_BEFORE}_([^_]+)_{_NOT_WORD_AFTER}"),
        _wrap("em"),
    ),
    InlineRule("mark", re.compile(r"==(.+?)=="), _wrap("mark")),
    InlineRule("strikethrough", re.compile(r"~~(.+?)~~"), _wrap("del")),
    InlineRule(
        "link",
        # URL may not contain whitespace or a fragment formatted earlier
        _LINK_PATTERN,
        _build_link,
    ),
)


def format_inline(escaped: str) -> str:
    """Apply the inline rules to one escaped line.

    Args:
        escaped: Text already passed through escape_html

    Returns:
        HTML fragment; text no rule matched is returned unchanged

    """
    if not escaped:
        return ""

    config = get_render_config()
    stash = _Stash()
    # User text can never address a stashed fragment
    text = _SENTINELS.sub(lambda m: f"&#x{ord(m.group()):x};", escaped)
    text = _apply_rules(text, 0, stash, config)
    return stash.resolve(text)


def _apply_rules(text: str, start: int, stash: _Stash, config: RenderConfig) -> str:
    for index in range(start, len(INLINE_RULES)):
        rule = INLINE_RULES[index]
        text = rule.pattern.sub(partial(_substitute, rule, index, stash, config), text)
    return text


def _substitute(
    rule: InlineRule,
    index: int,
    stash: _Stash,
    config: RenderConfig,
    match: re.Match[str],
) -> str:
    inner = match.group(1)
    if rule.nests:
        inner = _apply_rules(inner, index + 1, stash, config)
    markup = rule.build(match, inner, config)
    if markup is None:
        return match.group(0)
    return stash.put(markup)


__all__ = ["INLINE_RULES", "InlineRule", "format_inline"]
