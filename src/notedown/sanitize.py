"""Composable sanitization policies for rendered markup.

The sanitizer is an independent second pass: it parses an HTML fragment
into an element tree with BeautifulSoup and strips dangerous elements and
attributes no matter how they got there. Policies act on the tree in place
and compose via the | operator.

Serialization escapes every text node and attribute value and writes void
elements without a closing slash, so sanitize() output is a fixed point:
sanitize(sanitize(x)) == sanitize(x).

Example:
    >>> from notedown.sanitize import sanitize, web_safe
    >>> sanitize('<p onclick="x()">hi<script>alert(1)</script></p>')
    '<p>hi</p>'
"""

from __future__ import annotations

import re
from collections.abc import Callable

from bs4 import BeautifulSoup, ParserRejectedMarkup
from bs4.element import CData, Comment, Declaration, Doctype, ProcessingInstruction
from bs4.formatter import HTMLFormatter

from notedown.config import RenderConfig, get_render_config
from notedown.errors import SanitizeError
from notedown.utils.logger import get_logger
from notedown.utils.text import escape_html

logger = get_logger(__name__)

# Browsers drop ASCII whitespace and C0 controls anywhere in a URL scheme
_URL_NOISE_PATTERN = re.compile("[\x00-\x20\x7f]+")

_NON_CONTENT_STRINGS = (Comment, CData, Declaration, Doctype, ProcessingInstruction)

_FORMATTER = HTMLFormatter(entity_substitution=escape_html, void_element_close_prefix=None)


def _url_scheme(value: str, *, harden: bool) -> str | None:
    """Lower-cased scheme of a URL, or None for a relative URL."""
    candidate = _URL_NOISE_PATTERN.sub("", value) if harden else value.strip()
    scheme, sep, _ = candidate.lower().partition(":")
    return scheme if sep else None


def _is_blocked_url(value: str | None, config: RenderConfig) -> bool:
    """Check if URL uses a blocked scheme."""
    if not value:
        return False
    return _url_scheme(value, harden=config.harden_url_schemes) in config.blocked_url_schemes


class Policy:
    """Wrapper for an in-place tree transform, supports composition via |."""

    __slots__ = ("_fn",)

    def __init__(self, fn: Callable[[BeautifulSoup], BeautifulSoup]) -> None:
        self._fn = fn

    def __call__(self, soup: BeautifulSoup) -> BeautifulSoup:
        return self._fn(soup)

    def __or__(self, other: "Policy") -> "Policy":
        """Chain policies: (self | other)(soup) applies self then other."""

        def chained(soup: BeautifulSoup) -> BeautifulSoup:
            return other._fn(self._fn(soup))

        return Policy(chained)


def _strip_comments(soup: BeautifulSoup) -> BeautifulSoup:
    """Remove comments, CDATA, doctypes, declarations and processing instructions."""
    for node in soup.find_all(string=lambda s: isinstance(s, _NON_CONTENT_STRINGS)):
        node.extract()
    return soup


def _strip_denied_elements(soup: BeautifulSoup) -> BeautifulSoup:
    """Remove every denied element together with its content."""
    denied = sorted(get_render_config().denied_tags)
    removed = 0
    for tag in soup.find_all(denied):
        # Descendants of an already-extracted element are detached with it
        tag.extract()
        removed += 1
    if removed:
        logger.debug("Removed %d denied elements", removed)
    return soup


def _strip_event_handlers(soup: BeautifulSoup) -> BeautifulSoup:
    """Remove on* attributes from every element."""
    for tag in soup.find_all(True):
        handlers = [name for name in tag.attrs if name.lower().startswith("on")]
        for name in handlers:
            del tag.attrs[name]
        if handlers:
            logger.debug("Removed %s from <%s>", ", ".join(handlers), tag.name)
    return soup


def _strip_script_urls(soup: BeautifulSoup) -> BeautifulSoup:
    """Remove URL attributes that resolve to a blocked scheme."""
    config = get_render_config()
    for tag in soup.find_all(True):
        for name in [n for n in tag.attrs if n.lower() in config.url_attributes]:
            if _is_blocked_url(tag.attrs[name], config):
                del tag.attrs[name]
                logger.debug("Removed blocked %s from <%s>", name, tag.name)
    return soup


def _unwrap_links(soup: BeautifulSoup) -> BeautifulSoup:
    """Replace every anchor with its content."""
    for tag in soup.find_all("a"):
        tag.unwrap()
    return soup


def _strip_sources(soup: BeautifulSoup) -> BeautifulSoup:
    """Remove src attributes so nothing is fetched on display."""
    for tag in soup.find_all(src=True):
        del tag.attrs["src"]
    return soup


# Composable Policy instances (use with | operator)
strip_comments = Policy(_strip_comments)
strip_denied_elements = Policy(_strip_denied_elements)
strip_event_handlers = Policy(_strip_event_handlers)
strip_script_urls = Policy(_strip_script_urls)
unwrap_links = Policy(_unwrap_links)
strip_sources = Policy(_strip_sources)

# Pre-built policy sets
web_safe: Policy = strip_comments | strip_denied_elements | strip_event_handlers | strip_script_urls
strict: Policy = web_safe | unwrap_links | strip_sources


def _parse_fragment(fragment: str) -> BeautifulSoup:
    try:
        return BeautifulSoup(fragment, "html.parser", multi_valued_attributes=None)
    except ParserRejectedMarkup as exc:
        raise SanitizeError(f"Unparseable markup: {exc}", len(fragment)) from exc


def sanitize(
    fragment: str,
    *,
    policy: Policy | Callable[[BeautifulSoup], BeautifulSoup] | None = None,
) -> str:
    """Sanitize an HTML fragment.

    Args:
        fragment: Markup to clean; need not be well formed.
        policy: Policy or callable BeautifulSoup -> BeautifulSoup.
            Defaults to web_safe.

    Returns:
        Safe markup. An empty string when the fragment is empty or cannot
        be parsed; a partially cleaned tree is never returned.
    """
    if not fragment:
        return ""

    policy = policy or web_safe
    try:
        soup = policy(_parse_fragment(fragment))
        return soup.decode(formatter=_FORMATTER)
    except (SanitizeError, RecursionError) as exc:
        logger.warning("Dropping fragment the sanitizer could not process: %s", exc)
        return ""


__all__ = [
    "Policy",
    "sanitize",
    "strict",
    "strip_comments",
    "strip_denied_elements",
    "strip_event_handlers",
    "strip_script_urls",
    "strip_sources",
    "unwrap_links",
    "web_safe",
]
