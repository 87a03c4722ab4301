"""ContextVar-based render configuration for Notedown.

Provides context-local configuration using Python's ContextVars (PEP 567).
The link formatter and the sanitizer read the active config; nothing else
carries state between calls.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    # Through the configured callable
    nd = Notedown(config=RenderConfig(link_target=None))
    html = nd("[docs](https://example.com)")

    # Or use the context manager
    with render_config_context(RenderConfig(harden_url_schemes=False)):
        html = render(text)

"""

from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Any

DEFAULT_DENIED_TAGS = frozenset(
    {
        "script",
        "style",
        "iframe",
        "object",
        "embed",
        "form",
        "input",
        "button",
        "link",
        "meta",
    }
)

DEFAULT_URL_ATTRIBUTES = frozenset(
    {"href", "src", "xlink:href", "action", "formaction", "poster"}
)

_FROZENSET_FIELDS = (
    "allowed_link_schemes",
    "denied_tags",
    "url_attributes",
    "blocked_url_schemes",
)


@dataclass(frozen=True, slots=True)
class RenderConfig:
    """Immutable render configuration.

    Frozen dataclass ensures thread-safety (immutable after creation).

    Attributes:
        allowed_link_schemes: Schemes that may become clickable [text](url) links
        link_target: target attribute for produced anchors (None omits it)
        link_rel: rel attribute for produced anchors
        denied_tags: Elements the sanitizer removes unconditionally
        url_attributes: Attributes whose values the sanitizer scheme-checks
        blocked_url_schemes: Schemes the sanitizer strips from url_attributes
        harden_url_schemes: Ignore whitespace and control characters anywhere
            in a URL when checking its scheme (False keeps a plain trimmed
            prefix test)

    """

    allowed_link_schemes: frozenset[str] = frozenset({"http", "https"})
    link_target: str | None = "_blank"
    link_rel: str = "noopener noreferrer"
    denied_tags: frozenset[str] = DEFAULT_DENIED_TAGS
    url_attributes: frozenset[str] = DEFAULT_URL_ATTRIBUTES
    blocked_url_schemes: frozenset[str] = frozenset({"javascript", "vbscript"})
    harden_url_schemes: bool = True

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> "RenderConfig":
        """Create RenderConfig from dictionary.

        Only includes keys that are valid RenderConfig fields; unknown keys
        are silently ignored. Iterable values for set-valued fields are
        lower-cased and converted to frozensets.

        Args:
            config_dict: Dictionary with config values. Keys should match
                RenderConfig attribute names.

        Returns:
            New RenderConfig instance with values from dict.

        Example:
            >>> config = RenderConfig.from_dict({
            ...     "allowed_link_schemes": ["https"],
            ...     "unknown_key": "ignored",
            ... })
            >>> sorted(config.allowed_link_schemes)
            ['https']

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        for name in _FROZENSET_FIELDS:
            if name in filtered:
                filtered[name] = _lowered(filtered[name])
        return cls(**filtered)


def _lowered(values: Iterable[str]) -> frozenset[str]:
    if isinstance(values, str):
        values = (values,)
    return frozenset(v.lower() for v in values)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: RenderConfig = RenderConfig()

_render_config: ContextVar[RenderConfig] = ContextVar(
    "render_config",
    default=_DEFAULT_CONFIG,
)


def get_render_config() -> RenderConfig:
    """Get current render configuration (context-local)."""
    return _render_config.get()


def set_render_config(config: RenderConfig) -> None:
    """Set render configuration for current context.

    Args:
        config: RenderConfig instance to use for this context.

    """
    _render_config.set(config)


def reset_render_config() -> None:
    """Reset to the default configuration.

    Reuses the module-level _DEFAULT_CONFIG singleton, avoiding allocation.
    """
    _render_config.set(_DEFAULT_CONFIG)


@contextmanager
def render_config_context(config: RenderConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Args:
        config: RenderConfig to use within the context.

    Example:
        >>> with render_config_context(RenderConfig(link_target=None)):
        ...     html = render("[a](https://example.com)")
        >>> # Automatically reset to previous config

    Thread Safety:
        Only affects the current thread's context. Properly restores previous
        config even if an exception is raised.

    """
    token = _render_config.set(config)
    try:
        yield
    finally:
        _render_config.reset(token)


__all__ = [
    "DEFAULT_DENIED_TAGS",
    "DEFAULT_URL_ATTRIBUTES",
    "RenderConfig",
    "get_render_config",
    "set_render_config",
    "reset_render_config",
    "render_config_context",
]
