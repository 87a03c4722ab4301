"""Tests for error handling and total rendering.

render() must return a string for every input; internal errors surface as
NotedownError subclasses only where callers use the lower-level pieces.
"""

import pytest

from notedown import NotedownError, RenderError, SanitizeError, render
from notedown.errors import NotedownError as BaseError


class TestErrorHierarchy:
    def test_subclasses(self) -> None:
        assert issubclass(SanitizeError, NotedownError)
        assert issubclass(RenderError, NotedownError)
        assert BaseError is NotedownError

    def test_sanitize_error_message(self) -> None:
        err = SanitizeError("Unparseable markup", 42)
        assert str(err) == "Unparseable markup (42 chars)"
        assert err.message == "Unparseable markup"
        assert err.fragment_length == 42

    def test_sanitize_error_without_length(self) -> None:
        err = SanitizeError("bad")
        assert str(err) == "bad"
        assert err.fragment_length is None


class TestRenderTotality:
    @pytest.mark.parametrize("value", [None, 123, b"# bytes", ["# list"], 1.5])
    def test_non_string_input(self, value: object) -> None:
        assert render(value) == ""  # type: ignore[arg-type]

    @pytest.mark.parametrize(
        "text",
        [
            "```",
            "```\n",
            "#",
            "> ",
            "- ",
            "1. ",
            "**",
            "****",
            "[](",
            "[a](",
            "[a]()",
            "`",
            "\x00",
            "",
            "<" * 1000,
            "*" * 1000,
            "[" * 500 + "](" * 500,
            "<script>" * 50,
        ],
    )
    def test_malformed_input_renders(self, text: str) -> None:
        assert isinstance(render(text), str)

    def test_no_markup_becomes_paragraph(self) -> None:
        assert render("just words") == "<p>just words</p>"
