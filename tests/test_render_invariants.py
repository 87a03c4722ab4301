"""Property-based safety tests for render() and sanitize().

Output of both is re-parsed with BeautifulSoup and checked for executable
markup: denied elements, event handler attributes and script URLs.
"""

from bs4 import BeautifulSoup
from hypothesis import given, settings
from hypothesis import strategies as st

from notedown import render, sanitize
from notedown.config import DEFAULT_DENIED_TAGS, DEFAULT_URL_ATTRIBUTES

MARKDOWN_ALPHABET = "abc #->*_`=~[]()1.:/\n\t<>&\"'"

MARKDOWNISH = st.text(alphabet=MARKDOWN_ALPHABET, max_size=300)

LINKISH = st.builds(
    lambda label, scheme, rest: f"[{label}]({scheme}:{rest})",
    st.text(alphabet="ab <>\"'", min_size=1, max_size=10).filter(lambda s: "]" not in s),
    st.sampled_from(["javascript", "JavaScript", "vbscript", "data", "http", "https", "java\tscript"]),
    st.text(alphabet="/abc\"'<>(", max_size=15),
)

HOSTILE_SNIPPETS = [
    "<script>alert(1)</script>",
    "<SCRIPT SRC=//evil.example/x.js></SCRIPT>",
    "<style>body{}</style>",
    "<iframe src=javascript:alert(1)></iframe>",
    "<object data=x></object>",
    "<embed src=x>",
    "<form action=javascript:alert(1)><input name=a><button>b</button></form>",
    "<link rel=stylesheet href=x>",
    '<meta http-equiv="refresh" content="0">',
    '<img src=x onerror="alert(1)">',
    '<p onclick="x()" OnMouseOver="y()">p</p>',
    '<a href="javascript:alert(1)">a</a>',
    '<a href=" JaVaScRiPt:alert(1)">a</a>',
    '<a href="jav&#x09;ascript:alert(1)">a</a>',
    '<a href="&#106;avascript:alert(1)">a</a>',
    '<svg><a xlink:href="javascript:alert(1)">s</a></svg>',
    '<video poster="javascript:x()"></video>',
    '<button formaction="javascript:x()">b</button>',
    "<!-- comment -->",
    "<p>text &amp; more</p>",
    "<em>plain",
    "</div>",
]

MARKUPISH = st.text(alphabet="<>/=\"' &;!-abeiprst", max_size=200)

WELL_FORMED_SNIPPETS = [
    "<p>a</p>",
    "<strong>b</strong>",
    "<ul><li>c</li></ul>",
    '<a href="https://example.com" rel="noopener">d</a>',
    "<pre><code>x &lt; y\nz</code></pre>",
    "<hr>",
    "<br>",
    "<blockquote>q</blockquote>",
    "text &amp; &quot;quotes&quot;",
    '<p title="&lt;t&gt;">e</p>',
]


def assert_safe(html: str) -> None:
    soup = BeautifulSoup(html, "html.parser")
    for tag in soup.find_all(True):
        assert tag.name not in DEFAULT_DENIED_TAGS, html
        for name, value in tag.attrs.items():
            assert not name.lower().startswith("on"), html
            if name.lower() in DEFAULT_URL_ATTRIBUTES:
                compact = "".join(ch for ch in str(value) if ord(ch) > 0x20).lower()
                assert not compact.startswith(("javascript:", "vbscript:")), html


class TestRenderSafety:
    @given(st.text(max_size=300))
    @settings(max_examples=200)
    def test_arbitrary_text_is_safe(self, text: str) -> None:
        assert_safe(render(text))

    @given(MARKDOWNISH)
    @settings(max_examples=300)
    def test_markdownish_text_is_safe(self, text: str) -> None:
        assert_safe(render(text))

    @given(LINKISH)
    @settings(max_examples=200)
    def test_links_are_safe(self, text: str) -> None:
        html = render(text)
        assert_safe(html)
        if "<a " in html:
            assert 'rel="noopener noreferrer"' in html

    @given(MARKDOWNISH)
    @settings(max_examples=200)
    def test_render_is_total(self, text: str) -> None:
        assert isinstance(render(text), str)


class TestSanitizeSafety:
    @given(st.lists(st.sampled_from(HOSTILE_SNIPPETS), max_size=6).map("".join))
    @settings(max_examples=300)
    def test_hostile_fragments_are_safe(self, fragment: str) -> None:
        assert_safe(sanitize(fragment))


class TestIdempotence:
    @given(MARKDOWNISH)
    @settings(max_examples=200)
    def test_render_output_is_fixed_point(self, text: str) -> None:
        html = render(text)
        assert sanitize(html) == html

    @given(st.lists(st.sampled_from(WELL_FORMED_SNIPPETS), max_size=6).map("".join))
    @settings(max_examples=200)
    def test_sanitize_twice_equals_once(self, fragment: str) -> None:
        once = sanitize(fragment)
        assert sanitize(once) == once

    @given(MARKUPISH)
    @settings(max_examples=500)
    def test_arbitrary_markup_twice_equals_once(self, fragment: str) -> None:
        once = sanitize(fragment)
        assert sanitize(once) == once
