"""Thread safety tests for rendering.

Verifies that concurrent renders produce the same output as sequential
ones and that configured renderers never see each other's config.
"""

from concurrent.futures import ThreadPoolExecutor

from notedown import Notedown, RenderConfig, render

DOCUMENTS = [
    "# Title\n\nSome **bold** and *italic* text.",
    "- a\n- b\n\n1. c\n2. d",
    "> quoted `code`\n> ==marked==",
    "```py\nprint('<hi>')\n```",
    "[docs](https://example.com/a_b) and ~~gone~~",
    '<script>alert(1)</script><img src=x onerror="y()">',
    "---\n### Small\nplain",
]


class TestConcurrentRendering:
    def test_concurrent_matches_sequential(self) -> None:
        expected = [render(doc) for doc in DOCUMENTS]
        work = DOCUMENTS * 25

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(render, work))

        assert results == expected * 25

    def test_renderers_with_different_configs(self) -> None:
        same_tab = Notedown(config=RenderConfig(link_target=None))
        new_tab = Notedown()
        text = "[a](https://example.com)"

        def run(index: int) -> tuple[int, str]:
            renderer = same_tab if index % 2 else new_tab
            return index, renderer(text)

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(run, range(200)))

        for index, html in results:
            if index % 2:
                assert "target" not in html
            else:
                assert 'target="_blank"' in html

    def test_shared_renderer_instance(self) -> None:
        nd = Notedown(config=RenderConfig(allowed_link_schemes=frozenset({"https"})))
        texts = ["[a](http://x.example)", "[b](https://x.example)"] * 50

        with ThreadPoolExecutor(max_workers=4) as pool:
            results = list(pool.map(nd, texts))

        assert results[0::2] == ["<p>[a](http://x.example)</p>"] * 50
        assert all("<a " in html for html in results[1::2])
